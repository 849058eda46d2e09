# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest       import  assert_that, equal_to, is_, calling, raises, \
                            close_to
from unittest       import  TestCase
import struct

from tiffscope.exceptions   import  UnresolvableValue, OutOfRange,       \
                                    ValueOutOfBounds
from tiffscope.internal     import  int_to_bytes
from tiffscope.read         import  BufferReader
from tiffscope.read.tiff    import  TiffType, DirectoryEntry, Scalar,    \
                                    Array, Rational, Ascii,              \
                                    resolve_scalar, resolve_array_element, \
                                    resolve_rational, resolve_ascii,     \
                                    resolve_value

def inline (*chunks):
    return b"".join(chunks).ljust(4, b"\0")

class EntryTestCase (TestCase):
    def setUp (self):
        # Sixteen bytes of header-ish filler, then some values we can
        # point at.
        self.data   = bytes(16) \
                        + b"".join(int_to_bytes(n, 2)
                                   for n in (8, 8, 8)) \
                        + bytes(2) \
                        + int_to_bytes(300, 4) + int_to_bytes(1, 4) \
                        + int_to_bytes(72, 4) + int_to_bytes(7, 4) \
                        + b"hello\0junk"
        self.reader = BufferReader(self.data)

    def entry (self, tag, valtype, count, raw_value):
        if isinstance(raw_value, int):
            raw_value = int_to_bytes(raw_value, 4)

        return DirectoryEntry(tag, valtype, count, raw_value, 10)

class TestDirectoryEntry (EntryTestCase):
    def test_inline_follows_type_and_count (self):
        for valtype, count, expected in (
                (TiffType.BYTE,         4,  True),
                (TiffType.BYTE,         5,  False),
                (TiffType.SHORT,        2,  True),
                (TiffType.SHORT,        3,  False),
                (TiffType.LONG,         1,  True),
                (TiffType.LONG,         2,  False),
                (TiffType.RATIONAL,     1,  False),
                (TiffType.DOUBLE,       1,  False),
                (TiffType.ASCII,        4,  True),
                (TiffType.ASCII,        5,  False)):
            entry = self.entry(1, valtype, count, 0)
            assert_that(entry.is_inline, is_(expected))

    def test_offsets_ignore_the_tag (self):
        # StripOffsets with one Long is inline like anything else.
        entry = self.entry(273, TiffType.LONG, 1, 0x1234)

        assert_that(entry.is_inline, is_(True))
        assert_that(resolve_value(self.reader, entry),
                    equal_to(Scalar(0x1234)))

    def test_unknown_type (self):
        entry = self.entry(1, 99, 1, 0)

        assert_that(entry.byte_length, is_(None))
        assert_that(entry.is_inline, is_(False))

class TestResolveScalar (EntryTestCase):
    def test_inline_scalars (self):
        for valtype, raw, expected in (
                (TiffType.BYTE,     inline(b"\xfe"),            0xfe),
                (TiffType.SHORT,    int_to_bytes(108, 4),       108),
                (TiffType.LONG,     int_to_bytes(0x12345, 4),   0x12345),
                (TiffType.SBYTE,    inline(b"\xfe"),            -2),
                (TiffType.SSHORT,   inline(b"\xfe\xff"),        -2),
                (TiffType.SLONG,    b"\xfe\xff\xff\xff",        -2)):
            entry = self.entry(256, valtype, 1, raw)
            assert_that(resolve_scalar(self.reader, entry),
                        equal_to(expected))

    def test_first_of_many (self):
        entry = self.entry(258, TiffType.SHORT, 3, 16)
        assert_that(resolve_scalar(self.reader, entry), equal_to(8))

    def test_wrong_type (self):
        for valtype in (TiffType.ASCII, TiffType.RATIONAL,
                        TiffType.UNDEFINED, TiffType.FLOAT, 99):
            entry = self.entry(256, valtype, 1, 0)
            assert_that(calling(resolve_scalar).with_args(self.reader,
                                                          entry),
                        raises(UnresolvableValue, "Tag 256 has type"))

    def test_count_zero (self):
        entry = self.entry(256, TiffType.SHORT, 0, 0)
        assert_that(calling(resolve_scalar).with_args(self.reader, entry),
                    raises(OutOfRange))

class TestResolveArrayElement (EntryTestCase):
    def test_offset_array (self):
        entry = self.entry(258, TiffType.SHORT, 3, 16)

        assert_that([resolve_array_element(self.reader, entry, i)
                        for i in range(3)],
                    equal_to([8, 8, 8]))

    def test_two_shorts_are_inline (self):
        entry = self.entry(258, TiffType.SHORT, 2,
                           int_to_bytes(5, 2) + int_to_bytes(6, 2))

        assert_that(resolve_array_element(self.reader, entry, 0),
                    equal_to(5))
        assert_that(resolve_array_element(self.reader, entry, 1),
                    equal_to(6))

    def test_single_value (self):
        entry = self.entry(273, TiffType.LONG, 1, 0x9e)

        assert_that(resolve_array_element(self.reader, entry, 0),
                    equal_to(0x9e))
        assert_that(calling(resolve_array_element).with_args(
                        self.reader, entry, 1),
                    raises(OutOfRange, "Index 1 is out of range"))

    def test_out_of_range (self):
        entry = self.entry(258, TiffType.SHORT, 3, 16)

        for index in (-1, 3, 100):
            assert_that(calling(resolve_array_element).with_args(
                            self.reader, entry, index),
                        raises(OutOfRange))

    def test_past_the_end (self):
        entry = self.entry(273, TiffType.LONG, 4, len(self.data) - 4)

        assert_that(resolve_array_element(self.reader, entry, 0),
                    equal_to(int.from_bytes(self.data[-4:], "little")))
        assert_that(calling(resolve_array_element).with_args(
                        self.reader, entry, 1),
                    raises(ValueOutOfBounds))

    def test_wrong_type (self):
        entry = self.entry(258, TiffType.RATIONAL, 2, 24)
        assert_that(calling(resolve_array_element).with_args(
                        self.reader, entry, 0),
                    raises(UnresolvableValue))

class TestResolveRational (EntryTestCase):
    def test_rationals (self):
        entry = self.entry(282, TiffType.RATIONAL, 2, 24)

        assert_that(resolve_rational(self.reader, entry),
                    equal_to(Rational(300, 1)))
        assert_that(resolve_rational(self.reader, entry, 1),
                    equal_to(Rational(72, 7)))

    def test_signed_rational (self):
        data    = int_to_bytes(-3 & 0xffffffff, 4) + int_to_bytes(4, 4)
        reader  = BufferReader(data)
        entry   = self.entry(1, TiffType.SRATIONAL, 1, 0)

        assert_that(resolve_rational(reader, entry),
                    equal_to(Rational(-3, 4)))

    def test_bad_rationals (self):
        assert_that(calling(resolve_rational).with_args(
                        self.reader,
                        self.entry(282, TiffType.LONG, 1, 300)),
                    raises(UnresolvableValue))
        assert_that(calling(resolve_rational).with_args(
                        self.reader,
                        self.entry(282, TiffType.RATIONAL, 1,
                                   len(self.data) - 4)),
                    raises(ValueOutOfBounds))

class TestResolveAscii (EntryTestCase):
    def test_stops_at_nul (self):
        entry = self.entry(315, TiffType.ASCII, 10, 40)
        assert_that(resolve_ascii(self.reader, entry),
                    equal_to(Ascii(b"hello")))

    def test_inline_ascii (self):
        entry = self.entry(315, TiffType.ASCII, 3, b"hi\0\0")
        assert_that(resolve_ascii(self.reader, entry),
                    equal_to(Ascii(b"hi")))

    def test_no_nul (self):
        entry = self.entry(315, TiffType.ASCII, 4, b"abcd")
        assert_that(resolve_ascii(self.reader, entry),
                    equal_to(Ascii(b"abcd")))

    def test_not_ascii (self):
        entry = self.entry(315, TiffType.BYTE, 4, b"abcd")
        assert_that(calling(resolve_ascii).with_args(self.reader, entry),
                    raises(UnresolvableValue, "as ascii"))

class TestResolveValue (EntryTestCase):
    def test_variants (self):
        for entry, expected in (
                (self.entry(256, TiffType.SHORT, 1, 108),
                    Scalar(108)),
                (self.entry(258, TiffType.SHORT, 3, 16),
                    Array([8, 8, 8])),
                (self.entry(282, TiffType.RATIONAL, 1, 24),
                    Rational(300, 1)),
                (self.entry(282, TiffType.RATIONAL, 2, 24),
                    Array([Rational(300, 1), Rational(72, 7)])),
                (self.entry(315, TiffType.ASCII, 10, 40),
                    Ascii(b"hello")),
                (self.entry(1, TiffType.UNDEFINED, 3, b"\1\2\3\0"),
                    Array([1, 2, 3])),
                (self.entry(1, TiffType.LONG, 0, 0),
                    Array([ ]))):
            assert_that(resolve_value(self.reader, entry),
                        equal_to(expected))

    def test_floats (self):
        reader  = BufferReader(struct.pack("<d", 2.5))
        entry   = self.entry(1, TiffType.DOUBLE, 1, 0)
        assert_that(resolve_value(reader, entry).value, close_to(2.5, 0))

        entry   = self.entry(1, TiffType.FLOAT, 1, struct.pack("<f", 0.5))
        assert_that(resolve_value(self.reader, entry).value,
                    close_to(0.5, 0))

    def test_unknown_type (self):
        entry = self.entry(1, 13, 1, 0)
        assert_that(calling(resolve_value).with_args(self.reader, entry),
                    raises(UnresolvableValue, "any known type"))

    def test_value_out_of_bounds (self):
        entry = self.entry(258, TiffType.SHORT, 3, len(self.data) - 2)
        assert_that(calling(resolve_value).with_args(self.reader, entry),
                    raises(ValueOutOfBounds))

        entry = self.entry(258, TiffType.SHORT, 3, 0xffffffff)
        assert_that(calling(resolve_value).with_args(self.reader, entry),
                    raises(ValueOutOfBounds))
