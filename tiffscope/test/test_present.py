# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from hamcrest       import  assert_that, equal_to, contains_string, \
                            calling, raises
from unittest       import  TestCase

from tiffscope.exceptions   import  UnresolvableValue
from tiffscope.present      import  format_value, format_entry,         \
                                    format_rational, hex_dump, render
from tiffscope.read.tiff    import  Tiff, TiffType, DirectoryEntry,     \
                                    ResolvedEntry, Scalar, Array,       \
                                    Rational, Ascii, IFDTag

from tiffscope.read.tiff.test.builders  import  TiffBuilder, TINYTIFF, \
                                                pack_codes

def resolved (tag, value, problem = None, valtype = TiffType.SHORT,
              count = 1):
    entry = DirectoryEntry(tag, valtype, count, b"\x10\0\0\0", 10)
    return ResolvedEntry(entry, value, problem)

class TestFormatValue (TestCase):
    def test_labels (self):
        for tag, value, expected in (
                (IFDTag.Compression,        5,  "LZW"),
                (IFDTag.Compression,        1,  "Uncompressed"),
                (IFDTag.Orientation,        1,  "TopLeft"),
                (IFDTag.PhotometricInterpretation, 2, "RGB"),
                (IFDTag.Predictor,          2,  "HorizontalDifferencing"),
                (IFDTag.ResolutionUnit,     2,  "Inch"),
                (IFDTag.Compression,        99, "99"),
                (IFDTag.ImageWidth,         5,  "5")):
            assert_that(format_value(tag, Scalar(value)),
                        equal_to(expected))

    def test_arrays (self):
        assert_that(format_value(IFDTag.StripOffsets, Array([8, 16])),
                    equal_to("[8,16]"))
        assert_that(format_value(IFDTag.TileByteCounts, Array([1])),
                    equal_to("[1]"))
        assert_that(format_value(IFDTag.BitsPerSample, Array([8, 8, 8])),
                    equal_to("(8,8,8)"))
        assert_that(format_value(IFDTag.BitsPerSample, Array([ ])),
                    equal_to("()"))

    def test_rationals (self):
        assert_that(format_rational(Rational(300, 1)), equal_to("300"))
        assert_that(format_value(IFDTag.XResolution, Rational(72, 7)),
                    equal_to("72/7"))
        assert_that(format_value(IFDTag.WhitePoint,
                                 Array([Rational(1, 2), Rational(3, 1)])),
                    equal_to("(1/2,3)"))

    def test_ascii (self):
        assert_that(format_value(IFDTag.Artist, Ascii(b"Matt!")),
                    equal_to("Matt!"))

    def test_not_a_value (self):
        assert_that(calling(format_value).with_args(IFDTag.Artist, 5),
                    raises(TypeError))

class TestFormatEntry (TestCase):
    def test_named (self):
        assert_that(format_entry(resolved(256, Scalar(108))),
                    equal_to("ImageWidth:108"))

    def test_unnamed (self):
        assert_that(format_entry(resolved(300, Scalar(16), count = 1)),
                    equal_to("(tag:300 type:3 count:1 value:16)"))

    def test_unnamed_with_a_problem (self):
        problem = UnresolvableValue(10, 300, 99, "any known type")

        assert_that(format_entry(resolved(300, None, problem, 99)),
                    equal_to("(tag:300 type:99 count:1 value:16)"
                             " <{}>".format(problem)))

    def test_unresolved (self):
        problem = UnresolvableValue(10, 256, 99, "any known type")

        assert_that(format_entry(resolved(256, None, problem)),
                    equal_to("ImageWidth:<{}>".format(problem)))

    def test_value_with_a_problem (self):
        problem = UnresolvableValue(10, 256, 5, "a scalar")
        line    = format_entry(resolved(256, Rational(4, 1), problem,
                                        TiffType.RATIONAL))

        assert_that(line, equal_to("ImageWidth:4 <{}>".format(problem)))

class TestHexDump (TestCase):
    def test_lines (self):
        assert_that(list(hex_dump(bytes(range(0x22)))),
                    equal_to(["0000: 0001 0203 0405 0607"
                              " 0809 0A0B 0C0D 0E0F",
                              "0010: 1011 1213 1415 1617"
                              " 1819 1A1B 1C1D 1E1F",
                              "0020: 2021"]))

    def test_odd_length (self):
        assert_that(list(hex_dump(b"\xab\xcd\xef")),
                    equal_to(["0000: ABCD EF"]))

    def test_empty (self):
        assert_that(list(hex_dump(b"")), equal_to([ ]))

class TestRender (TestCase):
    def test_tinytiff (self):
        lines = list(render(Tiff(TINYTIFF)))

        assert_that(lines, equal_to([
            "byte order: little-endian",
            "image file directory:",
            "  ImageWidth:108",
            "  ImageLength:36",
            "  BitsPerSample:1",
            "  Compression:Group4Fax",
            "  PhotometricInterpretation:WhiteIsZero",
            "  FillOrder:LeftToRight",
            "  StripOffsets:158",
            "  SamplesPerPixel:1",
            "  StripByteCounts:80",
            "  PlanarConfiguration:Chunky",
            "  ResolutionUnit:Centimeter",
            "  Artist:Matt!",
            "",
            "Strip 0",
            "! Compression scheme 4 is not supported. (0x0000009e)"]))

    def test_without_strips (self):
        lines = list(render(Tiff(TINYTIFF), strips = False))

        assert_that(lines[-1], equal_to("  Artist:Matt!"))

    def test_lzw_strips_and_chain (self):
        builder = TiffBuilder()
        strip   = builder.append(pack_codes(256, 65, 66, 257))
        builder.add_ifd([(256, 3, 1, 2), (259, 3, 1, 5),
                         (273, 4, 1, strip), (279, 4, 1, 5)])
        second  = builder.add_ifd([(256, 3, 1, 2)])

        lines = list(render(Tiff(builder.getvalue())))

        assert_that(lines, equal_to([
            "byte order: little-endian",
            "image file directory:",
            "  ImageWidth:2",
            "  Compression:LZW",
            "  StripOffsets:{:d}".format(strip),
            "  StripByteCounts:5",
            "next ifd is at {:d}".format(second),
            "",
            "Strip 0",
            "0000: 4142",
            "image file directory:",
            "  ImageWidth:2"]))

    def test_truncated_strip (self):
        builder = TiffBuilder()
        strip   = builder.append(pack_codes(256, 65, 66, 257))
        builder.add_ifd([(256, 3, 1, 2), (259, 3, 1, 5),
                         (273, 4, 1, strip), (279, 4, 1, 5)])

        lines = list(render(Tiff(builder.getvalue()), capacity = 1))

        assert_that(lines[-2], equal_to("0000: 41"))
        assert_that(lines[-1], contains_string("! Decoded output filled"))

    def test_directory_level_strip_problem (self):
        builder = TiffBuilder()
        builder.add_ifd([(256, 3, 1, 2), (273, 4, 1, 100)])

        lines = list(render(Tiff(builder.getvalue())))

        assert_that(lines[-2], equal_to(""))
        assert_that(lines[-1], contains_string("StripByteCounts"))
