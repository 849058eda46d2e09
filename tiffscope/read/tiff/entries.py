# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple

import numpy

from ...exceptions  import  UnresolvableValue, OutOfRange, \
                            ValueOutOfBounds
from ...internal    import  bytes_to_int

########################################################################
############################## TIFF Types ##############################
########################################################################

# This is kinda an enumeration of TIFF data types.
class TiffType:
    """IFD value types by name"""
    # Everything really should be one of these five types.
    BYTE        = 1
    ASCII       = 2
    SHORT       = 3
    LONG        = 4
    RATIONAL    = 5

    # But each of these is also possible.
    SBYTE       = 6
    UNDEFINED   = 7
    SSHORT      = 8
    SLONG       = 9
    SRATIONAL   = 10
    FLOAT       = 11
    DOUBLE      = 12

# TIFF data types will be stored in a dictionary of named tuples. The
# dtype describes a single element (rationals are two of them).
TiffTypeDict    = { }
TiffTypeTuple   = namedtuple("TiffTypeTuple", ("tifftype",
                                               "name",
                                               "dtype",
                                               "bytecount"))

for tifftype, name, dtype, bytecount in (
        (TiffType.BYTE,         "Byte",         "<u1",  1),
        (TiffType.ASCII,        "Ascii",        "<u1",  1),
        (TiffType.SHORT,        "Short",        "<u2",  2),
        (TiffType.LONG,         "Long",         "<u4",  4),
        (TiffType.RATIONAL,     "Rational",     "<u4",  8),
        (TiffType.SBYTE,        "SByte",        "<i1",  1),
        (TiffType.UNDEFINED,    "Undefined",    "<u1",  1),
        (TiffType.SSHORT,       "SShort",       "<i2",  2),
        (TiffType.SLONG,        "SLong",        "<i4",  4),
        (TiffType.SRATIONAL,    "SRational",    "<i4",  8),
        (TiffType.FLOAT,        "Float",        "<f4",  4),
        (TiffType.DOUBLE,       "Double",       "<f8",  8)):
    TiffTypeDict[tifftype] = TiffTypeTuple(tifftype, name, dtype,
                                           bytecount)

integer_types   = frozenset((
    TiffType.BYTE,
    TiffType.SHORT,
    TiffType.LONG,
    TiffType.SBYTE,
    TiffType.SSHORT,
    TiffType.SLONG,
))

rational_types  = frozenset((
    TiffType.RATIONAL,
    TiffType.SRATIONAL,
))

# Anything this long or shorter lives right in the entry.
INLINE_LENGTH   = 4

########################################################################
############################ Entry records #############################
########################################################################

class DirectoryEntry (namedtuple("DirectoryEntry", ("tag",
                                                    "type",
                                                    "count",
                                                    "raw_value",
                                                    "position"))):
    """One 12-byte IFD entry.

    The raw value is the entry's last four bytes, untouched. Whether
    they hold the value itself or an offset to it depends only on the
    type and count, never on the tag.

        >>> entry = DirectoryEntry(256, TiffType.SHORT, 1,
        ...                        b"\\x6c\\x00\\x00\\x00", 10)
        >>> entry.is_inline
        True
        >>> DirectoryEntry(273, TiffType.LONG, 2,
        ...                b"\\xee\\x00\\x00\\x00", 22).value_offset
        238
    """

    __slots__ = ()

    @property
    def type_info (self):
        return TiffTypeDict.get(self.type)

    @property
    def byte_length (self):
        """Total bytes needed by the value, or None for unknown
        types."""
        if self.type_info is None:
            return None

        return self.type_info.bytecount * self.count

    @property
    def is_inline (self):
        return self.byte_length is not None \
                and self.byte_length <= INLINE_LENGTH

    @property
    def value_offset (self):
        return bytes_to_int(self.raw_value)

########################################################################
############################ Value variants ############################
########################################################################

Scalar      = namedtuple("Scalar",      ("value",))
Array       = namedtuple("Array",       ("values",))
Rational    = namedtuple("Rational",    ("numerator", "denominator"))
Ascii       = namedtuple("Ascii",       ("text",))

########################################################################
############################### Resolvers ##############################
########################################################################

def value_bytes (reader, entry, start = 0, length = None):
    """Get the bytes behind an entry.

    Inline values come straight from the raw value; anything else is
    read from the buffer at the entry's offset. Either way, only the
    requested window (defaulting to the whole value) is returned.
    """
    if length is None:
        length = entry.byte_length - start

    if entry.is_inline:
        return entry.raw_value[start:start + length]

    offset = entry.value_offset + start
    return reader.read(offset, length, ValueOutOfBounds,
                       entry.position, entry.tag, length, offset)

def check_index (entry, index):
    if index < 0 or index >= entry.count:
        raise OutOfRange(entry.position, index,
                         "tag {:d}".format(entry.tag), entry.count)

def read_element (reader, entry, index):
    width   = entry.type_info.bytecount
    chunk   = value_bytes(reader, entry, index * width, width)

    return numpy.frombuffer(chunk, dtype = entry.type_info.dtype).item()

def resolve_scalar (reader, entry):
    """Read the first value of an integer entry."""
    if entry.type not in integer_types:
        raise UnresolvableValue(entry.position, entry.tag, entry.type,
                                "a scalar")

    check_index(entry, 0)
    return read_element(reader, entry, 0)

def resolve_array_element (reader, entry, index):
    """Read one value from an integer entry.

    Single-valued entries only have an element 0. Otherwise, the index
    is checked against the count before anything is read.
    """
    if entry.type not in integer_types:
        raise UnresolvableValue(entry.position, entry.tag, entry.type,
                                "an array element")

    check_index(entry, index)

    if entry.count == 1:
        return resolve_scalar(reader, entry)

    return read_element(reader, entry, index)

def resolve_rational (reader, entry, index = 0):
    if entry.type not in rational_types:
        raise UnresolvableValue(entry.position, entry.tag, entry.type,
                                "a rational")

    check_index(entry, index)

    numerator, denominator = numpy.frombuffer(
            value_bytes(reader, entry, index * 8, 8),
            dtype = entry.type_info.dtype).tolist()

    return Rational(numerator, denominator)

def resolve_ascii (reader, entry):
    """Read a string, stopping at the first NUL byte if there is
    one."""
    if entry.type != TiffType.ASCII:
        raise UnresolvableValue(entry.position, entry.tag, entry.type,
                                "ascii")

    text    = value_bytes(reader, entry)
    nul     = text.find(b"\0")

    if nul != -1:
        text = text[:nul]

    return Ascii(text)

def resolve_value (reader, entry):
    """Read an entry's value as whichever variant its type calls for.

    Returns:
        Ascii for strings; Rational for a lone rational; Scalar for any
        other lone number; Array for everything else. Arrays of
        rationals hold Rational values.

    Raises:
        UnresolvableValue:  The type code is unknown.
        ValueOutOfBounds:   The value runs past the end of the buffer.
    """
    if entry.type_info is None:
        raise UnresolvableValue(entry.position, entry.tag, entry.type,
                                "any known type")

    if entry.type == TiffType.ASCII:
        return resolve_ascii(reader, entry)

    if entry.count == 0:
        return Array([ ])

    values = numpy.frombuffer(value_bytes(reader, entry),
                              dtype = entry.type_info.dtype)

    if entry.type in rational_types:
        pairs = [Rational(n, d) for n, d in values.reshape(-1, 2).tolist()]

        if entry.count == 1:
            return pairs[0]

        return Array(pairs)

    values = values.tolist()

    if entry.count == 1:
        return Scalar(values[0])

    return Array(values)
