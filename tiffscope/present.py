# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .exceptions        import  TiffItemError
from .internal          import  make_backways_map
from .read.tiff.entries import  Scalar, Array, Rational, Ascii
from .read.tiff.tags    import  IFDTag, IFDCompression, IFDFillOrder,  \
                                IFDOrientation,                        \
                                IFDPhotometricInterpretation,          \
                                IFDPlanarConfiguration, IFDPredictor,  \
                                IFDResolutionUnit, IFDSampleFormat

# This simply pairs IFD tags with IFD value classes.
IFDTagPairs = (
    (IFDTag.Compression,                IFDCompression),
    (IFDTag.FillOrder,                  IFDFillOrder),
    (IFDTag.Orientation,                IFDOrientation),
    (IFDTag.PhotometricInterpretation,  IFDPhotometricInterpretation),
    (IFDTag.PlanarConfiguration,        IFDPlanarConfiguration),
    (IFDTag.Predictor,                  IFDPredictor),
    (IFDTag.ResolutionUnit,             IFDResolutionUnit),
    (IFDTag.SampleFormat,               IFDSampleFormat),
)

# Here's a nice backways IFD tag map.
TiffTagNameDict     = make_backways_map(IFDTag)

# We'll do the same thing for IFD tag values.
TiffTagValueDict    = { }
for tag, value_class in IFDTagPairs:
    TiffTagValueDict[tag] = make_backways_map(value_class)

# Offset and length arrays get square brackets.
bracketed_tags = frozenset((
    IFDTag.StripOffsets,
    IFDTag.StripByteCounts,
    IFDTag.TileOffsets,
    IFDTag.TileByteCounts,
    IFDTag.FreeOffsets,
    IFDTag.FreeByteCounts,
))

BYTES_PER_LINE  = 16
BYTES_PER_GROUP = 2

def format_rational (rational):
    """Show a rational as n/d, or just n if d is 1.

        >>> format_rational(Rational(300, 1))
        '300'
        >>> format_rational(Rational(72, 7))
        '72/7'
    """
    if rational.denominator == 1:
        return str(rational.numerator)

    return "{}/{}".format(rational.numerator, rational.denominator)

def format_number (number):
    if isinstance(number, Rational):
        return format_rational(number)

    return str(number)

def format_value (tag, value):
    """Turn a resolved value into display text.

        >>> format_value(IFDTag.Compression, Scalar(5))
        'LZW'
        >>> format_value(IFDTag.Compression, Scalar(99))
        '99'
        >>> format_value(IFDTag.StripOffsets, Array([8, 1032]))
        '[8,1032]'
        >>> format_value(IFDTag.BitsPerSample, Array([8, 8, 8]))
        '(8,8,8)'
    """
    if isinstance(value, Scalar):
        labels = TiffTagValueDict.get(tag, { })
        return labels.get(value.value, format_number(value.value))

    if isinstance(value, Rational):
        return format_rational(value)

    if isinstance(value, Ascii):
        return value.text.decode("latin-1")

    if isinstance(value, Array):
        joined = ",".join(format_number(v) for v in value.values)

        if tag in bracketed_tags:
            return "[{}]".format(joined)

        return "({})".format(joined)

    raise TypeError("Unexpected value: {}".format(repr(value)))

def format_entry (resolved):
    """Turn one ResolvedEntry into a line of text.

    Known tags come out as Name:value. Tags without a name come out raw,
    the way they sit in the IFD. Any problem with the entry follows in
    angle brackets.
    """
    entry   = resolved.entry
    name    = TiffTagNameDict.get(entry.tag)

    if name is None:
        text = "(tag:{:d} type:{:d} count:{:d} value:{:d})".format(
                entry.tag, entry.type, entry.count, entry.value_offset)

    elif resolved.value is None:
        return "{}:<{}>".format(name, resolved.problem)

    else:
        text = "{}:{}".format(name, format_value(entry.tag,
                                                 resolved.value))

    if resolved.problem is not None:
        text += " <{}>".format(resolved.problem)

    return text

def hex_dump (data, base = 0):
    """Dump bytes as hex, sixteen to a line in two-byte groups.

        >>> list(hex_dump(bytes(range(18))))
        ['0000: 0001 0203 0405 0607 0809 0A0B 0C0D 0E0F', '0010: 1011']
    """
    for start in range(0, len(data), BYTES_PER_LINE):
        line    = data[start:start + BYTES_PER_LINE]
        groups  = [line[i:i + BYTES_PER_GROUP].hex().upper()
                   for i in range(0, len(line), BYTES_PER_GROUP)]

        yield "{:04X}: {}".format(base + start, " ".join(groups))

def render_strips (directory, capacity = None):
    try:
        for strip in directory.strips(capacity):
            yield ""
            yield "Strip {:d}".format(strip.index)

            if strip.data is not None:
                yield from hex_dump(strip.data)

            if strip.problem is not None:
                yield "! {}".format(strip.problem)

    except TiffItemError as e:
        yield ""
        yield "! {}".format(e)

def render (tiff, capacity = None, strips = True):
    """Render a whole Tiff as lines of text.

    Args:
        tiff (Tiff):                The parsed file.
        capacity (Optional[int]):   Passed along to each StripDecoder.
        strips (bool):              Whether to decode and dump strips.

    Yields:
        str:                        One line at a time.
    """
    yield "byte order: {}-endian".format(tiff.byte_order)

    for directory in tiff:
        yield "image file directory:"

        for resolved in directory:
            yield "  " + format_entry(resolved)

        if directory.next_offset:
            yield "next ifd is at {:d}".format(directory.next_offset)

        if strips:
            yield from render_strips(directory, capacity)
