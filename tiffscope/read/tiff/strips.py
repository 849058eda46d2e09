# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple
import logging

from ...exceptions  import  TiffItemError, MissingTag, StripsDontMatch, \
                            StripOutOfBounds, NotSupported,            \
                            OutputTruncated
from .entries       import  resolve_scalar, resolve_array_element
from .lzw           import  LZWDecoder
from .predictor     import  undo_horizontal_differencing
from .tags          import  IFDTag, IFDCompression, IFDPredictor

logger = logging.getLogger(__name__)

# The problem is None for a clean strip. It's an OutputTruncated warning
# if the data is only a prefix, and any other error if there's no data.
Strip = namedtuple("Strip", ("index", "offset", "length", "data",
                             "problem"))

class ImageDescriptor:
    """Image Descriptor

    This collects what one IFD says about its image while the IFD's
    entries are scanned. Tags can come in any order, so it's only
    complete once every entry has been absorbed.

        >>> descriptor = ImageDescriptor()
        >>> descriptor.compression == IFDCompression.Uncompressed
        True
    """

    # Single values and the attributes they land in.
    scalar_tags = {
        IFDTag.ImageWidth:      "image_width",
        IFDTag.ImageLength:     "image_height",
        IFDTag.Compression:     "compression",
        IFDTag.Predictor:       "predictor",
        IFDTag.SamplesPerPixel: "samples_per_pixel",
        IFDTag.RowsPerStrip:    "rows_per_strip",
    }

    # Arrays and the attributes they land in.
    array_tags  = {
        IFDTag.BitsPerSample:   "bits_per_sample",
        IFDTag.StripOffsets:    "strip_offsets",
        IFDTag.StripByteCounts: "strip_byte_counts",
    }

    def __init__ (self, position = 0):
        self.position           = position
        self.image_width        = None
        self.image_height       = None
        self.compression        = IFDCompression.Uncompressed
        self.predictor          = IFDPredictor.NoPrediction
        self.samples_per_pixel  = 1
        self.rows_per_strip     = None
        self.bits_per_sample    = None
        self.strip_offsets      = None
        self.strip_byte_counts  = None

    def __repr__ (self):
        return "<{} {:d}x{:d}, compression {:d}, {:d} strips>".format(
                self.__class__.__name__,
                self.image_width or 0,
                self.image_height or 0,
                self.compression,
                len(self.strip_offsets or ()))

    def absorb (self, reader, entry):
        """Take in one entry, if it's one we track.

        Raises whatever the resolver raises; the attribute is left
        alone in that case.
        """
        if entry.tag in self.scalar_tags:
            setattr(self, self.scalar_tags[entry.tag],
                    resolve_scalar(reader, entry))

        elif entry.tag in self.array_tags:
            setattr(self, self.array_tags[entry.tag],
                    [resolve_array_element(reader, entry, i)
                        for i in range(entry.count)])

    @property
    def stride (self):
        """Bytes in one full row across all channels."""
        return self.image_width * self.samples_per_pixel

class StripDecoder:
    """Strip Decoder

    This drives decompression and predictor reversal for every strip in
    one IFD, in file order. Iterating over it yields Strip tuples.

    Args:
        reader (BufferReader):          The whole file.
        descriptor (ImageDescriptor):   The IFD's complete descriptor.
        capacity (Optional[int]):       The most bytes any one strip
                                        may decode to.

    Raises:
        MissingTag:         Strip byte counts or the image width are
                            missing (raised on first iteration).
        StripsDontMatch:    Offset and byte count arrays differ in
                            length (raised on first iteration).
    """

    default_capacity    = 0x40000

    def __init__ (self, reader, descriptor, capacity = None):
        self.reader     = reader
        self.descriptor = descriptor
        self.capacity   = capacity

        if self.capacity is None:
            self.capacity = self.default_capacity

    def __iter__ (self):
        offsets = self.descriptor.strip_offsets
        lengths = self.descriptor.strip_byte_counts

        if offsets is None:
            # No strips; nothing to do.
            return

        if lengths is None:
            raise MissingTag(self.descriptor.position,
                             IFDTag.StripByteCounts, "StripByteCounts")

        if self.descriptor.image_width is None:
            raise MissingTag(self.descriptor.position,
                             IFDTag.ImageWidth, "ImageWidth")

        if len(offsets) != len(lengths):
            raise StripsDontMatch(self.descriptor.position,
                                  len(offsets), len(lengths))

        for index, (offset, length) in enumerate(zip(offsets, lengths)):
            try:
                data, problem = self.decode(index, offset, length)

            except TiffItemError as e:
                logger.warning("Skipping strip %d: %s", index, e)
                yield Strip(index, offset, length, None, e)

            else:
                if problem is not None:
                    logger.warning("Strip %d: %s", index, problem)

                yield Strip(index, offset, length, data, problem)

    def decode (self, index, offset, length):
        """Decode one strip.

        Returns:
            tuple:  The decoded bytes and either None or an
                    OutputTruncated warning.
        """
        raw = self.reader.read(offset, length, StripOutOfBounds,
                               offset, index, length)

        compression = self.descriptor.compression

        if compression == IFDCompression.Uncompressed:
            logger.debug("Strip %d is uncompressed", index)
            return raw, None

        if compression != IFDCompression.LZW:
            raise NotSupported(offset, "Compression scheme {:d}".format(
                    compression))

        logger.debug("Strip %d is LZW", index)
        decoder = LZWDecoder(raw, self.capacity, offset)
        data    = bytearray(decoder.decode())

        self.reverse_predictor(offset, data)

        if decoder.truncated:
            return bytes(data), OutputTruncated(offset, self.capacity)

        return bytes(data), None

    def reverse_predictor (self, offset, data):
        predictor = self.descriptor.predictor

        if predictor == IFDPredictor.NoPrediction:
            return

        if predictor != IFDPredictor.HorizontalDifferencing:
            raise NotSupported(offset,
                               "Predictor {:d}".format(predictor))

        bits = self.descriptor.bits_per_sample

        if bits is None:
            # Without BitsPerSample, samples are one bit wide.
            raise NotSupported(offset, "Horizontal differencing without"
                               " BitsPerSample")

        if any(b != 8 for b in bits):
            raise NotSupported(offset, "Horizontal differencing on"
                               " {}-bit samples".format(
                                   ",".join(str(b) for b in bits)))

        samples = self.descriptor.samples_per_pixel

        if samples < 1 or self.descriptor.image_width < 1:
            raise NotSupported(offset, "Horizontal differencing on a"
                               " {:d}x{:d}-sample row".format(
                                   self.descriptor.image_width, samples))

        undo_horizontal_differencing(data, self.descriptor.stride,
                                     samples)
