# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections        import  namedtuple
from collections.abc    import  Sequence
import logging

from ...exceptions      import  TiffItemError, UnsupportedByteOrder, \
                                BadMagic, FirstIFDOffsetTooLow
from ..buffer_reader    import  BufferReader
from .directories       import  walk_directories
from .entries           import  resolve_value
from .strips            import  ImageDescriptor, StripDecoder

logger = logging.getLogger(__name__)

# The value is None if it couldn't be resolved. The problem is None
# unless something went wrong reading the entry.
ResolvedEntry = namedtuple("ResolvedEntry", ("entry", "value", "problem"))

class Directory (Sequence):
    """One IFD, with every entry resolved.

    This is a sequence of ResolvedEntry tuples in file order. Entries
    that can't be resolved stay in the sequence, carrying their error,
    so nothing in the IFD is silently dropped.

    Args:
        reader (BufferReader):          The whole file.
        ifd (ImageFileDirectory):       The IFD as the walker found it.
        number (int):                   Its place in the chain.
    """

    def __init__ (self, reader, ifd, number):
        self.reader         = reader
        self.number         = number
        self.offset         = ifd.offset
        self.next_offset    = ifd.next_offset
        self.descriptor     = ImageDescriptor(ifd.offset)
        self.entries        = [ ]

        for entry in ifd.entries:
            self.entries.append(self.resolve(entry))

    def __getitem__ (self, key):
        return self.entries[key]

    def __len__ (self):
        return len(self.entries)

    def __repr__ (self):
        return "<{} {:d} at 0x{:08x}, {:d} entries>".format(
                self.__class__.__name__,
                self.number,
                self.offset,
                len(self))

    def resolve (self, entry):
        try:
            value = resolve_value(self.reader, entry)

        except TiffItemError as e:
            logger.warning("IFD %d, tag %d: %s", self.number, entry.tag, e)
            return ResolvedEntry(entry, None, e)

        try:
            # The descriptor reads its own tags through the scalar and
            # array accessors, which are pickier than resolve_value.
            self.descriptor.absorb(self.reader, entry)

        except TiffItemError as e:
            logger.warning("IFD %d, tag %d: %s", self.number, entry.tag, e)
            return ResolvedEntry(entry, value, e)

        return ResolvedEntry(entry, value, None)

    @property
    def problems (self):
        return [resolved for resolved in self.entries
                if resolved.problem is not None]

    def strips (self, capacity = None):
        """Decode this IFD's strips.

        Returns:
            StripDecoder:   Iterate over it for Strip tuples.
        """
        return StripDecoder(self.reader, self.descriptor, capacity)

class Tiff (Sequence):
    """Tiff Container

    Once initialized, this is little more than a non-mutable sequence of
    Directory objects. It takes in the bytes of a whole file, reads what
    it can, and becomes that sequence (or raises a TiffStructureError
    if it can't).

    Entries that can't be resolved don't stop anything; they're kept in
    their Directory along with their error. Strips aren't decoded until
    someone asks a Directory for them.
    """

    # The first two bytes of the tiff must be in here.
    expected_byte_orders    = {
        b"II":  "little",
    }

    # These are real tiffs, but not ones we read.
    unsupported_byte_orders = {
        b"MM":  "big",
    }

    # The second two bytes of the tiff must be this integer.
    magic_check_number      = 42

    header_length           = 8

    def __init__ (self, buffer):
        if not isinstance(buffer, BufferReader):
            buffer = BufferReader(buffer)

        self.reader = buffer

        # Read the header. This will set the byte order and return the
        # offset for the first IFD.
        ifd_offset  = self.read_header()

        # The whole chain is walked here, so a broken chain fails before
        # any IFD is handed out.
        self.ifds   = [ ]

        for number, ifd in enumerate(walk_directories(self.reader,
                                                      ifd_offset)):
            self.ifds.append(Directory(self.reader, ifd, number))

    def __getitem__ (self, key):
        """Get an IFD"""
        return self.ifds[key]

    def __len__ (self):
        """Get a count of IFDs"""
        return len(self.ifds)

    def read_header (self):
        """Read the tiff header.

        This reads the first eight bytes of the tiff. It discerns byte
        order, validates the magic number, and locates the offset of the
        first IFD. The byte order is set in self.byte_order; the first
        IFD offset is returned.
        """
        marker = self.reader.read(0, 2)

        if marker not in self.expected_byte_orders:
            if marker in self.unsupported_byte_orders:
                raise UnsupportedByteOrder(0, "{} ({}-endian)".format(
                        marker.decode("ascii"),
                        self.unsupported_byte_orders[marker]))

            raise UnsupportedByteOrder(0, marker.hex())

        self.byte_order = self.expected_byte_orders[marker]

        forty_two = self.reader.read_int(2, 2)

        if forty_two != self.magic_check_number:
            raise BadMagic(2, self.magic_check_number, forty_two)

        ifd_offset = self.reader.read_int(4, 4)

        if ifd_offset < self.header_length:
            # Be sure the offset doesn't point to anywhere in the tiff
            # header.
            raise FirstIFDOffsetTooLow(4, self.header_length, ifd_offset)

        return ifd_offset
