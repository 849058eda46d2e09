# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from mmap           import  mmap

from ..exceptions   import  UnexpectedEOF
from ..internal     import  ByteOrder, bytes_to_int, bytes_to_sint

class BufferReader:
    """Buffer Reader

    This wraps the immutable content of a whole file. Every read names
    its own offset, and every read is checked against the length of the
    buffer before anything is sliced out of it.

    Args:
        buffer (bytes):     The file's content. This can also be a
                            bytearray, a memoryview, or a read-only
                            mmap.

    Examples:
        >>> reader = BufferReader(b"II*\\x00\\x08\\x00\\x00\\x00")
        >>> reader.read_int(2, 2)
        42
        >>> reader.read(6, 4)
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        UnexpectedEOF: Unexpected end of file. (0x00000006)

        As you can see, it won't hand back a short read.

        >>> reader = BufferReader("sup doggie")
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        TypeError: Expected bytes, not str

    """

    # Classic tiffs we can read are always little endian.
    byte_order  = ByteOrder.LITTLE

    def __init__ (self, buffer):
        if not isinstance(buffer, (bytes, bytearray, memoryview, mmap)):
            raise TypeError("Expected bytes, not {}".format(
                    type(buffer).__name__))

        self.buffer = buffer

    def __len__ (self):
        return len(self.buffer)

    def contains (self, offset, length):
        """Check that [offset, offset + length) lies inside the
        buffer."""
        return offset >= 0 and length >= 0 \
                and offset + length <= len(self.buffer)

    def read (self, offset, length, error_class = UnexpectedEOF, *args):
        """Read exactly `length` bytes starting at `offset`.

        If that would run past the end of the buffer, this raises
        `error_class` instead. The error is positioned at `offset`
        unless it's given its own arguments, in which case those are
        passed along as-is.
        """
        if not self.contains(offset, length):
            if args:
                raise error_class(*args)

            raise error_class(offset)

        return bytes(self.buffer[offset:offset + length])

    def read_int (self, offset, length, *args):
        """Read an unsigned int."""
        return bytes_to_int(self.read(offset, length, *args),
                            self.byte_order)

    def read_sint (self, offset, length, *args):
        """Read a signed int."""
        return bytes_to_sint(self.read(offset, length, *args),
                             self.byte_order)
