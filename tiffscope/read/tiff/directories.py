# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from collections    import  namedtuple
import logging

from ...exceptions  import  DirectoryOutOfBounds, DirectoryCycle
from ...internal    import  bytes_to_int
from .entries       import  DirectoryEntry

logger = logging.getLogger(__name__)

# Each IFD is a two-byte count, that many twelve-byte entries, and a
# four-byte pointer to the next IFD.
COUNT_LENGTH    = 2
ENTRY_LENGTH    = 12
POINTER_LENGTH  = 4

ImageFileDirectory = namedtuple("ImageFileDirectory", ("offset",
                                                       "entries",
                                                       "next_offset"))

def parse_entry (record, position):
    """Split a twelve-byte record into a DirectoryEntry."""
    return DirectoryEntry(tag       = bytes_to_int(record[0:2]),
                          type      = bytes_to_int(record[2:4]),
                          count     = bytes_to_int(record[4:8]),
                          raw_value = record[8:12],
                          position  = position)

def walk_directories (reader, ifd_offset):
    """Walk the chain of IFDs.

    This is a generator; it reads one IFD at a time, in file order,
    until it finds a next-IFD offset of zero.

    Args:
        reader (BufferReader):  The whole file.
        ifd_offset (int):       Where the first IFD starts.

    Yields:
        ImageFileDirectory:     The IFD's own offset, its entries in
                                file order, and the next IFD's offset.

    Raises:
        DirectoryOutOfBounds:   An IFD's entry table or next-IFD pointer
                                runs past the end of the file.
        DirectoryCycle:         An IFD points back to one we've already
                                seen.
    """

    visited             = { }
    pointer_position    = 4

    while ifd_offset != 0:
        if ifd_offset in visited:
            raise DirectoryCycle(pointer_position, len(visited) - 1,
                                 ifd_offset)

        visited[ifd_offset] = len(visited)
        ifd_number          = len(visited) - 1

        # The count has to be there before we can know how much else
        # needs to be there.
        entry_count = reader.read_int(ifd_offset, COUNT_LENGTH,
                                      DirectoryOutOfBounds,
                                      ifd_offset, ifd_number,
                                      COUNT_LENGTH, len(reader))
        table_start = ifd_offset + COUNT_LENGTH
        table_bytes = ENTRY_LENGTH * entry_count + POINTER_LENGTH

        table = reader.read(table_start, table_bytes,
                            DirectoryOutOfBounds,
                            ifd_offset, ifd_number,
                            COUNT_LENGTH + table_bytes, len(reader))

        logger.debug("IFD %d at 0x%08x has %d entries",
                     ifd_number, ifd_offset, entry_count)

        entries = [ ]

        for i in range(entry_count):
            start = i * ENTRY_LENGTH
            entries.append(parse_entry(table[start:start + ENTRY_LENGTH],
                                       table_start + start))

        pointer_position    = table_start + table_bytes - POINTER_LENGTH
        next_offset         = bytes_to_int(table[-POINTER_LENGTH:])

        yield ImageFileDirectory(ifd_offset, entries, next_offset)

        ifd_offset = next_offset
