# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import logging

from ...exceptions  import  BitstreamCorrupt, UnexpectedEnd

logger = logging.getLogger(__name__)

CLEAR_CODE      = 256
END_CODE        = 257
FIRST_CODE      = 258

MIN_BITS        = 9
MAX_BITS        = 12

# Codes are never wider than twelve bits, so the table can't hold more
# than this many strings.
TABLE_SIZE      = 1 << MAX_BITS

def code_width (table_size):
    """Work out how wide the next code is.

    TIFF switches widths one code earlier than GIF does: as soon as the
    table has 511 entries, codes are 10 bits wide, and so on up to 12.

        >>> [code_width(n) for n in (258, 510, 511, 1022, 1023, 2047)]
        [9, 9, 10, 10, 11, 12]
        >>> code_width(4096)
        12
    """
    return min(max((table_size + 1).bit_length(), MIN_BITS), MAX_BITS)

class BitReader:
    """Read codes most-significant-bit first across byte boundaries.

    Args:
        data (bytes):       The compressed strip.
        position (int):     The strip's offset in the file. It's only
                            used to position errors.
    """

    def __init__ (self, data, position = 0):
        self.data           = data
        self.position       = position
        self.bit_position   = 0

    def bits_left (self):
        return len(self.data) * 8 - self.bit_position

    def byte_position (self):
        """File offset of the byte we're currently reading from."""
        return self.position + self.bit_position // 8

    def read (self, width):
        """Read one code of `width` bits.

        Returns None if the data ran out cleanly: either there's nothing
        left, or all that's left is the padding at the end of the last
        byte. Running out anywhere else raises UnexpectedEnd.
        """
        if self.bits_left() < width:
            if self.bits_left() < 8:
                self.bit_position = len(self.data) * 8
                return None

            raise UnexpectedEnd(self.byte_position(), width)

        code    = 0
        needed  = width

        while needed > 0:
            byte_index, bit_offset  = divmod(self.bit_position, 8)
            available               = 8 - bit_offset
            take                    = min(available, needed)

            # Take the highest unread bits of this byte.
            bits = (self.data[byte_index] >> (available - take)) \
                        & ((1 << take) - 1)

            code                = (code << take) | bits
            needed             -= take
            self.bit_position  += take

        return code

class LZWDecoder:
    """LZW decoder for a single tiff strip.

    The decoder moves between three states. It starts out waiting for
    its first code; a clear code resets the table and leaves it just
    after a clear, where the next code must be a literal and adds
    nothing to the table; every code after that is streaming, where each
    code both emits a string and defines the next free code.

    The table belongs to one call of decode() and is thrown away when
    it returns.

    Args:
        data (bytes):       The compressed strip.
        capacity (int):     The most bytes decode() will return.
        position (int):     The strip's offset in the file, for errors.

    Examples:
        >>> decoder = LZWDecoder(bytes.fromhex("800280703808"), 0x100)
        >>> list(decoder.decode())
        [10, 3, 3, 3]
        >>> decoder.truncated
        False

        If the output fills up, the decoder stops and says so.

        >>> decoder = LZWDecoder(bytes.fromhex("800280703808"), 3)
        >>> list(decoder.decode())
        [10, 3, 3]
        >>> decoder.truncated
        True

    """

    def __init__ (self, data, capacity, position = 0):
        self.bits       = BitReader(data, position)
        self.capacity   = capacity
        self.truncated  = False

    def reset_table (self):
        # Only the literals are defined. The two control codes never
        # have strings of their own.
        self.table      = [bytes((i,)) for i in range(256)]
        self.table     += [None] * (TABLE_SIZE - 256)
        self.next_code  = FIRST_CODE
        self.previous   = None

    def decode (self):
        """Decode codes until the end code, the end of the data, or the
        output capacity, whichever comes first.

        Returns:
            bytes:              Everything decoded, never more than the
                                capacity. If it's exactly the capacity,
                                `self.truncated` is set.

        Raises:
            BitstreamCorrupt:   A code was neither defined nor the next
                                free code, or the table overflowed.
            UnexpectedEnd:      The data ran out in the middle of a
                                code.
        """
        output          = bytearray()
        code_count      = 0
        self.truncated  = False
        self.reset_table()

        while len(output) < self.capacity:
            code = self.bits.read(code_width(self.next_code))

            if code is None or code == END_CODE:
                break

            code_count += 1

            if code == CLEAR_CODE:
                self.reset_table()
                continue

            string  = self.feed(code)
            output += string[:self.capacity - len(output)]

        if len(output) >= self.capacity:
            self.truncated = True

        logger.debug("LZW strip at 0x%08x: %d codes, %d bytes",
                     self.bits.position, code_count, len(output))

        # The table goes away with this call.
        self.table = None

        return bytes(output)

    def feed (self, code):
        """Handle one non-control code and return its string."""
        if self.previous is None:
            # Right after a clear, there's no string to extend yet.
            if code >= CLEAR_CODE:
                self.corrupt(code)

            string = self.table[code]

        elif code < self.next_code:
            string = self.table[code]
            self.define(code, self.table[self.previous] + string[:1])

        elif code == self.next_code:
            # The encoder used this code as soon as it defined it, so it
            # must be the previous string plus its own first byte.
            previous    = self.table[self.previous]
            string      = previous + previous[:1]
            self.define(code, string)

        else:
            self.corrupt(code)

        self.previous = code
        return string

    def define (self, code, string):
        # The table may never fill up without a clear.
        if self.next_code + 1 >= TABLE_SIZE:
            self.corrupt(code)

        self.table[self.next_code]  = string
        self.next_code             += 1

    def corrupt (self, code):
        raise BitstreamCorrupt(self.bits.byte_position(), code,
                               self.next_code)
