# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .backways_map  import make_backways_map
from .byte_handlers import ByteOrder, int_to_bytes, bytes_to_int, \
                           bytes_to_sint, hex_to_bytes

__all__ = [
    "ByteOrder",
    "int_to_bytes",
    "bytes_to_int",
    "bytes_to_sint",
    "hex_to_bytes",
    "make_backways_map",
]
