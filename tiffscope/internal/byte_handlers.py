# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class ByteOrder:
    BIG     = "big"
    LITTLE  = "little"

def int_to_bytes (integer, length, byte_order = ByteOrder.LITTLE):
    return integer.to_bytes(length, byte_order)

def bytes_to_int (bytestring, byte_order = ByteOrder.LITTLE):
    return int.from_bytes(bytestring, byte_order)

def bytes_to_sint (bytestring, byte_order = ByteOrder.LITTLE):
    return int.from_bytes(bytestring, byte_order, signed = True)

def hex_to_bytes (hexstring):
    # Allow the same whitespace-heavy layout the tests use to line up
    # tiff structures.
    return bytes.fromhex(" ".join(hexstring.split()))
