# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .exceptions import TiffScopeBaseError, FileReadError, UnexpectedEOF, \
                        TiffError, TiffStructureError, TiffItemError

__version__ = "1.0.0.dev0"

__all__ = [
    "read",

    # Exceptions
    "TiffScopeBaseError",
    "FileReadError",
    "UnexpectedEOF",
    "TiffError",
    "TiffStructureError",
    "TiffItemError",
]
