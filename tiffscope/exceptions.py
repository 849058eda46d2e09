# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class TiffScopeBaseError (Exception):
    """Root for all tiffscope errors.

    Note:
        This is meant to never be raised directly. Only its descendents
        will be raised; this is meant only to be caught.

    Examples:
        All child exceptions default to showing the docstring if ever
        converted to strings.

        >>> class MyError (TiffScopeBaseError):
        ...     '''Quick description of this subclass.'''
        ...     pass
        ...
        >>> raise MyError
        Traceback (most recent call last):
          File "<stdin>", line 1, in <module>
        MyError: Quick description of this subclass.

    """

    def __repr__ (self):
        return "{}({})".format(self.__class__.__name__, repr(str(self)))

    def __str__ (self):
        return self.__doc__

class FileReadError (TiffScopeBaseError):
    """File Read Error

    Something unexpected has happened while reading a file.

    Args:
        position (int):     The byte in the file.
        *args:              Values for the message template, which is
                            the first line of the child's docstring.

    Examples:
        >>> two_fifty_six = UnexpectedEOF(256)
        >>> two_fifty_six
        UnexpectedEOF('Unexpected end of file. (0x00000100)')

        The message contains an eight-digit hexadecimal pointing to the
        byte in the file where the problem occurred.

    """

    def __init__ (self, position, *args):
        self.position   = position
        self.args       = args

    def __str__ (self):
        template = self.__doc__.strip().splitlines()[0]
        return "{} (0x{:08x})".format(template.format(*(self.args)),
                                      self.position)

class UnexpectedEOF (FileReadError):
    """Unexpected end of file."""
    pass

class TiffError (FileReadError):
    """Catch-all for tiff errors."""
    pass

########################################################################
########################## Structural errors ###########################
########################################################################

class TiffStructureError (TiffError):
    """The file is not a well-formed classic tiff."""
    pass

class UnsupportedByteOrder (TiffStructureError):
    """Unsupported byte order: {}"""
    pass

class BadMagic (TiffStructureError):
    """Wrong magic number: expected {:d}; found {:d}"""
    pass

class CorruptDirectory (TiffStructureError):
    """IFD structure is corrupt."""
    pass

class FirstIFDOffsetTooLow (CorruptDirectory):
    """IFD offset must be at least {:d}; I was given {:d}"""
    pass

class DirectoryOutOfBounds (CorruptDirectory):
    """IFD {:d} needs {:d} bytes but the file is only {:d} bytes long."""
    pass

class DirectoryCycle (CorruptDirectory):
    """IFD {:d} points back to the IFD at 0x{:08x}."""
    pass

########################################################################
########################### Item-level errors ##########################
########################################################################

class TiffItemError (TiffError):
    """A single entry or strip could not be decoded."""
    pass

class UnresolvableValue (TiffItemError):
    """Tag {:d} has type {:d}, which can't be read as {}."""
    pass

class OutOfRange (TiffItemError):
    """Index {:d} is out of range for {} ({:d} available)."""
    pass

class ValueOutOfBounds (OutOfRange):
    """Tag {:d} needs {:d} bytes at 0x{:08x}, past the end of the file."""
    pass

class StripOutOfBounds (OutOfRange):
    """Strip {:d} needs {:d} bytes, past the end of the file."""
    pass

class MissingTag (TiffItemError):
    """Tag {:d} ({}) is required to decode strips."""
    pass

class StripsDontMatch (TiffItemError):
    """{:d} strip offsets don't match {:d} strip byte counts."""
    pass

class NotSupported (TiffItemError):
    """{} is not supported."""
    pass

class LZWError (TiffItemError):
    """Catch-all for LZW errors."""
    pass

class BitstreamCorrupt (LZWError):
    """Invalid LZW code {:d} (next free code is {:d})."""
    pass

class UnexpectedEnd (LZWError):
    """LZW data ended in the middle of a {:d}-bit code."""
    pass

class OutputTruncated (LZWError):
    """Decoded output filled its {:d}-byte capacity."""
    pass
