# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from .entries   import  TiffType, DirectoryEntry, Scalar, Array,     \
                        Rational, Ascii, resolve_scalar,             \
                        resolve_array_element, resolve_rational,     \
                        resolve_ascii, resolve_value
from .lzw       import  LZWDecoder
from .predictor import  undo_horizontal_differencing
from .reader    import  Tiff, Directory, ResolvedEntry
from .strips    import  ImageDescriptor, StripDecoder, Strip
from .tags      import  IFDTag, IFDCompression, IFDFillOrder,        \
                        IFDOrientation, IFDPhotometricInterpretation, \
                        IFDPlanarConfiguration, IFDPredictor,        \
                        IFDResolutionUnit, IFDSampleFormat

__all__ = [
    "TiffType",
    "DirectoryEntry",
    "Scalar",
    "Array",
    "Rational",
    "Ascii",
    "resolve_scalar",
    "resolve_array_element",
    "resolve_rational",
    "resolve_ascii",
    "resolve_value",
    "LZWDecoder",
    "undo_horizontal_differencing",
    "Tiff",
    "Directory",
    "ResolvedEntry",
    "ImageDescriptor",
    "StripDecoder",
    "Strip",
    "IFDTag",
    "IFDCompression",
    "IFDFillOrder",
    "IFDOrientation",
    "IFDPhotometricInterpretation",
    "IFDPlanarConfiguration",
    "IFDPredictor",
    "IFDResolutionUnit",
    "IFDSampleFormat",
]
