# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.

class IFDTag:
    """IFD tags by name"""
    NewSubfileType              = 0x00fe
    SubfileType                 = 0x00ff

    ImageWidth                  = 0x0100
    ImageLength                 = 0x0101
    BitsPerSample               = 0x0102
    Compression                 = 0x0103
    PhotometricInterpretation   = 0x0106
    Thresholding                = 0x0107

    CellWidth                   = 0x0108
    CellLength                  = 0x0109
    FillOrder                   = 0x010a
    DocumentName                = 0x010d
    ImageDescription            = 0x010e
    Make                        = 0x010f

    Model                       = 0x0110
    StripOffsets                = 0x0111
    Orientation                 = 0x0112
    SamplesPerPixel             = 0x0115
    RowsPerStrip                = 0x0116
    StripByteCounts             = 0x0117

    MinSampleValue              = 0x0118
    MaxSampleValue              = 0x0119
    XResolution                 = 0x011a
    YResolution                 = 0x011b
    PlanarConfiguration         = 0x011c
    PageName                    = 0x011d
    XPosition                   = 0x011e
    YPosition                   = 0x011f

    FreeOffsets                 = 0x0120
    FreeByteCounts              = 0x0121
    GrayResponseUnit            = 0x0122
    GrayResponseCurve           = 0x0123
    T4Options                   = 0x0124
    T6Options                   = 0x0125

    ResolutionUnit              = 0x0128
    PageNumber                  = 0x0129
    TransferFunction            = 0x012d

    Software                    = 0x0131
    DateTime                    = 0x0132

    Artist                      = 0x013b
    HostComputer                = 0x013c
    Predictor                   = 0x013d
    WhitePoint                  = 0x013e
    PrimaryChromaticities       = 0x013f

    ColorMap                    = 0x0140
    HalftoneHints               = 0x0141
    TileWidth                   = 0x0142
    TileLength                  = 0x0143
    TileOffsets                 = 0x0144
    TileByteCounts              = 0x0145

    SubIFDs                     = 0x014a
    InkSet                      = 0x014c
    InkNames                    = 0x014d
    NumberOfInks                = 0x014e

    DotRange                    = 0x0150
    TargetPrinter               = 0x0151
    ExtraSamples                = 0x0152
    SampleFormat                = 0x0153
    SMinSampleValue             = 0x0154
    SMaxSampleValue             = 0x0155
    TransferRange               = 0x0156

    JPEGTables                  = 0x015b

    YCbCrCoefficients           = 0x0211
    YCbCrSubSampling            = 0x0212
    YCbCrPositioning            = 0x0213
    ReferenceBlackWhite         = 0x0214

    XMP                         = 0x02bc

    Copyright                   = 0x8298
    IPTC                        = 0x83bb
    Photoshop                   = 0x8649
    ExifIFD                     = 0x8769
    ICCProfile                  = 0x8773

class IFDCompression:
    """IFDTag.Compression values"""
    Uncompressed        = 1
    CCITT_1D            = 2
    Group3Fax           = 3
    Group4Fax           = 4
    LZW                 = 5
    JPEG                = 6
    PackBits            = 0x8005

class IFDPhotometricInterpretation:
    """IFDTag.PhotometricInterpretation values"""
    WhiteIsZero         = 0
    BlackIsZero         = 1
    RGB                 = 2
    Palette             = 3
    TransparencyMask    = 4
    CMYK                = 5
    YCbCr               = 6
    CIELab              = 8

class IFDOrientation:
    """IFDTag.Orientation values

    Each name gives where the 0th row and the 0th column sit when the
    image is displayed.
    """
    TopLeft             = 1
    TopRight            = 2
    BottomRight         = 3
    BottomLeft          = 4
    LeftTop             = 5
    RightTop            = 6
    RightBottom         = 7
    LeftBottom          = 8

class IFDPlanarConfiguration:
    """IFDTag.PlanarConfiguration values"""
    Chunky              = 1
    Planar              = 2

class IFDResolutionUnit:
    """IFDTag.ResolutionUnit values"""
    NoUnit              = 1
    Inch                = 2
    Centimeter          = 3

class IFDPredictor:
    """IFDTag.Predictor values"""
    NoPrediction            = 1
    HorizontalDifferencing  = 2

class IFDFillOrder:
    """IFDTag.FillOrder values"""
    LeftToRight         = 1
    RightToLeft         = 2

class IFDSampleFormat:
    """IFDTag.SampleFormat values"""
    UnsignedInteger     = 1
    SignedInteger       = 2
    IEEEFloat           = 3
    Undefined           = 4
