# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
import numpy

def undo_horizontal_differencing (data, stride, samples):
    """Reverse the horizontal differencing predictor, in place.

    The encoder replaced each sample with its difference from the same
    channel one pixel to the left, modulo 256, starting over at each
    row. Adding the differences back up is a running sum across each
    row, separately for each channel.

    Args:
        data (bytearray):   Decoded strip bytes. These are modified.
        stride (int):       Bytes per row (width times samples).
        samples (int):      Samples per pixel.

    Examples:
        >>> data = bytearray([10, 3, 3, 3])
        >>> undo_horizontal_differencing(data, 4, 1)
        >>> list(data)
        [10, 13, 16, 19]

        With more than one channel, each channel sums on its own.

        >>> data = bytearray([1, 200, 1, 100, 1, 100])
        >>> undo_horizontal_differencing(data, 6, 2)
        >>> list(data)
        [1, 200, 2, 44, 3, 144]

    """
    if samples < 1 or stride < samples or stride % samples != 0:
        raise ValueError("Can't split rows of {:d} bytes into pixels of"
                         " {:d} samples".format(stride, samples))

    if len(data) == 0:
        return

    pixels  = numpy.frombuffer(data, dtype = numpy.uint8)
    whole   = len(pixels) - len(pixels) % stride

    if whole > 0:
        rows            = pixels[:whole].reshape(-1, stride // samples,
                                                 samples)
        rows[...]       = numpy.cumsum(rows, axis = 1,
                                       dtype = numpy.uint8)

    tail = pixels[whole:]

    if len(tail) > 0:
        # A partial last row gets the same treatment over whatever
        # bytes it has. Zero padding at the end can't change the sums
        # before it.
        padded              = numpy.zeros(-(-len(tail) // samples)
                                          * samples,
                                          dtype = numpy.uint8)
        padded[:len(tail)]  = tail
        tail[...]           = numpy.cumsum(padded.reshape(-1, samples),
                                           axis = 0,
                                           dtype = numpy.uint8
                                           ).ravel()[:len(tail)]
