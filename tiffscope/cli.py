# Copyright (c) 2017 The Regents of the University of Michigan.
# All Rights Reserved. Licensed according to the terms of the Revised
# BSD License. See LICENSE.txt for details.
from mmap           import  mmap, ACCESS_READ
import argparse
import logging
import os
import sys

from .exceptions    import  FileReadError
from .present       import  render
from .read.tiff     import  Tiff, StripDecoder

logger = logging.getLogger(__name__)

LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

def build_parser ():
    parser = argparse.ArgumentParser(
            prog = "tiffscope",
            description = "Show the IFDs and decoded strips of a"
                          " little-endian tiff.")
    parser.add_argument(
            "path", nargs = "?", help = "The tiff to inspect.")
    parser.add_argument(
            "--capacity", type = int,
            default = StripDecoder.default_capacity,
            help = "The most bytes any one strip may decode to"
                   " (default: %(default)d).")
    parser.add_argument(
            "--no-strips", dest = "strips", action = "store_false",
            help = "Only show the IFDs.")
    parser.add_argument(
            "--verbose", "-v", action = "count", default = 0)

    return parser

def main (argv = None, stdout = None):
    """Run the command line tool.

    Returns:
        int:    0 if the file parsed (whether or not some entries or
                strips had problems) or if there was nothing to do; 1
                if the file couldn't be read or isn't a tiff we read.
    """
    if stdout is None:
        stdout = sys.stdout

    parser  = build_parser()
    args    = parser.parse_args(argv)

    logging.basicConfig(
            level = LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)],
            format = "%(levelname)s %(name)s: %(message)s")

    if args.path is None:
        parser.print_usage(stdout)
        return 0

    try:
        with open(args.path, "rb") as tiff_file:
            if os.fstat(tiff_file.fileno()).st_size == 0:
                # There's nothing to map, and nothing to show.
                print("the file is empty", file = stdout)
                return 0

            with mmap(tiff_file.fileno(), 0,
                      access = ACCESS_READ) as buffer:
                tiff = Tiff(buffer)

                for line in render(tiff, args.capacity, args.strips):
                    print(line, file = stdout)

    except OSError as e:
        logger.error("%s", e)
        return 1

    except FileReadError as e:
        logger.error("%s: %s", args.path, e)
        return 1

    return 0
