"""
Command line interface for PictoBase.

Usage:
    pictobase [-w COLS] [-o OUTPUT] [-v] [INPUT]       encode
    pictobase -d [-o OUTPUT] [-v] [INPUT]              decode

INPUT and OUTPUT default to standard input and output ("-").
Exits with status 1 when decoding fails.
"""

import argparse
import logging
import sys
import time
from contextlib import nullcontext
from typing import BinaryIO, List, Optional

from PictoBase.version import __version__
from PictoBase.config import CodecConfig
from PictoBase.errors import DecodeError
from PictoBase.encoding.encoder import encoded_length
from PictoBase.interface.streams import encode_stream, decode_stream
from PictoBase.utils.logging import get_logger


class _CountingReader:
    """Counts bytes read through a binary file object."""

    def __init__(self, inner: BinaryIO):
        self.inner = inner
        self.bytes_read = 0

    def read(self, size: int = -1) -> bytes:
        data = self.inner.read(size)
        self.bytes_read += len(data)
        return data


def _open_input(path: str):
    if path == "-":
        return nullcontext(sys.stdin.buffer)
    return open(path, "rb")


def _open_output(path: str):
    if path == "-":
        return nullcontext(sys.stdout.buffer)
    return open(path, "wb")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pictobase",
        description="Encode or decode data with a 1024-symbol pictographic alphabet")
    parser.add_argument("input", nargs="?", default="-",
                        help="Input file (default: standard input)")
    parser.add_argument("-o", "--output", default="-",
                        help="Output file (default: standard output)")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-e", "--encode", dest="decode", action="store_false",
                      help="Encode data (default)")
    mode.add_argument("-d", "--decode", dest="decode", action="store_true",
                      help="Decode data")
    parser.set_defaults(decode=False)

    parser.add_argument("-w", "--wrap", type=int, default=0, metavar="COLS",
                        help="Wrap encoded lines after COLS symbols "
                             "(default: 0, no wrapping)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log a summary and debug output to stderr")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = CodecConfig(wrap=args.wrap, verbose=args.verbose)
    except ValueError as e:
        parser.error(str(e))

    logger = get_logger()
    if config.verbose:
        logger.set_level(logging.DEBUG)

    mode = "decode" if args.decode else "encode"
    run = decode_stream if args.decode else encode_stream

    try:
        with _open_input(args.input) as source, _open_output(args.output) as destination:
            reader = _CountingReader(source)
            start = time.time()
            written = run(reader, destination, config)
            elapsed = time.time() - start
            destination.flush()
    except DecodeError as e:
        logger.error(f"Invalid input: {e}")
        return 1
    except UnicodeDecodeError as e:
        logger.error(f"Input is not valid UTF-8: {e}")
        return 1
    except OSError as e:
        logger.error(str(e))
        return 1

    if config.verbose:
        # every symbol carries 10 bits of the decoded side
        symbols = encoded_length(written if args.decode else reader.bytes_read)
        logger.transfer_summary(mode, reader.bytes_read, written, symbols, elapsed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
