import logging
import sys
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from pathlib import Path
from timeit import default_timer as timer
from typing import Iterator, Optional

from bitstrm.common import BitStrmError
from bitstrm.reader import BitReader
from bitstrm.utils import argparse_width, argparse_widths, batch, hex_digits


# -----------------------------------------------------------------------------

ACTION_READ = 'read'
ACTION_DUMP = 'dump'

DEFAULT_WIDTH = 8
DEFAULT_COLUMNS = 8


# -----------------------------------------------------------------------------

def format_value(x: int, width: int) -> str:
    return f"0x{x:0{hex_digits(width)}x}"


def cmd_read(path: Path, widths: list[int], size: Optional[int]):
    reader = BitReader(path.read_bytes(), size=size)

    for width in widths:
        print(format_value(reader.getbits(width), width))


def cmd_dump(path: Path, width: int, size: Optional[int], columns: int):
    reader = BitReader(path.read_bytes(), size=size)

    def values() -> Iterator[str]:
        while reader.bits_remaining >= width:
            yield format_value(reader.getbits(width), width)

    time_start = timer()

    for line in batch(values(), columns):
        print(' '.join(line))

    tail = reader.bits_remaining
    if tail > 0:
        x = reader.getbits(tail)
        print(f"trailing {tail} bits: {format_value(x, tail)}")

    time_end = timer()

    delta = '{0:.6g}'.format(time_end - time_start)
    print(f"Read {reader.bit_length} bits in {delta} seconds")


# -----------------------------------------------------------------------------

def make_argument_parser():
    parser = ArgumentParser(
        prog='bitstrm',
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Log every chunk load."
    )

    # -------------------------------------------------------------------------

    action = parser.add_subparsers(
        title='action',
        dest='action',
        required=True
    )

    # -------------------------------------------------------------------------

    read = action.add_parser(
        ACTION_READ,
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    read.add_argument('infile', type=Path)
    read.add_argument(
        'widths',
        type=argparse_widths,
        help="Comma separated list of widths in bits (0..64).",
        metavar='N[,N...]'
    )

    # -------------------------------------------------------------------------

    dump = action.add_parser(
        ACTION_DUMP,
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    dump.add_argument('infile', type=Path)
    dump.add_argument(
        '-w', '--width',
        type=argparse_width,
        default=DEFAULT_WIDTH,
        help="Width in bits (1..64) of every value.",
        metavar='N'
    )
    dump.add_argument(
        '-c', '--columns',
        type=int,
        default=DEFAULT_COLUMNS,
        help="Values per output line.",
        metavar='N'
    )

    # -------------------------------------------------------------------------

    for p in (read, dump):
        p.add_argument(
            '-s', '--size',
            type=int,
            default=None,
            help=(
                "Number of bits of the file to use. Defaults to the whole "
                "file; smaller values drop the least significant bits of "
                "the last bytes."
            ),
            metavar='BITS'
        )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = make_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.action == ACTION_READ:
            cmd_read(args.infile, args.widths, args.size)

        if args.action == ACTION_DUMP:
            cmd_dump(args.infile, args.width, args.size, args.columns)
    except (BitStrmError, ValueError) as e:
        print(f"bitstrm: error: {e}", file=sys.stderr)
        return 1

    return 0


# -----------------------------------------------------------------------------

if __name__ == '__main__':
    sys.exit(main())
