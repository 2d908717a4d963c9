from argparse import ArgumentTypeError
from itertools import islice
from typing import Iterator, TypeVar

from bitstrm.common import WORD_SIZE


T = TypeVar('T')


def argparse_widths(s: str) -> list[int]:
    """
    >>> argparse_widths('4')
    [4]
    >>> argparse_widths('4,8, 12')
    [4, 8, 12]
    """
    try:
        xs = [int(i) for i in s.split(',')]
    except ValueError:
        raise ArgumentTypeError(f"invalid width list: {s!r}") from None

    for x in xs:
        if not 0 <= x <= WORD_SIZE:
            raise ArgumentTypeError(
                f"width must be between 0 and {WORD_SIZE}: {x}")

    return xs


def argparse_width(s: str) -> int:
    """
    >>> argparse_width('12')
    12
    """
    (x,) = argparse_widths(s)
    if x == 0:
        raise ArgumentTypeError("width must be greater than zero")
    return x


def batch(it: Iterator[T], n: int) -> Iterator[list[T]]:
    """
    Batch data into lists of length n. The last batch may be shorter.
    >>> [x for x in batch(iter('ABCDEFG'), 3)]
    [['A', 'B', 'C'], ['D', 'E', 'F'], ['G']]
    """
    if n < 1:
        raise ValueError('n must be greater than zero')
    while (batch := list(islice(it, n))):
        yield batch


def hex_digits(n: int) -> int:
    """
    Number of hex digits needed to print an n-bit value.
    >>> hex_digits(1), hex_digits(8), hex_digits(12), hex_digits(13)
    (1, 2, 3, 4)
    """
    return max(1, -(-n // 4))
