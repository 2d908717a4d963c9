from bitstrm.common import WORD_SIZE


# -----------------------------------------------------------------------------

def mask(n: int) -> int:
    """
    >>> bin(mask(0))
    '0b0'
    >>> bin(mask(1))
    '0b1'
    >>> bin(mask(3))
    '0b111'
    >>> mask(64) == 0xFFFF_FFFF_FFFF_FFFF
    True
    """
    return (1 << n) - 1


WORD_MASK = mask(WORD_SIZE)


def extract(x: int, size: int, start: int, stop: int) -> int:
    """
    >>> bin(extract(0b10101010, 8, 0, 8))
    '0b10101010'
    >>> bin(extract(0b10101010, 8, 2, 5))
    '0b101'
    """
    # assert(0 <= start <= stop <= size)
    return (x >> (size - stop)) & mask(stop - start)


# -----------------------------------------------------------------------------

def top(word: int, n: int) -> int:
    """
    Return the n most significant bits of a word.

    Both ends of the range are handled explicitly instead of relying on the
    shift amount wrapping around the word size.

    >>> top(0x8000_0000_0000_0001, 0)
    0
    >>> hex(top(0x8000_0000_0000_0001, 64))
    '0x8000000000000001'
    >>> hex(top(0x1234_0000_0000_0000, 12))
    '0x123'
    """
    assert 0 <= n <= WORD_SIZE
    if n == 0:
        return 0
    if n == WORD_SIZE:
        return word & WORD_MASK
    return extract(word, WORD_SIZE, 0, n)


def shift_out(word: int, n: int) -> int:
    """
    Shift a word left by n bits, dropping whatever falls off the top.

    >>> shift_out(0xFFFF_FFFF_FFFF_FFFF, 64)
    0
    >>> hex(shift_out(0x1234_0000_0000_0000, 4))
    '0x2340000000000000'
    """
    assert 0 <= n <= WORD_SIZE
    if n == WORD_SIZE:
        return 0
    return (word << n) & WORD_MASK


def left_justify(x: int, size: int) -> int:
    """
    >>> hex(left_justify(0x12, 8))
    '0x1200000000000000'
    """
    assert 0 < size <= WORD_SIZE
    return x << (WORD_SIZE - size)


def is_aligned(offset: int, n: int) -> bool:
    "Return True if a byte offset is a multiple of n bytes."
    return offset % n == 0
