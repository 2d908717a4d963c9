from dataclasses import dataclass

from bitstrm.binary import WORD_MASK, left_justify, mask, shift_out, top
from bitstrm.common import WORD_SIZE


# -----------------------------------------------------------------------------

@dataclass
class Accumulator:
    """
    Bits that have been loaded but not handed out yet.

    The word is left-justified: the next bit to be returned is always bit 63.
    Every bit below the `valid_bits` most significant ones is zero.
    """
    word: int = 0
    valid_bits: int = 0

    def load(self, x: int, size: int, valid_bits: int):
        "Replace the content with the size-bit value x."
        assert 0 < valid_bits <= size <= WORD_SIZE
        assert 0 <= x <= mask(size)

        # Clear anything past the logical end of the stream.
        x &= mask(size) ^ mask(size - valid_bits)

        self.word = left_justify(x, size) & WORD_MASK
        self.valid_bits = valid_bits

    def take(self, n: int) -> int:
        """
        >>> a = Accumulator()
        >>> a.load(0x1234, 16, 16)
        >>> hex(a.take(4)), hex(a.take(12)), a.valid_bits
        ('0x1', '0x234', 0)
        """
        bits = top(self.word, n)
        self.word = shift_out(self.word, n)
        self.valid_bits -= n
        return bits

    def drain(self) -> tuple[int, int]:
        "Take every valid bit, returning them along with their count."
        n = self.valid_bits
        return self.take(n), n
