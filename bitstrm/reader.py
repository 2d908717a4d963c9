import logging
from operator import index
from typing import Optional

from bitstrm.accumulator import Accumulator
from bitstrm.common import WORD_SIZE, BufferExhausted, InvalidWidth
from bitstrm.loader import reload
from bitstrm.view import ByteView


logger = logging.getLogger(__name__)


class BitReader:
    """
    Read unsigned integers of 0 to 64 bits, MSB-first, from a byte buffer.

    The bytes are borrowed, never copied. `size` reduces the number of bits
    available by dropping the least significant bits of the final bytes:

    >>> r = BitReader(b'\\x12\\x34', size=15)
    >>> hex(r.getbits(15))
    '0x91a'

    Once BufferExhausted has been raised the reader stays exhausted and every
    further non-empty read raises it again.
    """

    def __init__(self, bitstream, size: Optional[int] = None):
        self._view = ByteView.from_source(bitstream, size)
        self._acc = Accumulator()
        self._exhausted = False

    @property
    def bit_length(self) -> int:
        return self._view.bit_length

    @property
    def bits_remaining(self) -> int:
        if self._exhausted:
            return 0
        return self._acc.valid_bits + self._view.size

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def getbits(self, num_bits: int) -> int:
        "Get the next N bits from the stream, where N is the argument."
        n = index(num_bits)

        if not 0 <= n <= WORD_SIZE:
            raise InvalidWidth(n)

        if n == 0:
            return 0

        if self._exhausted:
            raise BufferExhausted()

        bits = 0

        while n > self._acc.valid_bits:
            x, m = self._acc.drain()
            bits = (bits << m) | x
            n -= m
            try:
                reload(self._view, self._acc)
            except BufferExhausted:
                self._exhausted = True
                logger.debug("Reader exhausted after %d bits",
                             self.bit_length)
                raise

        return (bits << n) | self._acc.take(n)

    def __repr__(self):
        return (f"{type(self).__name__}(bit_length={self.bit_length}, "
                f"bits_remaining={self.bits_remaining})")


BitStrm = BitReader
