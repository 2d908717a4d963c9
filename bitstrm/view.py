from operator import index
from typing import Optional

from bitstrm.common import BYTE_SIZE


# -----------------------------------------------------------------------------

def as_byte_view(source) -> memoryview:
    """
    Borrow a flat, read-only byte view over any object exporting the buffer
    protocol.

    >>> as_byte_view(bytearray(b'ab')).readonly
    True
    >>> as_byte_view('ab')
    Traceback (most recent call last):
        ...
    TypeError: a bytes-like object is required, not 'str'
    """
    if isinstance(source, str):
        raise TypeError("a bytes-like object is required, not 'str'")

    try:
        view = memoryview(source)
    except TypeError:
        raise TypeError("a bytes-like object is required, "
                        f"not '{type(source).__name__}'") from None

    if not view.c_contiguous:
        raise TypeError("a contiguous buffer is required")

    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')

    return view.toreadonly()


# -----------------------------------------------------------------------------

class ByteView:
    """
    Read-only window over the source bytes.

    `size` is the number of logical bits that have not been loaded yet and
    `offset` is the index of the next byte to load. Both only move forward.
    """

    def __init__(self, data: memoryview, size: int):
        assert 0 <= size <= BYTE_SIZE * len(data)
        self._data = data
        self._bit_length = size
        self.size = size
        self.offset = 0

    @classmethod
    def from_source(cls, source, size: Optional[int] = None) -> 'ByteView':
        data = as_byte_view(source)
        capacity = BYTE_SIZE * len(data)

        if size is None:
            return cls(data, capacity)

        size = index(size)
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        if size > capacity:
            raise ValueError(
                f"size {size} exceeds the {capacity} bits in the buffer")

        return cls(data, size)

    @property
    def bit_length(self) -> int:
        "Logical length of the whole stream in bits."
        return self._bit_length

    @property
    def bytes_left(self) -> int:
        return len(self._data) - self.offset

    def read(self, n: int) -> bytes:
        "Return the next n bytes and advance the cursor past them."
        if n < 1:
            raise ValueError("n must be greater than zero.")
        if n > self.bytes_left:
            raise EOFError()
        bs = self._data[self.offset:self.offset + n].tobytes()
        self.offset += n
        return bs

    def consume(self, n: int):
        assert 0 <= n <= self.size
        self.size -= n

    def __repr__(self):
        return (f"ByteView(length={len(self._data)}, "
                f"offset={self.offset}, size={self.size})")
