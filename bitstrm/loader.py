import logging

from bitstrm.accumulator import Accumulator
from bitstrm.binary import is_aligned
from bitstrm.common import BYTE_SIZE, CHUNK_SIZES, BufferExhausted
from bitstrm.view import ByteView


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def chunk_size(view: ByteView) -> int:
    """
    Width in bits of the next chunk to load, or 0 when the view is empty.

    The widest chunk wins as long as the cursor is aligned to it and the
    logical budget covers it. The final byte may carry fewer logical bits
    than its physical width.
    """
    for size in CHUNK_SIZES[:-1]:
        if is_aligned(view.offset, size // BYTE_SIZE) and view.size >= size:
            return size

    if view.size > 0:
        return BYTE_SIZE

    return 0


def reload(view: ByteView, acc: Accumulator):
    """
    Refill the accumulator with the next chunk of the view.

    Raises BufferExhausted, leaving both arguments untouched, when no logical
    bits remain.
    """
    size = chunk_size(view)

    if size == 0:
        logger.debug("No bits left to load at byte %d", view.offset)
        raise BufferExhausted()

    valid_bits = min(view.size, size)
    x = int.from_bytes(view.read(size // BYTE_SIZE), byteorder='big')

    view.consume(valid_bits)
    acc.load(x, size, valid_bits)

    logger.debug("Loaded %d-bit chunk (%d valid), %d bits left",
                 size, valid_bits, view.size)
