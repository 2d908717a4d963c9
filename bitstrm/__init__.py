from bitstrm.common import BitStrmError, BufferExhausted, InvalidWidth
from bitstrm.reader import BitReader, BitStrm

__all__ = [
    'BitReader',
    'BitStrm',
    'BitStrmError',
    'BufferExhausted',
    'InvalidWidth',
]
