# -----------------------------------------------------------------------------

WORD_SIZE = 64

# Chunk widths in bits, widest first. A chunk of width w can only be loaded
# from an offset that is a multiple of w // 8 bytes.
CHUNK_SIZES = (64, 32, 16, 8)

BYTE_SIZE = 8


# -----------------------------------------------------------------------------

class BitStrmError(Exception):
    pass


class InvalidWidth(BitStrmError, ValueError):
    def __init__(self, width: int):
        self.width = width
        if width > WORD_SIZE:
            message = (f"{width} bits exceeds maximum bit size "
                       f"({WORD_SIZE})")
        else:
            message = f"{width} is not a valid number of bits"
        super().__init__(message)


class BufferExhausted(BitStrmError, RuntimeError):
    def __init__(self, message: str = "BitStrm buffer ran out of bits"):
        super().__init__(message)
