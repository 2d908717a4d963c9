from bitstrm.accumulator import Accumulator


# -----------------------------------------------------------------------------

def test_take_from_full_word():
    a = Accumulator()
    a.load(0x0102_0304_0506_0708, 64, 64)

    assert a.take(8) == 0x01
    assert a.take(24) == 0x02_0304
    assert a.valid_bits == 32
    assert a.take(32) == 0x0506_0708
    assert a.valid_bits == 0
    assert a.word == 0


def test_take_whole_word():
    a = Accumulator()
    a.load(0xFFFF_FFFF_FFFF_FFFF, 64, 64)

    assert a.take(64) == 0xFFFF_FFFF_FFFF_FFFF
    assert a.word == 0
    assert a.valid_bits == 0


def test_take_nothing():
    a = Accumulator()
    a.load(0xAB, 8, 8)

    assert a.take(0) == 0
    assert a.valid_bits == 8
    assert a.take(8) == 0xAB


# -----------------------------------------------------------------------------

def test_load_clears_padding():
    a = Accumulator()
    a.load(0xFF, 8, 3)

    assert a.valid_bits == 3
    assert a.word == 0xE000_0000_0000_0000

    # Even reading past the valid bits only ever yields zeros.
    assert a.take(8) == 0b11100000


def test_drain():
    a = Accumulator()
    a.load(0x1234, 16, 16)
    a.take(4)

    assert a.drain() == (0x234, 12)
    assert a.drain() == (0, 0)
