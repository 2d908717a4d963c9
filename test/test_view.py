from array import array

import pytest
from bitstrm.view import ByteView, as_byte_view


# -----------------------------------------------------------------------------

@pytest.mark.parametrize("source", [
    b'\x12\x34',
    bytearray(b'\x12\x34'),
    memoryview(b'\x12\x34'),
    array('B', [0x12, 0x34]),
])
def test_byte_like_sources(source):
    view = as_byte_view(source)
    assert view.readonly is True
    assert view.tobytes() == b'\x12\x34'


def test_wide_items_are_flattened():
    view = as_byte_view(array('H', [0, 0]))
    assert view.format == 'B'
    assert len(view) == 4


@pytest.mark.parametrize("source", ['abc', 42, None, [1, 2, 3]])
def test_non_byte_like_sources(source):
    with pytest.raises(TypeError):
        as_byte_view(source)


def test_non_contiguous_source():
    with pytest.raises(TypeError):
        as_byte_view(memoryview(b'abcd')[::2])


def test_source_is_borrowed():
    data = bytearray(b'\x00\x00')
    view = ByteView.from_source(data)
    data[0] = 0xFF
    assert view.read(1) == b'\xff'


# -----------------------------------------------------------------------------

def test_default_size():
    view = ByteView.from_source(b'\x00' * 3)
    assert view.size == 24
    assert view.bit_length == 24
    assert view.offset == 0


def test_explicit_size():
    view = ByteView.from_source(b'\x00' * 3, size=20)
    assert view.size == 20
    assert view.bit_length == 20


def test_zero_size():
    view = ByteView.from_source(b'\x00', size=0)
    assert view.size == 0


@pytest.mark.parametrize("size", [-1, 25])
def test_size_out_of_range(size):
    with pytest.raises(ValueError):
        ByteView.from_source(b'\x00' * 3, size=size)


def test_size_not_an_integer():
    with pytest.raises(TypeError):
        ByteView.from_source(b'\x00', size=1.5)


# -----------------------------------------------------------------------------

def test_read_advances_cursor():
    view = ByteView.from_source(b'\x01\x02\x03')
    assert view.read(2) == b'\x01\x02'
    assert view.offset == 2
    assert view.bytes_left == 1
    assert view.read(1) == b'\x03'

    with pytest.raises(EOFError):
        view.read(1)


def test_consume():
    view = ByteView.from_source(b'\x01\x02')
    view.consume(10)
    assert view.size == 6
    assert view.bit_length == 16
