import io

import pytest

from circuitos.buffers import (
    BufferRangeError,
    DataBuffer,
    FSBuffer,
    LazyDataBuffer,
    RingBuffer,
)


def _fill(buffer, payload):
    view = buffer.write_data()
    view[:len(payload)] = payload
    buffer.write_move(len(payload))


def test_data_buffer_round_trip():
    buf = DataBuffer(8)
    _fill(buf, b"hello")
    assert buf.read_available() == 5
    assert bytes(buf.read_data()) == b"hello"
    buf.read_move(2)
    assert bytes(buf.read_data()) == b"llo"


def test_data_buffer_compacts_on_write_data():
    buf = DataBuffer(8)
    _fill(buf, b"abcdef")
    buf.read_move(4)
    assert buf.write_available() == 6
    view = buf.write_data()
    assert len(view) == buf.write_available()
    assert bytes(buf.read_data()) == b"ef"
    _fill(buf, b"ghijkl")
    assert bytes(buf.read_data()) == b"efghijkl"


def test_data_buffer_resets_when_empty():
    buf = DataBuffer(4)
    _fill(buf, b"ab")
    buf.read_move(2)
    assert len(buf.write_data()) == buf.size
    assert buf.read_available() == 0


def test_data_buffer_range_errors():
    buf = DataBuffer(4)
    with pytest.raises(BufferRangeError):
        buf.read_move(1)
    with pytest.raises(BufferRangeError):
        buf.write_move(5)
    with pytest.raises(BufferRangeError):
        buf.read_move(-1)


def test_data_buffer_clear():
    buf = DataBuffer(4)
    _fill(buf, b"abc")
    buf.clear()
    assert buf.read_available() == 0
    assert buf.write_available() == buf.size


def test_lazy_buffer_does_not_compact_until_relocate():
    buf = LazyDataBuffer(6)
    _fill(buf, b"abcd")
    buf.read_move(3)
    assert buf.write_available() == 2
    assert buf.potential_write_available() == 3
    buf.relocate()
    assert buf.write_available() == 5
    assert buf.potential_write_available() == 0
    assert bytes(buf.read_data()) == b"d"


def test_lazy_buffer_clear_rewinds_read_cursor():
    buf = LazyDataBuffer(6)
    _fill(buf, b"xyz")
    buf.read_move(3)
    assert buf.read_available() == 0
    buf.clear()
    assert bytes(buf.read_data()) == b"xyz"


def test_lazy_buffer_relocate_empty_resets():
    buf = LazyDataBuffer(4)
    _fill(buf, b"ab")
    buf.read_move(2)
    buf.relocate()
    assert buf.write_available() == buf.size
    with pytest.raises(BufferRangeError):
        buf.write_move(buf.size + 1)


def test_ring_buffer_limits_and_wraps():
    ring = RingBuffer(4)
    assert ring.write(b"abcdef") == 4
    assert ring.read_available() == 4
    assert ring.write_available() == 0
    assert ring.read(2) == b"ab"
    assert ring.write(b"gh") == 2
    assert ring.read(10) == b"cdgh"
    assert ring.read_available() == 0


def test_ring_buffer_peek():
    ring = RingBuffer(4)
    ring.write(b"abc")
    ring.read(2)
    ring.write(b"def")
    assert ring.peek(2, 1) == b"de"
    assert ring.peek(4) == b"cdef"
    assert ring.peek(5) is None
    assert ring.read_available() == 4


def test_ring_buffer_skip_and_clear():
    ring = RingBuffer(5)
    ring.write(b"12345")
    assert ring.skip(3) == 3
    assert ring.read(5) == b"45"
    assert ring.skip(1) == 0
    ring.write(b"ab")
    ring.clear()
    assert ring.read_available() == 0
    assert ring.write_available() == ring.capacity


def test_fs_buffer_refill_and_consume():
    buf = FSBuffer(io.BytesIO(b"0123456789"), 4)
    assert buf.refill() is True
    assert bytes(buf.data()) == b"0123"
    buf.move_read(3)
    assert buf.refill() is True
    assert bytes(buf.data()) == b"3456"
    buf.move_read(4)
    buf.refill()
    assert bytes(buf.data()) == b"789"
    buf.move_read(3)
    assert buf.refill() is False
    assert buf.available() == 0


def test_fs_buffer_clear_and_errors():
    buf = FSBuffer(io.BytesIO(b"abc"), 8)
    buf.refill()
    buf.move_read(2)
    buf.clear()
    assert bytes(buf.data()) == b"abc"
    with pytest.raises(BufferRangeError):
        buf.move_read(4)