"""Byte buffers: linear, lazily compacted, circular and file-backed."""

from __future__ import annotations

from typing import BinaryIO


class BufferRangeError(ValueError):
    """A cursor was asked to move past the data or space that is there."""


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise BufferRangeError(f"amount must not be negative, got {amount}")


class DataBuffer:
    """Linear buffer that compacts unread data whenever write space is requested."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._size = size
        self._buffer = bytearray(size)
        self._read = 0
        self._write = 0

    @property
    def size(self) -> int:
        return self._size

    def read_available(self) -> int:
        return self._write - self._read

    def read_move(self, amount: int) -> None:
        """Mark `amount` bytes as consumed."""
        _check_amount(amount)
        if self._read + amount > self._write:
            raise BufferRangeError(
                f"cannot consume {amount} bytes, only {self.read_available()} available"
            )
        self._read += amount

    def read_data(self) -> memoryview:
        """Read-only view of the unread bytes."""
        return memoryview(self._buffer)[self._read:self._write].toreadonly()

    def write_available(self) -> int:
        """Free space, counting the already consumed bytes at the front."""
        return self._read + (self._size - self._write)

    def write_move(self, amount: int) -> None:
        """Mark `amount` bytes of the write region as filled."""
        _check_amount(amount)
        if self._write + amount > self._size:
            raise BufferRangeError(
                f"cannot commit {amount} bytes, only {self._size - self._write} free"
            )
        self._write += amount

    def write_data(self) -> memoryview:
        """Compact unread data to the front and return a writable view of the free space."""
        if self._write:
            left = self._write - self._read
            if left == 0:
                self._read = self._write = 0
            else:
                self._buffer[:left] = self._buffer[self._read:self._write]
                self._read = 0
                self._write = left
        return memoryview(self._buffer)[self._write:]

    def clear(self) -> None:
        self._read = 0
        self._write = 0


class LazyDataBuffer:
    """Linear buffer that compacts only when `relocate` is called."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._size = size
        self._buffer = bytearray(size)
        self._read = 0
        self._write = 0

    @property
    def size(self) -> int:
        return self._size

    def read_available(self) -> int:
        return self._write - self._read

    def read_move(self, amount: int) -> None:
        _check_amount(amount)
        if self._read + amount > self._write:
            raise BufferRangeError(
                f"cannot consume {amount} bytes, only {self.read_available()} available"
            )
        self._read += amount

    def read_data(self) -> memoryview:
        return memoryview(self._buffer)[self._read:self._write].toreadonly()

    def write_available(self) -> int:
        """Space left after the write cursor, without compaction."""
        return self._size - self._write

    def potential_write_available(self) -> int:
        """Space that `relocate` would reclaim."""
        return self._read

    def write_move(self, amount: int) -> None:
        _check_amount(amount)
        if self._write + amount > self._size:
            raise BufferRangeError(
                f"cannot commit {amount} bytes, only {self.write_available()} free"
            )
        self._write += amount

    def write_data(self) -> memoryview:
        return memoryview(self._buffer)[self._write:]

    def relocate(self) -> None:
        """Move unread data to the front of the buffer."""
        left = self._write - self._read
        if left == 0:
            self._read = self._write = 0
            return
        self._buffer[:left] = self._buffer[self._read:self._write]
        self._read = 0
        self._write = left

    def clear(self) -> None:
        """Rewind the read cursor; written data stays in place."""
        self._read = 0


class RingBuffer:
    """Circular byte buffer holding at most `size` bytes."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._length = size + 1
        self._buffer = bytearray(self._length)
        self._begin = 0
        self._end = 0

    @property
    def capacity(self) -> int:
        return self._length - 1

    def write_available(self) -> int:
        return (self._begin - self._end - 1) % self._length

    def read_available(self) -> int:
        return (self._end - self._begin) % self._length

    def _copy_out(self, start: int, n: int) -> bytes:
        first = min(self._length - start, n)
        return bytes(self._buffer[start:start + first] + self._buffer[:n - first])

    def read(self, n: int) -> bytes:
        """Remove and return up to `n` bytes."""
        _check_amount(n)
        n = min(n, self.read_available())
        if n == 0:
            return b""
        data = self._copy_out(self._begin, n)
        self._begin = (self._begin + n) % self._length
        return data

    def write(self, data: bytes) -> int:
        """Store as much of `data` as fits; return the number of bytes stored."""
        data = bytes(data)
        n = min(len(data), self.write_available())
        if n == 0:
            return 0
        first = min(self._length - self._end, n)
        self._buffer[self._end:self._end + first] = data[:first]
        self._buffer[:n - first] = data[first:n]
        self._end = (self._end + n) % self._length
        return n

    def peek(self, size: int, offset: int = 0) -> bytes | None:
        """Return `size` bytes starting `offset` bytes in, or None if not all are there."""
        if size < 0 or offset < 0:
            raise ValueError("size and offset must not be negative")
        if offset + size > self.read_available():
            return None
        return self._copy_out((self._begin + offset) % self._length, size)

    def skip(self, n: int) -> int:
        """Drop up to `n` bytes; return how many were dropped."""
        _check_amount(n)
        n = min(n, self.read_available())
        self._begin = (self._begin + n) % self._length
        return n

    def clear(self) -> None:
        self._begin = self._end = 0


class FSBuffer:
    """Read-ahead buffer over a binary file."""

    def __init__(self, file: BinaryIO, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.file = file
        self._size = size
        self._buffer = bytearray(size)
        self._filled = 0
        self._cursor = 0

    @property
    def size(self) -> int:
        return self._size

    def available(self) -> int:
        return self._filled - self._cursor

    def move_read(self, amount: int) -> None:
        _check_amount(amount)
        if self._cursor + amount > self._filled:
            raise BufferRangeError(
                f"cannot consume {amount} bytes, only {self.available()} available"
            )
        self._cursor += amount

    def refill(self) -> bool:
        """Keep unread bytes, top up from the file; True if any data is buffered."""
        remaining = self._filled - self._cursor
        if remaining:
            self._buffer[:remaining] = self._buffer[self._cursor:self._filled]
        want = self._size - remaining
        chunk = (self.file.read(want) or b"")[:want] if want else b""
        self._buffer[remaining:remaining + len(chunk)] = chunk
        self._filled = remaining + len(chunk)
        self._cursor = 0
        return self._filled != 0

    def clear(self) -> None:
        """Rewind to the start of the buffered data."""
        self._cursor = 0

    def data(self) -> memoryview:
        return memoryview(self._buffer)[self._cursor:self._filled].toreadonly()