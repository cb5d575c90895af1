"""A minimal I2C bus interface and helpers for register-based devices."""

from __future__ import annotations

from abc import ABC, abstractmethod


class I2CError(IOError):
    """A transfer on the bus was not acknowledged or came back short."""


class I2CBus(ABC):
    """An I2C controller able to run write and read transactions."""

    @abstractmethod
    def write(self, address: int, data: bytes) -> None:
        """Send `data` to the device at `address` in one transaction; raise I2CError on failure."""

    @abstractmethod
    def read(self, address: int, count: int) -> bytes:
        """Read `count` bytes from the device at `address`; raise I2CError on failure."""


def probe(bus: I2CBus, address: int) -> bool:
    """Return whether a device acknowledges an empty write at `address`."""
    try:
        bus.write(address, b"")
    except I2CError:
        return False
    return True


def write_register(bus: I2CBus, address: int, register: int, data: int | bytes) -> None:
    """Write one byte, or a run of bytes, starting at `register`."""
    payload = bytes([data]) if isinstance(data, int) else bytes(data)
    bus.write(address, bytes([register]) + payload)


def read_register(bus: I2CBus, address: int, register: int) -> int:
    """Select `register` and read one byte back from it."""
    bus.write(address, bytes([register]))
    reply = bus.read(address, 1)
    if len(reply) != 1:
        raise I2CError(f"expected 1 byte from 0x{address:02X}, got {len(reply)}")
    return reply[0]