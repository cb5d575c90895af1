"""Driver for the AW9523 16-pin GPIO expander and LED driver."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable

from circuitos.i2c import I2CBus, I2CError, probe, read_register, write_register

_REG_INPUT = 0x00
_REG_OUTPUT = 0x02
_REG_DIR = 0x04
_REG_INTR = 0x06
_REG_ID = 0x10
_REG_CONF = 0x11
_REG_MODE = 0x12
_REG_DIM = 0x20
_REG_RESET = 0x7F

_VAL_RESET = 0x00
_CFG_MASK = 0b00010011
_CURRENT_MASK = 0b00000011

_DIM_MAP = (4, 5, 6, 7, 8, 9, 10, 11, 0, 1, 2, 3, 12, 13, 14, 15)

PIN_COUNT = 16


class PinMode(Enum):
    """IN and OUT are plain GPIO; LED is an output with current control (see `dim`)."""

    IN = "in"
    OUT = "out"
    LED = "led"


class CurrentLimit(IntEnum):
    """LED drive current limit as a fraction of I_max (37 mA)."""

    IMAX = 0
    IMAX_3Q = 1
    IMAX_2Q = 2
    IMAX_1Q = 3


@dataclass
class _Registers:
    conf: int = 0
    direction: list[int] = field(default_factory=lambda: [0, 0])
    output: list[int] = field(default_factory=lambda: [0, 0])
    intr: list[int] = field(default_factory=lambda: [0, 0])
    mode: list[int] = field(default_factory=lambda: [0xFF, 0xFF])
    dim: list[int] = field(default_factory=lambda: [0] * PIN_COUNT)


def _locate(pin: int) -> tuple[int, int]:
    if not 0 <= pin < PIN_COUNT:
        raise ValueError(f"pin must be within 0-{PIN_COUNT - 1}, got {pin}")
    return pin // 8, 1 << (pin % 8)


class AW9523:
    """An AW9523 on an I2C bus; register state is mirrored locally."""

    DEFAULT_ADDRESS = 0x58
    CHIP_ID = 0x23

    def __init__(
        self,
        bus: I2CBus,
        address: int = DEFAULT_ADDRESS,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._bus = bus
        self.address = address
        self._sleep = sleep
        self._regs = _Registers()

    def _write(self, register: int, value: int) -> None:
        write_register(self._bus, self.address, register, value)

    def begin(self) -> None:
        """Check the chip is there, reset it and verify its ID."""
        if not probe(self._bus, self.address):
            raise I2CError(f"no device acknowledged at 0x{self.address:02X}")
        self.reset()
        chip = read_register(self._bus, self.address, _REG_ID)
        if chip != self.CHIP_ID:
            raise I2CError(f"ID mismatch: expected 0x{self.CHIP_ID:02X}, got 0x{chip:02X}")

    def reset(self) -> None:
        """Send a software reset, then wait 50 microseconds."""
        self._write(_REG_RESET, _VAL_RESET)
        self._regs = _Registers()
        self._sleep(50e-6)

    def pin_mode(self, pin: int, mode: PinMode) -> None:
        port, mask = _locate(pin)
        mode = PinMode(mode)
        regs = self._regs
        if mode is PinMode.LED:
            regs.mode[port] &= ~mask & 0xFF
            self._write(_REG_MODE + port, regs.mode[port])
            return
        regs.mode[port] |= mask
        self._write(_REG_MODE + port, regs.mode[port])
        if mode is PinMode.OUT:
            regs.direction[port] &= ~mask & 0xFF
        else:
            regs.direction[port] |= mask
        self._write(_REG_DIR + port, regs.direction[port])

    def read(self, pin: int) -> bool:
        """Return the input level of a pin, True for high."""
        port, mask = _locate(pin)
        return bool(read_register(self._bus, self.address, _REG_INPUT + port) & mask)

    def write(self, pin: int, state: bool) -> None:
        port, mask = _locate(pin)
        self._set_bit(self._regs.output, _REG_OUTPUT, port, mask, state)

    def dim(self, pin: int, factor: int) -> None:
        """Set the LED dimming factor, 0-255, of a pin in LED mode."""
        _locate(pin)
        if not 0 <= factor <= 255:
            raise ValueError(f"factor must be within 0-255, got {factor}")
        index = _DIM_MAP[pin]
        self._regs.dim[index] = factor
        self._write(_REG_DIM + index, factor)

    def set_interrupt(self, pin: int, enabled: bool) -> None:
        port, mask = _locate(pin)
        self._set_bit(self._regs.intr, _REG_INTR, port, mask, enabled)

    def set_current_limit(self, limit: CurrentLimit) -> None:
        limit = CurrentLimit(limit)
        regs = self._regs
        regs.conf = (regs.conf & ~_CURRENT_MASK & 0xFF) | (limit & _CURRENT_MASK)
        self._write(_REG_CONF, regs.conf & _CFG_MASK)

    def _set_bit(self, shadow: list[int], base: int, port: int, mask: int, state: bool) -> None:
        if state:
            shadow[port] |= mask
        else:
            shadow[port] &= ~mask & 0xFF
        self._write(base + port, shadow[port])