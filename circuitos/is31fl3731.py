"""Driver for the IS31FL3731 16x9 charlieplexed LED matrix controller."""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Callable

from circuitos.i2c import I2CBus, I2CError, probe, read_register, write_register
from circuitos.matrix_output import MatrixOutput
from circuitos.matrix_pixel import MatrixPixel, MatrixPixelData

_REG_CONFIG = 0x00
_REG_CONFIG_PICTUREMODE = 0x00
_REG_PICTUREFRAME = 0x01
_REG_AUDIOSYNC = 0x06
_REG_SHUTDOWN = 0x0A
_COMMAND_REGISTER = 0xFD
_BANK_FUNCTION = 0x0B
_PWM_BASE = 0x24
_PWM_BLOCK = 77
_SPLIT_THRESHOLD = 70

WIDTH = 16
HEIGHT = 9


class IS31FL3731(MatrixOutput):
    """A 16x9 single-colour LED matrix; only changed pixels are sent on push."""

    DEFAULT_ADDRESS = 0x74

    def __init__(
        self,
        bus: I2CBus,
        address: int = DEFAULT_ADDRESS,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(WIDTH, HEIGHT)
        self._bus = bus
        self.address = address
        self._sleep = sleep
        self._current = MatrixPixelData(WIDTH, HEIGHT)

    def init(self) -> None:
        """Power the chip up in picture mode with every LED enabled and dark."""
        if not probe(self._bus, self.address):
            raise I2CError(f"no device acknowledged at 0x{self.address:02X}")
        self._write_register8(_BANK_FUNCTION, _REG_SHUTDOWN, 0x00)
        self._sleep(0.01)
        self._write_register8(_BANK_FUNCTION, _REG_SHUTDOWN, 0x01)
        self._write_register8(_BANK_FUNCTION, _REG_CONFIG, _REG_CONFIG_PICTUREMODE)
        self._write_register8(_BANK_FUNCTION, _REG_PICTUREFRAME, 0)

        self._current = MatrixPixelData(WIDTH, HEIGHT)
        self._select_bank(0)
        for block in range(2):
            start = (_PWM_BASE + block * _PWM_BLOCK) & 0xFF
            self._bus.write(self.address, bytes([start]) + bytes(_PWM_BLOCK))

        for bank in range(8):
            for register in range(18):
                self._write_register8(bank, register, 0xFF)

        self.audio_sync(False)

    def push(self, data: MatrixPixelData) -> None:
        """Send the runs of pixels that differ from the last frame sent."""
        count = WIDTH * HEIGHT
        parts: list[tuple[int, int]] = []
        start: int | None = None
        for index in range(count):
            y, x = divmod(index, WIDTH)
            if data.get(x, y) != self._current.get(x, y):
                if start is None:
                    start = index
            elif start is not None:
                parts.append((start, index - start))
                start = None
        if start is not None:
            parts.append((start, count - start))

        kept: list[tuple[int, int]] = []
        extra: list[tuple[int, int]] = []
        for offset, size in parts:
            if size < _SPLIT_THRESHOLD:
                kept.append((offset, size))
                continue
            half = size // 2
            kept.append((offset, half))
            extra.append((offset + half, size - half))

        self._select_bank(0)
        for offset, size in kept + extra:
            levels = bytes(
                self._level(data.get(index % WIDTH, index // WIDTH))
                for index in range(offset, offset + size)
            )
            self._bus.write(self.address, bytes([_PWM_BASE + offset]) + levels)

        self._current = data.copy()

    def audio_sync(self, sync: bool) -> None:
        self._write_register8(_BANK_FUNCTION, _REG_AUDIOSYNC, 0x01 if sync else 0x00)

    def _level(self, pixel: MatrixPixel) -> int:
        value = (pixel.r + pixel.g + pixel.b) / (3 * 255) * pixel.i / 255
        value *= self.brightness / 255
        value **= 2
        return min(int(value * 255 + 0.5), 255)

    def _brightness_changed(self, value: int) -> None:
        state = self._current
        inverse = state.copy()
        for x in range(inverse.width):
            for y in range(inverse.height):
                pixel = inverse.get(x, y)
                inverse.set(x, y, replace(pixel, i=255 - pixel.i))
        # Make every pixel look changed so the whole frame is resent.
        self._current = inverse
        self.push(state)

    def _write_register8(self, bank: int, register: int, value: int) -> None:
        self._select_bank(bank)
        write_register(self._bus, self.address, register, value)

    def _read_register8(self, bank: int, register: int) -> int:
        self._select_bank(bank)
        return read_register(self._bus, self.address, register)

    def _select_bank(self, bank: int) -> None:
        write_register(self._bus, self.address, _COMMAND_REGISTER, bank)