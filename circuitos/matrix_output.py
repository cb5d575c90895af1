"""Destinations for LED matrix frames: buffered, partial and rate-limited outputs."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Callable, Protocol

from circuitos.matrix_pixel import MatrixPixelData


def _monotonic_millis() -> float:
    return time.monotonic() * 1000.0


class _LoopManager(Protocol):
    def add_listener(self, listener: object) -> None: ...


class MatrixOutput(ABC):
    """Something that can display a width x height grid of pixels."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"dimensions must not be negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._brightness = 255

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def brightness(self) -> int:
        """Global brightness, 0-255."""
        return self._brightness

    @brightness.setter
    def brightness(self, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError(f"brightness must be within 0-255, got {value}")
        self._brightness = value
        self._brightness_changed(value)

    def _brightness_changed(self, value: int) -> None:
        """Hook for outputs that pass brightness on to another device."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the output for use."""

    @abstractmethod
    def push(self, data: MatrixPixelData) -> None:
        """Display a frame."""


class MatrixOutputBuffer(MatrixOutput):
    """Keeps a copy of the last pushed frame and forwards frames to an optional output."""

    def __init__(
        self,
        output: MatrixOutput | None = None,
        *,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if output is not None:
            width, height = output.width, output.height
        elif width is None or height is None:
            raise ValueError("either an output or both width and height are required")
        super().__init__(width, height)
        self._output = output
        self._data = MatrixPixelData(width, height)

    @property
    def output(self) -> MatrixOutput | None:
        return self._output

    @property
    def data(self) -> MatrixPixelData:
        """The last frame pushed into the buffer."""
        return self._data

    def set_output(self, output: MatrixOutput | None) -> None:
        self._output = output

    def init(self) -> None:
        """Nothing to prepare: the buffer lives in memory."""

    def push(self, data: MatrixPixelData) -> None:
        self._data = data.copy()
        if self._output is not None:
            self._output.push(data)

    def push_buffered(self) -> None:
        """Send the buffered frame to the output again."""
        if self._output is not None:
            self._output.push(self._data)

    def _brightness_changed(self, value: int) -> None:
        if self._output is not None:
            self._output.brightness = value


class MatrixPartOutput(MatrixOutput, ABC):
    """A region of a larger buffered matrix, placed by `map_coords`."""

    def __init__(self, output: MatrixOutputBuffer, width: int, height: int) -> None:
        super().__init__(width, height)
        self._output = output

    def init(self) -> None:
        """Nothing to prepare: the parent buffer is set up separately."""

    @abstractmethod
    def map_coords(self, x: int, y: int) -> tuple[int, int]:
        """Translate a coordinate of this part into one of the whole matrix."""

    def push(self, data: MatrixPixelData) -> None:
        whole = self._output.data.copy()
        for x in range(self.width):
            for y in range(self.height):
                pixel = data.get(x, y)
                target_x, target_y = self.map_coords(x, y)
                scaled = replace(pixel, i=pixel.i * self.brightness // 255)
                whole.set(target_x, target_y, scaled)
        self._output.push(whole)


class DelayedMatrixOutput(MatrixOutput):
    """Limits how often frames reach an output; the latest held-back frame is sent from `loop`."""

    def __init__(
        self,
        out: MatrixOutput,
        push_delay: int,
        *,
        clock: Callable[[], float] | None = None,
        loop_manager: _LoopManager | None = None,
    ) -> None:
        super().__init__(out.width, out.height)
        if push_delay < 0:
            raise ValueError(f"push_delay must not be negative, got {push_delay}")
        self._out = out
        self.push_delay = push_delay
        self._clock = clock or _monotonic_millis
        self._loop_manager = loop_manager
        self._last_push: float = 0
        self._pending = False
        self._data = MatrixPixelData(out.width, out.height)

    @property
    def pending(self) -> bool:
        """Whether a held-back frame is waiting to be sent."""
        return self._pending

    def init(self) -> None:
        """Register with the loop manager, if one was given; otherwise call `loop` directly."""
        if self._loop_manager is not None:
            self._loop_manager.add_listener(self)

    def push(self, data: MatrixPixelData) -> None:
        if self._clock() - self._last_push >= self.push_delay:
            self._out.push(data)
            self._last_push = self._clock()
        else:
            self._data = data.copy()
            self._pending = True

    def loop(self, micros: int) -> None:
        if self._pending and self._clock() - self._last_push > self.push_delay:
            self._last_push = self._clock()
            self._out.push(self._data)
            self._pending = False