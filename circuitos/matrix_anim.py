"""Base class for animations drawn onto a matrix at an offset."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from circuitos.matrix_pixel import MatrixPixel, MatrixPixelData

if TYPE_CHECKING:
    from circuitos.matrix import Matrix


class MatrixAnim(ABC):
    """An animation occupying a width x height area placed at (x, y) on a matrix."""

    def __init__(self, matrix: Matrix | None = None) -> None:
        self._matrix = matrix
        self._started = False
        self.x = 0
        self.y = 0
        self.width = 0
        self.height = 0
        if matrix is not None:
            self.width = matrix.width
            self.height = matrix.height

    @property
    def matrix(self) -> Matrix | None:
        return self._matrix

    @property
    def started(self) -> bool:
        return self._started

    def set_matrix(self, matrix: Matrix) -> None:
        """Attach to a matrix; an unsized animation takes the matrix's size."""
        if self._matrix is None and self.width == 0 and self.height == 0:
            self.width = matrix.width
            self.height = matrix.height
        self._matrix = matrix

    def start(self) -> None:
        """Start the animation; does nothing without a matrix or if already running."""
        if self._matrix is None or self._started:
            return
        self._started = True
        self._matrix._add_anim(self)
        self.on_start()

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        if self._matrix is not None:
            self._matrix._remove_anim(self)
        self.on_stop()

    @abstractmethod
    def reset(self) -> None:
        """Return the animation to its first frame."""

    @abstractmethod
    def push(self) -> None:
        """Draw the current frame and send it to the matrix."""

    @abstractmethod
    def on_start(self) -> None:
        """Called once when the animation starts."""

    @abstractmethod
    def on_stop(self) -> None:
        """Called once when the animation stops."""

    def _target(self) -> Matrix:
        if self._matrix is None:
            raise RuntimeError("animation is not attached to a matrix")
        return self._matrix

    def draw_pixel(self, x: int, y: int, color: MatrixPixel) -> None:
        self._target().draw_pixel(x + self.x, y + self.y, color)

    def draw_pixel_index(self, i: int, color: MatrixPixel) -> None:
        """Draw the i-th pixel of the animation area, counted row by row."""
        if self.width == 0:
            raise ValueError("animation has no width")
        self.draw_pixel(i % self.width, i // self.width, color)

    def draw_char(self, x: int, y: int, c: int | str, color: MatrixPixel = MatrixPixel.WHITE) -> None:
        self._target().draw_char(x + self.x, y + self.y, c, color)

    def draw_string(self, x: int, y: int, text: str, color: MatrixPixel = MatrixPixel.WHITE) -> None:
        self._target().draw_string(x + self.x, y + self.y, text, color)

    def draw_bitmap(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        data: Sequence[int],
        color: MatrixPixel = MatrixPixel.WHITE,
    ) -> None:
        self._target().draw_bitmap(x + self.x, y + self.y, width, height, data, color)

    def draw_pixel_data(self, x: int, y: int, data: MatrixPixelData) -> None:
        self._target().draw_pixel_data(x + self.x, y + self.y, data)

    def push_matrix(self) -> None:
        self._target().push()

    def clear(self) -> None:
        """Turn off every pixel of the animation area."""
        for x in range(self.width):
            for y in range(self.height):
                self.draw_pixel(x, y, MatrixPixel.OFF)