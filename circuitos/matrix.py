"""Drawing surface for an LED matrix: pixels, text, bitmaps and animations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from enum import Enum

from circuitos.font5x7 import classic_glyph
from circuitos.matrix_anim import MatrixAnim
from circuitos.matrix_output import MatrixOutput
from circuitos.matrix_pixel import MatrixPixel, MatrixPixelData
from circuitos.tomthumb import TOM_THUMB


class FontSize(Enum):
    """BIG is the 5x7 classic font, SMALL the 3x5 Tom Thumb font."""

    BIG = "big"
    SMALL = "small"


def _char_code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


class Matrix:
    """Draws into a frame buffer and pushes it to a matrix output."""

    def __init__(self, output: MatrixOutput) -> None:
        self._output = output
        self._width = output.width
        self._height = output.height
        self._data = MatrixPixelData(self._width, self._height)
        self._rotation = 0
        self.font = FontSize.BIG
        self._animations: set[MatrixAnim] = set()

    @property
    def output(self) -> MatrixOutput:
        return self._output

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def data(self) -> MatrixPixelData:
        """The frame being drawn."""
        return self._data

    @property
    def rotation(self) -> int:
        """Quarter turns applied to drawn coordinates, 0-3."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: int) -> None:
        if not 0 <= value <= 3:
            raise ValueError(f"rotation must be within 0-3, got {value}")
        self._rotation = value

    @property
    def brightness(self) -> int:
        return self._output.brightness

    @brightness.setter
    def brightness(self, value: int) -> None:
        self._output.brightness = value

    @property
    def animations(self) -> set[MatrixAnim]:
        """The running animations (a copy)."""
        return set(self._animations)

    def begin(self) -> None:
        self.clear()
        self.push()

    def clear(self, color: MatrixPixel = MatrixPixel.OFF) -> None:
        self._data.clear(color)

    def push(self) -> None:
        self._output.push(self._data)

    def draw_pixel(self, x: int, y: int, color: MatrixPixel) -> None:
        """Draw one pixel after rotation; pixels outside the matrix are dropped."""
        if self._rotation == 1:
            x, y = self._width - y - 1, x
        elif self._rotation == 2:
            x, y = self._width - x - 1, self._height - y - 1
        elif self._rotation == 3:
            x, y = y, self._height - x - 1
        if 0 <= x < self._width and 0 <= y < self._height:
            self._data.set(x, y, color)

    def draw_pixel_index(self, i: int, color: MatrixPixel) -> None:
        """Draw the i-th pixel, counted row by row."""
        y, x = divmod(i, self._width)
        self.draw_pixel(x, y, color)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def draw_char(self, x: int, y: int, c: int | str, color: MatrixPixel = MatrixPixel.WHITE) -> None:
        """Draw a character with its top-left (BIG) or baseline (SMALL) at (x, y)."""
        code = _char_code(c)
        if self.font is FontSize.BIG:
            columns = classic_glyph(code)
            for j in range(8):
                for k, column in enumerate(columns):
                    if column & (1 << j) and self._inside(x + k, y + j):
                        self.draw_pixel(x + k, y + j, color)
            return

        if code not in TOM_THUMB:
            return
        glyph = TOM_THUMB.glyph(code)
        for yy, row in enumerate(TOM_THUMB.glyph_bitmap(code)):
            for xx, lit in enumerate(row):
                px = x + glyph.x_offset + xx
                py = y + glyph.y_offset + yy
                if lit and self._inside(px, py):
                    self.draw_pixel(px % 16, py, color)

    def draw_string(self, x: int, y: int, text: str, color: MatrixPixel = MatrixPixel.WHITE) -> None:
        advance = 6 if self.font is FontSize.BIG else 4
        for character in text:
            self.draw_char(x, y, character, color)
            x += advance

    def draw_bitmap(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        data: Sequence[int],
        color: MatrixPixel = MatrixPixel.WHITE,
    ) -> None:
        """Draw an intensity map in one colour; `data` holds width*height values row by row."""
        if len(data) < width * height:
            raise ValueError(f"expected {width * height} intensities, got {len(data)}")
        for dx in range(width):
            for dy in range(height):
                self.draw_pixel(x + dx, y + dy, replace(color, i=data[dy * width + dx]))

    def draw_pixel_data(self, x: int, y: int, data: MatrixPixelData) -> None:
        for dx in range(data.width):
            for dy in range(data.height):
                self.draw_pixel(x + dx, y + dy, data.get(dx, dy))

    def start_animation(self, animation: MatrixAnim) -> None:
        animation.set_matrix(self)
        animation.start()

    def stop_animations(self) -> None:
        for animation in self.animations:
            animation.stop()

    def _add_anim(self, animation: MatrixAnim) -> None:
        self._animations.add(animation)

    def _remove_anim(self, animation: MatrixAnim) -> None:
        self._animations.discard(animation)