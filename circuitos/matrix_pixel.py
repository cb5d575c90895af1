"""Pixels for LED matrices and a grid of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class MatrixPixel:
    """A colour (r, g, b) with an intensity i, each 0-255."""

    r: int = 0
    g: int = 0
    b: int = 0
    i: int = 0

    RED: ClassVar[MatrixPixel]
    GREEN: ClassVar[MatrixPixel]
    BLUE: ClassVar[MatrixPixel]
    YELLOW: ClassVar[MatrixPixel]
    CYAN: ClassVar[MatrixPixel]
    MAGENTA: ClassVar[MatrixPixel]
    WHITE: ClassVar[MatrixPixel]
    BLACK: ClassVar[MatrixPixel]
    OFF: ClassVar[MatrixPixel]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "i"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} must be within 0-255, got {value}")


MatrixPixel.RED = MatrixPixel(255, 0, 0, 255)
MatrixPixel.GREEN = MatrixPixel(0, 255, 0, 255)
MatrixPixel.BLUE = MatrixPixel(0, 0, 255, 255)
MatrixPixel.YELLOW = MatrixPixel(255, 255, 0, 255)
MatrixPixel.CYAN = MatrixPixel(0, 255, 255, 255)
MatrixPixel.MAGENTA = MatrixPixel(255, 0, 255, 255)
MatrixPixel.WHITE = MatrixPixel(255, 255, 255, 255)
MatrixPixel.BLACK = MatrixPixel(0, 0, 0, 255)
MatrixPixel.OFF = MatrixPixel(0, 0, 0, 0)


class MatrixPixelData:
    """A width x height grid of pixels, all off to begin with."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"dimensions must not be negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._columns = [[MatrixPixel.OFF] * height for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set(self, x: int, y: int, pixel: MatrixPixel) -> None:
        """Set a pixel; coordinates outside the grid are ignored."""
        if self._inside(x, y):
            self._columns[x][y] = pixel

    def get(self, x: int, y: int) -> MatrixPixel:
        """Return a pixel, or an off pixel for coordinates outside the grid."""
        if not self._inside(x, y):
            return MatrixPixel.OFF
        return self._columns[x][y]

    def clear(self, color: MatrixPixel = MatrixPixel.OFF) -> None:
        """Fill the whole grid with one colour."""
        self._columns = [[color] * self._height for _ in range(self._width)]

    def copy(self) -> MatrixPixelData:
        duplicate = MatrixPixelData(self._width, self._height)
        duplicate._columns = [list(column) for column in self._columns]
        return duplicate

    def __getitem__(self, xy: tuple[int, int]) -> MatrixPixel:
        x, y = xy
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        return self._columns[x][y]

    def __setitem__(self, xy: tuple[int, int], pixel: MatrixPixel) -> None:
        x, y = xy
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height}")
        self._columns[x][y] = pixel

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixPixelData):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._columns == other._columns
        )

    def __repr__(self) -> str:
        return f"MatrixPixelData({self._width}, {self._height})"