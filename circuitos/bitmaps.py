"""Small 18x18 RGB565 icons: a right arrow, a cross and a tick."""

from __future__ import annotations

WIDTH = 18
HEIGHT = 18
BLACK = 0x0000
WHITE = 0xFFFF


def _decode(*lines: str) -> tuple[int, ...]:
    pixels = [WHITE if ch == "#" else BLACK for ch in "".join(lines)]
    pixels.extend([BLACK] * (WIDTH * HEIGHT - len(pixels)))
    return tuple(pixels)


ARROW_RIGHT = _decode(
    "....##..........",
    ".....####.......",
    ".......#####....",
    ".........######.",
    "............####",
    "##.............#",
    "#####...........",
    "..######........",
    ".....######.....",
    "........######..",
    "..........######",
    "...........#####",
    "#...........####",
    "##...........###",
    "###...........##",
    "####...........#",
    "#####...........",
    ".#####..........",
    "...####.........",
    ".....###........",
    "....",
)

CROSS = _decode(
    "................",
    "................",
    "................",
    "..........#.....",
    "...#.......###..",
    "....###......###",
    "#....###........",
    "####..###.......",
    "...#######......",
    "......#####.....",
    ".........####...",
    "..........######",
    "...........###.#",
    "####........###.",
    "..####.......###",
    ".....####.......",
    "#.......##......",
    "................",
    "................",
    "................",
)

YES = _decode(
    "................",
    "................",
    "................",
    "..##............",
    "...###..........",
    "....##.###......",
    ".....##..##.....",
    "......##..##....",
    ".#.....##..##...",
    "..###...##..##..",
    "...##.#..##..##.",
    "....###.####..##",
    ".......##..##..#",
    "#.........##....",
    "##...........##.",
    ".##.............",
    "####............",
    "...##...........",
    "................",
    "................",
)


def rows(bitmap: tuple[int, ...]) -> list[tuple[int, ...]]:
    """Split an 18x18 bitmap into its rows, top to bottom."""
    if len(bitmap) != WIDTH * HEIGHT:
        raise ValueError(f"expected {WIDTH * HEIGHT} pixels, got {len(bitmap)}")
    return [tuple(bitmap[start:start + WIDTH]) for start in range(0, len(bitmap), WIDTH)]