"""The 3x5 "Tom Thumb" proportional font in the GFX glyph format."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Glyph:
    """Where a glyph's bits live and how it is placed relative to the cursor."""

    bitmap_offset: int
    width: int
    height: int
    x_advance: int
    x_offset: int
    y_offset: int


@dataclass(frozen=True)
class GFXFont:
    """A font whose glyph bitmaps are packed row by row, most significant bit first."""

    bitmap: bytes
    glyphs: tuple[Glyph, ...]
    first: int
    last: int
    y_advance: int

    def __post_init__(self) -> None:
        expected = self.last - self.first + 1
        if len(self.glyphs) != expected:
            raise ValueError(f"expected {expected} glyphs, got {len(self.glyphs)}")

    @staticmethod
    def _code(code: int | str) -> int:
        if isinstance(code, str):
            if len(code) != 1:
                raise ValueError(f"expected a single character, got {code!r}")
            return ord(code)
        return code

    def __contains__(self, code: object) -> bool:
        if isinstance(code, str):
            return len(code) == 1 and self.first <= ord(code) <= self.last
        return isinstance(code, int) and self.first <= code <= self.last

    def glyph(self, code: int | str) -> Glyph:
        """Return the glyph for a character code or a one-character string."""
        value = self._code(code)
        if not self.first <= value <= self.last:
            raise ValueError(f"no glyph for code {value}")
        return self.glyphs[value - self.first]

    def glyph_bitmap(self, code: int | str) -> tuple[tuple[bool, ...], ...]:
        """Unpack a glyph into rows of pixels, True where the pixel is set."""
        glyph = self.glyph(code)
        base = glyph.bitmap_offset
        rows = []
        for row in range(glyph.height):
            pixels = []
            for column in range(glyph.width):
                index = row * glyph.width + column
                byte = self.bitmap[base + index // 8]
                pixels.append(bool(byte & (0x80 >> (index % 8))))
            rows.append(tuple(pixels))
        return tuple(rows)


_BITMAP = bytes.fromhex(
    "00"              # space
    "8080800080"      # !
    "A0A0"            # "
    "A0E0A0E0A0"      # #
    "60C060C040"      # $
    "8020408020"      # %
    "C0C0E0A060"      # &
    "8080"            # '
    "4080808040"      # (
    "8040404080"      # )
    "A040A0"          # *
    "40E040"          # +
    "4080"            # ,
    "E0"              # -
    "80"              # .
    "2020408080"      # /
    "60A0A0A0C0"      # 0
    "40C0404040"      # 1
    "C0204080E0"      # 2
    "C0204020C0"      # 3
    "A0A0E02020"      # 4
    "E080C020C0"      # 5
    "6080E0A0E0"      # 6
    "E020408080"      # 7
    "E0A0E0A0E0"      # 8
    "E0A0E020C0"      # 9
    "800080"          # :
    "40004080"        # ;
    "2040804020"      # <
    "E000E0"          # =
    "8040204080"      # >
    "E020400040"      # ?
    "40A0E08060"      # @
    "40A0E0A0A0"      # A
    "C0A0C0A0C0"      # B
    "6080808060"      # C
    "C0A0A0A0C0"      # D
    "E080E080E0"      # E
    "E080E08080"      # F
    "6080E0A060"      # G
    "A0A0E0A0A0"      # H
    "E0404040E0"      # I
    "202020A040"      # J
    "A0A0C0A0A0"      # K
    "80808080E0"      # L
    "A0E0E0A0A0"      # M
    "A0E0E0E0A0"      # N
    "40A0A0A040"      # O
    "C0A0C08080"      # P
    "40A0A0E060"      # Q
    "C0A0E0C0A0"      # R
    "60804020C0"      # S
    "E040404040"      # T
    "A0A0A0A060"      # U
    "A0A0A04040"      # V
    "A0A0E0E0A0"      # W
    "A0A040A0A0"      # X
    "A0A0404040"      # Y
    "E0204080E0"      # Z
    "E0808080E0"      # [
    "804020"          # backslash
    "E0202020E0"      # ]
    "40A0"            # ^
    "E0"              # _
    "8040"            # `
    "C060A0E0"        # a
    "80C0A0A0C0"      # b
    "60808060"        # c
    "2060A0A060"      # d
    "60A0C060"        # e
    "2040E04040"      # f
    "60A0E02040"      # g
    "80C0A0A0A0"      # h
    "8000808080"      # i
    "20002020A040"    # j
    "80A0C0C0A0"      # k
    "C0404040E0"      # l
    "E0E0E0A0"        # m
    "C0A0A0A0"        # n
    "40A0A040"        # o
    "C0A0A0C080"      # p
    "60A0A06020"      # q
    "60808080"        # r
    "60C060C0"        # s
    "40E0404060"      # t
    "A0A0A060"        # u
    "A0A0E040"        # v
    "A0E0E0E0"        # w
    "A04040A0"        # x
    "A0A0602040"      # y
    "E060C0E0"        # z
    "6040804060"      # {
    "8080008080"      # |
    "C0402040C0"      # }
    "60C0"            # ~
)

_GLYPHS = tuple(
    Glyph(*entry)
    for entry in (
        (0, 8, 1, 2, 0, -5), (1, 8, 5, 2, 0, -5), (6, 8, 2, 4, 0, -5),
        (8, 8, 5, 4, 0, -5), (13, 8, 5, 4, 0, -5), (18, 8, 5, 4, 0, -5),
        (23, 8, 5, 4, 0, -5), (28, 8, 2, 2, 0, -5), (30, 8, 5, 3, 0, -5),
        (35, 8, 5, 3, 0, -5), (40, 8, 3, 4, 0, -5), (43, 8, 3, 4, 0, -4),
        (46, 8, 2, 3, 0, -2), (48, 8, 1, 4, 0, -3), (49, 8, 1, 2, 0, -1),
        (50, 8, 5, 4, 0, -5), (55, 8, 5, 4, 0, -5), (60, 8, 5, 3, 0, -5),
        (65, 8, 5, 4, 0, -5), (70, 8, 5, 4, 0, -5), (75, 8, 5, 4, 0, -5),
        (80, 8, 5, 4, 0, -5), (85, 8, 5, 4, 0, -5), (90, 8, 5, 4, 0, -5),
        (95, 8, 5, 4, 0, -5), (100, 8, 5, 4, 0, -5), (105, 8, 3, 2, 0, -4),
        (108, 8, 4, 3, 0, -4), (112, 8, 5, 4, 0, -5), (117, 8, 3, 4, 0, -4),
        (120, 8, 5, 4, 0, -5), (125, 8, 5, 4, 0, -5), (130, 8, 5, 4, 0, -5),
        (135, 8, 5, 4, 0, -5), (140, 8, 5, 4, 0, -5), (145, 8, 5, 4, 0, -5),
        (150, 8, 5, 4, 0, -5), (155, 8, 5, 4, 0, -5), (160, 8, 5, 4, 0, -5),
        (165, 8, 5, 4, 0, -5), (170, 8, 5, 4, 0, -5), (175, 8, 5, 4, 0, -5),
        (180, 8, 5, 4, 0, -5), (185, 8, 5, 4, 0, -5), (190, 8, 5, 4, 0, -5),
        (195, 8, 5, 4, 0, -5), (200, 8, 5, 4, 0, -5), (205, 8, 5, 4, 0, -5),
        (210, 8, 5, 4, 0, -5), (215, 8, 5, 4, 0, -5), (220, 8, 5, 4, 0, -5),
        (225, 8, 5, 4, 0, -5), (230, 8, 5, 4, 0, -5), (235, 8, 5, 4, 0, -5),
        (240, 8, 5, 4, 0, -5), (245, 8, 5, 4, 0, -5), (250, 8, 5, 4, 0, -5),
        (255, 8, 5, 4, 0, -5), (260, 8, 5, 4, 0, -5), (265, 8, 5, 4, 0, -5),
        (270, 8, 3, 4, 0, -4), (273, 8, 5, 4, 0, -5), (278, 8, 2, 4, 0, -5),
        (280, 8, 1, 4, 0, -1), (281, 8, 2, 3, 0, -5), (283, 8, 4, 4, 0, -4),
        (287, 8, 5, 4, 0, -5), (292, 8, 4, 4, 0, -4), (296, 8, 5, 4, 0, -5),
        (301, 8, 4, 4, 0, -4), (305, 8, 5, 4, 0, -5), (310, 8, 5, 4, 0, -4),
        (315, 8, 5, 4, 0, -5), (320, 8, 5, 2, 0, -5), (325, 8, 6, 4, 0, -5),
        (331, 8, 5, 4, 0, -5), (336, 8, 5, 4, 0, -5), (341, 8, 4, 4, 0, -4),
        (345, 8, 4, 4, 0, -4), (349, 8, 4, 4, 0, -4), (353, 8, 5, 4, 0, -4),
        (358, 8, 5, 4, 0, -4), (363, 8, 4, 4, 0, -4), (367, 8, 4, 4, 0, -4),
        (371, 8, 5, 4, 0, -5), (376, 8, 4, 4, 0, -4), (380, 8, 4, 4, 0, -4),
        (384, 8, 4, 4, 0, -4), (388, 8, 4, 4, 0, -4), (392, 8, 5, 4, 0, -4),
        (397, 8, 4, 4, 0, -4), (401, 8, 5, 4, 0, -5), (406, 8, 5, 2, 0, -5),
        (411, 8, 5, 4, 0, -5), (416, 8, 2, 4, 0, -5),
    )
)

TOM_THUMB = GFXFont(bitmap=_BITMAP, glyphs=_GLYPHS, first=0x20, last=0x7E, y_advance=6)