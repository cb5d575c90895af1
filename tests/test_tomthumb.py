import pytest

from circuitos.tomthumb import TOM_THUMB, GFXFont, Glyph


def test_font_extents_match_source():
    assert TOM_THUMB.first == 0x20
    assert TOM_THUMB.last == 0x7E
    assert TOM_THUMB.y_advance == 6
    assert TOM_THUMB.glyph(TOM_THUMB.first) == Glyph(0, 8, 1, 2, 0, -5)
    assert TOM_THUMB.glyph(TOM_THUMB.last) == Glyph(416, 8, 2, 4, 0, -5)


def test_glyph_lookup_by_char_and_code_agree():
    assert TOM_THUMB.glyph("A") == TOM_THUMB.glyph(0x41)
    assert TOM_THUMB.glyph("A") == Glyph(135, 8, 5, 4, 0, -5)


def test_space_glyph_from_source_table():
    assert TOM_THUMB.glyph(" ") == Glyph(0, 8, 1, 2, 0, -5)


def test_glyph_offsets_are_contiguous():
    glyphs = [TOM_THUMB.glyph(code) for code in range(TOM_THUMB.first, TOM_THUMB.last + 1)]
    for current, following in zip(glyphs, glyphs[1:]):
        needed = (current.width * current.height + 7) // 8
        assert following.bitmap_offset == current.bitmap_offset + needed
    last = glyphs[-1]
    assert last.bitmap_offset + (last.width * last.height + 7) // 8 == len(TOM_THUMB.bitmap)


def test_bitmap_shape_matches_glyph():
    for code in range(TOM_THUMB.first, TOM_THUMB.last + 1):
        glyph = TOM_THUMB.glyph(code)
        rows = TOM_THUMB.glyph_bitmap(code)
        assert len(rows) == glyph.height
        assert all(len(row) == glyph.width for row in rows)


def test_pixels_stay_within_three_columns():
    for code in range(TOM_THUMB.first, TOM_THUMB.last + 1):
        for row in TOM_THUMB.glyph_bitmap(code):
            assert sum(1 for pixel in row[3:] if pixel) == 0


def test_exclamation_bitmap():
    rows = TOM_THUMB.glyph_bitmap("!")
    assert [row[0] for row in rows] == [True, True, True, False, True]


def test_bitmap_matches_source_bytes():
    glyph = TOM_THUMB.glyph("H")
    rows = TOM_THUMB.glyph_bitmap("H")
    for offset, row in enumerate(rows):
        byte = TOM_THUMB.bitmap[glyph.bitmap_offset + offset]
        rebuilt = sum(0x80 >> bit for bit, on in enumerate(row) if on)
        assert rebuilt == byte


def test_space_is_blank():
    rows = TOM_THUMB.glyph_bitmap(" ")
    assert [[bool(pixel) for pixel in row] for row in rows] == [[False] * 8]


def test_containment():
    assert "A" in TOM_THUMB
    assert 0x7E in TOM_THUMB
    assert 0x7F not in TOM_THUMB
    assert "\x1f" not in TOM_THUMB
    assert TOM_THUMB.glyph(0x7E) == Glyph(416, 8, 2, 4, 0, -5)


@pytest.mark.parametrize("code", [0x1F, 0x7F, 0xA1, -1])
def test_out_of_range_code_raises(code):
    with pytest.raises(ValueError):
        TOM_THUMB.glyph(code)


def test_multi_character_string_raises():
    with pytest.raises(ValueError):
        TOM_THUMB.glyph_bitmap("ab")


def test_font_rejects_wrong_glyph_count():
    with pytest.raises(ValueError):
        GFXFont(bitmap=b"\x00", glyphs=(Glyph(0, 8, 1, 2, 0, -1),), first=0x20, last=0x21, y_advance=6)