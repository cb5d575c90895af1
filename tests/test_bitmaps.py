import pytest

from circuitos.bitmaps import ARROW_RIGHT, BLACK, CROSS, HEIGHT, WHITE, WIDTH, YES, rows


@pytest.mark.parametrize("bitmap", [ARROW_RIGHT, CROSS, YES])
def test_bitmap_size_and_palette(bitmap):
    assert len(bitmap) == WIDTH * HEIGHT
    assert set(bitmap) == {BLACK, WHITE}


def test_pinned_pixels():
    assert rows(ARROW_RIGHT)[0][4] == WHITE
    assert rows(ARROW_RIGHT)[0][0] == BLACK
    assert rows(CROSS)[3][4] == WHITE
    assert rows(YES)[2][14] == WHITE


@pytest.mark.parametrize("bitmap", [CROSS, YES])
def test_unspecified_tail_is_black(bitmap):
    assert all(pixel == BLACK for pixel in bitmap[320:])


def test_rows_shape_and_round_trip():
    grid = rows(ARROW_RIGHT)
    assert len(grid) == HEIGHT
    assert all(len(row) == WIDTH for row in grid)
    assert tuple(pixel for row in grid for pixel in row) == ARROW_RIGHT


def test_rows_rejects_wrong_size():
    with pytest.raises(ValueError):
        rows(ARROW_RIGHT[:-1])


def test_icons_differ():
    grids = {tuple(tuple(row) for row in rows(bitmap)) for bitmap in (ARROW_RIGHT, CROSS, YES)}
    assert len(grids) == 3