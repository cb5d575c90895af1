import pytest

from circuitos.matrix_pixel import MatrixPixel, MatrixPixelData


def test_named_colours():
    assert MatrixPixel.RED == MatrixPixel(255, 0, 0, 255)
    assert MatrixPixel.BLACK == MatrixPixel(0, 0, 0, 255)
    assert MatrixPixel.OFF == MatrixPixel(0, 0, 0, 0)
    assert MatrixPixel.MAGENTA == MatrixPixel(255, 0, 255, 255)


def test_default_pixel_is_off():
    assert MatrixPixel() == MatrixPixel.OFF


def test_pixels_differ_by_intensity():
    black = MatrixPixelData(1, 1)
    black.set(0, 0, MatrixPixel.BLACK)
    assert black.get(0, 0) == MatrixPixel.BLACK
    assert (black == MatrixPixelData(1, 1)) is False


@pytest.mark.parametrize("args", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 0, 300)])
def test_pixel_component_range(args):
    with pytest.raises(ValueError):
        MatrixPixel(*args)


def test_new_data_is_off():
    data = MatrixPixelData(4, 3)
    assert (data.width, data.height) == (4, 3)
    assert all(data.get(x, y) == MatrixPixel.OFF for x in range(4) for y in range(3))


def test_set_get_round_trip():
    data = MatrixPixelData(16, 9)
    data.set(15, 8, MatrixPixel.GREEN)
    assert data.get(15, 8) == MatrixPixel.GREEN
    assert data[15, 8] == MatrixPixel.GREEN
    assert data.get(14, 8) == MatrixPixel.OFF


def test_set_outside_is_ignored():
    data = MatrixPixelData(2, 2)
    before = data.copy()
    data.set(2, 0, MatrixPixel.RED)
    data.set(0, -1, MatrixPixel.RED)
    assert data == before


def test_get_outside_returns_off():
    data = MatrixPixelData(2, 2)
    data.clear(MatrixPixel.WHITE)
    assert data.get(5, 5) == MatrixPixel.OFF
    assert data.get(-1, 0) == MatrixPixel.OFF


def test_clear_fills_every_pixel():
    data = MatrixPixelData(3, 2)
    data.clear(MatrixPixel.BLUE)
    assert all(data.get(x, y) == MatrixPixel.BLUE for x in range(3) for y in range(2))
    data.clear()
    assert data == MatrixPixelData(3, 2)


def test_copy_is_independent():
    data = MatrixPixelData(3, 3)
    data.set(1, 1, MatrixPixel.CYAN)
    duplicate = data.copy()
    assert duplicate == data
    duplicate.set(0, 0, MatrixPixel.YELLOW)
    assert data.get(0, 0) == MatrixPixel.OFF
    assert duplicate != data


def test_index_outside_raises():
    data = MatrixPixelData(2, 2)
    with pytest.raises(IndexError):
        data[2, 0]
    with pytest.raises(IndexError):
        data[0, 2] = MatrixPixel.RED
    assert data == MatrixPixelData(2, 2)


def test_setitem_writes_pixel():
    data = MatrixPixelData(2, 2)
    data[1, 0] = MatrixPixel.WHITE
    assert data.get(1, 0) == MatrixPixel.WHITE


def test_sizes_must_match_for_equality():
    assert MatrixPixelData(2, 3) != MatrixPixelData(3, 2)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        MatrixPixelData(-1, 4)