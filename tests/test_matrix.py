import pytest

from circuitos.matrix import FontSize, Matrix
from circuitos.matrix_output import MatrixOutput
from circuitos.matrix_pixel import MatrixPixel, MatrixPixelData


class RecordingOutput(MatrixOutput):
    def __init__(self, width=16, height=9):
        super().__init__(width, height)
        self.pushes = []

    def init(self):
        pass

    def push(self, data):
        self.pushes.append(data.copy())


def lit(matrix):
    return {
        (x, y)
        for x in range(matrix.width)
        for y in range(matrix.height)
        if matrix.data.get(x, y) != MatrixPixel.OFF
    }


@pytest.fixture
def matrix():
    return Matrix(RecordingOutput())


def test_size_follows_output(matrix):
    assert (matrix.width, matrix.height) == (16, 9)


def test_begin_clears_and_pushes(matrix):
    matrix.draw_pixel(0, 0, MatrixPixel.RED)
    matrix.begin()
    assert len(matrix.output.pushes) == 1
    assert matrix.output.pushes[0] == MatrixPixelData(16, 9)


def test_clear_with_color(matrix):
    matrix.clear(MatrixPixel.BLUE)
    assert matrix.data.get(5, 5) == MatrixPixel.BLUE


def test_draw_pixel_outside_is_dropped(matrix):
    matrix.draw_pixel(matrix.width, 0, MatrixPixel.RED)
    matrix.draw_pixel(-1, 0, MatrixPixel.RED)
    assert lit(matrix) == set()


@pytest.mark.parametrize(
    "rotation, expected",
    [
        (0, lambda m: (0, 0)),
        (1, lambda m: (m.width - 1, 0)),
        (2, lambda m: (m.width - 1, m.height - 1)),
        (3, lambda m: (0, m.height - 1)),
    ],
)
def test_rotation_moves_origin(matrix, rotation, expected):
    matrix.rotation = rotation
    matrix.draw_pixel(0, 0, MatrixPixel.RED)
    assert lit(matrix) == {expected(matrix)}


def test_invalid_rotation_raises(matrix):
    with pytest.raises(ValueError):
        matrix.rotation = 4
    assert matrix.rotation == 0
    matrix.draw_pixel(0, 0, MatrixPixel.RED)
    assert lit(matrix) == {(0, 0)}


def test_draw_pixel_index_counts_rows(matrix):
    matrix.draw_pixel_index(matrix.width * 2 + 3, MatrixPixel.GREEN)
    assert lit(matrix) == {(3, 2)}


def test_default_font_is_big(matrix):
    assert matrix.font is FontSize.BIG


def test_big_exclamation_mark(matrix):
    matrix.draw_char(0, 0, "!")
    assert lit(matrix) == {(2, j) for j in (0, 1, 2, 3, 4, 6)}


def test_big_string_advances_six(matrix):
    matrix.draw_string(0, 0, "!!")
    assert {x for x, _ in lit(matrix)} == {2, 8}


def test_big_char_code_out_of_range_raises(matrix):
    with pytest.raises(ValueError):
        matrix.draw_char(0, 0, 256)


def test_small_period(matrix):
    matrix.font = FontSize.SMALL
    matrix.draw_char(0, 5, ".")
    assert lit(matrix) == {(0, 4)}


def test_small_string_advances_four(matrix):
    matrix.font = FontSize.SMALL
    matrix.draw_string(0, 5, "..")
    assert lit(matrix) == {(0, 4), (4, 4)}


def test_small_char_outside_font_draws_nothing(matrix):
    matrix.font = FontSize.SMALL
    matrix.draw_char(0, 5, 0x7F)
    assert lit(matrix) == set()


def test_char_color_is_used(matrix):
    matrix.draw_char(0, 0, "!", MatrixPixel.RED)
    assert matrix.data.get(2, 0) == MatrixPixel.RED


def test_draw_bitmap_intensities(matrix):
    matrix.draw_bitmap(1, 1, 2, 2, [0, 50, 100, 150], MatrixPixel.RED)
    assert matrix.data.get(2, 1) == MatrixPixel(255, 0, 0, 50)
    assert matrix.data.get(1, 2) == MatrixPixel(255, 0, 0, 100)
    assert matrix.data.get(2, 2) == MatrixPixel(255, 0, 0, 150)


def test_draw_bitmap_short_data_raises(matrix):
    with pytest.raises(ValueError):
        matrix.draw_bitmap(0, 0, 2, 2, [1, 2, 3])


def test_draw_pixel_data_copies_grid(matrix):
    frame = MatrixPixelData(2, 2)
    frame.set(1, 0, MatrixPixel.MAGENTA)
    matrix.draw_pixel_data(4, 4, frame)
    assert matrix.data.get(5, 4) == MatrixPixel.MAGENTA


def test_brightness_goes_to_output(matrix):
    matrix.brightness = 10
    assert matrix.output.brightness == 10
    assert matrix.brightness == 10


def test_push_sends_current_frame(matrix):
    matrix.draw_pixel(3, 3, MatrixPixel.YELLOW)
    matrix.push()
    assert matrix.output.pushes[-1] == matrix.data