import pytest

from widgetlab.grid import SIDE_LENGTH, cell_color, cell_index, cell_label


def test_cell_index_covers_grid_once():
    indices = [
        cell_index(row, col, SIDE_LENGTH)
        for row in range(SIDE_LENGTH)
        for col in range(SIDE_LENGTH)
    ]
    assert indices == list(range(SIDE_LENGTH * SIDE_LENGTH))


def test_cell_index_row_major():
    assert cell_index(1, 0, 8) == 8
    assert cell_index(0, 7, 8) == 7


@pytest.mark.parametrize("row, col", [(-1, 0), (0, 8), (8, 0)])
def test_cell_index_out_of_range(row, col):
    with pytest.raises(IndexError):
        cell_index(row, col, 8)


def test_cell_label_format():
    assert cell_label(2, 5) == "R2 C5"
    assert cell_label(0, 0) == "R0 C0"


def test_origin_is_black():
    assert cell_color(0, 0) == (0, 0, 0, 255)


def test_red_depends_on_row_green_on_column():
    for row in range(SIDE_LENGTH):
        for col in range(SIDE_LENGTH):
            r, g, b, a = cell_color(row, col)
            assert r == cell_color(row, 0)[0]
            assert g == cell_color(0, col)[1]
            assert a == 255
            assert 0 <= b <= 255


def test_colors_grow_along_axes():
    reds = [cell_color(row, 0)[0] for row in range(SIDE_LENGTH)]
    greens = [cell_color(0, col)[1] for col in range(SIDE_LENGTH)]
    assert reds == sorted(reds)
    assert greens == sorted(greens)
    assert reds == greens


def test_blue_is_symmetric_and_zero_on_edges():
    for row in range(SIDE_LENGTH):
        assert cell_color(row, 0)[2] == 0
        for col in range(SIDE_LENGTH):
            assert cell_color(row, col)[2] == cell_color(col, row)[2]


def test_cell_color_out_of_range():
    with pytest.raises(IndexError):
        cell_color(SIDE_LENGTH, 0)