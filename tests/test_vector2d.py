import pytest

from reformant.vector2d import Vector2D


def test_shape_and_fill_value():
    grid = Vector2D(2, 3, 7)
    assert grid.rows == 2
    assert grid.cols == 3
    assert [list(row) for row in grid] == [[7, 7, 7], [7, 7, 7]]


def test_default_is_empty():
    grid = Vector2D()
    assert grid.rows == 0 and grid.cols == 0
    with pytest.raises(IndexError, match="Row index out of bounds"):
        grid[0, 0]


def test_set_and_get_element():
    grid = Vector2D(3, 4, 0.0)
    grid[1, 2] = 5.5
    assert grid[1, 2] == 5.5
    assert grid[1][2] == 5.5
    assert grid.row(1)[2] == 5.5
    assert grid[2, 1] == 0.0


def test_row_view_writes_through():
    grid = Vector2D(2, 2, 0)
    row = grid[1]
    row[0] = 9
    assert grid[1, 0] == 9
    assert len(row) == 2


@pytest.mark.parametrize("i", [-1, 2, 10])
def test_row_out_of_bounds(i):
    grid = Vector2D(2, 3, 0)
    with pytest.raises(IndexError) as read_error:
        grid[i, 0]
    assert str(read_error.value) == "Row index out of bounds"
    with pytest.raises(IndexError) as row_error:
        grid[i]
    assert str(row_error.value) == "Row index out of bounds"
    with pytest.raises(IndexError) as write_error:
        grid[i, 0] = 1
    assert str(write_error.value) == "Row index out of bounds"
    assert [list(row) for row in grid] == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize("j", [-1, 3, 10])
def test_column_out_of_bounds(j):
    grid = Vector2D(2, 3, 0)
    with pytest.raises(IndexError, match="Column index out of bounds"):
        grid[0, j]
    with pytest.raises(IndexError, match="Column index out of bounds"):
        grid[0][j]
    with pytest.raises(IndexError, match="Column index out of bounds"):
        grid.row(1)[j] = 1


def test_setting_whole_row_is_rejected():
    grid = Vector2D(2, 2, 0)
    with pytest.raises(TypeError):
        grid[0] = [1, 2]
    assert [list(row) for row in grid] == [[0, 0], [0, 0]]


def test_resize_keeps_flat_layout():
    grid = Vector2D(2, 3, 0)
    for i in range(2):
        for j in range(3):
            grid[i, j] = i * 3 + j
    grid.resize(3, 2)
    assert grid.rows == 3 and grid.cols == 2
    assert [grid[i, j] for i in range(3) for j in range(2)] == list(range(6))


def test_resize_grows_with_blank_values():
    grid = Vector2D(1, 2, 4)
    grid.resize(2, 2)
    assert list(grid[0]) == [4, 4]
    assert list(grid[1]) == [0, 0]


def test_resize_shrinks():
    grid = Vector2D(3, 3, 1)
    grid.resize(1, 2)
    assert [list(row) for row in grid] == [[1, 1]]
    with pytest.raises(IndexError):
        grid[1, 0]


def test_clear():
    grid = Vector2D(2, 2, 1)
    grid.clear()
    assert grid.rows == 0 and grid.cols == 0
    assert len(grid) == 0
    with pytest.raises(IndexError):
        grid[0, 0]