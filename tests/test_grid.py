import pytest

from cubscene.errors import CubError
from cubscene.grid import allocate_grid, row_end, row_start, validate_grid


def test_allocate_grid_has_height_empty_rows():
    grid = allocate_grid(5, 3)
    assert len(grid) == 3
    assert all(row == "" for row in grid)


def test_allocate_grid_rejects_negative():
    with pytest.raises(ValueError):
        allocate_grid(-1, 2)


@pytest.mark.parametrize("row", ["VV11V1", "1", "0V1VV", "111"])
def test_row_start_is_first_wall(row):
    start = row_start(row)
    assert row[start] == "1"
    assert "1" not in row[:start]


@pytest.mark.parametrize("row", ["VV11V1", "1", "0V1VV", "1110"])
def test_row_end_is_last_wall(row):
    end = row_end(row)
    assert row[end] == "1"
    assert "1" not in row[end + 1:]


@pytest.mark.parametrize("row", ["", "VV0", "000"])
def test_row_without_walls(row):
    assert row_start(row) is None
    assert row_end(row) is None


def test_void_surrounded_by_walls_is_valid():
    grid = ["111", "1V1", "111"]
    assert validate_grid(grid) is grid


def test_top_border_with_gap():
    with pytest.raises(CubError, match="Borda superior inválida na linha 0"):
        validate_grid(["1V11", "1001", "1111"])


def test_top_border_without_walls():
    with pytest.raises(CubError, match="Borda superior"):
        validate_grid(["000", "101", "111"])


def test_bottom_border_with_gap():
    with pytest.raises(CubError, match="Borda inferior inválida na linha"):
        validate_grid(["1111", "1001", "1101"])


def test_empty_last_row_fails_bottom_border():
    with pytest.raises(CubError, match="Borda inferior"):
        validate_grid(["111", "101", ""])


def test_void_next_to_floor_on_the_left():
    with pytest.raises(CubError, match="Borda esquerda inválida do caractere"):
        validate_grid(["1111", "10V1", "1111"])


def test_void_next_to_floor_on_the_right():
    with pytest.raises(CubError, match="Borda direita inválida do caractere"):
        validate_grid(["1111", "1V01", "1111"])


def test_void_above_floor():
    with pytest.raises(CubError, match="Borda inferior inválida do caractere"):
        validate_grid(["11111", "1V111", "10001", "11111"])


def test_void_below_short_row():
    with pytest.raises(CubError, match="Borda superior inválida do caractere"):
        validate_grid(["111", "11", "11V1", "1111"])


def test_empty_grid_is_rejected():
    with pytest.raises(CubError, match="Mapa não encontrado"):
        validate_grid([])