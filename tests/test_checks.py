import re

import pytest

from cubscene.checks import (
    check_extension,
    check_file,
    classify_map_line,
    fill_map_row,
    parse_param_line,
)
from cubscene.errors import CubError
from cubscene.model import Direction, Scene, spawn_player


@pytest.fixture
def textures(tmp_path):
    paths = {}
    for name in ("north", "south", "east", "west"):
        path = tmp_path / f"{name}.xpm"
        path.write_text("x")
        paths[name] = str(path)
    return paths


def test_check_extension_accepts_suffix():
    assert check_extension("maps/level.cub", ".cub")


@pytest.mark.parametrize("path", [".cub", "level.cubx", "level.xpm", "cub"])
def test_check_extension_rejects(path):
    assert not check_extension(path, ".cub")


def test_check_file(tmp_path):
    existing = tmp_path / "a.cub"
    existing.write_text("")
    assert check_file(str(existing))
    assert not check_file(str(tmp_path / "missing.cub"))


def test_parse_param_lines_until_complete(textures):
    scene = Scene()
    assert not parse_param_line(scene, f"NO {textures['north']}")
    assert not parse_param_line(scene, f"SO   {textures['south']}  ")
    assert not parse_param_line(scene, "")
    assert not parse_param_line(scene, f"WE {textures['west']}")
    assert not parse_param_line(scene, f"EA {textures['east']}")
    assert not parse_param_line(scene, "F 220,100,0")
    assert parse_param_line(scene, "C 225,30,0")
    assert scene.textures[Direction.SOUTH] == textures["south"]
    assert scene.floor == scene.floor & 0xFFFFFF
    assert (scene.ceiling >> 16) & 0xFF == 225


def test_parse_param_line_unknown_identifier():
    with pytest.raises(CubError, match="Indentificador Desconhecido"):
        parse_param_line(Scene(), "XX something")


def test_identifier_needs_trailing_space(textures):
    with pytest.raises(CubError, match="Indentificador Desconhecido"):
        parse_param_line(Scene(), f"NO{textures['north']}")


def test_texture_needs_xpm_extension(tmp_path):
    path = tmp_path / "north.png"
    path.write_text("x")
    with pytest.raises(CubError, match="extensão .xpm"):
        parse_param_line(Scene(), f"NO {path}")


def test_texture_must_exist(tmp_path):
    with pytest.raises(CubError, match="arquivo da textura"):
        parse_param_line(Scene(), f"EA {tmp_path / 'missing.xpm'}")


def test_black_color_is_rejected():
    scene = Scene()
    with pytest.raises(CubError, match="Código da Cor Inválido"):
        parse_param_line(scene, "F 0,0,0")
    assert scene.floor is None


def test_classify_map_line():
    assert classify_map_line("111 111")
    assert classify_map_line("   1001")
    assert not classify_map_line("")
    assert not classify_map_line("    ")


def test_classify_map_line_rejects_other_start():
    with pytest.raises(CubError, match="Caractere inválido ao ler o mapa"):
        classify_map_line("0111")


def test_fill_map_row_places_player():
    scene = Scene()
    fill_map_row(scene, "1N 1", 0)
    assert scene.grid == ["10V1"]
    assert scene.player == spawn_player("N", 1, 0)


def test_fill_map_row_extends_grid():
    scene = Scene()
    fill_map_row(scene, "111", 2)
    assert len(scene.grid) == 3
    assert scene.grid[2] == "111"


def test_fill_map_row_second_player_raises():
    scene = Scene()
    fill_map_row(scene, "1E1", 0)
    with pytest.raises(CubError, match=re.escape("(N,S,W,E)")):
        fill_map_row(scene, "1W1", 1)


def test_fill_map_row_invalid_character():
    with pytest.raises(CubError, match="Caractere inválido no mapa"):
        fill_map_row(Scene(), "1X1", 0)