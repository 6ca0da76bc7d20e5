"""Validation of file names, parameter lines and map rows."""

from __future__ import annotations

import os

from cubscene.color import INVALID_COLOR, rgb_to_int
from cubscene.errors import CubError
from cubscene.model import EMPTY, VOID, WALL, Direction, Scene, spawn_player

_TEXTURE_IDS = {
    "SO ": Direction.SOUTH,
    "WE ": Direction.WEST,
    "EA ": Direction.EAST,
    "NO ": Direction.NORTH,
}
_COLOR_IDS = {"F ": "floor", "C ": "ceiling"}
_PLAYER_CHARS = frozenset(d.value for d in Direction)


def check_extension(path: str, key: str) -> bool:
    """True when ``path`` ends with ``key`` and has something before it."""
    return len(path) > len(key) and path.endswith(key)


def check_file(path: str) -> bool:
    """True when ``path`` can be opened for reading."""
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError:
        return False
    try:
        os.close(fd)
    except OSError:
        return False
    return True


def _set_texture(scene: Scene, text: str, direction: Direction) -> None:
    path = text.strip(" ")
    if not check_extension(path, ".xpm"):
        raise CubError("Use uma textura de extensão .xpm")
    if not check_file(path):
        raise CubError("Não foi possivel acessar o arquivo da textura")
    scene.textures[direction] = path


def _set_color(scene: Scene, text: str, attr: str) -> None:
    color = rgb_to_int(text.strip(" "))
    if not color:
        raise CubError(INVALID_COLOR)
    setattr(scene, attr, color)


def parse_param_line(scene: Scene, line: str) -> bool:
    """Apply one texture or colour line to ``scene``.

    Returns True once the scene has every texture and colour. Blank lines are
    ignored; an unknown identifier or a bad value raises :class:`CubError`.
    """
    if not line or line[0] == "\n":
        return False
    texture = next((d for p, d in _TEXTURE_IDS.items() if line.startswith(p)), None)
    if texture is not None:
        _set_texture(scene, line[2:], texture)
    else:
        attr = next((a for p, a in _COLOR_IDS.items() if line.startswith(p)), None)
        if attr is None:
            raise CubError("Indentificador Desconhecido")
        _set_color(scene, line[1:], attr)
    return scene.is_complete()


def classify_map_line(line: str) -> bool:
    """True for a map row, False for a blank line; anything else raises :class:`CubError`."""
    trimmed = line.strip(" ")
    if not trimmed or trimmed[0] == "\n":
        return False
    if trimmed[0] == WALL:
        return True
    raise CubError("Caractere inválido ao ler o mapa")


def fill_map_row(scene: Scene, line: str, y: int) -> None:
    """Store map row ``y`` from ``line`` in ``scene.grid``.

    Spaces become void cells; a direction letter places the player and leaves
    an empty cell. A second player or any other character raises :class:`CubError`.
    """
    cells = []
    for x, ch in enumerate(line):
        if ch in _PLAYER_CHARS:
            if scene.player is not None:
                raise CubError(
                    "Só é permitido um indicador de posição (N,S,W,E) no mapa"
                )
            scene.player = spawn_player(ch, x, y)
            cells.append(EMPTY)
        elif ch in (WALL, EMPTY):
            cells.append(ch)
        elif ch == " ":
            cells.append(VOID)
        else:
            raise CubError("Caractere inválido no mapa")
    if y >= len(scene.grid):
        scene.grid.extend([""] * (y + 1 - len(scene.grid)))
    scene.grid[y] = "".join(cells)