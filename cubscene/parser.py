"""Reading a scene description file into a :class:`Scene`."""

from __future__ import annotations

import re

from cubscene.checks import classify_map_line, fill_map_row, parse_param_line
from cubscene.errors import CubError
from cubscene.grid import allocate_grid
from cubscene.model import Scene
from cubscene.strtools import strtrim

_LINE = re.compile(r"[^\n]*\n|[^\n]+")
_LINE_CHARS = " \n"


def read_lines(path: str) -> list[str]:
    """The lines of the file at ``path``, each keeping its newline."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise CubError("Erro ao abrir o arquivo do mapa") from exc
    return _LINE.findall(text)


def trim(text: str | None, chars: str) -> str | None:
    """``text`` without leading and trailing ``chars``; ``None`` stays ``None``."""
    if text is None:
        return None
    return strtrim(text, chars)


def count_lines(path: str) -> int:
    """Number of lines in the file at ``path``."""
    return len(read_lines(path))


def parse_scene(path: str) -> Scene:
    """Read textures, colours and the map from ``path``.

    Parameter lines come first until all of them are known; blank lines may
    follow, then the map runs to the end of the file. Raises
    :class:`CubError` on any problem. The map walls are not validated here.
    """
    lines = read_lines(path)
    scene = Scene(path_file=path, height_file=len(lines))
    remaining = iter(enumerate(lines))

    for _, raw in remaining:
        if parse_param_line(scene, trim(raw, _LINE_CHARS)):
            break

    for start, raw in remaining:
        if classify_map_line(trim(raw, _LINE_CHARS)):
            break
    else:
        raise CubError("Mapa não encontrado")

    rows = [trim(raw, _LINE_CHARS) for raw in lines[start:]]
    scene.height = len(rows)
    scene.width = max(len(row) for row in rows)
    scene.grid = allocate_grid(scene.width, scene.height)
    for y, row in enumerate(rows):
        fill_map_row(scene, row, y)
    if scene.player is None:
        raise CubError("Posição e direção do player não encontrado no mapa")
    return scene