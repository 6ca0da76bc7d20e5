"""Allocation and wall validation of the map grid."""

from __future__ import annotations

from cubscene.errors import CubError
from cubscene.model import VOID, WALL

_NEIGHBOURS = (
    (-1, 0, "superior"),
    (1, 0, "inferior"),
    (0, 1, "direita"),
    (0, -1, "esquerda"),
)


def allocate_grid(width: int, height: int) -> list[str]:
    """An empty grid of ``height`` rows, each of which may hold up to ``width`` cells."""
    if width < 0 or height < 0:
        raise ValueError("grid dimensions must not be negative")
    return [""] * height


def row_start(row: str) -> int | None:
    """Index of the first wall in ``row``, or ``None`` when it has none."""
    index = row.find(WALL)
    return None if index < 0 else index


def row_end(row: str) -> int | None:
    """Index of the last wall in ``row``, or ``None`` when it has none."""
    index = row.rfind(WALL)
    return None if index < 0 else index


def _cell(grid: list[str], y: int, x: int) -> str:
    if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
        return grid[y][x]
    return ""


def _check_border_row(grid: list[str], y: int, which: str) -> None:
    row = grid[y]
    message = f"Borda {which} inválida na linha {y}"
    start, end = row_start(row), row_end(row)
    if start is None or end is None:
        raise CubError(message)
    if any(ch != WALL for ch in row[start:end + 1]):
        raise CubError(message)


def _check_void(grid: list[str], y: int, x: int) -> None:
    last = len(grid) - 1
    for dy, dx, side in _NEIGHBOURS:
        ny = y + dy
        if dy and not 0 <= ny <= last:
            continue
        if _cell(grid, ny, x + dx) not in (VOID, WALL):
            raise CubError(
                f"Borda {side} inválida do caractere {x} da linha {y}"
            )


def validate_grid(grid: list[str]) -> list[str]:
    """Check that the map is closed by walls and return it unchanged.

    The first and last rows must be walls from their first to their last
    wall cell, and every void cell may only touch void cells or walls.
    Raises :class:`CubError` on the first problem found.
    """
    if not grid:
        raise CubError("Mapa não encontrado")
    _check_border_row(grid, 0, "superior")
    _check_border_row(grid, len(grid) - 1, "inferior")
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            if ch == VOID:
                _check_void(grid, y, x)
    return grid