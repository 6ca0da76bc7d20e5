"""Data model of a scene: directions, the player and the parsed scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

WIDTH = 800
HEIGHT = 640
TITLE = "cub3D"
TEX_WIDTH = 64
TEX_HEIGHT = 64

WALL = "1"
EMPTY = "0"
VOID = "V"

PLANE_LENGTH = 0.66


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESCAPE = 65307
    W = 119
    S = 115
    A = 97
    D = 100
    LEFT = 65361
    RIGHT = 65363


class Direction(Enum):
    """The direction a player starts facing, keyed by its map letter."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    def vectors(self) -> tuple[float, float, float, float]:
        """``(dir_x, dir_y, plane_x, plane_y)`` for this facing."""
        return _VECTORS[self]


_VECTORS = {
    Direction.NORTH: (0.0, -1.0, -PLANE_LENGTH, 0.0),
    Direction.SOUTH: (0.0, 1.0, PLANE_LENGTH, 0.0),
    Direction.EAST: (1.0, 0.0, 0.0, -PLANE_LENGTH),
    Direction.WEST: (-1.0, 0.0, 0.0, PLANE_LENGTH),
}


@dataclass
class Player:
    """Position, facing and camera plane of the player."""

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    move_speed: float = 0.0
    rot_speed: float = 0.0


def spawn_player(direction: Direction | str, x: int, y: int) -> Player:
    """A player standing in the middle of cell ``(x, y)`` facing ``direction``."""
    dir_x, dir_y, plane_x, plane_y = Direction(direction).vectors()
    return Player(
        pos_x=x + 0.5,
        pos_y=y + 0.5,
        dir_x=dir_x,
        dir_y=dir_y,
        plane_x=plane_x,
        plane_y=plane_y,
    )


@dataclass
class Scene:
    """Everything read from a scene description file."""

    path_file: str | None = None
    textures: dict[Direction, str] = field(default_factory=dict)
    floor: int | None = None
    ceiling: int | None = None
    width: int = 0
    height: int = 0
    height_file: int = 0
    grid: list[str] = field(default_factory=list)
    player: Player | None = None

    def is_complete(self) -> bool:
        """True once all four textures and both colours are known."""
        return (
            len(self.textures) == len(Direction)
            and self.floor is not None
            and self.ceiling is not None
        )