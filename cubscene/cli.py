"""Command-line entry point: load and validate a scene file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubscene.checks import check_extension, check_file
from cubscene.errors import CubError, format_error
from cubscene.grid import validate_grid
from cubscene.model import TITLE, Scene
from cubscene.parser import parse_scene


def load_scene(argv: Sequence[str]) -> Scene:
    """Load the scene named by ``argv``, which holds the program name and one path."""
    if len(argv) != 2:
        program = argv[0] if argv else TITLE
        raise CubError(f"Use: {program} mapa.cub")
    path = argv[1]
    if not check_extension(path, ".cub"):
        raise CubError("Use um arquivo de extensão .cub")
    if not check_file(path):
        raise CubError("Não foi possivel acessar o arquivo do mapa")
    scene = parse_scene(path)
    validate_grid(scene.grid)
    return scene


def main(argv: Sequence[str] | None = None) -> int:
    """Run the loader and return the process exit status."""
    if argv is None:
        argv = sys.argv
    try:
        load_scene(argv)
    except CubError as exc:
        print(format_error(exc.message), end="")
        return 1
    print("Inicio do game")
    return 0


if __name__ == "__main__":
    sys.exit(main())