"""Parsing of ``R,G,B`` colour codes."""

from __future__ import annotations

import re

from cubscene.errors import CubError

INVALID_COLOR = "Código da Cor Inválido"

_ALLOWED = frozenset("0123456789 ,")
_NUMBER = re.compile(r"[0-9]+")


def check_color_code(text: str) -> bool:
    """True when ``text`` holds only digits, spaces and commas, with exactly two commas."""
    return all(ch in _ALLOWED for ch in text) and text.count(",") == 2


def rgb_to_int(text: str) -> int:
    """Pack an ``R,G,B`` code into ``0xRRGGBB``.

    Missing components count as 0; a component above 255 or a malformed code
    raises :class:`CubError`.
    """
    if not check_color_code(text):
        raise CubError(INVALID_COLOR)
    components = [int(run) for run in _NUMBER.findall(text)[:3]]
    components += [0] * (3 - len(components))
    if any(value > 255 for value in components):
        raise CubError(INVALID_COLOR)
    red, green, blue = components
    return red << 16 | green << 8 | blue