"""Error type and message formatting for scene loading."""

from __future__ import annotations


class CubError(Exception):
    """Raised when a scene description or its arguments are invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def format_error(message: str) -> str:
    """The text reported for an error: an ``Error`` header line, then the message."""
    if not message.endswith("\n"):
        message += "\n"
    return f"Error\n{message}"