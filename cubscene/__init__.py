"""Parse and validate .cub raycaster scene files, with small string and buffer helpers."""

__version__ = "0.1.0"