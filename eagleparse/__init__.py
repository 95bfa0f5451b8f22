"""Read EAGLE library, board and schematic XML files into frozen dataclasses."""

__version__ = "0.1.0"

__all__ = [
    "board",
    "deviceset",
    "dom",
    "enums",
    "geometry",
    "library",
    "package",
    "schematic",
    "shapes",
    "symbol",
]