"""Points and rotations as used in EAGLE coordinates."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Point", "Rotation"]


@dataclass(frozen=True)
class Point:
    """A 2D coordinate."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rotation:
    """An EAGLE rotation such as ``R90``, ``MR180`` or ``SR45``."""

    spin: bool = False
    mirror: bool = False
    angle: float = 0.0

    @classmethod
    def parse(cls, text: str) -> Rotation:
        """Parse a rotation string; an unreadable angle becomes 0."""
        number = text.replace("M", "").replace("S", "").replace("R", "")
        angle = 0.0
        if "_" not in number:
            try:
                angle = float(number)
            except ValueError:
                angle = 0.0
        return cls(spin="S" in text, mirror="M" in text, angle=angle)