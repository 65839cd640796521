"""Board coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coord:
    """A cell on the board; x grows to the right, y grows downwards."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"Coord(x={self.x}, y={self.y})"