"""Coordinate value type used to address grid cells."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    """Immutable ``(x, y)`` coordinate; ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Point coordinates must be non-negative, got ({self.x}, {self.y})")

    def __str__(self) -> str:
        return f"(x: {self.x}, y: {self.y})"


__all__ = ["Point"]
