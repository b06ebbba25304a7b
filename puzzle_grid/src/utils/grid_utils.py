"""Grid loading, conversion and validation helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Tuple

import numpy as np

from puzzle_grid.src.core.grid import Grid

logger = logging.getLogger(__name__)


def validate_grid(grid: Any, expected_shape: Tuple[int, int] | None = None) -> bool:
    """Return ``True`` if ``grid`` is well formed and matches ``expected_shape``."""

    if not isinstance(grid, Grid):
        return False

    shape = grid.shape()
    if expected_shape and shape != expected_shape:
        return False

    h, w = shape
    if h == 0 or w == 0:
        return False

    return len(grid.elements) == h * w


def grid_from_lines(
    lines: Iterable[str], parse: Optional[Callable[[str], Any]] = None
) -> Grid[Any]:
    """Return a grid with one row per non-blank line and one cell per character.

    ``parse`` is applied to every character, e.g. ``int`` for digit grids.
    """
    grid: Grid[Any] = Grid()
    for lineno, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        row = [parse(ch) if parse else ch for ch in line]
        if not grid.add_row(row):
            raise ValueError(
                f"Line {lineno} has {len(row)} cells, expected {grid.columns}"
            )
    return grid


def load_grid(path: str | Path, parse: Optional[Callable[[str], Any]] = None) -> Grid[Any]:
    """Read ``path`` and return its contents as a grid."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    grid = grid_from_lines(text.splitlines(), parse)
    logger.debug("Loaded %s grid from %s", grid.shape(), path)
    return grid


def grid_to_array(grid: Grid[Any]) -> np.ndarray:
    """Return ``grid`` as a ``(rows, columns)`` numpy array."""
    return np.array(grid.elements).reshape(grid.rows, grid.columns)


def grid_from_array(arr: np.ndarray) -> Grid[Any]:
    """Return a grid holding the values of the 2-D array ``arr``."""
    arr = np.asarray(arr)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got {arr.ndim} dimension(s)")
    return Grid.from_rows(arr.tolist())


__all__ = [
    "validate_grid",
    "grid_from_lines",
    "load_grid",
    "grid_to_array",
    "grid_from_array",
]
