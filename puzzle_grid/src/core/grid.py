"""Row-major grid container shared by the puzzle solvers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .point import Point
from ..utils import config_loader

logger = logging.getLogger(__name__)

# Elements must support value copying and ``str()`` for rendering.
T = TypeVar("T")


class GridTooSmallError(ValueError):
    """Raised when an operation needs more rows or columns than the grid has."""


@dataclass(eq=False)
class Grid(Generic[T]):
    """2-dimensional, row-major grid with a fixed column count.

    Rows are appended with :meth:`add_row`. The column count is taken from the
    first row added unless it was set beforehand with
    :meth:`with_column_size`; afterwards it never changes.
    """

    elements: List[T] = field(default_factory=list)
    columns: int = 0
    rows: int = 0
    _pending: List[T] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.columns < 0 or self.rows < 0:
            raise ValueError("Column and row counts must be non-negative")
        if len(self.elements) != self.columns * self.rows:
            raise ValueError(
                f"{len(self.elements)} elements do not fill {self.rows} rows of {self.columns} columns"
            )
        if self.rows and not self.columns:
            raise ValueError("Rows need a non-zero column count")
        self.elements = list(self.elements)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> "Grid[T]":
        """Return a grid built from ``rows``; raise ``ValueError`` on ragged input."""
        grid: Grid[T] = cls()
        for idx, row in enumerate(rows):
            if not grid.add_row(list(row)):
                raise ValueError(f"Row {idx} does not match column count {grid.columns}")
        return grid

    def with_column_size(self, columns: int) -> "Grid[T]":
        """Fix the column count up front; ignored once a width is known."""
        if columns < 0:
            raise ValueError(f"Column size must be non-negative, got {columns}")
        if self.columns == 0:
            self.columns = columns
        return self

    # Mutation -------------------------------------------------------------

    def add_row(self, row: List[T]) -> bool:
        """Append ``row`` and return ``True``, or reject it and return ``False``.

        A row is rejected when it is empty, when its length differs from the
        column count or while a row started with :meth:`push_element` is still
        incomplete. Rejected rows leave the grid untouched.
        """
        if self._pending:
            logger.warning(
                "Cannot add row while %d pushed element(s) are pending", len(self._pending)
            )
            return False

        row_len = len(row)
        if row_len == 0:
            logger.warning("Cannot add an empty row")
            return False

        if self.columns == 0:
            self.columns = row_len
        elif row_len != self.columns:
            logger.warning(
                "Row length %d does not equal column length %d of grid", row_len, self.columns
            )
            return False

        self.elements.extend(row)
        self.rows += 1
        return True

    def push_element(self, value: T) -> bool:
        """Append a single element, committing a row once it is full."""
        if self.columns == 0:
            logger.warning("Column size must be known before pushing single elements")
            return False

        self._pending.append(value)
        if len(self._pending) == self.columns:
            self.elements.extend(self._pending)
            self._pending = []
            self.rows += 1
        return True

    def set_element(self, point: Point, value: T) -> bool:
        index = self.point_to_index(point)
        if index is None:
            return False
        self.elements[index] = value
        return True

    # Accessors ------------------------------------------------------------

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (rows, columns)."""
        return self.rows, self.columns

    def get_row(self, row: int) -> Optional[List[T]]:
        if row < 0 or row >= self.rows:
            return None
        start = self.columns * row
        return self.elements[start : start + self.columns]

    def get_column(self, column: int) -> Optional[List[T]]:
        if column < 0 or column >= self.columns:
            return None
        return self.elements[column :: self.columns]

    def get_inner_grid(self) -> "Grid[T]":
        """Return a new grid without the first and last rows and columns."""
        if self.rows < 3 or self.columns < 3:
            raise GridTooSmallError(
                f"Inner grid needs at least 3 rows and 3 columns, grid is {self.rows}x{self.columns}"
            )

        inner: Grid[T] = Grid()
        for r in range(1, self.rows - 1):
            start = r * self.columns
            inner.add_row(self.elements[start + 1 : start + self.columns - 1])
        return inner

    def index_to_point(self, index: int) -> Optional[Point]:
        """Convert a flat element index to an ``(x, y)`` point.

        With ``strict_index_bounds`` disabled in the config, an index equal to
        the number of elements is still accepted.
        """
        if self.columns == 0 or index < 0:
            return None
        limit = len(self.elements)
        if not config_loader.STRICT_INDEX_BOUNDS:
            limit += 1
        if index >= limit:
            return None
        return Point(index % self.columns, index // self.columns)

    def point_to_index(self, point: Point) -> Optional[int]:
        if point.x >= self.columns or point.y >= self.rows:
            return None
        return self.columns * point.y + point.x

    def get_element(self, point: Point) -> Optional[T]:
        index = self.point_to_index(point)
        if index is None:
            return None
        return self.elements[index]

    def points(self) -> Iterator[Point]:
        """Yield every point of the grid in row-major order."""
        for y in range(self.rows):
            for x in range(self.columns):
                yield Point(x, y)

    def get_adjacent_points(self, point: Point) -> List[Point]:
        """Return in-bounds neighbours left, up, down and right of ``point``.

        Diagonal neighbours are not included.
        """
        if point.x >= self.columns or point.y >= self.rows:
            return []

        adjacent: List[Point] = []
        for dx, dy in ((-1, 0), (0, -1), (0, 1), (1, 0)):
            x = point.x + dx
            y = point.y + dy
            if x < 0 or y < 0:
                continue
            if x < self.columns and y < self.rows:
                adjacent.append(Point(x, y))
        return adjacent

    def is_edge_node(self, point: Point) -> bool:
        """Return ``True`` if ``point`` lies on the first/last row or column."""
        if self.rows == 0 or self.columns == 0:
            raise GridTooSmallError("Edge nodes are undefined on an empty grid")
        return point.x in (0, self.columns - 1) or point.y in (0, self.rows - 1)

    def to_list(self) -> List[List[T]]:
        """Return the grid as a list of row lists."""
        return [self.elements[r * self.columns : (r + 1) * self.columns] for r in range(self.rows)]

    # Dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.elements == other.elements

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join("".join(str(e) for e in row) + "\n" for row in self.to_list())

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"


__all__ = ["Grid", "GridTooSmallError"]
