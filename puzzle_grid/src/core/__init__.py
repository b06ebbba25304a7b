"""Core grid data structures."""

from .point import Point
from .grid import Grid, GridTooSmallError

__all__ = ["Point", "Grid", "GridTooSmallError"]
