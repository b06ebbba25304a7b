import os
import sys

import pytest

# Add project root to sys.path (so tests can import puzzle_grid.* and tools.*)
PROJECT_ROOT = os.path.abspath(os.path.dirname(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from puzzle_grid.src.core.grid import Grid  # noqa: E402


@pytest.fixture
def sample_grid():
    """5 rows by 4 columns of small integers."""
    grid = Grid()
    grid.add_row([0, 0, 1, 5])
    grid.add_row([1, 3, 1, 7])
    grid.add_row([8, 7, 1, 10])
    grid.add_row([99, 2, 1, 12])
    grid.add_row([9, 20, 61, 2])
    return grid
