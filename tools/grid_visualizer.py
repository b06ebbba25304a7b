"""Command line grid inspection.

Loads a text grid (one row per line, one cell per character) and prints its
rendering. The CLI entry point can be invoked as::

    python grid_visualizer.py <grid_file> [--digits] [--inner] [--edges] [--plot out.png]

``--plot`` renders a numeric grid with matplotlib and saves the image.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from puzzle_grid.src.core.grid import Grid  # noqa: E402
from puzzle_grid.src.utils.grid_utils import grid_to_array, load_grid  # noqa: E402
from puzzle_grid.src.utils.logger import get_logger  # noqa: E402

logger = get_logger("grid_visualizer")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def count_edge_nodes(grid: Grid[Any]) -> int:
    return sum(1 for p in grid.points() if grid.is_edge_node(p))


def plot_grid(grid: Grid[Any], out_file: str, title: str = "grid") -> Path:
    """Save an image of the numeric ``grid`` to ``out_file``."""
    fig, ax = plt.subplots(figsize=(max(grid.columns, 1) * 0.4 + 1, max(grid.rows, 1) * 0.4 + 1))
    ax.imshow(grid_to_array(grid), cmap="tab20", interpolation="none")
    ax.set_title(title)
    ax.axis("off")
    fig.tight_layout()

    out = Path(out_file)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out)
    plt.close(fig)
    logger.info("saved grid image to %s", out)
    return out


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render a text grid file")
    parser.add_argument("grid_file")
    parser.add_argument("--digits", action="store_true", help="parse cells as integers")
    parser.add_argument("--inner", action="store_true", help="strip the outer border first")
    parser.add_argument("--edges", action="store_true", help="report the number of edge nodes")
    parser.add_argument("--plot", help="save a PNG/PDF image of a numeric grid")
    args = parser.parse_args(argv)
    if args.plot and not args.digits:
        parser.error("--plot requires --digits")

    try:
        grid = load_grid(args.grid_file, parse=int if args.digits else None)
        if args.inner:
            grid = grid.get_inner_grid()
    except (OSError, ValueError) as exc:
        logger.error("could not load %s: %s", args.grid_file, exc)
        return 1

    sys.stdout.write(str(grid))
    if args.edges:
        print(f"edge nodes: {count_edge_nodes(grid)}")
    if args.plot:
        plot_grid(grid, args.plot, title=Path(args.grid_file).name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
