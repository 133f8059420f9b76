# src/cli/find_path.py
"""
Command-line front end for the navigation core.

Reads a text layout (or builds an empty grid), runs find_path and prints
the outcome as JSON, or as a coloured grid with --render.

Exit codes:
- 0: path found
- 1: no path between start and end
- 2: bad input (layout, endpoints, config)
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from app.logging_config import configure_logging
from env.loader import load_nav_config
from nav import (
    FRONTIERS,
    Coord,
    Grid,
    NoPathFound,
    PathFound,
    find_path,
    load_layout,
)

# Cell colours: start green, end red, wall black, path yellow.
_STYLES = {
    "start": "bold white on green",
    "end": "bold white on red",
    "wall": "on black",
    "path": "black on yellow",
    "free": "on grey85",
}


def _parse_coord(value: str) -> Coord:
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {value!r}")
    return row, col


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridnav-find-path",
        description="Find a shortest path between S and E on a grid layout (A*).",
    )
    parser.add_argument("layout", nargs="?", type=Path, help="Layout file (. free, # wall, S start, E end)")
    parser.add_argument("--size", type=int, help="Empty grid size when no layout is given")
    parser.add_argument("--start", type=_parse_coord, help="Override start as ROW,COL")
    parser.add_argument("--end", type=_parse_coord, help="Override end as ROW,COL")
    parser.add_argument("--frontier", choices=FRONTIERS, help="Frontier strategy (default from config)")
    parser.add_argument("--config", type=Path, help="Path to nav.yaml")
    parser.add_argument("--render", action="store_true", help="Print a coloured grid instead of JSON")
    parser.add_argument("--log-level", help="Override logging level")
    return parser


def _result_to_dict(result: PathFound | NoPathFound) -> Dict[str, Any]:
    return {
        "status": "path_found" if result.success else "no_path",
        "path": [list(cell) for cell in result.path],
        "length": result.length if isinstance(result, PathFound) else None,
        "expanded": result.expanded,
    }


def render_grid(grid: Grid, path: List[Coord]) -> Text:
    """Two-character coloured cells, one line per row."""
    on_path = set(path)
    text = Text()
    for r in range(grid.size):
        for c in range(grid.size):
            cell = (r, c)
            if cell == grid.start:
                kind = "start"
            elif cell == grid.end:
                kind = "end"
            elif grid.walls[r][c]:
                kind = "wall"
            elif cell in on_path:
                kind = "path"
            else:
                kind = "free"
            text.append("  ", style=_STYLES[kind])
        text.append("\n")
    return text


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    err = Console(stderr=True)

    try:
        config = load_nav_config(args.config)
    except (OSError, ValueError) as exc:
        err.print(f"[red]Config error:[/red] {escape(str(exc))}")
        return 2

    try:
        configure_logging(args.log_level or config.log_level, stream=sys.stderr)
        if args.layout is not None and args.size is not None:
            raise ValueError("--size cannot be combined with a layout file")
        if args.layout is not None:
            grid = load_layout(args.layout)
        else:
            grid = Grid.empty(args.size if args.size is not None else config.grid_size)
        if args.start is not None or args.end is not None:
            grid = grid.with_endpoints(
                start=args.start if args.start is not None else grid.start,
                end=args.end if args.end is not None else grid.end,
            )
        result = find_path(grid, frontier=args.frontier or config.frontier)
    except (OSError, ValueError) as exc:
        # bad layout, endpoints or size
        err.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 2

    if args.render:
        console = Console()
        console.print(render_grid(grid, result.path), end="")
        if isinstance(result, PathFound):
            console.print(f"Path found: {result.length} steps, {result.expanded} nodes expanded")
        else:
            console.print(f"[yellow]No path found[/yellow] ({result.expanded} nodes expanded)")
    else:
        print(json.dumps(_result_to_dict(result), indent=2))

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
