# text layouts <-> Grid snapshots
# src/nav/layout.py
"""
Plain-text grid layouts.

    S..#.
    .#.#.
    .#...
    .#.#E
    ...#.

Legend:
- "." free cell
- "#" wall
- "S" start
- "E" end
- "*" path cell (render only)

Blank lines and surrounding whitespace are ignored when parsing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .grid import Coord, Grid

FREE = "."
WALL = "#"
START = "S"
END = "E"
PATH = "*"


class LayoutError(ValueError):
    """Malformed text layout."""


def parse_layout(text: str) -> Grid:
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise LayoutError("Layout is empty")

    size = len(rows)
    start: Optional[Coord] = None
    end: Optional[Coord] = None
    walls: List[Coord] = []

    for r, line in enumerate(rows):
        if len(line) != size:
            raise LayoutError(
                f"Layout must be square: row {r} has {len(line)} cells, expected {size}"
            )
        for c, ch in enumerate(line):
            if ch == WALL:
                walls.append((r, c))
            elif ch == START:
                if start is not None:
                    raise LayoutError(f"Second start at {(r, c)}; first at {start}")
                start = (r, c)
            elif ch == END:
                if end is not None:
                    raise LayoutError(f"Second end at {(r, c)}; first at {end}")
                end = (r, c)
            elif ch != FREE:
                raise LayoutError(f"Unknown cell {ch!r} at {(r, c)}")

    return Grid.from_walls(size, walls, start=start, end=end)


def load_layout(path: Path) -> Grid:
    """Read a UTF-8 layout file and parse it."""
    with Path(path).open("r", encoding="utf-8") as f:
        return parse_layout(f.read())


def render_layout(grid: Grid, path: Optional[Iterable[Coord]] = None) -> str:
    """Inverse of parse_layout; path cells other than endpoints become '*'."""
    on_path = set(path or ())
    lines: List[str] = []
    for r in range(grid.size):
        line: List[str] = []
        for c in range(grid.size):
            cell = (r, c)
            if cell == grid.start:
                line.append(START)
            elif cell == grid.end:
                line.append(END)
            elif grid.walls[r][c]:
                line.append(WALL)
            elif cell in on_path:
                line.append(PATH)
            else:
                line.append(FREE)
        lines.append("".join(line))
    return "\n".join(lines)
