# immutable obstacle grid + neighbor queries
# src/nav/grid.py
"""
Grid: immutable snapshot of a square obstacle field.

This module does not search. It only:
- Holds wall flags and the two endpoints (start, end).
- Exposes bounds / wall / neighbor queries for the pathfinder.
- Produces new snapshots for edits (set endpoints, toggle wall, reset).

Editing state (current tool, click handling) belongs to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

# (row, col) integer coordinates
Coord = Tuple[int, int]

# Default side length for new grids.
GRID_SIZE = 20

# Fixed neighbor order: up, down, left, right.
_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Sentinel so with_endpoints() can tell "not given" from "clear it".
_KEEP = object()


@dataclass(frozen=True)
class Grid:
    """
    Square grid of wall flags with optional start / end cells.

    Invariants (checked on construction):
    - walls is exactly size rows of size flags.
    - start / end, when set, are in bounds and not walls.
    """

    size: int
    walls: Tuple[Tuple[bool, ...], ...]
    start: Optional[Coord] = None
    end: Optional[Coord] = None

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Grid size must be positive, got {self.size}")
        if len(self.walls) != self.size or any(len(row) != self.size for row in self.walls):
            raise ValueError(f"Wall matrix must be {self.size}x{self.size}")
        # Copy into nested tuples so callers can't mutate a snapshot through
        # the lists they passed in.
        object.__setattr__(
            self,
            "walls",
            tuple(tuple(bool(flag) for flag in row) for row in self.walls),
        )
        for label, coord in (("start", self.start), ("end", self.end)):
            if coord is None:
                continue
            if not self.in_bounds(coord):
                raise ValueError(f"{label} {coord} is outside a {self.size}x{self.size} grid")
            if self.is_wall(coord):
                raise ValueError(f"{label} {coord} is on a wall")

    # ------------------------------------------------------------------
    # Snapshot constructors
    # ------------------------------------------------------------------

    @classmethod
    def empty(
        cls,
        size: int = GRID_SIZE,
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
    ) -> "Grid":
        """Grid with no walls."""
        row = (False,) * size
        return cls(size=size, walls=(row,) * size, start=start, end=end)

    @classmethod
    def from_walls(
        cls,
        size: int,
        walls: Iterable[Coord],
        start: Optional[Coord] = None,
        end: Optional[Coord] = None,
    ) -> "Grid":
        """
        Build a grid from a collection of wall coordinates.

        Coordinates outside the grid raise ValueError.
        """
        wall_set = set(walls)
        for coord in wall_set:
            r, c = coord
            if not (0 <= r < size and 0 <= c < size):
                raise ValueError(f"Wall {coord} is outside a {size}x{size} grid")
        flags = tuple(
            tuple((r, c) in wall_set for c in range(size))
            for r in range(size)
        )
        return cls(size=size, walls=flags, start=start, end=end)

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.size and 0 <= c < self.size

    def is_wall(self, coord: Coord) -> bool:
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside a {self.size}x{self.size} grid")
        r, c = coord
        return self.walls[r][c]

    def neighbors(self, coord: Coord) -> List[Coord]:
        """
        Return the in-bounds, non-wall orthogonal neighbors of coord.

        Order is always up, down, left, right so searches are reproducible.
        """
        r, c = coord
        out: List[Coord] = []
        for dr, dc in _OFFSETS:
            n = (r + dr, c + dc)
            if self.in_bounds(n) and not self.walls[n[0]][n[1]]:
                out.append(n)
        return out

    def index(self, coord: Coord) -> int:
        """Packed integer key for coord: row * size + col."""
        r, c = coord
        return r * self.size + c

    def coord_of(self, index: int) -> Coord:
        return divmod(index, self.size)

    def free_cells(self) -> int:
        return sum(1 for row in self.walls for flag in row if not flag)

    # ------------------------------------------------------------------
    # Snapshot edits (each returns a new Grid)
    # ------------------------------------------------------------------

    def with_endpoints(self, start=_KEEP, end=_KEEP) -> "Grid":
        """
        Move start and/or end. Pass None to clear an endpoint.

        Only one start and one end exist, so setting one replaces the old one.
        """
        return replace(
            self,
            start=self.start if start is _KEEP else start,
            end=self.end if end is _KEEP else end,
        )

    def toggled_wall(self, coord: Coord) -> "Grid":
        """Flip the wall flag at coord. Endpoints cannot become walls."""
        if not self.in_bounds(coord):
            raise ValueError(f"{coord} is outside a {self.size}x{self.size} grid")
        if coord in (self.start, self.end):
            raise ValueError(f"Cannot place a wall on endpoint {coord}")
        r, c = coord
        row = list(self.walls[r])
        row[c] = not row[c]
        walls = self.walls[:r] + (tuple(row),) + self.walls[r + 1:]
        return replace(self, walls=walls)

    def cleared(self) -> "Grid":
        """Reset: same size, no walls, no endpoints."""
        return Grid.empty(self.size)


def neighbors(grid: Grid, coord: Coord) -> List[Coord]:
    """Function form of Grid.neighbors for callers that prefer it."""
    return grid.neighbors(coord)
