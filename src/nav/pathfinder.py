# A* pathfinding over Grid
# src/nav/pathfinder.py
"""
A* pathfinding over Grid.

- Uses Manhattan distance heuristic (admissible + consistent on a
  4-connected unit-cost grid).
- 4-directional neighbors from Grid.neighbors.
- Per-node state keyed by the packed index row * size + col.

Two frontier strategies are available:
- "heap":   binary heap with lazy deletion, ordered by (f, h, sequence).
- "linear": insertion-ordered scan for the lowest f (first one wins).

Both return a shortest path. They may pick different paths of equal length.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .grid import Coord, Grid

log = logging.getLogger(__name__)

FRONTIERS = ("heap", "linear")


class InvalidEndpoints(ValueError):
    """Start or end is missing, out of bounds, or on a wall."""

    def __init__(self, reason: str, coord: Optional[Coord] = None) -> None:
        super().__init__(reason if coord is None else f"{reason}: {coord}")
        self.reason = reason
        self.coord = coord


@dataclass
class PathFound:
    """Successful search: path runs from start to end inclusive."""

    path: List[Coord]
    expanded: int = 0
    success: bool = field(default=True, init=False)

    @property
    def length(self) -> int:
        """Number of steps (cells minus one)."""
        return len(self.path) - 1


@dataclass
class NoPathFound:
    """Start and end are not connected through free cells."""

    expanded: int = 0
    success: bool = field(default=False, init=False)
    path: List[Coord] = field(default_factory=list, init=False)


@dataclass
class SearchNode:
    coord: Coord
    g_score: int
    f_score: int
    came_from: Optional[int] = None


def manhattan(a: Coord, b: Coord) -> int:
    """Manhattan distance heuristic for A*."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# ----------------------------------------------------------------------
# Frontiers
# ----------------------------------------------------------------------


class _HeapFrontier:
    """Heap of (f, h, seq, index); superseded entries are skipped on pop."""

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int, int]] = []
        self._best: Dict[int, int] = {}
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._best)

    def push(self, index: int, f_score: int, h_score: int) -> None:
        self._best[index] = f_score
        heapq.heappush(self._heap, (f_score, h_score, next(self._seq), index))

    def pop(self) -> int:
        while self._heap:
            f_score, _, _, index = heapq.heappop(self._heap)
            if self._best.get(index) == f_score:
                del self._best[index]
                return index
        raise IndexError("pop from empty frontier")


class _LinearFrontier:
    """Insertion-ordered open set; pop scans for the lowest f."""

    def __init__(self) -> None:
        self._open: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._open)

    def push(self, index: int, f_score: int, h_score: int) -> None:
        # Updating an existing entry keeps its original position.
        self._open[index] = f_score

    def pop(self) -> int:
        if not self._open:
            raise IndexError("pop from empty frontier")
        index = min(self._open, key=self._open.__getitem__)
        del self._open[index]
        return index


def _make_frontier(kind: str):
    if kind == "heap":
        return _HeapFrontier()
    if kind == "linear":
        return _LinearFrontier()
    raise ValueError(f"Unknown frontier {kind!r}; expected one of {FRONTIERS}")


# ----------------------------------------------------------------------
# Search
# ----------------------------------------------------------------------


def find_path(
    grid: Grid,
    start: Optional[Coord] = None,
    end: Optional[Coord] = None,
    *,
    frontier: str = "heap",
) -> PathFound | NoPathFound:
    """
    A* search for a path from start to end on grid.

    start / end default to grid.start / grid.end.

    Returns PathFound or NoPathFound. Raises InvalidEndpoints when an
    endpoint is missing, out of bounds or on a wall.

    This function does not mutate the grid or any shared state.
    """
    open_set = _make_frontier(frontier)
    start = grid.start if start is None else start
    end = grid.end if end is None else end
    _check_endpoint(grid, "start", start)
    _check_endpoint(grid, "end", end)

    log.debug("find_path %s -> %s on %dx%d grid (%s)", start, end, grid.size, grid.size, frontier)

    if start == end:
        return PathFound(path=[start])

    start_h = manhattan(start, end)
    start_idx = grid.index(start)
    end_idx = grid.index(end)

    nodes: Dict[int, SearchNode] = {
        start_idx: SearchNode(coord=start, g_score=0, f_score=start_h),
    }
    closed: Set[int] = set()
    open_set.push(start_idx, start_h, start_h)
    expanded = 0

    while len(open_set):
        current_idx = open_set.pop()
        current = nodes[current_idx]

        if current_idx == end_idx:
            path = _reconstruct_path(grid, nodes, current_idx)
            log.debug("Path found: %d steps, %d nodes expanded", len(path) - 1, expanded)
            return PathFound(path=path, expanded=expanded)

        closed.add(current_idx)
        expanded += 1

        for nxt in grid.neighbors(current.coord):
            nxt_idx = grid.index(nxt)
            if nxt_idx in closed:
                continue

            tentative_g = current.g_score + 1
            known = nodes.get(nxt_idx)
            if known is not None and tentative_g >= known.g_score:
                continue

            h = manhattan(nxt, end)
            nodes[nxt_idx] = SearchNode(
                coord=nxt,
                g_score=tentative_g,
                f_score=tentative_g + h,
                came_from=current_idx,
            )
            open_set.push(nxt_idx, tentative_g + h, h)

    log.debug("No path from %s to %s after expanding %d nodes", start, end, expanded)
    return NoPathFound(expanded=expanded)


def _check_endpoint(grid: Grid, label: str, coord: Optional[Coord]) -> None:
    if coord is None:
        raise InvalidEndpoints(f"{label} is not set")
    if not grid.in_bounds(coord):
        raise InvalidEndpoints(f"{label} is out of bounds", coord)
    if grid.is_wall(coord):
        raise InvalidEndpoints(f"{label} is on a wall", coord)


def _reconstruct_path(
    grid: Grid,
    nodes: Dict[int, SearchNode],
    current_idx: int,
) -> List[Coord]:
    """Follow came_from links back to the start, then reverse."""
    path: List[Coord] = []
    idx: Optional[int] = current_idx
    while idx is not None:
        node = nodes[idx]
        path.append(node.coord)
        idx = node.came_from
    path.reverse()
    return path
