"""A* search over a :class:`TileGrid`.

One :class:`AStarSearch` instance handles exactly one request. It owns the
grid, open set and closed set for the duration of :meth:`AStarSearch.run`
and releases the transient buffers on every exit path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from ..core.errors import RetraceError
from ..core.grid import TileGrid
from ..core.heap import IndexedMinHeap
from .neighbors import heuristic, neighbors, step_cost


logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRACE_STEPS = 10000


class SearchStatus(Enum):
    SUCCEEDED = "succeeded"
    UNREACHABLE = "unreachable"
    INVALID_INPUT = "invalid_input"
    INTERNAL_ERROR = "internal_error"


class EngineState(Enum):
    INITIALIZED = "initialized"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SearchResult:
    """Outcome of one search.

    ``path`` holds tile indices in target-to-start order, excluding the
    start tile. It is empty for every non-success status and for the
    trivial start == target case.
    """

    status: SearchStatus
    path: List[int] = field(default_factory=list)
    cost: Optional[int] = None
    nodes_expanded: int = 0

    @property
    def success(self) -> bool:
        return self.status is SearchStatus.SUCCEEDED


def retrace(grid: TileGrid, start: int, target: int, max_steps: int) -> List[int]:
    """Follow parent links from ``target`` back to ``start``.

    Raises :class:`RetraceError` if the chain is broken or longer than
    ``max_steps``.
    """

    path: List[int] = []
    current = grid.tiles[target]
    steps = 0
    while current.index != start:
        if steps >= max_steps:
            raise RetraceError(
                f"retrace from {target} did not reach {start} within {max_steps} steps",
                steps,
            )
        if current.parent_index is None:
            raise RetraceError(f"tile {current.index} has no parent link", steps)
        path.append(current.index)
        current = grid.tiles[current.parent_index]
        steps += 1
    return path


class AStarSearch:
    """Single-shot A* request over ``grid`` from ``start`` to ``target``."""

    def __init__(
        self,
        grid: TileGrid,
        start: int,
        target: int,
        allow_diagonals: bool = True,
        max_retrace_steps: Optional[int] = DEFAULT_MAX_RETRACE_STEPS,
    ) -> None:
        self.grid = grid
        self.start = start
        self.target = target
        self.allow_diagonals = allow_diagonals
        self.max_retrace_steps = grid.size if max_retrace_steps is None else max_retrace_steps
        self.state = EngineState.INITIALIZED
        self.nodes_expanded = 0

    def _fail(self, status: SearchStatus) -> SearchResult:
        self.state = EngineState.FAILED
        return SearchResult(status, nodes_expanded=self.nodes_expanded)

    def run(self) -> SearchResult:
        if self.state is not EngineState.INITIALIZED:
            raise RuntimeError("AStarSearch instances are single-use")

        grid = self.grid
        start, target = self.start, self.target
        if not grid.contains_index(start) or not grid.contains_index(target):
            logger.error(
                "[AStar] Start %s or target %s outside grid of %s tiles",
                start,
                target,
                grid.size,
            )
            return self._fail(SearchStatus.INVALID_INPUT)

        tiles = grid.tiles
        if not tiles[start].is_walkable or not tiles[target].is_walkable:
            logger.info("[AStar] Start %s or target %s is not walkable", start, target)
            return self._fail(SearchStatus.UNREACHABLE)

        self.state = EngineState.RUNNING
        # Costs, heuristics and parents cached by an earlier search are stale.
        grid.reset()
        open_set = IndexedMinHeap(grid)
        closed: Set[int] = set()
        try:
            start_tile = tiles[start]
            start_tile.g_cost = 0
            start_tile.h_cost = heuristic(grid, start, target)
            start_tile.parent_index = None
            open_set.push(start)

            found = False
            while open_set:
                current = open_set.pop()
                closed.add(current)
                self.nodes_expanded += 1
                if current == target:
                    found = True
                    break

                current_tile = tiles[current]
                for neighbour in neighbors(grid, current, self.allow_diagonals):
                    tile = tiles[neighbour]
                    if not tile.is_walkable or neighbour in closed:
                        continue
                    candidate = (
                        current_tile.g_cost
                        + step_cost(grid, current, neighbour)
                        + tile.movement_penalty
                    )
                    in_open = neighbour in open_set
                    if in_open and candidate >= tile.g_cost:
                        continue
                    tile.g_cost = candidate
                    if tile.h_cost is None:
                        tile.h_cost = heuristic(grid, neighbour, target)
                    tile.parent_index = current
                    if in_open:
                        open_set.update(neighbour)
                    else:
                        open_set.push(neighbour)

            if not found:
                logger.info(
                    "[AStar] No path from %s to %s after expanding %s tiles",
                    start,
                    target,
                    self.nodes_expanded,
                )
                return self._fail(SearchStatus.UNREACHABLE)

            try:
                path = retrace(grid, start, target, self.max_retrace_steps)
            except RetraceError as exc:
                logger.error("[AStar] Retracing path failed after %s steps: %s", exc.steps, exc)
                return self._fail(SearchStatus.INTERNAL_ERROR)

            self.state = EngineState.SUCCEEDED
            cost = tiles[target].g_cost
            logger.debug(
                "[AStar] Path %s -> %s: %s steps, cost %s, %s tiles expanded",
                start,
                target,
                len(path),
                cost,
                self.nodes_expanded,
            )
            return SearchResult(
                SearchStatus.SUCCEEDED,
                path=path,
                cost=cost,
                nodes_expanded=self.nodes_expanded,
            )
        finally:
            open_set.clear()
            closed.clear()


def search(
    grid: TileGrid,
    start: int,
    target: int,
    allow_diagonals: bool = True,
    max_retrace_steps: Optional[int] = DEFAULT_MAX_RETRACE_STEPS,
) -> SearchResult:
    """Run A* from ``start`` to ``target`` on ``grid``.

    Parameters
    ----------
    grid:
        Grid to search. Search bookkeeping is cleared and then written into
        its tiles, so a grid may be reused across requests but not shared
        between concurrent ones.
    start, target:
        Tile indices (``y * width + x``).
    allow_diagonals:
        ``True`` for 8-connected movement, ``False`` for 4-connected.
    max_retrace_steps:
        Bound on the parent-link walk. ``None`` uses the grid size.
    """

    return AStarSearch(grid, start, target, allow_diagonals, max_retrace_steps).run()


__all__ = [
    "DEFAULT_MAX_RETRACE_STEPS",
    "SearchStatus",
    "EngineState",
    "SearchResult",
    "AStarSearch",
    "retrace",
    "search",
]
