"""Neighbour enumeration and the integer cost model."""

from __future__ import annotations

from typing import List, Tuple

from ..core.grid import TileGrid


ORTHOGONAL_COST = 10
DIAGONAL_COST = 14

# Column-major scan of the 3x3 block around a tile, centre excluded.
_OFFSETS_8: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)
_OFFSETS_4: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx, dy in _OFFSETS_8 if dx == 0 or dy == 0
)


def offsets(allow_diagonals: bool) -> Tuple[Tuple[int, int], ...]:
    """Return the ``(dx, dy)`` steps allowed for the movement model."""

    return _OFFSETS_8 if allow_diagonals else _OFFSETS_4


def neighbors(grid: TileGrid, index: int, allow_diagonals: bool = True) -> List[int]:
    """Return in-bounds neighbour indices of ``index``.

    Walkability is not checked here; the search skips blocked tiles itself.
    """

    x, y = grid.position_of(index)
    result: List[int] = []
    for dx, dy in offsets(allow_diagonals):
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny):
            result.append(grid.index_of(nx, ny))
    return result


def octile_distance(dx: int, dy: int) -> int:
    """Return ``14 * min + 10 * (max - min)`` for absolute deltas."""

    dx = abs(dx)
    dy = abs(dy)
    if dx > dy:
        return DIAGONAL_COST * dy + ORTHOGONAL_COST * (dx - dy)
    return DIAGONAL_COST * dx + ORTHOGONAL_COST * (dy - dx)


def distance(grid: TileGrid, a: int, b: int) -> int:
    """Octile distance between tiles ``a`` and ``b``.

    Serves both as the step cost between adjacent tiles (10 or 14) and as
    the heuristic towards the target. The heuristic is the same whether or
    not diagonal moves are allowed.
    """

    ax, ay = grid.position_of(a)
    bx, by = grid.position_of(b)
    return octile_distance(ax - bx, ay - by)


step_cost = distance
heuristic = distance


__all__ = [
    "ORTHOGONAL_COST",
    "DIAGONAL_COST",
    "offsets",
    "neighbors",
    "octile_distance",
    "distance",
    "step_cost",
    "heuristic",
]
