"""Flat tile arena used as the search space for A*."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple


# Cost of a tile that has not been reached yet.
INFINITY = sys.maxsize

Coord = Tuple[int, int]


@dataclass(eq=False)
class Tile:
    """One cell of the grid plus its search bookkeeping.

    Tiles compare and hash by ``index`` only. The search engine mutates the
    tile stored in :attr:`TileGrid.tiles` directly, so there is never a stale
    copy to write back.
    """

    index: int
    is_walkable: bool = True
    movement_penalty: int = 0
    g_cost: int = INFINITY
    h_cost: Optional[int] = None
    parent_index: Optional[int] = None
    heap_slot: Optional[int] = field(default=None, repr=False)

    @property
    def f_cost(self) -> int:
        """Total estimated cost, always derived from the current fields."""

        h = self.h_cost if self.h_cost is not None else 0
        return self.g_cost + h

    def reset(self) -> None:
        """Clear search bookkeeping, keeping walkability and penalty."""

        self.g_cost = INFINITY
        self.h_cost = None
        self.parent_index = None
        self.heap_slot = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.index == other.index

    def __hash__(self) -> int:
        return hash(self.index)


class TileGrid:
    """Row-major ``width * height`` array of :class:`Tile` objects."""

    def __init__(self, width: int, height: int, tiles: Optional[List[Tile]] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        if tiles is None:
            tiles = [Tile(i) for i in range(width * height)]
        elif len(tiles) != width * height:
            raise ValueError(
                f"expected {width * height} tiles for a {width}x{height} grid, got {len(tiles)}"
            )
        self.tiles = tiles

    @classmethod
    def from_walkable(
        cls,
        width: int,
        height: int,
        walkable: Iterable[bool],
        penalties: Optional[Iterable[int]] = None,
    ) -> "TileGrid":
        """Build a grid from per-index walkability and optional penalties."""

        walk = [bool(w) for w in walkable]
        size = width * height
        if len(walk) != size:
            raise ValueError(f"walkable has {len(walk)} entries, expected {size}")
        if penalties is None:
            pen: Sequence[int] = [0] * size
        else:
            pen = [int(p) for p in penalties]
            if len(pen) != size:
                raise ValueError(f"penalties has {len(pen)} entries, expected {size}")
        tiles: List[Tile] = []
        for i in range(size):
            if pen[i] < 0:
                raise ValueError(f"movement penalty for tile {i} is negative: {pen[i]}")
            tiles.append(Tile(i, walk[i], pen[i]))
        return cls(width, height, tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[str], blocked: str = "#") -> "TileGrid":
        """Build a grid from text rows where ``blocked`` marks unwalkable cells.

        Digits ``1``-``9`` are walkable with that digit as the penalty.
        """

        height = len(rows)
        width = len(rows[0]) if rows else 0
        walkable: List[bool] = []
        penalties: List[int] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {y} has length {len(row)}, expected {width}")
            for ch in row:
                walkable.append(ch != blocked)
                penalties.append(int(ch) if ch.isdigit() else 0)
        return cls.from_walkable(width, height, walkable, penalties)

    # ------------------------------------------------------------------
    # Coordinate helpers
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self.width * self.height

    def index_of(self, x: int, y: int) -> int:
        """Return the tile index for column ``x`` and row ``y``."""

        return y * self.width + x

    def position_of(self, index: int) -> Coord:
        """Return ``(x, y)`` for ``index``."""

        return index % self.width, index // self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def contains_index(self, index: int) -> bool:
        return 0 <= index < self.size

    def tile_at(self, x: int, y: int) -> Tile:
        return self.tiles[self.index_of(x, y)]

    def reset(self) -> None:
        """Clear search bookkeeping on every tile."""

        for tile in self.tiles:
            tile.reset()

    def __len__(self) -> int:
        return len(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]


__all__ = ["INFINITY", "Coord", "Tile", "TileGrid"]
