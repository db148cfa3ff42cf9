"""Scatter points on a texture while keeping a minimum distance between them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..adapter.mask import Mask
from ..adapter.texture import Color, TextureData, to_color
from ..config import CONFIG


logger = logging.getLogger(__name__)


class IndexedPool:
    """Set of ints with O(1) add, remove and uniform random choice."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: List[int] = []
        self._positions: Dict[int, int] = {}
        self.update(items)

    def add(self, item: int) -> None:
        if item not in self._positions:
            self._positions[item] = len(self._items)
            self._items.append(item)

    def update(self, items: Iterable[int]) -> None:
        for item in items:
            self.add(item)

    def discard(self, item: int) -> bool:
        """Remove ``item`` by swapping it with the last element."""

        pos = self._positions.pop(item, None)
        if pos is None:
            return False
        last = self._items.pop()
        if last != item:
            self._items[pos] = last
            self._positions[last] = pos
        return True

    def discard_all(self, items: Iterable[int]) -> None:
        for item in items:
            self.discard(item)

    def choice(self, rng: Random) -> int:
        if not self._items:
            raise IndexError("cannot choose from an empty pool")
        return self._items[rng.randrange(len(self._items))]

    def __contains__(self, item: object) -> bool:
        return item in self._positions

    def __len__(self) -> int:
        return len(self._items)


def indices_in_circle(cx: int, cy: int, radius: int, width: int, height: int) -> Set[int]:
    """Return tile indices within Euclidean ``radius`` of ``(cx, cy)``."""

    result: Set[int] = set()
    r2 = radius * radius
    for y in range(max(0, cy - radius), min(height, cy + radius + 1)):
        for x in range(max(0, cx - radius), min(width, cx + radius + 1)):
            dx = cx - x
            dy = cy - y
            if dx * dx + dy * dy <= r2:
                result.add(y * width + x)
    return result


@dataclass
class PlacementOutput:
    texture: TextureData
    mask: Mask
    placements: List[Tuple[int, int]]


def place_random_points(
    texture: TextureData,
    fill_color: Color,
    point_count: int,
    radius: int,
    mask: Optional[Mask] = None,
    rng: Optional[Random] = None,
) -> PlacementOutput:
    """Paint up to ``point_count`` points at least ``radius`` apart.

    Candidates are the unmasked points of ``mask`` (all tiles when ``mask``
    is ``None``). Placed points are marked on the returned mask.
    """

    if rng is None:
        rng = Random(CONFIG.placement.seed)
    width, height = texture.width, texture.height
    out_texture = texture.clone()
    color = to_color(fill_color)

    if mask is not None:
        out_mask = mask.clone()
        pool = IndexedPool(mask.unmasked_points)
    else:
        out_mask = Mask(width * height)
        pool = IndexedPool(range(width * height))

    placements: List[Tuple[int, int]] = []
    for _ in range(point_count):
        if not len(pool):
            logger.info(
                "[Placement] Ran out of free tiles after %s of %s points", len(placements), point_count
            )
            break
        index = pool.choice(rng)
        x, y = index % width, index // width
        out_texture[index] = color
        pool.discard(index)
        pool.discard_all(indices_in_circle(x, y, radius, width, height))
        out_mask.mask_point(index)
        placements.append((x, y))

    return PlacementOutput(out_texture, out_mask, placements)


__all__ = ["IndexedPool", "indices_in_circle", "PlacementOutput", "place_random_points"]
