"""Binary min-heap over tile indices with an index -> slot reverse map.

The heap never stores tile copies. It holds tile indices and reads the
ordering key (``f_cost``) from the owning :class:`TileGrid` at comparison
time, so a cost change made on the grid is immediately what the heap sees.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .errors import HeapCapacityError, HeapEmptyError
from .grid import Tile, TileGrid


class IndexedMinHeap:
    """Priority queue of tile indices ordered by ``f_cost``.

    ``capacity`` defaults to the grid size, the worst case of every tile
    entering the open set at once.
    """

    def __init__(self, grid: TileGrid, capacity: Optional[int] = None) -> None:
        self._tiles = grid.tiles
        self.capacity = grid.size if capacity is None else capacity
        if self.capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._items: List[int] = []
        self._slots: Dict[int, int] = {}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _key(self, slot: int) -> int:
        return self._tiles[self._items[slot]].f_cost

    def _place(self, slot: int, index: int) -> None:
        self._items[slot] = index
        self._slots[index] = slot
        self._tiles[index].heap_slot = slot

    def _swap(self, a: int, b: int) -> None:
        first = self._items[a]
        second = self._items[b]
        self._place(a, second)
        self._place(b, first)

    def _sift_up(self, slot: int) -> None:
        while slot > 0:
            parent = (slot - 1) // 2
            if not self._key(parent) > self._key(slot):
                break
            self._swap(parent, slot)
            slot = parent

    def _sift_down(self, slot: int) -> None:
        size = len(self._items)
        while True:
            child = 2 * slot + 1
            if child >= size:
                break
            right = child + 1
            # Equal children resolve to the left one.
            if right < size and self._key(right) < self._key(child):
                child = right
            if not self._key(slot) > self._key(child):
                break
            self._swap(slot, child)
            slot = child

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def push(self, index: int) -> None:
        """Insert tile ``index`` and restore heap order."""

        if len(self._items) >= self.capacity:
            raise HeapCapacityError(f"heap is full (capacity {self.capacity})")
        if index in self._slots:
            raise ValueError(f"tile {index} is already in the heap")
        self._items.append(index)
        self._place(len(self._items) - 1, index)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> int:
        """Remove and return the index with the smallest ``f_cost``."""

        if not self._items:
            raise HeapEmptyError("heap is empty")
        root = self._items[0]
        last = self._items.pop()
        del self._slots[root]
        self._tiles[root].heap_slot = None
        if self._items:
            self._place(0, last)
            self._sift_down(0)
        return root

    def peek(self) -> int:
        """Return the index with the smallest ``f_cost`` without removing it."""

        if not self._items:
            raise HeapEmptyError("heap is empty")
        return self._items[0]

    def update(self, index: int) -> None:
        """Restore order after the tile's cost was *decreased*.

        Only a sift-up is performed. Calling this after a cost increase
        leaves the heap out of order.
        """

        slot = self._slots[index]
        self._sift_up(slot)

    def slot_of(self, index: int) -> int:
        """Return the current heap slot of ``index`` (``KeyError`` if absent)."""

        return self._slots[index]

    def clear(self) -> None:
        for index in self._items:
            self._tiles[index].heap_slot = None
        self._items.clear()
        self._slots.clear()

    # Names used by the grid-search literature.
    insert = push
    extract_min = pop
    update_key = update

    def check_invariants(self) -> None:
        """Raise ``AssertionError`` if heap order or the slot map is broken."""

        assert len(self._items) == len(self._slots)
        for slot, index in enumerate(self._items):
            assert self._slots[index] == slot, f"slot map out of sync for tile {index}"
            assert self._tiles[index].heap_slot == slot, f"heap_slot out of sync for tile {index}"
            if slot > 0:
                parent = (slot - 1) // 2
                assert self._key(parent) <= self._key(slot), (
                    f"heap order violated between slots {parent} and {slot}"
                )

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Tile):
            item = item.index
        return item in self._slots

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


__all__ = ["IndexedMinHeap"]
