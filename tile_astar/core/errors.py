"""Exception types raised by the pathfinding core."""

from __future__ import annotations


class HeapCapacityError(RuntimeError):
    """Raised when inserting into a heap that is already at capacity."""


class HeapEmptyError(RuntimeError):
    """Raised when popping or peeking an empty heap."""


class RetraceError(RuntimeError):
    """Raised when following parent links does not terminate at the start tile."""

    def __init__(self, message: str, steps: int) -> None:
        super().__init__(message)
        self.steps = steps


__all__ = [
    "HeapCapacityError",
    "HeapEmptyError",
    "RetraceError",
]
