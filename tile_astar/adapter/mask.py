"""Boolean point set over tile indices."""

from __future__ import annotations

from typing import Iterable, List


class Mask:
    """Marks a subset of ``size`` tile indices."""

    def __init__(self, size: int = 0) -> None:
        self._points: List[bool] = [False] * size

    @classmethod
    def from_points(cls, size: int, points: Iterable[int]) -> "Mask":
        mask = cls(size)
        for index in points:
            mask.mask_point(index)
        return mask

    def set(self, size: int) -> None:
        """Resize to ``size`` points, all unmasked."""

        self._points = [False] * size

    def mask_point(self, index: int) -> None:
        self._points[index] = True

    def unmask_point(self, index: int) -> None:
        self._points[index] = False

    def is_masked(self, index: int) -> bool:
        return self._points[index]

    @property
    def masked_points(self) -> List[int]:
        return [i for i, masked in enumerate(self._points) if masked]

    @property
    def unmasked_points(self) -> List[int]:
        return [i for i, masked in enumerate(self._points) if not masked]

    def clone(self) -> "Mask":
        other = Mask()
        other._points = list(self._points)
        return other

    def __len__(self) -> int:
        return len(self._points)


__all__ = ["Mask"]
