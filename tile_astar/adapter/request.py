"""Translate texture/mask inputs into a tile grid, search, and draw the result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..config import CONFIG, SearchConfig
from ..core.grid import Coord, TileGrid
from ..search.engine import SearchResult, SearchStatus, search
from .mask import Mask
from .modifiers import Modifiers
from .texture import Color, TextureData, to_color


logger = logging.getLogger(__name__)


@dataclass
class PathRequest:
    """Inputs for one path search.

    ``walkable_mask`` marks the tiles that may be entered. ``texture``
    supplies the per-tile colour used to look up movement penalties.
    """

    texture: TextureData
    walkable_mask: Optional[Mask]
    start: Coord
    target: Coord
    draw_color: Color = (255, 0, 0, 255)
    allow_diagonals: Optional[bool] = None
    modifiers: Optional[Modifiers] = None
    want_mask: bool = False
    overlay: bool = False
    max_retrace_steps: Optional[int] = None


@dataclass
class PathOutput:
    texture: TextureData
    mask: Optional[Mask]
    result: SearchResult
    width: int

    @property
    def path(self) -> List[int]:
        """Tile indices from target back to (excluding) start."""

        return self.result.path

    @property
    def coordinates(self) -> List[Tuple[int, int]]:
        """Path as ``(x, y)`` pairs ordered from start to target."""

        return [(i % self.width, i // self.width) for i in reversed(self.result.path)]


def _check_mask_size(texture: TextureData, mask: Mask) -> int:
    size = texture.width * texture.height
    if len(mask) != size:
        raise ValueError(f"mask covers {len(mask)} points, texture has {size}")
    return size


def build_grid(
    texture: TextureData,
    walkable_mask: Mask,
    modifiers: Optional[Modifiers] = None,
) -> TileGrid:
    """Create the tile grid for ``texture`` using ``walkable_mask`` and penalties."""

    table = modifiers.penalty_table() if modifiers is not None else {}
    size = _check_mask_size(texture, walkable_mask)
    walkable = (walkable_mask.is_masked(i) for i in range(size))
    penalties = (table.get(texture[i], 0) for i in range(size))
    return TileGrid.from_walkable(texture.width, texture.height, walkable, penalties)


def _draw(texture: TextureData, mask: Optional[Mask], path: Iterable[int], color: Color) -> None:
    for index in path:
        texture[index] = color
        if mask is not None:
            mask.mask_point(index)


def find_path(request: PathRequest, settings: Optional[SearchConfig] = None) -> PathOutput:
    """Run a search for ``request`` and project the result onto output artifacts.

    Request fields left as ``None`` take their value from ``settings``
    (``CONFIG.search`` when omitted). A ``max_retrace_steps`` of ``None`` in
    ``settings`` bounds retracing by the grid size.

    Search failures never raise: an invalid or unreachable request returns a
    copy of the input texture with nothing drawn. A walkable mask whose size
    differs from the texture raises :class:`ValueError`.
    """

    settings = CONFIG.search if settings is None else settings

    base = request.texture
    width, height = base.width, base.height
    out_mask = Mask(width * height) if request.want_mask else None
    allow_diagonals = (
        settings.allow_diagonals if request.allow_diagonals is None else request.allow_diagonals
    )
    max_retrace = (
        settings.max_retrace_steps
        if request.max_retrace_steps is None
        else request.max_retrace_steps
    )

    def no_path(status: SearchStatus) -> PathOutput:
        return PathOutput(base.clone(), out_mask, SearchResult(status), width)

    mask = request.walkable_mask
    if mask is None:
        logger.warning("[PathRequest] No walkable mask supplied; returning input texture")
        return no_path(SearchStatus.INVALID_INPUT)
    _check_mask_size(base, mask)

    (sx, sy), (tx, ty) = request.start, request.target
    if not (0 <= sx < width and 0 <= sy < height and 0 <= tx < width and 0 <= ty < height):
        logger.error(
            "[PathRequest] Start %s or target %s outside %sx%s texture",
            request.start,
            request.target,
            width,
            height,
        )
        return no_path(SearchStatus.INVALID_INPUT)

    start_index = sy * width + sx
    target_index = ty * width + tx
    if not mask.is_masked(start_index) or not mask.is_masked(target_index):
        logger.info(
            "[PathRequest] Start %s or target %s is not walkable", request.start, request.target
        )
        return no_path(SearchStatus.UNREACHABLE)

    grid = build_grid(base, mask, request.modifiers)
    result = search(grid, start_index, target_index, allow_diagonals, max_retrace)
    if not result.success:
        return PathOutput(base.clone(), out_mask, result, width)

    if request.overlay:
        texture = base.clone()
    else:
        texture = TextureData(width, height)
    _draw(texture, out_mask, result.path, to_color(request.draw_color))
    return PathOutput(texture, out_mask, result, width)


__all__ = ["PathRequest", "PathOutput", "build_grid", "find_path"]
