# tests/conftest.py
from typing import Callable, Optional, Sequence

import pytest

from tile_astar.adapter.mask import Mask
from tile_astar.adapter.texture import Color, TextureData
from tile_astar.core.grid import TileGrid


GRAY: Color = (128, 128, 128, 255)
MUD: Color = (110, 70, 20, 255)
WALL: Color = (0, 0, 0, 255)


@pytest.fixture
def open_grid() -> Callable[[int, int], TileGrid]:
    def factory(width: int, height: int) -> TileGrid:
        return TileGrid.from_walkable(width, height, [True] * (width * height))

    return factory


@pytest.fixture
def texture_from_rows() -> Callable[..., tuple[TextureData, Mask]]:
    """Build a texture and walkable mask from text rows.

    ``.`` is gray floor, ``m`` is mud floor and ``#`` is a wall.
    """

    palette = {".": GRAY, "m": MUD, "#": WALL}

    def factory(rows: Sequence[str], walkable: Optional[str] = ".m") -> tuple[TextureData, Mask]:
        width, height = len(rows[0]), len(rows)
        pixels = [palette[ch] for row in rows for ch in row]
        texture = TextureData(width, height, pixels)
        chars = "".join(rows)
        mask = Mask.from_points(width * height, (i for i, ch in enumerate(chars) if ch in walkable))
        return texture, mask

    return factory
