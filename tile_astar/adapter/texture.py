"""Per-tile colour storage bridging :mod:`Pillow` images and tile indices."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from PIL import Image


Color = Tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)


def to_color(value: Iterable[int]) -> Color:
    """Normalise an RGB or RGBA sequence to an RGBA tuple."""

    channels = tuple(int(c) for c in value)
    if len(channels) == 3:
        channels = channels + (255,)
    if len(channels) != 4:
        raise ValueError(f"expected 3 or 4 colour channels, got {len(channels)}")
    return channels  # type: ignore[return-value]


class TextureData:
    """Row-major RGBA pixels indexed the same way as tiles (``y * width + x``)."""

    def __init__(self, width: int, height: int, pixels: Optional[List[Color]] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError("texture dimensions must be non-negative")
        self.width = width
        self.height = height
        if pixels is None:
            pixels = [TRANSPARENT] * (width * height)
        elif len(pixels) != width * height:
            raise ValueError(
                f"expected {width * height} pixels for a {width}x{height} texture, got {len(pixels)}"
            )
        self._pixels = pixels

    @classmethod
    def from_image(cls, image: Image.Image) -> "TextureData":
        """Copy the pixels of ``image`` (converted to RGBA)."""

        rgba = image.convert("RGBA")
        width, height = rgba.size
        px = rgba.load()
        pixels: List[Color] = []
        for y in range(height):
            for x in range(width):
                pixels.append(tuple(px[x, y]))  # type: ignore[arg-type]
        return cls(width, height, pixels)

    def to_image(self) -> Image.Image:
        img = Image.new("RGBA", (self.width, self.height))
        px = img.load()
        for index, color in enumerate(self._pixels):
            px[index % self.width, index // self.width] = color
        return img

    def set(self, width: int, height: int) -> None:
        """Resize and clear to transparent."""

        self.width = width
        self.height = height
        self._pixels = [TRANSPARENT] * (width * height)

    def fill(self, color: Iterable[int]) -> None:
        c = to_color(color)
        self._pixels = [c] * (self.width * self.height)

    def clone(self) -> "TextureData":
        return TextureData(self.width, self.height, list(self._pixels))

    @property
    def pixels(self) -> List[Color]:
        return self._pixels

    def __getitem__(self, index: int) -> Color:
        return self._pixels[index]

    def __setitem__(self, index: int, color: Iterable[int]) -> None:
        self._pixels[index] = to_color(color)

    def __len__(self) -> int:
        return len(self._pixels)


__all__ = ["Color", "TRANSPARENT", "to_color", "TextureData"]
