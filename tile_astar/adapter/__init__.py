"""adapter package."""

from .mask import Mask
from .modifiers import Modifier, Modifiers, NamedColor, load_modifiers
from .request import PathOutput, PathRequest, find_path
from .texture import TextureData

__all__ = [
    "Mask",
    "Modifier",
    "Modifiers",
    "NamedColor",
    "load_modifiers",
    "PathOutput",
    "PathRequest",
    "find_path",
    "TextureData",
]
