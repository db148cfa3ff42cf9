# tile_astar/main.py
"""Command-line entry point: find a path across an image.

Example:
    python -m tile_astar.main map.png --start 0 0 --target 31 17 \
        --walkable-color 128 128 128 --modifiers tile_astar/data/modifiers.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image

from .adapter.mask import Mask
from .adapter.modifiers import Modifiers, load_modifiers
from .adapter.request import PathRequest, find_path
from .adapter.texture import TextureData, to_color
from .config import CONFIG, CONFIG_PATH, Config, load_config


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: Config = CONFIG) -> None:
    """Apply the global and per-module log levels from ``config``."""

    numeric_level = getattr(logging, config.logging.global_level, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def walkable_mask_from_texture(texture: TextureData, walkable_color=None) -> Mask:
    """Mark pixels equal to ``walkable_color`` (every pixel when ``None``)."""

    size = texture.width * texture.height
    if walkable_color is None:
        return Mask.from_points(size, range(size))
    color = to_color(walkable_color)
    return Mask.from_points(size, (i for i in range(size) if texture[i] == color))


def _resolve_modifiers(path: Optional[str], config: Config, config_path: Path) -> Optional[Modifiers]:
    if path:
        return load_modifiers(path)
    if config.modifiers_path:
        candidate = Path(config.modifiers_path)
        if not candidate.is_absolute():
            candidate = config_path.resolve().parent / candidate
        if candidate.is_file():
            return load_modifiers(candidate)
        logger.warning("Modifiers file %s from config not found; using no penalties.", candidate)
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tile-astar",
        description="Find the cheapest path between two pixels of an image.",
    )
    parser.add_argument("image", help="Image whose pixels define the tile grid")
    parser.add_argument("--start", nargs=2, type=int, required=True, metavar=("X", "Y"))
    parser.add_argument("--target", nargs=2, type=int, required=True, metavar=("X", "Y"))
    parser.add_argument(
        "--walkable-color",
        nargs="+",
        type=int,
        metavar="C",
        help="RGB(A) colour of walkable pixels; all pixels are walkable if omitted",
    )
    parser.add_argument("--no-diagonals", action="store_true", help="Use 4-connected movement")
    parser.add_argument("--modifiers", help="YAML file with colour penalties")
    parser.add_argument("--config", default=str(CONFIG_PATH), help="Path to config.yaml")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config_path = Path(args.config)
    config = load_config(config_path)
    configure_logging(config)

    with Image.open(args.image) as img:
        texture = TextureData.from_image(img)
    mask = walkable_mask_from_texture(texture, args.walkable_color)
    modifiers = _resolve_modifiers(args.modifiers, config, config_path)

    allow_diagonals = False if args.no_diagonals else config.search.allow_diagonals
    request = PathRequest(
        texture=texture,
        walkable_mask=mask,
        start=(args.start[0], args.start[1]),
        target=(args.target[0], args.target[1]),
        allow_diagonals=allow_diagonals,
        modifiers=modifiers,
    )
    output = find_path(request, config.search)
    if not output.result.success:
        logger.info("No path found (%s).", output.result.status.value)
        print(f"no path: {output.result.status.value}")
        return 1

    coords: List[str] = [f"{x},{y}" for x, y in output.coordinates]
    print(f"cost {output.result.cost} over {len(coords)} steps")
    print(" ".join(coords))
    return 0


if __name__ == "__main__":
    sys.exit(main())
