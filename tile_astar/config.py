"""Simple configuration loader for tile_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Defaults applied to path requests."""

    allow_diagonals: bool = True
    # ``None`` bounds retracing by the grid size instead of a fixed count.
    max_retrace_steps: Optional[int] = 10000
    max_workers: Optional[int] = None


@dataclass
class PlacementConfig:
    """Configuration for random point placement."""

    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """Logging levels for the application and individual modules."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    placement: PlacementConfig
    logging: LoggingConfig
    modifiers_path: Optional[str] = None


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        allow_diagonals=bool(search_data.get("allow_diagonals", True)),
        max_retrace_steps=_optional_int(search_data.get("max_retrace_steps", 10000)),
        max_workers=_optional_int(search_data.get("max_workers")),
    )

    placement_data = data.get("placement", {}) or {}
    placement = PlacementConfig(seed=_optional_int(placement_data.get("seed")))

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(
        search=search,
        placement=placement,
        logging=logging_cfg,
        modifiers_path=data.get("modifiers_path"),
    )


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "SearchConfig",
    "PlacementConfig",
    "LoggingConfig",
    "load_config",
]
