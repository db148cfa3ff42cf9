"""Named colours and the movement penalties attached to them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .texture import Color, to_color


@dataclass
class NamedColor:
    name: str
    color: Color


@dataclass
class Modifier:
    """Extra cost for entering a tile painted with ``named_color``."""

    named_color: NamedColor
    movement_penalty: int = 0


@dataclass
class Modifiers:
    active_modifiers: List[Modifier] = field(default_factory=list)
    selected_name: Optional[str] = None

    def penalty_table(self) -> Dict[Color, int]:
        """Return colour -> penalty. Later entries win for repeated colours."""

        table: Dict[Color, int] = {}
        for modifier in self.active_modifiers:
            table[modifier.named_color.color] = modifier.movement_penalty
        return table


def _parse_modifier(entry: Dict[str, Any]) -> Modifier:
    penalty = int(entry.get("penalty", 0))
    if penalty < 0:
        raise ValueError(f"modifier {entry.get('name')!r} has a negative penalty")
    return Modifier(
        named_color=NamedColor(str(entry["name"]), to_color(entry["color"])),
        movement_penalty=penalty,
    )


def parse_modifiers(data: Any) -> Modifiers:
    """Build :class:`Modifiers` from a list or a ``{"modifiers": [...]}`` mapping."""

    selected = None
    if isinstance(data, dict):
        selected = data.get("selected")
        data = data.get("modifiers", [])
    if not isinstance(data, list):
        raise ValueError("modifiers must be a list of {name, color, penalty} entries")
    return Modifiers([_parse_modifier(entry) for entry in data], selected)


def load_modifiers(path: str | Path) -> Modifiers:
    """Load modifiers from the YAML file at ``path``."""

    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or []
    return parse_modifiers(raw)


__all__ = [
    "NamedColor",
    "Modifier",
    "Modifiers",
    "parse_modifiers",
    "load_modifiers",
]
