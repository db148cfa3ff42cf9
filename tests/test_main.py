import logging
from pathlib import Path

import pytest
import yaml
from PIL import Image

from tile_astar import main as main_module
from tile_astar.adapter.texture import TextureData
from tile_astar.config import CONFIG, load_config


GRAY = (128, 128, 128)
WALL = (0, 0, 0)


@pytest.fixture
def quiet_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"search": {"allow_diagonals": True}}))
    return path


def _write_map(path: Path, rows: list[str]) -> Path:
    img = Image.new("RGB", (len(rows[0]), len(rows)), GRAY)
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == "#":
                img.putpixel((x, y), WALL)
    img.save(path)
    return path


def _run(image: Path, config: Path, *extra: str) -> int:
    return main_module.main(
        [str(image), "--start", "0", "0", "--target", "4", "0", "--config", str(config), *extra]
    )


def test_cli_prints_path(tmp_path, config_file, quiet_logging, capsys):
    image = _write_map(tmp_path / "map.png", ["..#..", "..#..", "....."])
    code = _run(image, config_file, "--walkable-color", "128", "128", "128")
    out = capsys.readouterr().out.strip().splitlines()
    assert code == 0
    assert out[0].startswith("cost ")
    coords = out[1].split()
    assert coords[-1] == "4,0"
    assert "2,0" not in coords and "2,1" not in coords
    assert quiet_logging and quiet_logging[0]["force"] is True


def test_cli_reports_unreachable(tmp_path, config_file, quiet_logging, capsys):
    image = _write_map(tmp_path / "map.png", ["..#..", "..#..", "..#.."])
    code = _run(image, config_file, "--walkable-color", "128", "128", "128")
    assert code == 1
    assert "no path: unreachable" in capsys.readouterr().out


def test_cli_without_walkable_colour_walks_everything(tmp_path, config_file, quiet_logging, capsys):
    image = _write_map(tmp_path / "map.png", ["..#..", "..#..", "..#.."])
    assert _run(image, config_file, "--no-diagonals") == 0
    assert "cost 40 over 4 steps" in capsys.readouterr().out


def test_cli_applies_modifiers(tmp_path, config_file, quiet_logging, capsys):
    image = _write_map(tmp_path / "map.png", [".....", "....."])
    mods = tmp_path / "mods.yaml"
    mods.write_text(yaml.safe_dump([{"name": "floor", "color": list(GRAY), "penalty": 1}]))
    assert _run(image, config_file, "--no-diagonals", "--modifiers", str(mods)) == 0
    assert "cost 44 over 4 steps" in capsys.readouterr().out


def test_configure_logging_applies_module_levels(tmp_path, quiet_logging):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "logging": {
                    "global_level": "WARNING",
                    "module_levels": {
                        "tile_astar.test_probe": "DEBUG",
                        "tile_astar.test_bogus": "LOUD",
                    },
                }
            }
        )
    )
    main_module.configure_logging(load_config(path))
    assert quiet_logging[0]["level"] == logging.WARNING
    assert logging.getLogger("tile_astar.test_probe").level == logging.DEBUG
    assert logging.getLogger("tile_astar.test_bogus").level == logging.NOTSET


def test_walkable_mask_from_texture():
    texture = TextureData(3, 1, [(1, 1, 1, 255), (2, 2, 2, 255), (1, 1, 1, 255)])
    assert main_module.walkable_mask_from_texture(texture, [1, 1, 1]).masked_points == [0, 2]
    assert main_module.walkable_mask_from_texture(texture).masked_points == [0, 1, 2]


def _config_with(tmp_path: Path, search: dict) -> Path:
    path = tmp_path / "retrace.yaml"
    path.write_text(yaml.safe_dump({"search": search}))
    return path


def test_cli_null_retrace_bound_uses_grid_size(tmp_path, quiet_logging, capsys, monkeypatch):
    # The import-time defaults must not replace an explicit null from --config.
    monkeypatch.setattr(CONFIG.search, "max_retrace_steps", 2)
    image = _write_map(tmp_path / "map.png", ["....."])
    config = _config_with(tmp_path, {"max_retrace_steps": None})
    assert _run(image, config, "--no-diagonals") == 0
    assert "cost 40 over 4 steps" in capsys.readouterr().out


def test_cli_retrace_bound_from_config(tmp_path, quiet_logging, capsys):
    image = _write_map(tmp_path / "map.png", ["....."])
    config = _config_with(tmp_path, {"max_retrace_steps": 2})
    assert _run(image, config, "--no-diagonals") == 1
    assert "no path: internal_error" in capsys.readouterr().out


def test_resolve_modifiers_from_config_path(tmp_path):
    mods = tmp_path / "data" / "mods.yaml"
    mods.parent.mkdir()
    mods.write_text(yaml.safe_dump([{"name": "mud", "color": [1, 2, 3], "penalty": 7}]))
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({"modifiers_path": "data/mods.yaml"}))

    resolved = main_module._resolve_modifiers(None, load_config(config_path), config_path)
    assert resolved is not None
    assert resolved.penalty_table() == {(1, 2, 3, 255): 7}


def test_resolve_modifiers_prefers_explicit_file(tmp_path):
    mods = tmp_path / "cli.yaml"
    mods.write_text(yaml.safe_dump([{"name": "road", "color": [9, 9, 9], "penalty": 0}]))
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({"modifiers_path": "missing.yaml"}))

    resolved = main_module._resolve_modifiers(str(mods), load_config(config_path), config_path)
    assert resolved.penalty_table() == {(9, 9, 9, 255): 0}


def test_resolve_modifiers_warns_on_missing_file(tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="tile_astar.main")
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump({"modifiers_path": "missing.yaml"}))

    assert main_module._resolve_modifiers(None, load_config(config_path), config_path) is None
    assert "not found" in caplog.text


def test_resolve_modifiers_without_any_source(tmp_path):
    config_path = tmp_path / "config.yaml"
    assert main_module._resolve_modifiers(None, load_config(config_path), config_path) is None
