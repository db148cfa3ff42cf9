from pathlib import Path

import pytest
import yaml

from tile_astar.config import CONFIG_PATH, load_config


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.search.allow_diagonals is True
    assert cfg.search.max_retrace_steps == 10000
    assert cfg.search.max_workers is None
    assert cfg.placement.seed is None
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}
    assert cfg.modifiers_path is None


def test_values_are_parsed(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n"
        "  allow_diagonals: false\n"
        "  max_retrace_steps: null\n"
        "  max_workers: 4\n"
        "placement:\n"
        "  seed: 9\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    tile_astar.search.engine: ERROR\n"
        "modifiers_path: mods.yaml\n"
    )
    cfg = load_config(path)
    assert cfg.search.allow_diagonals is False
    assert cfg.search.max_retrace_steps is None
    assert cfg.search.max_workers == 4
    assert cfg.placement.seed == 9
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"tile_astar.search.engine": "ERROR"}
    assert cfg.modifiers_path == "mods.yaml"


def test_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).search.max_retrace_steps == 10000


def test_project_config_loads():
    assert CONFIG_PATH.is_file()
    cfg = load_config(CONFIG_PATH)
    assert cfg.search.max_retrace_steps == 10000
    assert cfg.modifiers_path


def test_project_config_values():
    cfg = load_config(CONFIG_PATH)
    assert cfg.search.allow_diagonals is True
    assert cfg.search.max_workers is None
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {"tile_astar.search.engine": "WARNING"}
    assert (CONFIG_PATH.parent / cfg.modifiers_path).is_file()


@pytest.mark.parametrize("value, expected", [(None, None), (250, 250), ("40", 40)])
def test_retrace_bound_values(tmp_path: Path, value, expected):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"search": {"max_retrace_steps": value}}))
    assert load_config(path).search.max_retrace_steps == expected


def test_partial_sections_keep_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump({"search": {"max_workers": 2}, "logging": {"global_level": "warning"}})
    )
    cfg = load_config(path)
    assert cfg.search.max_workers == 2
    assert cfg.search.allow_diagonals is True
    assert cfg.search.max_retrace_steps == 10000
    assert cfg.logging.global_level == "WARNING"
    assert cfg.logging.module_levels == {}
    assert cfg.placement.seed is None


def test_null_sections_give_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("search:\nplacement:\nlogging:\n")
    cfg = load_config(path)
    assert cfg.search.max_retrace_steps == 10000
    assert cfg.logging.module_levels == {}
