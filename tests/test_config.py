import json
import logging
import os

from map_explorer import config as config_mod
from map_explorer.config import ViewerConfig, build_config, load_config
from map_explorer.settings import SCREEN_WIDTH, FPS


def test_load_config_missing_returns_empty(tmp_path):
    assert load_config(str(tmp_path / "config.json")) == {}


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"fps": 30}))

    assert load_config(str(path)) == {"fps": 30}


def test_load_config_ignores_corrupt_file(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    with caplog.at_level(logging.WARNING):
        assert load_config(str(path)) == {}
    assert "unreadable config" in caplog.text


def test_load_config_ignores_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")

    assert load_config(str(path)) == {}


def test_build_config_defaults():
    config = build_config()

    assert config == ViewerConfig()
    assert config.screen_width == SCREEN_WIDTH
    assert config.fps == FPS
    assert config.minimap_visible


def test_build_config_precedence():
    file_config = {"screen_width": 1024, "fps": 30, "minimap_visible": False}
    overrides = {"screen_width": 1280, "fps": None}

    config = build_config(file_config, overrides)

    assert config.screen_width == 1280
    assert config.fps == 30
    assert config.minimap_visible is False


def test_build_config_skips_bad_values(caplog):
    file_config = {"screen_height": "tall", "fps": True, "colour": "blue", "keys": {"quit": "q"}}

    with caplog.at_level(logging.WARNING):
        config = build_config(file_config)

    assert config.screen_height == ViewerConfig().screen_height
    assert config.fps == FPS
    assert config.keys == {"quit": "q"}
    assert "Unknown config key 'colour'" in caplog.text


def test_config_dir_honors_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr(config_mod.sys, "platform", "linux")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert config_mod.get_config_dir() == os.path.join(str(tmp_path), "MapExplorer")
    assert config_mod.config_path() == os.path.join(str(tmp_path), "MapExplorer", "config.json")


def test_load_config_ignores_non_utf8_file(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_bytes(b'{"fps": "\xff\xfe"}')

    with caplog.at_level(logging.WARNING):
        assert load_config(str(path)) == {}
    assert "unreadable config" in caplog.text


def test_build_config_rejects_non_positive_sizes(caplog):
    file_config = {
        "screen_width": 0, "screen_height": -5, "fps": 0,
        "map_size": 0, "tile_size": 0, "minimap_width": -1,
    }

    with caplog.at_level(logging.WARNING):
        config = build_config(file_config)

    assert config == ViewerConfig()
    assert "must be positive" in caplog.text


def test_build_config_allows_zero_margin_and_seed():
    config = build_config({"minimap_margin": 0, "seed": 0})

    assert config.minimap_margin == 0
    assert config.seed == 0
