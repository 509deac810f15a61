"""User configuration: platform config.json merged with command-line overrides."""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field

from map_explorer.settings import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, MAP_SIZE, TILE_SIZE, MAP_SEED,
    MINIMAP_WIDTH, MINIMAP_MARGIN,
)

logger = logging.getLogger(__name__)

_ASSET_DIR = os.path.normpath(
    os.path.join(os.path.dirname(os.path.abspath(__file__)), os.pardir, os.pardir, "assets")
)
DEFAULT_MAP_PATH = os.path.join(_ASSET_DIR, "map.png")

# config.json key -> (ViewerConfig attribute, expected type)
_CONFIG_KEYS = {
    "screen_width": ("screen_width", int),
    "screen_height": ("screen_height", int),
    "fps": ("fps", int),
    "map_path": ("map_path", str),
    "seed": ("seed", int),
    "map_size": ("map_size", int),
    "tile_size": ("tile_size", int),
    "minimap_width": ("minimap_width", int),
    "minimap_margin": ("minimap_margin", int),
    "minimap_visible": ("minimap_visible", bool),
    "keys": ("keys", dict),
}

# Sizes and rates that must be > 0
_POSITIVE_KEYS = frozenset({
    "screen_width", "screen_height", "fps", "map_size", "tile_size", "minimap_width",
})


@dataclass
class ViewerConfig:
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    fps: int = FPS
    map_path: str = DEFAULT_MAP_PATH
    seed: int = MAP_SEED
    map_size: int = MAP_SIZE
    tile_size: int = TILE_SIZE
    minimap_width: int = MINIMAP_WIDTH
    minimap_margin: int = MINIMAP_MARGIN
    minimap_visible: bool = True
    keys: dict = field(default_factory=dict)


def get_config_dir() -> str:
    """Return the platform-appropriate config directory (not created).

    macOS:   ~/Library/Application Support/MapExplorer/
    Linux:   ~/.local/share/MapExplorer/
    Windows: %APPDATA%/MapExplorer/
    """
    if sys.platform == "darwin":
        base = os.path.expanduser("~/Library/Application Support")
    elif sys.platform == "win32":
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
    else:
        base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
    return os.path.join(base, "MapExplorer")


def config_path() -> str:
    return os.path.join(get_config_dir(), "config.json")


def load_config(path: str | None = None) -> dict:
    """Load config.json, returning {} if absent or unreadable."""
    if path is None:
        path = config_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError, OSError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", path)
        return {}
    return data


def build_config(file_config: dict | None = None, overrides: dict | None = None) -> ViewerConfig:
    """Merge settings defaults, config.json values and CLI overrides.

    Overrides whose value is None are treated as "not given".
    """
    config = ViewerConfig()

    for key, value in (file_config or {}).items():
        if key not in _CONFIG_KEYS:
            logger.warning("Unknown config key '%s'", key)
            continue
        attr, expected = _CONFIG_KEYS[key]
        # bool is an int subclass; don't let `true` pass as a width
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            logger.warning("Config key '%s' should be %s, got %r", key, expected.__name__, value)
            continue
        if key in _POSITIVE_KEYS and value <= 0:
            logger.warning("Config key '%s' must be positive, got %r", key, value)
            continue
        setattr(config, attr, value)

    for attr, value in (overrides or {}).items():
        if value is not None:
            setattr(config, attr, value)

    return config
