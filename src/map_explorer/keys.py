"""Keyboard actions, bindings and press-edge detection."""
from __future__ import annotations

import logging
from enum import Enum, auto

import pygame

logger = logging.getLogger(__name__)


class Action(Enum):
    QUIT = auto()
    ZOOM_IN = auto()
    ZOOM_OUT = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()
    SCROLL_LEFT = auto()
    SCROLL_RIGHT = auto()
    TOGGLE_MINIMAP = auto()
    SWITCH_MAP = auto()


DEFAULT_BINDINGS = {
    Action.QUIT: pygame.K_ESCAPE,
    Action.ZOOM_IN: pygame.K_z,
    Action.ZOOM_OUT: pygame.K_x,
    Action.SCROLL_UP: pygame.K_UP,
    Action.SCROLL_DOWN: pygame.K_DOWN,
    Action.SCROLL_LEFT: pygame.K_LEFT,
    Action.SCROLL_RIGHT: pygame.K_RIGHT,
    Action.TOGGLE_MINIMAP: pygame.K_h,
    Action.SWITCH_MAP: pygame.K_s,
}

# Map from scroll action to unit direction (dx, dy)
SCROLL_DIRECTIONS = {
    Action.SCROLL_UP:    (0, -1),
    Action.SCROLL_DOWN:  (0,  1),
    Action.SCROLL_LEFT:  (-1, 0),
    Action.SCROLL_RIGHT: (1,  0),
}


def bindings_from_config(overrides: dict | None) -> dict[Action, int]:
    """Return the default bindings with config overrides applied.

    *overrides* maps action names (e.g. "zoom_in") to pygame key names
    (e.g. "page up"). Bad entries are logged and skipped.
    """
    bindings = dict(DEFAULT_BINDINGS)
    for action_name, key_name in (overrides or {}).items():
        try:
            action = Action[str(action_name).upper()]
        except KeyError:
            logger.warning("Unknown action '%s' in key bindings", action_name)
            continue
        try:
            bindings[action] = pygame.key.key_code(str(key_name))
        except ValueError:
            logger.warning("Unknown key name '%s' for action '%s'", key_name, action_name)
    return bindings


def poll_actions(bindings: dict[Action, int], key_state=None) -> frozenset[Action]:
    """Snapshot the set of actions whose key is currently down."""
    if key_state is None:
        key_state = pygame.key.get_pressed()
    return frozenset(action for action, key in bindings.items() if key_state[key])


def pressed_actions(previous: frozenset[Action], current: frozenset[Action]) -> frozenset[Action]:
    """Actions that went down this frame (down now, up last frame)."""
    return frozenset(current - previous)
