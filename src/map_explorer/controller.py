"""Viewport controller: zoom, scroll, minimap and map selection driven by key snapshots."""
from __future__ import annotations

import logging

from map_explorer.camera import Camera, Rect
from map_explorer.keys import Action, SCROLL_DIRECTIONS, pressed_actions
from map_explorer.minimap import minimap_geometry
from map_explorer.settings import MINIMAP_WIDTH, MINIMAP_MARGIN

logger = logging.getLogger(__name__)


class ViewportController:
    """Owns the view state; the host calls update() once per frame.

    *primary* and *alternate* are the two map images (anything with
    get_size()). The primary map starts active.
    """

    def __init__(self, primary, alternate, screen_size, minimap_visible=True):
        self.maps = (primary, alternate)
        self.active_map = primary
        self.camera = Camera(*screen_size)
        self.minimap_visible = minimap_visible
        self.quit_requested = False
        self._previous: frozenset[Action] = frozenset()

    @property
    def screen_size(self):
        return self.camera.screen_width, self.camera.screen_height

    @property
    def zoom(self):
        return self.camera.zoom

    @property
    def offset(self):
        return self.camera.x, self.camera.y

    def update(self, keys_down, screen_size=None):
        """Apply one frame of input.

        *keys_down* is the set of actions whose key is held this frame.
        Zoom, minimap and map switching react to press edges only;
        scrolling reacts to held keys.
        """
        keys_down = frozenset(keys_down)
        if screen_size is not None:
            self.camera.resize(*screen_size)

        if Action.QUIT in keys_down:
            if not self.quit_requested:
                logger.info("Quit requested")
            self.quit_requested = True
            return

        pressed = pressed_actions(self._previous, keys_down)
        camera = self.camera

        # Zoom first so the clamp below sees the new view size
        if Action.ZOOM_OUT in pressed:
            camera.zoom_out()
        if Action.ZOOM_IN in pressed:
            camera.zoom_in()
        if pressed & {Action.ZOOM_IN, Action.ZOOM_OUT}:
            logger.debug("Zoom is now %s", camera.zoom)

        for action, (dx, dy) in SCROLL_DIRECTIONS.items():
            if action in keys_down:
                camera.scroll(dx, dy)

        self._clamp()

        if Action.TOGGLE_MINIMAP in pressed:
            self.minimap_visible = not self.minimap_visible
            logger.debug("Minimap visible: %s", self.minimap_visible)

        if Action.SWITCH_MAP in pressed:
            primary, alternate = self.maps
            self.active_map = alternate if self.active_map is primary else primary
            logger.debug("Switched to map of size %s", self.active_map.get_size())
            # New map may have different bounds
            self._clamp()

        self._previous = keys_down

    def _clamp(self):
        self.camera.clamp_to(*self.active_map.get_size())

    def source_rect(self) -> Rect:
        """Region of the active map to draw over the full screen."""
        return self.camera.source_rect()

    def minimap_geometry(self, screen_w, screen_h,
                         minimap_width=MINIMAP_WIDTH, margin=MINIMAP_MARGIN):
        """Return (placement, indicator) for the minimap, or None when hidden."""
        if not self.minimap_visible:
            return None
        return minimap_geometry(
            self.active_map.get_size(), (screen_w, screen_h),
            self.offset, self.camera.zoom, minimap_width, margin,
        )
