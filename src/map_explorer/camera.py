from __future__ import annotations

from dataclasses import dataclass

import pygame

from map_explorer.settings import ZOOM_MIN, ZOOM_MAX, ZOOM_FACTOR, SCROLL_SPEED


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in float coordinates."""
    x: float
    y: float
    width: float
    height: float

    def to_pygame(self) -> pygame.Rect:
        """Truncate to an integer pygame.Rect for drawing."""
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


def clamp(value, low, high):
    return max(low, min(value, high))


class Camera:
    def __init__(self, screen_width, screen_height):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.zoom = 1.0
        # Offset into the map, in unscaled map pixels
        self.x = 0.0
        self.y = 0.0

    def resize(self, screen_width, screen_height):
        self.screen_width = screen_width
        self.screen_height = screen_height

    @property
    def view_width(self):
        """Width of the visible window in map pixels."""
        return self.screen_width / self.zoom

    @property
    def view_height(self):
        return self.screen_height / self.zoom

    def zoom_in(self):
        self.zoom = clamp(self.zoom * ZOOM_FACTOR, ZOOM_MIN, ZOOM_MAX)

    def zoom_out(self):
        self.zoom = clamp(self.zoom / ZOOM_FACTOR, ZOOM_MIN, ZOOM_MAX)

    def scroll(self, dx, dy):
        """Move by (dx, dy) steps; step length shrinks as zoom grows."""
        speed = SCROLL_SPEED / self.zoom
        self.x += dx * speed
        self.y += dy * speed

    def clamp_to(self, map_width_px, map_height_px):
        """Clamp the offset so we never show void beyond the map."""
        self.x = clamp(self.x, 0.0, max(0.0, map_width_px - self.view_width))
        self.y = clamp(self.y, 0.0, max(0.0, map_height_px - self.view_height))

    def source_rect(self) -> Rect:
        """Window of the map, in map pixels, that fills the screen."""
        return Rect(self.x, self.y, self.view_width, self.view_height)
