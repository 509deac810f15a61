"""Minimap layout: where the overview sits and where the viewport indicator goes."""
from __future__ import annotations

import pygame

from map_explorer.camera import Rect
from map_explorer.settings import MINIMAP_WIDTH, MINIMAP_MARGIN


def minimap_geometry(map_size, screen_size, offset, zoom,
                     minimap_width=MINIMAP_WIDTH, margin=MINIMAP_MARGIN) -> tuple[Rect, Rect]:
    """Return (placement, indicator) rectangles in screen pixels.

    The minimap keeps the map's aspect ratio at a fixed width and is
    anchored to the bottom-right corner of the screen. The indicator is
    the visible window of the map scaled into minimap space.
    """
    map_w, map_h = map_size
    screen_w, screen_h = screen_size
    off_x, off_y = offset

    minimap_height = minimap_width * (map_h / map_w)
    placement = Rect(
        screen_w - minimap_width - margin,
        screen_h - minimap_height - margin,
        minimap_width,
        minimap_height,
    )

    # [0, map width] -> [0, minimap width]
    offset_scale = minimap_width / map_w
    indicator = Rect(
        placement.x + off_x * offset_scale,
        placement.y + off_y * offset_scale,
        minimap_width * (screen_w / zoom) / map_w,
        minimap_height * (screen_h / zoom) / map_h,
    )
    return placement, indicator


def outline_segments(rect: Rect) -> list[pygame.Rect]:
    """The four 1px edges of *rect*: top, right, bottom, left.

    Rects thinner than a pixel still produce 1px edges so the indicator
    never disappears.
    """
    r = rect.to_pygame()
    r.width = max(1, r.width)
    r.height = max(1, r.height)
    return [
        pygame.Rect(r.left, r.top, r.width, 1),
        pygame.Rect(r.right - 1, r.top, 1, r.height),
        pygame.Rect(r.left, r.bottom - 1, r.width, 1),
        pygame.Rect(r.left, r.top, 1, r.height),
    ]
