"""Draws the controller's geometry onto a pygame surface."""
from __future__ import annotations

import math

import pygame

from map_explorer.camera import Rect
from map_explorer.minimap import outline_segments
from map_explorer.settings import (
    COLOR_BACKGROUND, COLOR_BLACK, MINIMAP_WIDTH, MINIMAP_MARGIN, MINIMAP_BORDER,
)


class Renderer:
    def __init__(self, minimap_width=MINIMAP_WIDTH, margin=MINIMAP_MARGIN, border=MINIMAP_BORDER):
        self.minimap_width = minimap_width
        self.margin = margin
        self.border = border
        self._thumb_key = None
        self._thumb = None

    def draw(self, screen, controller):
        """Draw one frame: the map window full-screen, then the minimap."""
        screen.fill(COLOR_BACKGROUND)
        self.draw_map(screen, controller.active_map, controller.source_rect())

        geometry = controller.minimap_geometry(
            *screen.get_size(), minimap_width=self.minimap_width, margin=self.margin,
        )
        if geometry is not None:
            placement, indicator = geometry
            self.draw_minimap(screen, controller.active_map, placement, indicator)

    def draw_map(self, screen, map_image, source: Rect):
        """Stretch *source* (map pixels) over the whole screen.

        Only the part of *source* that lies inside the map is drawn; the
        rest of the screen keeps whatever was there.
        """
        screen_w, screen_h = screen.get_size()
        if source.width <= 0 or source.height <= 0:
            return
        scale_x = screen_w / source.width
        scale_y = screen_h / source.height

        # Round outward so a fractional offset never leaves a gap at the edges
        left, top = math.floor(source.x), math.floor(source.y)
        right = math.ceil(source.x + source.width)
        bottom = math.ceil(source.y + source.height)
        map_rect = pygame.Rect((0, 0), map_image.get_size())
        clip = pygame.Rect(left, top, right - left, bottom - top).clip(map_rect)
        if clip.width == 0 or clip.height == 0:
            return

        dest_x = math.floor((clip.left - source.x) * scale_x)
        dest_y = math.floor((clip.top - source.y) * scale_y)
        dest_w = max(1, math.ceil((clip.right - source.x) * scale_x) - dest_x)
        dest_h = max(1, math.ceil((clip.bottom - source.y) * scale_y) - dest_y)

        window = map_image.subsurface(clip)
        screen.blit(pygame.transform.scale(window, (dest_w, dest_h)), (dest_x, dest_y))

    def _thumbnail(self, map_image, size):
        key = (id(map_image), size)
        if key != self._thumb_key:
            # smoothscale only handles 24/32-bit surfaces
            if map_image.get_bitsize() in (24, 32):
                self._thumb = pygame.transform.smoothscale(map_image, size)
            else:
                self._thumb = pygame.transform.scale(map_image, size)
            self._thumb_key = key
        return self._thumb

    def draw_minimap(self, screen, map_image, placement: Rect, indicator: Rect):
        area = placement.to_pygame()
        if area.width <= 0 or area.height <= 0:
            return

        # Border
        pygame.draw.rect(screen, COLOR_BLACK, area.inflate(self.border * 2, self.border * 2))

        screen.blit(self._thumbnail(map_image, area.size), area.topleft)

        for segment in outline_segments(indicator):
            screen.fill(COLOR_BLACK, segment)
