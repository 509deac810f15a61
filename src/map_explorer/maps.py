"""Map images: the seeded tile map and the alternate image loaded from disk."""
from __future__ import annotations

import logging
import os
import random
from xml.etree import ElementTree

import pygame
import pytmx
import pytmx.util_pygame

from map_explorer.settings import MAP_SIZE, TILE_SIZE, MAP_SEED

logger = logging.getLogger(__name__)


class MapLoadError(Exception):
    """The alternate map image could not be read."""


def generate_tile_map(size=MAP_SIZE, tile_size=TILE_SIZE, seed=MAP_SEED) -> pygame.Surface:
    """Build a size x size surface of randomly colored square tiles.

    The same seed always yields the same colors.
    """
    surface = pygame.Surface((size, size))
    rng = random.Random(seed)
    tiles = size // tile_size
    for x in range(tiles):
        for y in range(tiles):
            color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
            surface.fill(color, (x * tile_size, y * tile_size, tile_size, tile_size))
    return surface


def _render_tmx(path: str) -> pygame.Surface:
    """Flatten every visible tile layer of a Tiled map into one surface."""
    tmx_data = pytmx.util_pygame.load_pygame(path)
    tw, th = tmx_data.tilewidth, tmx_data.tileheight
    surface = pygame.Surface((tmx_data.width * tw, tmx_data.height * th), pygame.SRCALPHA)
    for layer in tmx_data.visible_layers:
        if not isinstance(layer, pytmx.TiledTileLayer):
            continue
        for x, y, image in layer.tiles():
            surface.blit(image, (x * tw, y * th))
    return surface


def load_map_image(path: str) -> pygame.Surface:
    """Load a map image from disk.

    Tiled maps (.tmx) are rendered through pytmx; anything else goes to
    pygame.image.load. Raises MapLoadError on any failure.
    """
    if not os.path.isfile(path):
        raise MapLoadError(f"map image not found: {path}")
    try:
        if path.lower().endswith(".tmx"):
            image = _render_tmx(path)
        else:
            image = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                image = image.convert()
    except (pygame.error, OSError, ValueError, ElementTree.ParseError) as exc:
        raise MapLoadError(f"could not load map image {path}: {exc}") from exc
    if image.get_width() == 0 or image.get_height() == 0:
        raise MapLoadError(f"map image is empty: {path}")
    return image


def load_maps(config) -> tuple[pygame.Surface, pygame.Surface]:
    """Return (generated, alternate) map images.

    If the alternate image can't be loaded, a second generated map with
    the next seed takes its place so there are always two maps to switch
    between.
    """
    generated = generate_tile_map(config.map_size, config.tile_size, config.seed)
    try:
        alternate = load_map_image(config.map_path)
    except MapLoadError as exc:
        logger.warning("%s; using a generated map instead", exc)
        alternate = generate_tile_map(config.map_size, config.tile_size, config.seed + 1)
    return generated, alternate
