#!/usr/bin/env python3
"""Generate the alternate map assets for Map Explorer.

Run:  python tools/generate_assets.py

Uses SDL dummy video driver for headless operation.
Writes, relative to the project root:
  assets/map.png                  terrain image used as the alternate map
  assets/maps/terrain.tmx         the same terrain as a Tiled map
  assets/maps/terrain_tiles.png   tileset for terrain.tmx
"""
import os
import random

os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame  # noqa: E402

pygame.init()
# Need a display surface even with dummy driver
pygame.display.set_mode((1, 1))

TILE = 32
MAP_W, MAP_H = 2048, 1536  # non-square so the minimap aspect ratio shows
BLOCK = 8                  # terrain is shaded in BLOCK x BLOCK squares
SEED = 7

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
ASSETS_DIR = os.path.join(PROJECT_ROOT, "assets")
MAPS_DIR = os.path.join(ASSETS_DIR, "maps")

# (upper height bound, color)
TERRAIN_BANDS = [
    (0.35, (40, 80, 160)),    # deep water
    (0.42, (60, 120, 190)),   # shallow water
    (0.46, (210, 195, 140)),  # sand
    (0.62, (90, 160, 70)),    # grass
    (0.75, (40, 110, 50)),    # forest
    (0.88, (120, 110, 100)),  # rock
    (1.01, (235, 235, 240)),  # snow
]


def ensure_dirs():
    os.makedirs(MAPS_DIR, exist_ok=True)


# ---------------------------------------------------------------------------
# Value noise
# ---------------------------------------------------------------------------

class ValueNoise:
    """Bilinear value noise over a random lattice, summed over octaves."""

    def __init__(self, seed, octaves=4, base_cells=6):
        rng = random.Random(seed)
        self.octaves = []
        cells = base_cells
        amplitude = 1.0
        for _ in range(octaves):
            lattice = [[rng.random() for _ in range(cells + 1)] for _ in range(cells + 1)]
            self.octaves.append((cells, amplitude, lattice))
            cells *= 2
            amplitude /= 2
        self._norm = sum(a for _, a, _ in self.octaves)

    def sample(self, u, v):
        """Height in [0, 1] at normalized coordinates (u, v) in [0, 1]."""
        total = 0.0
        for cells, amplitude, lattice in self.octaves:
            fx, fy = u * cells, v * cells
            ix, iy = min(int(fx), cells - 1), min(int(fy), cells - 1)
            tx, ty = fx - ix, fy - iy
            # Smoothstep the blend weights
            tx = tx * tx * (3 - 2 * tx)
            ty = ty * ty * (3 - 2 * ty)
            top = lattice[iy][ix] * (1 - tx) + lattice[iy][ix + 1] * tx
            bottom = lattice[iy + 1][ix] * (1 - tx) + lattice[iy + 1][ix + 1] * tx
            total += amplitude * (top * (1 - ty) + bottom * ty)
        return total / self._norm


def band_index(height):
    for i, (limit, _) in enumerate(TERRAIN_BANDS):
        if height < limit:
            return i
    return len(TERRAIN_BANDS) - 1


def shade(color, amount):
    return tuple(max(0, min(255, int(c + amount))) for c in color)


# ---------------------------------------------------------------------------
# map.png
# ---------------------------------------------------------------------------

def generate_map_png(noise):
    surf = pygame.Surface((MAP_W, MAP_H))
    for by in range(0, MAP_H, BLOCK):
        for bx in range(0, MAP_W, BLOCK):
            h = noise.sample(bx / MAP_W, by / MAP_H)
            _, color = TERRAIN_BANDS[band_index(h)]
            # Brighten higher ground within a band a little
            surf.fill(shade(color, (h - 0.5) * 40), (bx, by, BLOCK, BLOCK))
    path = os.path.join(ASSETS_DIR, "map.png")
    pygame.image.save(surf, path)
    print(f"  {path} ({MAP_W}x{MAP_H})")


# ---------------------------------------------------------------------------
# terrain.tmx + tileset
# ---------------------------------------------------------------------------

def generate_tileset():
    sheet = pygame.Surface((TILE * len(TERRAIN_BANDS), TILE))
    rng = random.Random(SEED)
    for col, (_, color) in enumerate(TERRAIN_BANDS):
        x0 = col * TILE
        sheet.fill(color, (x0, 0, TILE, TILE))
        # Speckle so individual tiles read at high zoom
        for _ in range(24):
            px, py = rng.randrange(TILE), rng.randrange(TILE)
            sheet.set_at((x0 + px, py), shade(color, rng.choice((-25, 25))))
    path = os.path.join(MAPS_DIR, "terrain_tiles.png")
    pygame.image.save(sheet, path)
    print(f"  {path}")


def write_tmx(path, width, height, gids, tile_count):
    """Write a single-layer TMX with an embedded tileset."""
    rows = [",".join(str(gid) for gid in row) for row in gids]
    csv_data = ",\n".join(rows)
    xml = f"""<?xml version="1.0" encoding="UTF-8"?>
<map version="1.10" orientation="orthogonal" renderorder="right-down"
     width="{width}" height="{height}" tilewidth="{TILE}" tileheight="{TILE}"
     infinite="0" nextlayerid="2" nextobjectid="1">
 <tileset firstgid="1" name="terrain" tilewidth="{TILE}" tileheight="{TILE}"
          tilecount="{tile_count}" columns="{tile_count}">
  <image source="terrain_tiles.png" width="{TILE * tile_count}" height="{TILE}"/>
 </tileset>
 <layer id="1" name="ground" width="{width}" height="{height}">
  <data encoding="csv">
{csv_data}
</data>
 </layer>
</map>"""
    with open(path, "w") as f:
        f.write(xml)


def generate_tmx(noise):
    width, height = MAP_W // TILE, MAP_H // TILE
    gids = [
        [1 + band_index(noise.sample(x / width, y / height)) for x in range(width)]
        for y in range(height)
    ]
    path = os.path.join(MAPS_DIR, "terrain.tmx")
    write_tmx(path, width, height, gids, len(TERRAIN_BANDS))
    print(f"  {path} ({width}x{height} tiles)")


def main():
    print("Generating Map Explorer assets...")
    ensure_dirs()
    noise = ValueNoise(SEED)

    print("Images:")
    generate_map_png(noise)

    print("Tiled:")
    generate_tileset()
    generate_tmx(noise)

    print("Done! All assets written to assets/")


if __name__ == "__main__":
    main()
