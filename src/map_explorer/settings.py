"""Default constants for Map Explorer. No logic lives here."""

# --- Window ---
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 480
FPS = 60
WINDOW_TITLE = "Map Explorer"

# --- Zoom ---
ZOOM_MIN = 0.25
ZOOM_MAX = 4.0
ZOOM_FACTOR = 2.0

# --- Scrolling (map pixels per frame at zoom 1) ---
SCROLL_SPEED = 10.0

# --- Generated map ---
MAP_SIZE = 4096
TILE_SIZE = 32
MAP_SEED = 420

# --- Minimap ---
MINIMAP_WIDTH = 120
MINIMAP_MARGIN = 20
MINIMAP_BORDER = 2

# --- Colors ---
COLOR_BACKGROUND = (100, 149, 237)  # cornflower blue
COLOR_BLACK = (0, 0, 0)
