# tile_viewport/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback constants for the viewport
clipping engine and its demo harness. These values are used if they are not
explicitly provided by the user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC SCENE.
Instead, pass a configuration dictionary to ViewportConfig.from_dict().
================================================================================
"""

# --- Grid ---
# Tiles are assumed to be square, TILE_SIZE_PX pixels on a side.
TILE_SIZE_PX = 16

# --- Map & Viewport Sizes (in tiles) ---
# The demo map is the tileset itself, so these two match by default.
DEFAULT_TILESET_SIZE_TILES = (8, 8)
DEFAULT_MAP_SIZE_TILES = DEFAULT_TILESET_SIZE_TILES

# The imaginary window looking at the map. A 2x2 viewable area will need a
# 3x3 tile render area once the window sits mid-tile.
DEFAULT_VIEWPORT_SIZE_TILES = (2, 2)

# One extra tile per axis in the intermediate buffer.
BUFFER_SLACK_TILES = 1

# --- Colours (RGB) ---
# Stands in for a sky texture behind the map in the composed viewport.
COLOR_SKY = (255, 180, 0)
# Never visible in a correct frame; any cyan in a viewport is a clipping bug.
COLOR_BUFFER_CLEAR = (0, 255, 255)
COLOR_OUTLINE = (255, 0, 255)
COLOR_BACKGROUND = (0, 40, 60)

# --- Procedural Tileset ---
DEFAULT_TILESET_SEED = 1337
# How much darker the one-pixel tile border is than the tile fill.
TILE_BORDER_SHADE = 0.6

# --- Demo Display ---
DEFAULT_SCREEN_SIZE = (1024, 768)
CLOCK_TICK_RATE = 60
# Where the full map is drawn on screen; viewport cases are placed relative to it.
DEFAULT_MAP_ORIGIN = (432, 322)

# --- Demo Cases ---
# Each case: viewport top-left on screen, where to show its intermediate
# buffer, and where to show the composed viewport.
DEFAULT_CASES = {
    "north_west": {"region": (416, 306), "buffer_at": (356, 244), "screen_at": (301, 192)},
    "north": {"region": (480, 306), "buffer_at": (476, 245), "screen_at": (474, 170)},
    "north_east": {"region": (533, 316), "buffer_at": (580, 265), "screen_at": (649, 208)},
    "east": {"region": (532, 370), "buffer_at": (606, 359), "screen_at": (686, 357)},
    "south_east": {"region": (534, 426), "buffer_at": (595, 481), "screen_at": (651, 537)},
    "south": {"region": (476, 427), "buffer_at": (468, 491), "screen_at": (469, 592)},
    "south_west": {"region": (426, 420), "buffer_at": (361, 464), "screen_at": (316, 525)},
    "west": {"region": (413, 361), "buffer_at": (323, 358), "screen_at": (271, 410)},
    "all_in": {"region": (482, 356), "buffer_at": (164, 278), "screen_at": (82, 294)},
    "all_out": {"region": (364, 308), "buffer_at": (164, 337), "screen_at": (81, 334)},
}

# The mouse-following viewport's panels.
MOUSE_CASE_BUFFER_AT = (770, 255)
MOUSE_CASE_SCREEN_AT = (777, 323)
