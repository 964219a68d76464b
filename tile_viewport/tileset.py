# tile_viewport/tileset.py

"""
================================================================================
TILESET SOURCES
================================================================================
Produces the tileset pixels the demo map is drawn from, either generated
procedurally or loaded from an image file.

Like the clipping engine this module has no dependency on Pygame. Arrays are
returned in (width, height, 3) order, the layout pygame.surfarray expects;
Pillow works with (height, width, channels), so conversions transpose.
================================================================================
"""
import logging
import os

import numpy as np
from PIL import Image

from . import config as DEFAULTS

logger = logging.getLogger(__name__)


def make_checker_tileset(size_tiles=DEFAULTS.DEFAULT_TILESET_SIZE_TILES,
                         tile_size: int = DEFAULTS.TILE_SIZE_PX,
                         seed: int = DEFAULTS.DEFAULT_TILESET_SEED) -> np.ndarray:
    """
    Creates a tileset where every tile has its own flat colour and a darker
    one-pixel border, so a misplaced or clipped tile is easy to spot.

    Returns:
        np.ndarray: uint8 array of shape (width_px, height_px, 3).
    """
    columns, rows = size_tiles
    rng = np.random.default_rng(seed)

    # One colour per tile, kept away from pure black and the debug colours.
    tile_colors = rng.integers(40, 216, size=(columns, rows, 3), dtype=np.uint8)

    # Expand each tile colour to a tile_size x tile_size block.
    color_array = np.repeat(np.repeat(tile_colors, tile_size, axis=0), tile_size, axis=1)

    # Darken the first row and column of each tile to draw the grid lines.
    border = np.zeros(color_array.shape[:2], dtype=bool)
    border[::tile_size, :] = True
    border[:, ::tile_size] = True
    shaded = (color_array[border].astype(np.float32) * DEFAULTS.TILE_BORDER_SHADE).astype(np.uint8)
    color_array[border] = shaded

    return color_array


def load_tileset(path: str) -> np.ndarray:
    """Loads a tileset image with Pillow and returns it as a (width, height, 3) array."""
    if not os.path.exists(path):
        logger.error(f"Tileset image '{path}' could not be loaded: file not found.")
        raise FileNotFoundError(f"Could not find tileset image '{path}'")

    with Image.open(path) as img:
        img_data = np.asarray(img.convert("RGB"), dtype=np.uint8)

    logger.info(f"Loaded tileset '{path}' ({img_data.shape[1]}x{img_data.shape[0]} pixels).")
    return np.ascontiguousarray(np.transpose(img_data, (1, 0, 2)))


def array_to_image(color_array: np.ndarray) -> Image.Image:
    """Converts a (width, height, 3) colour array to a Pillow RGB image."""
    img_data = np.ascontiguousarray(np.transpose(color_array, (1, 0, 2)))
    return Image.fromarray(img_data.astype(np.uint8), "RGB")
