# tile_viewport/runtime/__init__.py

# This file makes the 'runtime' directory a Python package.
# It holds the Pygame-dependent half of the project; importing it requires pygame.

from .renderer import TileMapRenderer

__all__ = ["TileMapRenderer"]
