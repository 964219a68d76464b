"""Shared fixtures. Pygame always runs headless under test."""

from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from tile_viewport.geometry import Size
from tile_viewport.planner import ViewportConfig


@pytest.fixture
def demo_config() -> ViewportConfig:
    """The original demo's setup: 8x8 map, 2x2 viewport, 16px tiles."""
    return ViewportConfig(tile_size=16, map_size_tiles=Size(8, 8), viewport_size_tiles=Size(2, 2))


@pytest.fixture
def wide_config() -> ViewportConfig:
    """A 100x100 px map with a 50x50 px viewport on a 10px grid."""
    return ViewportConfig(tile_size=10, map_size_tiles=Size(10, 10), viewport_size_tiles=Size(5, 5))
