# tile_viewport/__init__.py

# The pure clipping engine. Nothing imported here depends on Pygame; the
# renderer lives in tile_viewport.runtime.

from .geometry import Point, Rect, Size, grid_coordinate, grid_coordinate_round_up, point_in_rect
from .intersect import (
    GeometryError,
    IntersectionCategory,
    classify,
    map_render_rectangle,
    placement_offset,
    texture_read_area,
)
from .planner import RenderPlan, TileDraw, ViewportConfig, plan_render

__all__ = [
    "Point",
    "Rect",
    "Size",
    "point_in_rect",
    "grid_coordinate",
    "grid_coordinate_round_up",
    "GeometryError",
    "IntersectionCategory",
    "classify",
    "map_render_rectangle",
    "texture_read_area",
    "placement_offset",
    "RenderPlan",
    "TileDraw",
    "ViewportConfig",
    "plan_render",
]
