# tile_viewport/planner.py

"""
================================================================================
RENDER PLANNER
================================================================================
Turns a viewport position into a complete, renderer-agnostic plan for one
frame: which map tiles to draw, where each goes in the intermediate buffer,
which rectangle of that buffer to read back, and where to blit it in the
viewport.

Per-frame flow:
    relative position -> classify -> map render rectangle -> tile range
    -> (caller renders tiles into the buffer) -> read area + placement
    -> (caller blits)

Data Contract:
---------------
- Inputs: an immutable ViewportConfig and the viewport top-left relative to
  the map origin, in pixels.
- Outputs: an immutable RenderPlan.
- Side Effects: None. No renderer, context or global state is touched.
================================================================================
"""
import logging
from dataclasses import dataclass
from typing import Iterator, NamedTuple

from . import config as DEFAULTS
from .geometry import (
    EMPTY_RECT,
    ORIGIN,
    Point,
    Rect,
    Size,
    grid_coordinate,
    grid_coordinate_round_up,
)
from .intersect import (
    GeometryError,
    IntersectionCategory,
    classify,
    map_render_rectangle,
    placement_offset,
    texture_read_area,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportConfig:
    """
    Immutable description of the map, the viewport and the tile grid.

    Sizes are in tiles; the *_px properties convert them to pixels. The
    viewport is assumed to be a whole number of tiles.
    """
    tile_size: int = DEFAULTS.TILE_SIZE_PX
    map_size_tiles: Size = Size(*DEFAULTS.DEFAULT_MAP_SIZE_TILES)
    viewport_size_tiles: Size = Size(*DEFAULTS.DEFAULT_VIEWPORT_SIZE_TILES)

    def __post_init__(self):
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        # Accept plain tuples/lists from JSON and normalise them.
        object.__setattr__(self, "map_size_tiles", Size(*self.map_size_tiles))
        object.__setattr__(self, "viewport_size_tiles", Size(*self.viewport_size_tiles))
        for name in ("map_size_tiles", "viewport_size_tiles"):
            size = getattr(self, name)
            if size.width < 0 or size.height < 0:
                raise ValueError(f"{name} must be non-negative, got {tuple(size)}")

    @classmethod
    def from_dict(cls, data: dict) -> "ViewportConfig":
        """Builds a config from a JSON-style dict, using module defaults for missing keys."""
        return cls(
            tile_size=data.get("tile_size", DEFAULTS.TILE_SIZE_PX),
            map_size_tiles=Size(*data.get("map_size_tiles", DEFAULTS.DEFAULT_MAP_SIZE_TILES)),
            viewport_size_tiles=Size(*data.get("viewport_size_tiles", DEFAULTS.DEFAULT_VIEWPORT_SIZE_TILES)),
        )

    @property
    def map_size_px(self) -> Size:
        return self.map_size_tiles.scaled(self.tile_size)

    @property
    def viewport_size_px(self) -> Size:
        return self.viewport_size_tiles.scaled(self.tile_size)

    @property
    def buffer_size_tiles(self) -> Size:
        # A viewport whose edges fall mid-tile touches one extra tile per axis.
        slack = DEFAULTS.BUFFER_SLACK_TILES
        return Size(self.viewport_size_tiles.width + slack, self.viewport_size_tiles.height + slack)

    @property
    def buffer_size_px(self) -> Size:
        return self.buffer_size_tiles.scaled(self.tile_size)


class TileDraw(NamedTuple):
    """One tile copy: map tile `source` goes to buffer tile slot `dest`."""
    source: Point
    dest: Point


@dataclass(frozen=True)
class RenderPlan:
    """Everything a renderer needs to draw one viewport for one frame."""
    category: IntersectionCategory
    map_rect: Rect
    first_tile: Point
    tile_span: Size
    draws: tuple
    rendered_area: Rect
    buffer_offset: Point
    read_rect: Rect
    dest_offset: Point

    @property
    def is_empty(self) -> bool:
        return self.category is IntersectionCategory.TOTALLY_OUT

    @property
    def dest_rect(self) -> Rect:
        """Where the read pixels land in the viewport."""
        return Rect.from_parts(self.dest_offset, self.read_rect.size)


def iter_tiles(first, end) -> Iterator[Point]:
    """Yields every (column, row) in [first, end), row by row."""
    for row in range(first[1], end[1]):
        for column in range(first[0], end[0]):
            yield Point(column, row)


def empty_plan() -> RenderPlan:
    return RenderPlan(
        category=IntersectionCategory.TOTALLY_OUT,
        map_rect=EMPTY_RECT,
        first_tile=ORIGIN,
        tile_span=Size(0, 0),
        draws=(),
        rendered_area=EMPTY_RECT,
        buffer_offset=ORIGIN,
        read_rect=EMPTY_RECT,
        dest_offset=ORIGIN,
    )


def plan_render(viewport_config: ViewportConfig, relative_top_left) -> RenderPlan:
    """
    Plans the rendering of a viewport whose top-left is at `relative_top_left`
    pixels from the map origin.
    """
    tile_size = viewport_config.tile_size
    map_size = viewport_config.map_size_px
    viewport_size = viewport_config.viewport_size_px
    top_left = Point(*relative_top_left)

    category = classify(map_size, top_left, viewport_size)
    if category is IntersectionCategory.TOTALLY_OUT:
        return empty_plan()

    map_rect = map_render_rectangle(map_size, top_left, viewport_size)

    # map_rect is clamped to the map, so both corners are non-negative here.
    first_tile = grid_coordinate(map_rect.top_left, tile_size)
    end_tile = grid_coordinate_round_up(map_rect.bottom_right, tile_size)
    tile_span = Size(end_tile.x - first_tile.x, end_tile.y - first_tile.y)

    buffer_tiles = viewport_config.buffer_size_tiles
    if tile_span.width > buffer_tiles.width or tile_span.height > buffer_tiles.height:
        logger.error(
            f"Tile span {tuple(tile_span)} for viewport at {tuple(top_left)} "
            f"exceeds the {tuple(buffer_tiles)} tile buffer."
        )
        raise GeometryError(f"Tile span {tuple(tile_span)} does not fit buffer {tuple(buffer_tiles)}")

    draws = tuple(
        TileDraw(source=tile, dest=tile - first_tile)
        for tile in iter_tiles(first_tile, end_tile)
    )
    rendered_area = Rect(0, 0, tile_span.width * tile_size, tile_span.height * tile_size)
    buffer_offset = top_left - first_tile.scaled(tile_size)

    read_rect = texture_read_area(buffer_offset, viewport_size, category, rendered_area.size)
    dest_offset = placement_offset(read_rect, viewport_size, category)

    return RenderPlan(
        category=category,
        map_rect=map_rect,
        first_tile=first_tile,
        tile_span=tile_span,
        draws=draws,
        rendered_area=rendered_area,
        buffer_offset=buffer_offset,
        read_rect=read_rect,
        dest_offset=dest_offset,
    )
