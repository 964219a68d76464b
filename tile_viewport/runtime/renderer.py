# tile_viewport/runtime/renderer.py

"""
================================================================================
TILE MAP RENDERER
================================================================================
This module provides the Pygame side of the viewport pipeline. It executes a
RenderPlan: copies the planned tiles from a tileset into an intermediate
buffer one tile larger than the viewport, then copies the useful part of that
buffer into the viewport surface over a sky-coloured background.

All decisions about which tiles and pixels are needed come from the planner;
this class only moves pixels. Surfaces are created without a display, so it
also works headless.
================================================================================
"""
import logging

# This module requires Pygame for rendering, as it is the runtime component.
import pygame

from .. import config as DEFAULTS
from ..geometry import Point
from ..planner import RenderPlan, ViewportConfig, plan_render


class TileMapRenderer:
    """
    Renders viewports over a tile map whose tiles are read from `tileset`.

    In the demo the map is the tileset itself, so map tile (c, r) is drawn
    from tileset tile (c, r).
    """
    def __init__(self, tileset: pygame.Surface, viewport_config: ViewportConfig,
                 sky_color=DEFAULTS.COLOR_SKY, buffer_color=DEFAULTS.COLOR_BUFFER_CLEAR):
        """
        Args:
            tileset (pygame.Surface): Source of tile pixels.
            viewport_config (ViewportConfig): Map, viewport and grid sizes.
            sky_color: Fill for the off-map part of a composed viewport.
            buffer_color: Fill for the intermediate buffer before tiles are drawn.
        """
        self.logger = logging.getLogger(__name__)
        self.tileset = tileset
        self.config = viewport_config
        self.sky_color = sky_color
        self.buffer_color = buffer_color

        tileset_width, tileset_height = tileset.get_size()
        map_width, map_height = viewport_config.map_size_px
        if tileset_width < map_width or tileset_height < map_height:
            self.logger.warning(
                f"Tileset ({tileset_width}x{tileset_height}) is smaller than the map "
                f"({map_width}x{map_height}); some tiles will render blank."
            )

        # Reused every frame; created on-demand.
        self._buffer = None

        self.logger.info(
            f"Renderer ready: map {tuple(viewport_config.map_size_tiles)} tiles, "
            f"viewport {tuple(viewport_config.viewport_size_tiles)} tiles, "
            f"tile size {viewport_config.tile_size}px."
        )

    @property
    def buffer(self) -> pygame.Surface:
        """The intermediate render target, sized one tile larger than the viewport."""
        if self._buffer is None:
            self._buffer = pygame.Surface(tuple(self.config.buffer_size_px))
        return self._buffer

    def plan(self, relative_top_left) -> RenderPlan:
        return plan_render(self.config, relative_top_left)

    def render_to_buffer(self, plan: RenderPlan, buffer: pygame.Surface):
        """Clears the buffer and draws every planned tile into it."""
        tile_size = self.config.tile_size
        buffer.fill(self.buffer_color)

        for draw in plan.draws:
            source_rect = pygame.Rect(draw.source.x * tile_size, draw.source.y * tile_size, tile_size, tile_size)
            dest_pos = (draw.dest.x * tile_size, draw.dest.y * tile_size)
            buffer.blit(self.tileset, dest_pos, source_rect)

        self.logger.debug(f"Rendered {len(plan.draws)} tiles for a {plan.category.value} viewport.")

    def compose(self, plan: RenderPlan, buffer: pygame.Surface, target: pygame.Surface):
        """Fills the viewport with sky and copies the read area of the buffer onto it."""
        target.fill(self.sky_color)
        if plan.is_empty:
            return

        target.blit(buffer, tuple(plan.dest_offset), pygame.Rect(tuple(plan.read_rect)))

    def render_viewport(self, relative_top_left, target: pygame.Surface | None = None):
        """
        Runs the full per-frame pipeline for one viewport.

        Args:
            relative_top_left: Viewport top-left relative to the map origin, in pixels.
            target (pygame.Surface | None): Destination viewport surface. A new
                one of the viewport's size is created when omitted.

        Returns:
            tuple[RenderPlan, pygame.Surface]: The plan used and the composed viewport.
        """
        if target is None:
            target = pygame.Surface(tuple(self.config.viewport_size_px))

        plan = self.plan(Point(*relative_top_left))
        self.render_to_buffer(plan, self.buffer)
        self.compose(plan, self.buffer, target)
        return plan, target
