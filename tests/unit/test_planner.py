"""Tests for the per-frame render planner."""

from __future__ import annotations

import pytest

from tile_viewport import config as DEFAULTS
from tile_viewport.geometry import EMPTY_RECT, Point, Rect, Size
from tile_viewport.intersect import IntersectionCategory as Cat
from tile_viewport.planner import TileDraw, ViewportConfig, iter_tiles, plan_render


class TestViewportConfig:
    def test_defaults(self) -> None:
        config = ViewportConfig()
        assert config.tile_size == DEFAULTS.TILE_SIZE_PX
        assert config.map_size_tiles == Size(*DEFAULTS.DEFAULT_MAP_SIZE_TILES)
        assert config.viewport_size_tiles == Size(*DEFAULTS.DEFAULT_VIEWPORT_SIZE_TILES)

    def test_pixel_sizes(self, demo_config: ViewportConfig) -> None:
        assert demo_config.map_size_px == Size(128, 128)
        assert demo_config.viewport_size_px == Size(32, 32)
        assert demo_config.buffer_size_tiles == Size(3, 3)
        assert demo_config.buffer_size_px == Size(48, 48)

    def test_from_dict(self) -> None:
        config = ViewportConfig.from_dict({"tile_size": 8, "map_size_tiles": [4, 6]})
        assert config.tile_size == 8
        assert config.map_size_px == Size(32, 48)
        assert config.viewport_size_tiles == Size(*DEFAULTS.DEFAULT_VIEWPORT_SIZE_TILES)

    def test_normalises_tuples(self) -> None:
        config = ViewportConfig(tile_size=4, map_size_tiles=(3, 3), viewport_size_tiles=[1, 2])
        assert isinstance(config.viewport_size_tiles, Size)
        assert config.viewport_size_px == Size(4, 8)

    @pytest.mark.parametrize("tile_size", [0, -16])
    def test_rejects_bad_tile_size(self, tile_size: int) -> None:
        with pytest.raises(ValueError):
            ViewportConfig(tile_size=tile_size)

    def test_rejects_negative_size(self) -> None:
        with pytest.raises(ValueError):
            ViewportConfig(map_size_tiles=Size(-1, 4))

    def test_is_immutable(self, demo_config: ViewportConfig) -> None:
        with pytest.raises(AttributeError):
            demo_config.tile_size = 32


class TestIterTiles:
    def test_row_major(self) -> None:
        assert list(iter_tiles(Point(1, 2), Point(3, 4))) == [
            Point(1, 2), Point(2, 2), Point(1, 3), Point(2, 3),
        ]

    def test_empty_range(self) -> None:
        assert list(iter_tiles(Point(2, 2), Point(2, 5))) == []


class TestPlanRender:
    """Cases from the original demo: 8x8 map of 16px tiles, 32x32 viewport."""

    def test_north_east(self, demo_config: ViewportConfig) -> None:
        plan = plan_render(demo_config, Point(101, -6))
        assert plan.category is Cat.NORTH_EAST
        assert plan.map_rect == Rect(101, 0, 27, 26)
        assert plan.first_tile == Point(6, 0)
        assert plan.tile_span == Size(2, 2)
        assert plan.draws == (
            TileDraw(Point(6, 0), Point(0, 0)),
            TileDraw(Point(7, 0), Point(1, 0)),
            TileDraw(Point(6, 1), Point(0, 1)),
            TileDraw(Point(7, 1), Point(1, 1)),
        )
        assert plan.rendered_area == Rect(0, 0, 32, 32)
        assert plan.buffer_offset == Point(5, -6)
        assert plan.read_rect == Rect(5, 0, 27, 26)
        assert plan.dest_offset == Point(0, 6)
        assert plan.dest_rect == Rect(0, 6, 27, 26)

    def test_west(self, demo_config: ViewportConfig) -> None:
        plan = plan_render(demo_config, Point(-19, 39))
        assert plan.category is Cat.WEST
        assert plan.map_rect == Rect(0, 39, 13, 32)
        assert plan.tile_span == Size(1, 3)
        assert len(plan.draws) == 3
        assert plan.buffer_offset == Point(-19, 7)
        assert plan.read_rect == Rect(0, 7, 13, 32)
        assert plan.dest_offset == Point(19, 0)

    def test_totally_in_mid_tile(self, demo_config: ViewportConfig) -> None:
        plan = plan_render(demo_config, Point(50, 34))
        assert plan.category is Cat.TOTALLY_IN
        assert plan.map_rect == Rect(50, 34, 32, 32)
        assert plan.first_tile == Point(3, 2)
        assert plan.tile_span == Size(3, 3)
        assert plan.buffer_offset == Point(2, 2)
        assert plan.read_rect == Rect(2, 2, 32, 32)
        assert plan.dest_offset == Point(0, 0)

    def test_tile_aligned_needs_no_slack(self, demo_config: ViewportConfig) -> None:
        plan = plan_render(demo_config, Point(32, 32))
        assert plan.tile_span == Size(2, 2)
        assert plan.read_rect == Rect(0, 0, 32, 32)

    def test_totally_out(self, demo_config: ViewportConfig) -> None:
        plan = plan_render(demo_config, Point(-68, -14))
        assert plan.is_empty
        assert plan.draws == ()
        assert plan.map_rect == EMPTY_RECT
        assert plan.read_rect == EMPTY_RECT
        assert plan.dest_offset == Point(0, 0)

    def test_worked_example_grid(self, wide_config: ViewportConfig) -> None:
        plan = plan_render(wide_config, Point(-20, -20))
        assert plan.category is Cat.NORTH_WEST
        assert plan.map_rect == Rect(0, 0, 30, 30)
        assert plan.read_rect == Rect(0, 0, 30, 30)
        assert plan.dest_offset == Point(20, 20)

    def test_accepts_plain_tuple(self, demo_config: ViewportConfig) -> None:
        assert plan_render(demo_config, (50, 34)) == plan_render(demo_config, Point(50, 34))


class TestPlanSweep:
    """Every position around the map yields a self-consistent plan."""

    @pytest.mark.parametrize("fixture_name", ["demo_config", "wide_config"])
    def test_plans_are_consistent(self, fixture_name: str, request: pytest.FixtureRequest) -> None:
        config: ViewportConfig = request.getfixturevalue(fixture_name)
        map_w, map_h = config.map_size_px
        view_w, view_h = config.viewport_size_px
        buffer_tiles = config.buffer_size_tiles

        for x in range(-view_w - 5, map_w + 5, 3):
            for y in range(-view_h - 5, map_h + 5, 5):
                plan = plan_render(config, Point(x, y))
                if plan.is_empty:
                    assert plan.draws == ()
                    continue

                # The read-back covers exactly the visible map pixels.
                assert plan.read_rect.size == plan.map_rect.size
                assert plan.read_rect.x + plan.read_rect.width <= plan.rendered_area.width
                assert plan.read_rect.y + plan.read_rect.height <= plan.rendered_area.height

                # The tiles fit the buffer and every one is on the map.
                assert plan.tile_span.width <= buffer_tiles.width
                assert plan.tile_span.height <= buffer_tiles.height
                assert len(plan.draws) == plan.tile_span.area
                for draw in plan.draws:
                    assert 0 <= draw.source.x < config.map_size_tiles.width
                    assert 0 <= draw.source.y < config.map_size_tiles.height

                # Placed pixels stay inside the viewport.
                dest = plan.dest_rect
                assert dest.x >= 0 and dest.y >= 0
                assert dest.x + dest.width <= view_w
                assert dest.y + dest.height <= view_h

                # The visible map lands where it sits relative to the viewport.
                assert dest.x == plan.map_rect.x - x
                assert dest.y == plan.map_rect.y - y
