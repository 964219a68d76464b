# tile_viewport/cases.py

"""Demo viewport cases: fixed windows placed around the map on screen."""
from typing import NamedTuple

from . import config as DEFAULTS
from .geometry import Point


class DemoCase(NamedTuple):
    name: str
    # Viewport top-left on screen.
    region: Point
    # Where the case's intermediate buffer and composed viewport are shown.
    buffer_at: Point
    screen_at: Point

    def relative_to(self, map_origin) -> Point:
        """The viewport's top-left relative to a map drawn at `map_origin`."""
        return self.region - map_origin


def load_cases(scene: dict) -> list[DemoCase]:
    """Reads the 'cases' mapping of a scene config, falling back to the defaults."""
    cases = scene.get("cases", DEFAULTS.DEFAULT_CASES)
    return [
        DemoCase(
            name=name,
            region=Point(*case["region"]),
            buffer_at=Point(*case.get("buffer_at", (0, 0))),
            screen_at=Point(*case.get("screen_at", (0, 0))),
        )
        for name, case in cases.items()
    ]


def map_origin_from(scene: dict) -> Point:
    return Point(*scene.get("map_origin", DEFAULTS.DEFAULT_MAP_ORIGIN))
