# tile_viewport/intersect.py

"""
================================================================================
VIEWPORT / MAP INTERSECTION
================================================================================
Classifies how a viewport rectangle overlaps the map rectangle and derives,
per classification, the three rectangles a renderer needs:

  1. map_render_rectangle() - the map-space pixels that are visible.
  2. texture_read_area()    - where those pixels sit in the intermediate
                              buffer the tiles were rendered into.
  3. placement_offset()     - where the read pixels land in the viewport so
                              the visible map edge is flush with the matching
                              viewport edge.

Data Contract:
---------------
- Inputs: map size, viewport top-left relative to the map origin and
  viewport size, all integer pixels.
- Outputs: IntersectionCategory, Rect or Point values.
- Side Effects: None. Every function is pure and safe to call from any thread.
- Invariants: The category is a pure function of the four corner-containment
  booleans. An impossible corner combination or an out-of-bounds read
  rectangle is a defect in this module and raises GeometryError.
================================================================================
"""
from enum import Enum

from .geometry import EMPTY_RECT, ORIGIN, Point, Rect, Size, point_in_rect


class GeometryError(AssertionError):
    """Raised when the clipping math reaches a state no valid input can produce."""


class IntersectionCategory(Enum):
    """
    How the viewport sits relative to the map.

    Edge and corner names say which side of the map the viewport hangs off:
    NORTH means the viewport overhangs the map's north edge, so only the
    southern part of the viewport is over the map.
    """
    TOTALLY_OUT = "totally_out"
    TOTALLY_IN = "totally_in"
    NORTH_WEST = "north_west"
    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"


class Overhang(Enum):
    """Which side of the map the viewport hangs off along one axis."""
    NONE = 0
    LOW = 1   # west on the x axis, north on the y axis
    HIGH = 2  # east on the x axis, south on the y axis


# (x axis, y axis) overhang per category. TOTALLY_OUT has no entry; it is
# handled before any table lookup.
OVERHANG_TABLE = {
    IntersectionCategory.TOTALLY_IN: (Overhang.NONE, Overhang.NONE),
    IntersectionCategory.NORTH_WEST: (Overhang.LOW, Overhang.LOW),
    IntersectionCategory.NORTH: (Overhang.NONE, Overhang.LOW),
    IntersectionCategory.NORTH_EAST: (Overhang.HIGH, Overhang.LOW),
    IntersectionCategory.EAST: (Overhang.HIGH, Overhang.NONE),
    IntersectionCategory.SOUTH_EAST: (Overhang.HIGH, Overhang.HIGH),
    IntersectionCategory.SOUTH: (Overhang.NONE, Overhang.HIGH),
    IntersectionCategory.SOUTH_WEST: (Overhang.LOW, Overhang.HIGH),
    IntersectionCategory.WEST: (Overhang.LOW, Overhang.NONE),
}

# Corner-containment booleans (nw, ne, sw, se) for every combination a
# rectangle can produce against another rectangle. Order is irrelevant here
# because the keys are exact; classify() documents the precedence.
_CORNER_TABLE = {
    (True, True, True, True): IntersectionCategory.TOTALLY_IN,
    (False, False, False, False): IntersectionCategory.TOTALLY_OUT,
    (False, False, True, True): IntersectionCategory.NORTH,
    (True, False, True, False): IntersectionCategory.EAST,
    (True, True, False, False): IntersectionCategory.SOUTH,
    (False, True, False, True): IntersectionCategory.WEST,
    (False, False, False, True): IntersectionCategory.NORTH_WEST,
    (False, False, True, False): IntersectionCategory.NORTH_EAST,
    (True, False, False, False): IntersectionCategory.SOUTH_EAST,
    (False, True, False, False): IntersectionCategory.SOUTH_WEST,
}


def corner_flags(map_size, top_left, viewport_size) -> tuple[bool, bool, bool, bool]:
    """
    Tests the viewport's NW, NE, SW and SE corner pixels against the map.

    The east and south corners are the last pixel column/row the viewport
    covers, so a viewport ending exactly on the map's far edge is inside and
    one starting exactly past it is outside. A zero-size viewport collapses
    to its top-left point.
    """
    x, y = top_left
    width, height = viewport_size
    east = x + max(width - 1, 0)
    south = y + max(height - 1, 0)
    map_rect = Rect(0, 0, map_size[0], map_size[1])

    return (
        point_in_rect((x, y), map_rect),
        point_in_rect((east, y), map_rect),
        point_in_rect((x, south), map_rect),
        point_in_rect((east, south), map_rect),
    )


def category_from_corners(nw: bool, ne: bool, sw: bool, se: bool) -> IntersectionCategory:
    """
    Maps the four corner booleans to a category.

    Only the combinations a rectangle can actually produce are accepted:
    all in, all out, two adjacent corners in, or exactly one corner in.
    Anything else (e.g. two diagonally opposite corners) raises GeometryError.
    """
    try:
        return _CORNER_TABLE[(nw, ne, sw, se)]
    except KeyError:
        raise GeometryError(
            f"Impossible intersect type detected: corners nw={nw} ne={ne} sw={sw} se={se}"
        ) from None


def classify(map_size, top_left, viewport_size) -> IntersectionCategory:
    """
    Classifies a viewport placed at `top_left` (relative to the map origin)
    against a map of `map_size` pixels.
    """
    return category_from_corners(*corner_flags(map_size, top_left, viewport_size))


def overhang_for(category: IntersectionCategory) -> tuple[Overhang, Overhang]:
    """Looks up the per-axis overhang of a category other than TOTALLY_OUT."""
    try:
        return OVERHANG_TABLE[category]
    except KeyError:
        raise GeometryError(f"Impossible intersection type: {category!r}") from None


def _clip_axis(overhang: Overhang, start: int, extent: int, map_extent: int) -> tuple[int, int]:
    if overhang is Overhang.LOW:
        return 0, start + extent
    if overhang is Overhang.HIGH:
        return start, map_extent - start
    return start, extent


def map_render_rectangle(map_size, top_left, viewport_size) -> Rect:
    """
    Returns the map-space rectangle visible through the viewport.

    This is the intersection of the viewport with the map, expressed through
    the overhang table so every category yields exactly the same numbers as
    the per-case formulas (northHeight = y + h, southHeight = map_h - y,
    westWidth = x + w, eastWidth = map_w - x).
    """
    category = classify(map_size, top_left, viewport_size)
    if category is IntersectionCategory.TOTALLY_OUT:
        return EMPTY_RECT

    x_overhang, y_overhang = overhang_for(category)
    x, width = _clip_axis(x_overhang, top_left[0], viewport_size[0], map_size[0])
    y, height = _clip_axis(y_overhang, top_left[1], viewport_size[1], map_size[1])
    return Rect(x, y, width, height)


def check_area(rect, viewport_size):
    """
    Raises GeometryError unless `rect` fits the viewport.

    A read rectangle never starts left of or above the buffer, and is never
    larger than the viewport. A non-empty one also starts inside the
    viewport's extent.
    """
    x, y, width, height = rect
    view_width, view_height = viewport_size

    problems = []
    if x < 0 or y < 0:
        problems.append("negative origin")
    if width < 0 or height < 0:
        problems.append("negative size")
    if width > view_width or height > view_height:
        problems.append("larger than the viewport")
    if width > 0 and height > 0 and (x >= view_width or y >= view_height):
        problems.append("origin outside the viewport extent")

    if problems:
        raise GeometryError(
            f"Read area {tuple(rect)} is invalid for viewport {tuple(viewport_size)}: "
            + ", ".join(problems)
        )


def _read_axis(overhang: Overhang, offset: int, extent: int, rendered_extent: int) -> tuple[int, int]:
    if overhang is Overhang.LOW:
        # The offset is negative here, so the sum trims the off-map part.
        return 0, extent + offset
    if overhang is Overhang.HIGH:
        return offset, rendered_extent - offset
    return offset, extent


def texture_read_area(buffer_offset, viewport_size, category: IntersectionCategory, rendered_size) -> Rect:
    """
    Returns the rectangle of the intermediate buffer holding the wanted pixels.

    Args:
        buffer_offset: The viewport's top-left relative to the buffer's
            top-left. Negative on an axis where the viewport hangs off the
            map's west or north side.
        viewport_size: The viewport's pixel size.
        category: The viewport's intersection category (map-relative).
        rendered_size: The pixel extent of the buffer actually covered by
            rendered tiles, anchored at the buffer origin.
    """
    if category is IntersectionCategory.TOTALLY_OUT:
        check_area(EMPTY_RECT, viewport_size)
        return EMPTY_RECT

    x_overhang, y_overhang = overhang_for(category)
    x, width = _read_axis(x_overhang, buffer_offset[0], viewport_size[0], rendered_size[0])
    y, height = _read_axis(y_overhang, buffer_offset[1], viewport_size[1], rendered_size[1])

    rect = Rect(x, y, width, height)
    check_area(rect, viewport_size)
    return rect


def placement_offset(read_rect, viewport_size, category: IntersectionCategory) -> Point:
    """
    Returns where the read pixels go in the destination viewport.

    Standing on the map's north-west corner you would see the map in the
    bottom-right of the viewport with sky filling the rest, so a low-side
    overhang pushes the content to the far edge on that axis.
    """
    if category is IntersectionCategory.TOTALLY_OUT:
        return ORIGIN

    x_overhang, y_overhang = overhang_for(category)
    read_size = Size(read_rect[2], read_rect[3])
    dest_x = viewport_size[0] - read_size.width if x_overhang is Overhang.LOW else 0
    dest_y = viewport_size[1] - read_size.height if y_overhang is Overhang.LOW else 0
    return Point(dest_x, dest_y)
