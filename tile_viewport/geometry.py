# tile_viewport/geometry.py

"""
================================================================================
GEOMETRY PRIMITIVES
================================================================================
Integer points, sizes and rectangles plus the grid quantization helpers used
to turn pixel coordinates into tile coordinates.

Everything here is a pure, stateless value or function with no dependency on
Pygame. The value types are NamedTuples so they can be handed straight to
pygame calls that accept (x, y) or (x, y, w, h) sequences.

Data Contract:
---------------
- Rectangles are top-left anchored and half-open: a rectangle covers
  x <= px < x + width and y <= py < y + height.
- Points may be negative (above/left of the map origin).
- Sizes are non-negative.
================================================================================
"""
from typing import NamedTuple


class Point(NamedTuple):
    """An integer pixel coordinate, or a (column, row) grid coordinate."""
    x: int
    y: int

    def __add__(self, other):
        return Point(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Point(self.x - other[0], self.y - other[1])

    def scaled(self, factor: int) -> "Point":
        return Point(self.x * factor, self.y * factor)


class Size(NamedTuple):
    """An integer extent in pixels or tiles."""
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def scaled(self, factor: int) -> "Size":
        return Size(self.width * factor, self.height * factor)


class Rect(NamedTuple):
    """An axis-aligned rectangle. Zero area means "nothing to render"."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_parts(cls, top_left, size) -> "Rect":
        return cls(top_left[0], top_left[1], size[0], size[1])

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def bottom_right(self) -> Point:
        """The exclusive bottom-right corner."""
        return Point(self.x + self.width, self.y + self.height)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


EMPTY_RECT = Rect(0, 0, 0, 0)
ORIGIN = Point(0, 0)


def point_in_rect(point, rect) -> bool:
    """
    Half-open containment test.

    A point lying exactly on the right or bottom edge is outside. A viewport
    whose far edge lands on the map boundary therefore classifies as fully
    inside instead of hanging off that edge.
    """
    px, py = point
    rx, ry, rw, rh = rect
    return rx <= px < rx + rw and ry <= py < ry + rh


def _div_toward_zero(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def grid_coordinate(point, cell_size: int) -> Point:
    """
    Returns the (column, row) of the grid cell containing a pixel coordinate.

    Division truncates toward zero. Valid call sites pass non-negative
    coordinates (already clamped to the map), where this is plain floor
    division; callers holding a negative coordinate must clamp the result.
    """
    return Point(_div_toward_zero(point[0], cell_size), _div_toward_zero(point[1], cell_size))


def grid_coordinate_round_up(point, cell_size: int) -> Point:
    """
    Like grid_coordinate(), but steps to the next cell on any remainder.

    Applied to an exclusive bottom-right pixel coordinate this gives the
    exclusive end of the tile range, so partially covered trailing tiles are
    included.
    """
    column, row = grid_coordinate(point, cell_size)
    if point[0] % cell_size != 0:
        column += 1
    if point[1] % cell_size != 0:
        row += 1
    return Point(column, row)
