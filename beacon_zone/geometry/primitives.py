"""
Geometry Primitives
===================

Integer points and the Manhattan metric - NO state, NO side effects.

Design:
- Immutable Point (frozen dataclass pattern)
- Pure functions over plain ints (Python ints never overflow)
"""

from dataclasses import dataclass, asdict
from typing import Dict, Sequence, Tuple, Union


@dataclass(frozen=True)
class Point:
    """
    Immutable integer 2D coordinate.

    Attributes:
        x: Column
        y: Row
    """

    x: int
    y: int

    @classmethod
    def of(cls, value: Union["Point", Sequence[int]]) -> "Point":
        """
        Coerce a Point or an (x, y) pair into a Point.

        Raises:
            ValueError: If value is not a 2-element sequence
        """
        if isinstance(value, Point):
            return value
        if len(value) != 2:
            raise ValueError(f"Point needs exactly 2 coordinates, got {value!r}")
        x, y = value
        return cls(int(x), int(y))

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class BoundingBox:
    """
    Immutable axis-aligned rectangle, inclusive on both ends.

    Unpacks as (min_x, min_y, max_x, max_y).

    Invariants:
        - min_x <= max_x
        - min_y <= max_y
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self):
        """Validate invariants."""
        if self.min_x > self.max_x:
            raise ValueError(f"BoundingBox min_x > max_x: {self.min_x} > {self.max_x}")
        if self.min_y > self.max_y:
            raise ValueError(f"BoundingBox min_y > max_y: {self.min_y} > {self.max_y}")

    @classmethod
    def of(cls, value: Union["BoundingBox", Sequence[int]]) -> "BoundingBox":
        """Coerce a BoundingBox or a (min_x, min_y, max_x, max_y) sequence."""
        if isinstance(value, BoundingBox):
            return value
        if len(value) != 4:
            raise ValueError(
                f"BoundingBox needs (min_x, min_y, max_x, max_y), got {value!r}"
            )
        min_x, min_y, max_x, max_y = (int(v) for v in value)
        return cls(min_x, min_y, max_x, max_y)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def contains(self, point: Point) -> bool:
        point = Point.of(point)
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def to_dict(self) -> Dict[str, int]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    def __iter__(self):
        return iter(self.as_tuple())


def abs_diff(a: int, b: int) -> int:
    """Absolute difference of two integers."""
    return a - b if a >= b else b - a


def manhattan(a: Point, b: Point) -> int:
    """
    Manhattan (taxicab) distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        |a.x - b.x| + |a.y - b.y|
    """
    return abs_diff(a.x, b.x) + abs_diff(a.y, b.y)
