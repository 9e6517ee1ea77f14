"""
Sensor Shape Module
===================

Pure geometric representation of one sensor's diamond-shaped reach.

Design:
- Immutable sensor (frozen dataclass pattern)
- Radius derived once at init, never mutated
- Exact per-row column interval for O(1) row coverage queries
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from beacon_zone.geometry.intervals import ColumnInterval
from beacon_zone.geometry.primitives import Point, abs_diff, manhattan


@dataclass(frozen=True)
class Sensor:
    """
    Immutable Manhattan-metric sensor.

    The sensor covers every point at Manhattan distance <= radius, where
    radius is the distance to its nearest known object (beacon).

    Attributes:
        position: Sensor location
        nearest_object: Closest beacon the sensor reported
        radius: manhattan(position, nearest_object), computed at init
    """

    position: Point
    nearest_object: Point
    radius: int = field(init=False)

    def __post_init__(self):
        """Normalize coordinates and derive radius."""
        object.__setattr__(self, 'position', Point.of(self.position))
        object.__setattr__(self, 'nearest_object', Point.of(self.nearest_object))
        object.__setattr__(self, 'radius', manhattan(self.position, self.nearest_object))

    @classmethod
    def from_pair(
        cls,
        position: Union[Point, Sequence[int]],
        nearest_object: Union[Point, Sequence[int]]
    ) -> "Sensor":
        """
        Build a sensor from plain (x, y) pairs.

        Example:
            >>> Sensor.from_pair((0, 0), (5, 5)).radius
            10
        """
        return cls(position=Point.of(position), nearest_object=Point.of(nearest_object))

    def covers(self, point: Point) -> bool:
        """
        Check if point is within reach (inclusive of the boundary).

        Args:
            point: Point to test

        Returns:
            True if manhattan(position, point) <= radius
        """
        return manhattan(self.position, Point.of(point)) <= self.radius

    def covers_row(self, row: int) -> bool:
        """
        Check if the sensor reaches any column of a row.

        Only the vertical distance matters: if the sensor's own column is out
        of reach on that row, every other column is too.
        """
        return abs_diff(self.position.y, row) <= self.radius

    def is_known_location(self, point: Point) -> bool:
        """True if point is this sensor or its beacon."""
        point = Point.of(point)
        return point == self.position or point == self.nearest_object

    def min_x_reach(self) -> int:
        return self.position.x - self.radius

    def max_x_reach(self) -> int:
        return self.position.x + self.radius

    def min_y_reach(self) -> int:
        return self.position.y - self.radius

    def max_y_reach(self) -> int:
        return self.position.y + self.radius

    def row_interval(self, row: int) -> Optional[ColumnInterval]:
        """
        Exact columns covered on a row.

        The diamond narrows by one column on each side per row of vertical
        offset, so the half-width on a row is radius - |position.y - row|.

        Args:
            row: Row to intersect

        Returns:
            Inclusive ColumnInterval, or None if the row is out of reach
        """
        half_width = self.radius - abs_diff(self.position.y, row)
        if half_width < 0:
            return None
        return ColumnInterval(self.position.x - half_width, self.position.x + half_width)

    def __str__(self) -> str:
        return f"Sensor(at={self.position}, beacon={self.nearest_object}, r={self.radius})"
