"""
Environment Module
==================

Aggregate queries over a fixed set of sensors.

Design:
- Sensor set frozen at construction (tuple, input order preserved)
- Every query is a pure function of the sensor set
- Empty aggregates are explicit: None for a degenerate row,
  NoSensorsError for an empty sensor set
"""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from beacon_zone.errors import NoSensorsError
from beacon_zone.geometry.intervals import ColumnInterval, merge_intervals, total_length
from beacon_zone.geometry.primitives import BoundingBox, Point
from beacon_zone.geometry.shapes import Sensor
from beacon_zone.analytics.search import BoundedSearch, SearchStrategy
from beacon_zone.logging import StructuredLogger, LogEvent, create_logger

SensorPair = Tuple[Sequence[int], Sequence[int]]

_default_logger = create_logger("environment")


class Environment:
    """
    Immutable collection of sensors with coverage queries.

    Usage:
        env = Environment.from_pairs([((2, 18), (-2, 15)), ...])

        env.bounding_box()                      # BoundingBox(-8, -10, 28, 26)
        env.count_covered_cells(10)             # 26
        env.find_uncovered_point((0, 0, 20, 20))  # Point(14, 11)
    """

    def __init__(
        self,
        sensors: Iterable[Sensor],
        logger: Optional[StructuredLogger] = None
    ):
        """
        Args:
            sensors: Sensors in input order
            logger: Structured logger (default: shared "environment" logger)
        """
        self._sensors: Tuple[Sensor, ...] = tuple(sensors)
        self.logger = logger or _default_logger

        self.logger.debug(
            event=LogEvent.ENVIRONMENT_BUILT,
            message="Environment built",
            metadata={'sensor_count': len(self._sensors)}
        )

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[SensorPair],
        logger: Optional[StructuredLogger] = None
    ) -> "Environment":
        """
        Build from (sensor_position, nearest_object_position) pairs.

        Args:
            pairs: Iterable of ((sx, sy), (bx, by))
            logger: Optional structured logger
        """
        return cls(
            (Sensor.from_pair(position, beacon) for position, beacon in pairs),
            logger=logger
        )

    @property
    def sensors(self) -> Tuple[Sensor, ...]:
        return self._sensors

    def __len__(self) -> int:
        return len(self._sensors)

    def __iter__(self) -> Iterator[Sensor]:
        return iter(self._sensors)

    def __repr__(self) -> str:
        return f"Environment(sensors={len(self._sensors)})"

    def _require_sensors(self, operation: str) -> None:
        if not self._sensors:
            self.logger.error(
                event=LogEvent.NO_SENSORS_ERROR,
                message=f"{operation} called on an empty sensor set",
                metadata={'operation': operation}
            )
            raise NoSensorsError(operation)

    # ========== Aggregates ==========

    def bounding_box(self) -> BoundingBox:
        """
        Smallest rectangle containing every sensor's full reach.

        Raises:
            NoSensorsError: If the sensor set is empty
        """
        self._require_sensors("bounding_box")
        return BoundingBox(
            min_x=min(s.min_x_reach() for s in self._sensors),
            min_y=min(s.min_y_reach() for s in self._sensors),
            max_x=max(s.max_x_reach() for s in self._sensors),
            max_y=max(s.max_y_reach() for s in self._sensors),
        )

    def known_locations(self) -> frozenset:
        """All sensor and beacon positions."""
        return frozenset(
            point
            for sensor in self._sensors
            for point in (sensor.position, sensor.nearest_object)
        )

    # ========== Row queries ==========

    def sensors_relevant_to_row(self, row: int) -> Tuple[Sensor, ...]:
        """
        Sensors that reach at least one column of a row, in input order.

        Raises:
            NoSensorsError: If the sensor set is empty
        """
        self._require_sensors("sensors_relevant_to_row")
        return tuple(s for s in self._sensors if s.covers_row(row))

    def relevant_column_range(self, row: int) -> Optional[Tuple[int, int]]:
        """
        Half-open column bound [min_x, max_x) of the row's relevant sensors.

        Built from whole-sensor reach, not the row's actual diamond width, so
        it is a superset of the covered columns (except the far edge column
        when the row passes through the widest sensor's centre). Only meant to
        bound a search.

        Returns:
            (min_x, max_x), or None when no sensor reaches the row
        """
        relevant = self.sensors_relevant_to_row(row)
        if not relevant:
            return None
        return (
            min(s.min_x_reach() for s in relevant),
            max(s.max_x_reach() for s in relevant),
        )

    def covered_intervals(self, row: int) -> List[ColumnInterval]:
        """
        Exact covered columns on a row as merged, sorted intervals.

        Raises:
            NoSensorsError: If the sensor set is empty
        """
        return merge_intervals(
            s.row_interval(row) for s in self.sensors_relevant_to_row(row)
        )

    def count_covered_cells(self, row: int) -> int:
        """
        Number of columns on a row that provably hold no unknown beacon.

        A column counts when some sensor covers it and it is not itself a
        sensor or beacon position.

        Args:
            row: Row index

        Returns:
            Covered cell count (0 for a degenerate row)

        Raises:
            NoSensorsError: If the sensor set is empty
        """
        merged = self.covered_intervals(row)
        if not merged:
            self.logger.debug(
                event=LogEvent.DEGENERATE_ROW,
                message="No sensor reaches row",
                metadata={'row': row}
            )
            return 0

        known_on_row = {
            point.x for point in self.known_locations()
            if point.y == row and any(point.x in interval for interval in merged)
        }
        covered = total_length(merged) - len(known_on_row)

        self.logger.debug(
            event=LogEvent.ROW_COVERAGE_COUNTED,
            message="Counted covered cells",
            metadata={
                'row': row,
                'intervals': len(merged),
                'known_locations': len(known_on_row),
                'covered': covered,
            }
        )
        return covered

    # ========== Search ==========

    def find_uncovered_point(
        self,
        bounds: Union[BoundingBox, Sequence[int]],
        strategy: Union[SearchStrategy, str] = SearchStrategy.SKIP
    ) -> Optional[Point]:
        """
        First point in bounds (row-major, ascending) that no sensor covers.

        Args:
            bounds: (min_x, min_y, max_x, max_y), inclusive
            strategy: SearchStrategy.SKIP (default) or SearchStrategy.STEP;
                both return the same point

        Returns:
            Uncovered Point, or None if the whole rectangle is covered

        Raises:
            NoSensorsError: If the sensor set is empty
            ValueError: If bounds has min_x > max_x or min_y > max_y, or the
                strategy is unknown
        """
        self._require_sensors("find_uncovered_point")
        search = BoundedSearch(self, strategy=strategy, logger=self.logger)
        return search.run(BoundingBox.of(bounds))
