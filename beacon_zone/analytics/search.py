"""
Bounded Search Module
=====================

Row-by-row scan for the first point no sensor covers.

Design:
- Rows ascending, columns ascending; first hit wins
- Row pruning: only sensors that reach the row are tested
- Column pruning: bounded columns outside the sensors' reach are
  trivially uncovered
- Two interchangeable strategies that return the same point:
    STEP  full Manhattan check on every column (numpy mask, chunked)
    SKIP  jump past each covering run (merged row intervals)
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence, Union

from beacon_zone.geometry.detector import CoverageDetector
from beacon_zone.geometry.intervals import first_gap, merge_intervals
from beacon_zone.geometry.primitives import BoundingBox, Point
from beacon_zone.geometry.shapes import Sensor
from beacon_zone.logging import StructuredLogger, LogEvent

if TYPE_CHECKING:
    from beacon_zone.analytics.environment import Environment

# Columns tested per numpy mask in the STEP strategy
STEP_CHUNK_SIZE = 1 << 16


class SearchStrategy(str, Enum):
    """Column-advance strategy for BoundedSearch."""

    STEP = "step"
    SKIP = "skip"


class BoundedSearch:
    """
    One uncovered-point search over an Environment.

    Usage:
        search = BoundedSearch(env, strategy=SearchStrategy.SKIP, logger=logger)
        point = search.run(BoundingBox(0, 0, 20, 20))
    """

    def __init__(
        self,
        environment: "Environment",
        strategy: Union[SearchStrategy, str] = SearchStrategy.SKIP,
        logger: Optional[StructuredLogger] = None
    ):
        self.environment = environment
        self.strategy = SearchStrategy(strategy)
        self.logger = logger or environment.logger

    def run(self, bounds: BoundingBox) -> Optional[Point]:
        """
        Scan bounds row by row and return the first uncovered point.

        Returns:
            Point, or None if every point in bounds is covered
        """
        self.logger.debug(
            event=LogEvent.SEARCH_STARTED,
            message="Searching for uncovered point",
            metadata={'bounds': bounds.to_dict(), 'strategy': self.strategy.value}
        )

        for row in range(bounds.min_y, bounds.max_y + 1):
            column = self._scan_row(row, bounds.min_x, bounds.max_x)
            if column is not None:
                point = Point(column, row)
                self.logger.debug(
                    event=LogEvent.SEARCH_POINT_FOUND,
                    message="Found uncovered point",
                    metadata={'x': point.x, 'y': point.y}
                )
                return point

        self.logger.debug(
            event=LogEvent.SEARCH_EXHAUSTED,
            message="No uncovered point in bounds",
            metadata={'bounds': bounds.to_dict()}
        )
        return None

    def _scan_row(self, row: int, min_x: int, max_x: int) -> Optional[int]:
        """First uncovered column of a row within [min_x, max_x]."""
        relevant = self.environment.sensors_relevant_to_row(row)

        if not relevant:
            return min_x

        reach_min = min(s.min_x_reach() for s in relevant)
        reach_max = max(s.max_x_reach() for s in relevant)

        if min_x < reach_min:
            return min_x

        high = min(max_x, reach_max)
        if self.strategy is SearchStrategy.STEP:
            column = self._step(relevant, row, min_x, high)
        else:
            column = self._skip(relevant, row, min_x, high)

        if column is not None:
            return column
        if max_x > reach_max:
            return max(reach_max + 1, min_x)
        return None

    @staticmethod
    def _step(
        relevant: Sequence[Sensor],
        row: int,
        low: int,
        high: int
    ) -> Optional[int]:
        start = low
        while start <= high:
            stop = min(start + STEP_CHUNK_SIZE, high + 1)
            columns = CoverageDetector.columns(start, stop)
            uncovered = ~CoverageDetector.row_mask(relevant, row, columns)
            if uncovered.any():
                return int(columns[uncovered.argmax()])
            start = stop
        return None

    @staticmethod
    def _skip(
        relevant: Sequence[Sensor],
        row: int,
        low: int,
        high: int
    ) -> Optional[int]:
        merged = merge_intervals(s.row_interval(row) for s in relevant)
        return first_gap(merged, low, high)
