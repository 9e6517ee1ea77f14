"""
Column Interval Module
======================

Inclusive integer intervals on a single row, and their union.

Design:
- Immutable intervals (frozen dataclass pattern)
- Merge in O(n log n) instead of scanning every column
- Gap search walks the merged union left to right
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True, order=True)
class ColumnInterval:
    """
    Inclusive run of columns [start, end].

    Invariants:
        - start <= end
    """

    start: int
    end: int

    def __post_init__(self):
        """Validate bounds."""
        if self.start > self.end:
            raise ValueError(
                f"ColumnInterval start must be <= end, got [{self.start}, {self.end}]"
            )

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, column: int) -> bool:
        return self.start <= column <= self.end


def merge_intervals(intervals: Iterable[ColumnInterval]) -> List[ColumnInterval]:
    """
    Merge overlapping or adjacent intervals.

    Adjacent runs ([0, 3] and [4, 6]) are joined since no column lies
    between them.

    Args:
        intervals: Intervals in any order

    Returns:
        Disjoint, non-adjacent intervals sorted by start
    """
    merged: List[ColumnInterval] = []
    for interval in sorted(intervals):
        if merged and interval.start <= merged[-1].end + 1:
            last = merged[-1]
            if interval.end > last.end:
                merged[-1] = ColumnInterval(last.start, interval.end)
        else:
            merged.append(interval)
    return merged


def total_length(intervals: Iterable[ColumnInterval]) -> int:
    """Number of columns covered by disjoint intervals."""
    return sum(len(interval) for interval in intervals)


def first_gap(merged: List[ColumnInterval], low: int, high: int) -> Optional[int]:
    """
    First column in [low, high] not inside any merged interval.

    Args:
        merged: Output of merge_intervals (sorted, disjoint)
        low: First column to consider
        high: Last column to consider (inclusive)

    Returns:
        Column index, or None if [low, high] is fully covered
    """
    column = low
    for interval in merged:
        if column > high:
            return None
        if interval.end < column:
            continue
        if interval.start > column:
            return column
        # Skip past the covering run
        column = interval.end + 1
    return column if column <= high else None
