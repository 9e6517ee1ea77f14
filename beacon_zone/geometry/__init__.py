"""
Geometry Layer
==============

Bounded Context: Pure Manhattan geometry and coverage queries.

Responsibilities:
- Point representation and the Manhattan metric
- Sensor reach (diamond) and per-row intervals
- Column-by-column coverage masks
- NO state, NO aggregation across sensors, NO logging

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from beacon_zone.geometry.primitives import BoundingBox, Point, abs_diff, manhattan
from beacon_zone.geometry.intervals import ColumnInterval, merge_intervals, first_gap
from beacon_zone.geometry.shapes import Sensor
from beacon_zone.geometry.detector import CoverageDetector

__all__ = [
    "BoundingBox",
    "Point",
    "abs_diff",
    "manhattan",
    "ColumnInterval",
    "merge_intervals",
    "first_gap",
    "Sensor",
    "CoverageDetector",
]
