"""
Beacon Zone
===========

Bounded Context: Manhattan-metric sensor coverage and gap search.

Design Philosophy:
- Separation of Concerns: Geometry and Analytics separated
- Immutable snapshot: sensors are fixed once the Environment is built
- Explicit failures: empty aggregates never yield a made-up bound

Architecture:

    beacon_zone/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── primitives.py  # Point, BoundingBox, manhattan
    │   ├── intervals.py   # ColumnInterval, merge_intervals, first_gap
    │   ├── shapes.py      # Sensor
    │   └── detector.py    # CoverageDetector (numpy column masks)
    │
    ├── analytics/         # Aggregate queries over the sensor set
    │   ├── environment.py # Environment
    │   └── search.py      # BoundedSearch, SearchStrategy
    │
    ├── logging/           # Structured JSON logging
    ├── report.py          # Sensor report parsing
    └── errors.py          # Exception taxonomy

Usage:

    from beacon_zone import Environment, load_report

    env = Environment.from_pairs(load_report("data/sample.txt"))

    env.count_covered_cells(10)               # 26
    env.bounding_box()                        # BoundingBox(-8, -10, 28, 26)
    env.find_uncovered_point((0, 0, 20, 20))  # Point(x=14, y=11)
"""

# Geometry Layer (immutable, stateless)
from beacon_zone.geometry import (
    BoundingBox,
    ColumnInterval,
    CoverageDetector,
    Point,
    Sensor,
    manhattan,
)

# Analytics Layer
from beacon_zone.analytics import BoundedSearch, Environment, SearchStrategy

# Input
from beacon_zone.report import load_report, parse_line, parse_report

from beacon_zone.errors import BeaconZoneError, NoSensorsError, ReportParseError

__all__ = [
    # Geometry
    "BoundingBox",
    "ColumnInterval",
    "CoverageDetector",
    "Point",
    "Sensor",
    "manhattan",
    # Analytics
    "BoundedSearch",
    "Environment",
    "SearchStrategy",
    # Input
    "load_report",
    "parse_line",
    "parse_report",
    # Errors
    "BeaconZoneError",
    "NoSensorsError",
    "ReportParseError",
]

__version__ = "1.0.0"
