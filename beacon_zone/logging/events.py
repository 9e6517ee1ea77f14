"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<category>.<action>

    component: environment, coverage, search, report, config, error
    category: row, point
    action: built, counted, found

Example Log Query (jq):
    jq 'select(.event == "search.point.found") | .metadata'
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - environment.*: Sensor set construction
    - coverage.*: Row coverage queries
    - search.*: Bounded uncovered-point search
    - report.* / config.*: Input loading
    - error.*: Error conditions
    """

    # ========== Engine Events ==========
    ENVIRONMENT_BUILT = "environment.built"
    """Environment constructed from a sensor set."""

    ROW_COVERAGE_COUNTED = "coverage.row.counted"
    """Covered cells counted on a row."""

    DEGENERATE_ROW = "coverage.row.degenerate"
    """No sensor reaches the queried row."""

    # ========== Search Events ==========
    SEARCH_STARTED = "search.started"
    """Bounded uncovered-point search started."""

    SEARCH_POINT_FOUND = "search.point.found"
    """Uncovered point located."""

    SEARCH_EXHAUSTED = "search.exhausted"
    """Every row scanned without finding an uncovered point."""

    # ========== Input Events ==========
    REPORT_PARSED = "report.parsed"
    """Sensor report parsed into sensor/beacon pairs."""

    CONFIG_LOADED = "config.loaded"
    """Engine configuration loaded from YAML."""

    # ========== Error Events ==========
    REPORT_PARSE_ERROR = "error.report_parse"
    """Sensor report line did not match the expected format."""

    NO_SENSORS_ERROR = "error.no_sensors"
    """Aggregate query over an empty sensor set."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""


# Event categories for filtering
ENGINE_EVENTS = {
    LogEvent.ENVIRONMENT_BUILT,
    LogEvent.ROW_COVERAGE_COUNTED,
    LogEvent.DEGENERATE_ROW,
}

SEARCH_EVENTS = {
    LogEvent.SEARCH_STARTED,
    LogEvent.SEARCH_POINT_FOUND,
    LogEvent.SEARCH_EXHAUSTED,
}

ERROR_EVENTS = {
    LogEvent.REPORT_PARSE_ERROR,
    LogEvent.NO_SENSORS_ERROR,
    LogEvent.CONFIG_ERROR,
}
