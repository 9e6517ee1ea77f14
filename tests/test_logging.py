"""
Tests for structured JSON logging and the events the engine emits.
"""

import json
import logging

from beacon_zone import Environment
from beacon_zone.logging import LogEvent, create_logger
from beacon_zone.logging.events import ENGINE_EVENTS, ERROR_EVENTS, SEARCH_EVENTS


def _entries(caplog, logger_name):
    return [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == logger_name
    ]


def test_log_entry_shape(caplog):
    logger = create_logger("test-shape")
    with caplog.at_level(logging.INFO, logger="beacon_zone.test-shape"):
        logger.info(
            event=LogEvent.REPORT_PARSED,
            message="Parsed sensor report",
            metadata={'records': 14}
        )

    [entry] = _entries(caplog, "beacon_zone.test-shape")
    assert entry['level'] == "INFO"
    assert entry['component'] == "test-shape"
    assert entry['event'] == "report.parsed"
    assert entry['metadata'] == {'records': 14}
    assert 'timestamp' in entry


def test_error_entry_carries_exception(caplog):
    logger = create_logger("test-error")
    with caplog.at_level(logging.INFO, logger="beacon_zone.test-error"):
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load config",
            exc_info=ValueError("bad strategy")
        )

    [entry] = _entries(caplog, "beacon_zone.test-error")
    assert entry['exception'] == {'type': 'ValueError', 'message': 'bad strategy'}


def test_warning_entry(caplog):
    logger = create_logger("test-warning")
    with caplog.at_level(logging.WARNING, logger="beacon_zone.test-warning"):
        logger.warning(
            event=LogEvent.SEARCH_EXHAUSTED,
            message="No uncovered point in bounds",
            metadata={'bounds': [0, 0, 1, 1]}
        )

    [entry] = _entries(caplog, "beacon_zone.test-warning")
    assert entry['level'] == "WARNING"
    assert entry['event'] == "search.exhausted"


def test_debug_suppressed_at_info(caplog):
    logger = create_logger("test-quiet", level=logging.INFO)
    logger.debug(event=LogEvent.SEARCH_STARTED, message="hidden")
    assert _entries(caplog, "beacon_zone.test-quiet") == []


def test_engine_emits_query_events(caplog):
    logger = create_logger("test-engine", level=logging.DEBUG)
    caplog.set_level(logging.DEBUG, logger="beacon_zone.test-engine")

    env = Environment.from_pairs(
        [((2, 18), (-2, 15)), ((8, 7), (2, 10))],
        logger=logger
    )
    env.count_covered_cells(10)
    env.count_covered_cells(1000)
    env.find_uncovered_point((0, 0, 3, 3))

    events = [entry['event'] for entry in _entries(caplog, "beacon_zone.test-engine")]
    assert events[0] == LogEvent.ENVIRONMENT_BUILT.value
    assert LogEvent.ROW_COVERAGE_COUNTED.value in events
    assert LogEvent.DEGENERATE_ROW.value in events
    assert LogEvent.SEARCH_STARTED.value in events
    assert LogEvent.SEARCH_POINT_FOUND.value in events


def test_event_categories_are_disjoint():
    assert not (ERROR_EVENTS & SEARCH_EVENTS)
    assert not (ENGINE_EVENTS & SEARCH_EVENTS)
    assert not (ENGINE_EVENTS & ERROR_EVENTS)
    assert LogEvent.ENVIRONMENT_BUILT in ENGINE_EVENTS
    assert all(event.value.startswith("error.") for event in ERROR_EVENTS)
