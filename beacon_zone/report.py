"""
Sensor Report Module
====================

Parses sensor report text into (sensor, beacon) point pairs.

Format (one record per line, blank lines ignored):

    Sensor at x=2, y=18: closest beacon is at x=-2, y=15
"""

import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from beacon_zone.errors import ReportParseError
from beacon_zone.geometry.primitives import Point
from beacon_zone.logging import StructuredLogger, LogEvent

LINE_PATTERN = re.compile(
    r"^Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)$"
)

SensorRecord = Tuple[Point, Point]


def parse_line(line: str, line_number: int = 1) -> SensorRecord:
    """
    Parse one report line.

    Raises:
        ReportParseError: If the line does not match the report format
    """
    match = LINE_PATTERN.match(line.strip())
    if match is None:
        raise ReportParseError(line_number, line)

    sx, sy, bx, by = (int(group) for group in match.groups())
    return Point(sx, sy), Point(bx, by)


def parse_report(text: str) -> List[SensorRecord]:
    """
    Parse a full report.

    Args:
        text: Report contents

    Returns:
        (sensor, beacon) pairs in file order
    """
    records = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        records.append(parse_line(line, line_number))
    return records


def load_report(
    path: Union[str, Path],
    logger: Optional[StructuredLogger] = None
) -> List[SensorRecord]:
    """
    Read and parse a report file.

    Raises:
        FileNotFoundError: If the file does not exist
        ReportParseError: On the first malformed line
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sensor report not found: {path}")

    try:
        records = parse_report(path.read_text())
    except ReportParseError as e:
        if logger:
            logger.error(
                event=LogEvent.REPORT_PARSE_ERROR,
                message="Failed to parse sensor report",
                metadata={'path': str(path), 'line': e.line_number},
                exc_info=e
            )
        raise

    if logger:
        logger.info(
            event=LogEvent.REPORT_PARSED,
            message="Parsed sensor report",
            metadata={'path': str(path), 'records': len(records)}
        )
    return records
