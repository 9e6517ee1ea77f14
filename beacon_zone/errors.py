"""
Beacon Zone Errors
==================

Exception taxonomy for the coverage engine.

Every failure here is an input-contract violation surfaced to the caller.
Degenerate rows (no sensor reaches them) are NOT errors and never raise.
"""


class BeaconZoneError(Exception):
    """Base class for all beacon_zone errors"""
    pass


class NoSensorsError(BeaconZoneError):
    """Raised when an aggregate query runs over an empty sensor set"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"{operation} requires at least one sensor, got an empty sensor set"
        )


class ReportParseError(BeaconZoneError, ValueError):
    """Raised when a sensor report line does not match the expected format"""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Malformed sensor report at line {line_number}: {line!r}")
