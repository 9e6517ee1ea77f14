"""
Coverage Detector Module
========================

Stateless per-column coverage checks - applies sensor geometry to a row.

Design:
- Pure functions (no state)
- Vectorized over columns with numpy (int64, no overflow at puzzle scale)
- Returns boolean masks, one entry per tested column
"""

import numpy as np
from typing import Sequence

from beacon_zone.geometry.shapes import Sensor


class CoverageDetector:
    """
    Stateless detector for sensor coverage on a row.

    Design Philosophy:
    - All methods are static (no instance state)
    - Full Manhattan check per column (no interval shortcuts)
    - Serves as the column-by-column reference for the interval math
    """

    @staticmethod
    def columns(start: int, stop: int) -> np.ndarray:
        """Half-open column range [start, stop) as int64."""
        return np.arange(start, stop, dtype=np.int64)

    @staticmethod
    def row_mask(
        sensors: Sequence[Sensor],
        row: int,
        columns: np.ndarray
    ) -> np.ndarray:
        """
        Detect which columns of a row are covered by any sensor.

        Args:
            sensors: Sensors to test (usually the row-relevant subset)
            row: Row index
            columns: 1D int64 array of column indices

        Returns:
            Boolean mask of shape (N,) where True = covered
        """
        columns = np.asarray(columns, dtype=np.int64)
        mask = np.zeros(columns.shape, dtype=bool)

        if len(sensors) == 0 or columns.size == 0:
            return mask

        for sensor in sensors:
            dy = abs(sensor.position.y - row)
            distance = np.abs(columns - sensor.position.x) + dy
            mask |= distance <= sensor.radius

        return mask

    @staticmethod
    def known_mask(
        sensors: Sequence[Sensor],
        row: int,
        columns: np.ndarray
    ) -> np.ndarray:
        """
        Detect which columns of a row hold a sensor or its beacon.

        Returns:
            Boolean mask of shape (N,) where True = known location
        """
        columns = np.asarray(columns, dtype=np.int64)
        mask = np.zeros(columns.shape, dtype=bool)

        for sensor in sensors:
            for point in (sensor.position, sensor.nearest_object):
                if point.y == row:
                    mask |= columns == point.x

        return mask

    @staticmethod
    def count_covered(
        sensors: Sequence[Sensor],
        row: int,
        columns: np.ndarray
    ) -> int:
        """
        Count covered columns that are not known locations.

        Column-by-column equivalent of Environment.count_covered_cells.
        """
        covered = CoverageDetector.row_mask(sensors, row, columns)
        known = CoverageDetector.known_mask(sensors, row, columns)
        return int(np.count_nonzero(covered & ~known))
