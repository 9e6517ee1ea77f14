"""
Configuration schema for the beacon-cli queries.

Defines the row to count, the search rectangle and strategy, and the log
level. Loaded from YAML; command-line flags override individual values.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Tuple, Union
import logging
import yaml

from beacon_zone.analytics.search import SearchStrategy


@dataclass(frozen=True)
class SearchConfig:
    """Bounded search rectangle (inclusive) and strategy."""

    min_x: int = 0
    min_y: int = 0
    max_x: int = 4_000_000
    max_y: int = 4_000_000
    strategy: str = "skip"  # "skip" or "step"
    tuning_multiplier: int = 4_000_000

    def __post_init__(self):
        """Validate search configuration."""
        if self.min_x > self.max_x:
            raise ValueError(
                f"min_x must be <= max_x, got {self.min_x} > {self.max_x}"
            )

        if self.min_y > self.max_y:
            raise ValueError(
                f"min_y must be <= max_y, got {self.min_y} > {self.max_y}"
            )

        valid_strategies = {s.value for s in SearchStrategy}
        if self.strategy not in valid_strategies:
            raise ValueError(
                f"Invalid strategy: {self.strategy}. "
                f"Must be one of {sorted(valid_strategies)}"
            )

        if self.tuning_multiplier <= 0:
            raise ValueError(
                f"tuning_multiplier must be positive, got {self.tuning_multiplier}"
            )

    @property
    def bounds(self) -> Tuple[int, int, int, int]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class EngineConfig:
    """
    Main configuration for beacon-cli.

    Immutable after construction (frozen dataclass).
    """

    row: int = 2_000_000
    search: SearchConfig = field(default_factory=SearchConfig)
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate engine configuration."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if self.log_level.upper() not in valid_levels:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(valid_levels)}"
            )
        object.__setattr__(self, 'log_level', self.log_level.upper())

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def with_overrides(self, **overrides) -> "EngineConfig":
        """
        Copy with non-None overrides applied.

        Keys: row, log_level, bounds (4-tuple), strategy, tuning_multiplier.
        """
        overrides = {k: v for k, v in overrides.items() if v is not None}

        search_changes = {}
        if "bounds" in overrides:
            min_x, min_y, max_x, max_y = overrides.pop("bounds")
            search_changes.update(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)
        for key in ("strategy", "tuning_multiplier"):
            if key in overrides:
                search_changes[key] = overrides.pop(key)

        search = replace(self.search, **search_changes) if search_changes else self.search
        return replace(self, search=search, **overrides)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "EngineConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            row: 2000000
            log_level: "INFO"

            search:
              min_x: 0
              min_y: 0
              max_x: 4000000
              max_y: 4000000
              strategy: "skip"
              tuning_multiplier: 4000000

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is malformed or a value is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(yaml_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        search_data = data.get("search", {}) or {}
        search = SearchConfig(**search_data)

        return cls(
            row=int(data.get("row", 2_000_000)),
            search=search,
            log_level=str(data.get("log_level", "INFO")),
        )
