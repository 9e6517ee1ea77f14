"""
Analytics Layer
===============

Bounded Context: Aggregate coverage queries over a sensor set.

Responsibilities:
- Own the (immutable) sensor set
- Bounding box and row relevance
- Covered cell counts per row
- Bounded search for an uncovered point

Design Philosophy:
- Immutable inputs, pure queries
- Explicit empty results (None / NoSensorsError)
- Structured logging of every query at DEBUG
"""

from beacon_zone.analytics.search import BoundedSearch, SearchStrategy
from beacon_zone.analytics.environment import Environment

__all__ = [
    "BoundedSearch",
    "SearchStrategy",
    "Environment",
]
