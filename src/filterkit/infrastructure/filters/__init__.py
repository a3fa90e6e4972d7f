"""Infrastructure layer: stateless filter factories.

Filters are pure functions: Filter = Callable[[P], R].
Each factory captures its arguments once and returns a closure.

Usage:
    from filterkit.infrastructure.filters import contains, date, not_

    # Predicate
    active = contains({"status": "active"})
    rows = [r for r in records if active(r)]

    # Transform
    fmt = date("YYYY-MM-DD", lambda r: r["created_ms"])
    labels = [fmt(r) for r in records]
"""

from filterkit.infrastructure.filters.dates import date
from filterkit.infrastructure.filters.logical import empty, equal, not_, not_equal
from filterkit.infrastructure.filters.numeric import round_filter, round_split, split_range_filter
from filterkit.infrastructure.filters.structural import (
    contains,
    contains_deep,
    not_contains,
    not_contains_deep,
)
from filterkit.infrastructure.filters.types import Filter, Path, Processor

__all__ = [
    "Filter",
    "Path",
    "Processor",
    "contains",
    "contains_deep",
    "date",
    "empty",
    "equal",
    "not_",
    "not_contains",
    "not_contains_deep",
    "not_equal",
    "round_filter",
    "round_split",
    "split_range_filter",
]
