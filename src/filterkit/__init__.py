"""filterkit - composable predicate and transform factories for single values."""

__version__ = "0.1.0"

from filterkit.infrastructure.filters import (
    contains,
    contains_deep,
    date,
    empty,
    equal,
    not_,
    not_contains,
    not_contains_deep,
    not_equal,
    round_filter,
    round_split,
    split_range_filter,
)

__all__ = [
    "__version__",
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
