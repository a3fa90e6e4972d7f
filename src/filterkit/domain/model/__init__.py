"""Domain model: sentinels, options and value objects."""

from filterkit.domain.model.date_token import DateToken
from filterkit.domain.model.empty_options import EmptyFilterOptions, EmptyRule
from filterkit.domain.model.match_pattern import (
    MatchPattern,
    Scalar,
    Structured,
    classify_pattern,
)
from filterkit.domain.model.range_options import SplitRangeOptions
from filterkit.domain.model.undefined import UNDEFINED, Undefined

__all__ = [
    "UNDEFINED",
    "DateToken",
    "EmptyFilterOptions",
    "EmptyRule",
    "MatchPattern",
    "Scalar",
    "SplitRangeOptions",
    "Structured",
    "Undefined",
    "classify_pattern",
]
