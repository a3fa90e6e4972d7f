"""Value primitives used by the filter factories.

Type checks, safe nested access, leaf path enumeration, equality,
rounding, zero padding and range labeling.
"""

from filterkit.infrastructure.primitives.equality import loose_equals, strict_equals
from filterkit.infrastructure.primitives.numbers import num_to_length, round_to, split_range
from filterkit.infrastructure.primitives.paths import get, get_paths
from filterkit.infrastructure.primitives.type_checks import (
    is_not_empty,
    is_null,
    is_number,
    is_plain_object,
    is_string,
    is_structured,
    is_undefined,
)

__all__ = [
    "get",
    "get_paths",
    "is_not_empty",
    "is_null",
    "is_number",
    "is_plain_object",
    "is_string",
    "is_structured",
    "is_undefined",
    "loose_equals",
    "num_to_length",
    "round_to",
    "split_range",
    "strict_equals",
]
