"""Structural filters: partial matching of records.

contains() compares the top-level keys of a partial mapping.
contains_deep() compares every leaf path of a nested partial.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterkit.domain.model.match_pattern import Scalar, Structured, classify_pattern
from filterkit.domain.model.undefined import UNDEFINED
from filterkit.infrastructure.filters.logical import not_
from filterkit.infrastructure.primitives import (
    get,
    get_paths,
    is_plain_object,
    is_structured,
    strict_equals,
)

if TYPE_CHECKING:
    from filterkit.infrastructure.filters.types import Filter


def contains(partial: object) -> Filter[object, bool]:
    """Create filter: candidate has every key/value of partial.

    Args:
        partial: Mapping of expected top-level fields, or a scalar.

    Returns:
        For a mapping partial: True if candidate is a mapping and each key of
        partial strictly equals candidate's value (missing key = UNDEFINED).
        For a scalar partial: strict equality with candidate.
    """
    match classify_pattern(partial):
        case Structured(fields):
            expected = tuple(fields.items())

            def _fields(data: object) -> bool:
                if not is_plain_object(data):
                    return False
                return all(
                    strict_equals(value, data.get(key, UNDEFINED))  # type: ignore[attr-defined]
                    for key, value in expected
                )

            return _fields

        case Scalar(value):

            def _scalar(data: object) -> bool:
                return strict_equals(value, data)

            return _scalar


def contains_deep(partial: object) -> Filter[object, bool]:
    """Create filter: candidate matches partial at every leaf path.

    Leaf paths of partial are enumerated once, here. Partial must not be
    mutated after the filter is built.

    Args:
        partial: Nested mapping of expected values.

    Returns:
        True if candidate is structured and, for every leaf path of partial,
        the value at that path strictly equals candidate's value at the
        same path (missing segments = UNDEFINED). Scalar partial: always False.
    """
    match classify_pattern(partial):
        case Structured(fields):
            expected = tuple((path, get(fields, path)) for path in get_paths(fields))

            def _paths(data: object) -> bool:
                if not is_structured(data):
                    return False
                return all(strict_equals(value, get(data, path)) for path, value in expected)

            return _paths

        case Scalar():

            def _never(data: object) -> bool:
                del data  # Unused
                return False

            return _never


def not_contains(partial: object) -> Filter[object, bool]:
    """Create filter: negation of contains(partial)."""
    return not_(contains(partial))


def not_contains_deep(partial: object) -> Filter[object, bool]:
    """Create filter: negation of contains_deep(partial)."""
    return not_(contains_deep(partial))
