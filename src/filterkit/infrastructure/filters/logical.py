"""Logical filters: NOT, equality, emptiness."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeVar

from filterkit.domain.model.empty_options import EmptyFilterOptions, EmptyRule
from filterkit.infrastructure.primitives import (
    is_not_empty,
    is_null,
    is_number,
    is_string,
    is_undefined,
    loose_equals,
    strict_equals,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from filterkit.infrastructure.filters.types import Filter, Processor

T = TypeVar("T")

# Read-only rule table, iterated in EmptyRule order
EMPTY_CHECKS: Mapping[EmptyRule, Callable[[object], bool]] = MappingProxyType(
    {
        EmptyRule.SKIP_NUMBER: is_number,
        EmptyRule.SKIP_STRING: is_string,
        EmptyRule.SKIP_NOT_EMPTY: is_not_empty,
        EmptyRule.SKIP_NULL: is_null,
        EmptyRule.SKIP_UNDEFINED: is_undefined,
    }
)


def not_(predicate: Processor[T] | None = None) -> Filter[T, bool]:
    """Create filter that negates a predicate (NOT).

    Args:
        predicate: Filter to negate. None = negate the value's own truthiness.

    Returns:
        Filter returning the opposite truth value.
    """
    if predicate is None:

        def _falsy(data: T) -> bool:
            return not data

        return _falsy

    def _filter(data: T) -> bool:
        return not predicate(data)

    return _filter


def equal(value: T, loose: bool = False) -> Filter[object, bool]:
    """Create filter: argument equals value.

    Args:
        value: Expected value.
        loose: Use coercive equality (1 == "1"). Default strict.

    Returns:
        Equality filter.
    """
    if loose:

        def _loose(data: object) -> bool:
            return loose_equals(value, data)

        return _loose

    def _strict(data: object) -> bool:
        return strict_equals(value, data)

    return _strict


def not_equal(value: T, loose: bool = False) -> Filter[object, bool]:
    """Create filter: argument does not equal value."""
    return not_(equal(value, loose))


def empty(
    options: EmptyFilterOptions | Mapping[str, object] | None = None,
) -> Filter[object, bool]:
    """Create filter: value is falsy, or matches an enabled override rule.

    Args:
        options: Override flags. A mapping is converted with
            EmptyFilterOptions.from_mapping (camelCase keys accepted).

    Returns:
        Plain falsy test when no rule is enabled, otherwise falsy test
        OR any enabled rule check.

    Raises:
        InvalidOptionError: Mapping has unknown keys or non-bool values.
            Options are configuration and fail at build time instead of
            being ignored; the returned filter itself never raises.
    """
    if options is None:
        return not_()
    if not isinstance(options, EmptyFilterOptions):
        options = EmptyFilterOptions.from_mapping(options)

    checks = tuple(EMPTY_CHECKS[rule] for rule in options.enabled_rules())
    if not checks:
        return not_()

    def _filter(data: object) -> bool:
        return not data or any(check(data) for check in checks)

    return _filter
