"""Strict and loose equality.

Strict: no coercion between kinds of value, applied recursively inside
mappings, lists and tuples. Numbers compare numerically
(1 equals 1.0), bools are not numbers, None and UNDEFINED differ.

Loose: coercive. None and UNDEFINED equal each other and nothing else;
when a number or bool meets a string or another number/bool, both sides
are converted to numbers first.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from filterkit.domain.model.undefined import UNDEFINED
from filterkit.infrastructure.primitives.type_checks import is_number, is_string

# Spellings float() accepts beyond plain decimals
_FLOAT_SPECIALS = frozenset({"inf", "infinity", "nan"})


def strict_equals(left: object, right: object) -> bool:
    """Equality without type coercion. NaN never equals anything."""
    if is_number(left) and is_number(right):
        return left == right
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    if is_number(left) or is_number(right):
        return False
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(strict_equals(value, right[key]) for key, value in left.items())
    if type(left) is not type(right):
        return False
    if isinstance(left, (list, tuple)):
        return len(left) == len(right) and all(  # type: ignore[arg-type]
            strict_equals(item, other) for item, other in zip(left, right)  # type: ignore[call-overload]
        )
    return bool(left == right)


def loose_equals(left: object, right: object) -> bool:
    """Equality with type coercion (1 == "1", True == 1, None == UNDEFINED)."""
    left_nullish = left is None or left is UNDEFINED
    right_nullish = right is None or right is UNDEFINED
    if left_nullish or right_nullish:
        return left_nullish and right_nullish

    if is_string(left) and is_string(right):
        return left == right

    if _is_primitive(left) and _is_primitive(right):
        return _to_number(left) == _to_number(right)

    return strict_equals(left, right)


def _is_primitive(value: object) -> bool:
    return isinstance(value, bool) or is_number(value) or is_string(value)


def _to_number(value: object) -> float:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        return _parse_number(value)
    return float(value)  # type: ignore[arg-type]


def _parse_number(value: str) -> float:
    """Parse numeric text. Blank = 0, unparseable = NaN.

    float() also accepts "1_000", "inf" and "nan"; only the plain decimal
    spellings and "Infinity" (optionally signed) count as numbers here.
    """
    text = value.strip()
    if not text:
        return 0.0
    if "_" in text:
        return math.nan
    unsigned = text.lstrip("+-")
    if unsigned.lower() in _FLOAT_SPECIALS and unsigned != "Infinity":
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan
