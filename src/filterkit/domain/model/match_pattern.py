"""Partial-match pattern variants.

A matcher decides once, when it is built, whether its pattern is
structured (a mapping of expected fields) or a scalar compared as a whole.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Scalar:
    """Pattern compared by strict equality."""

    value: object


@dataclass(frozen=True, slots=True)
class Structured:
    """Pattern compared field by field."""

    fields: Mapping[object, object]


MatchPattern: TypeAlias = Scalar | Structured


def classify_pattern(partial: object) -> MatchPattern:
    """Resolve a raw partial into its pattern variant.

    Mappings are structured, everything else (None included) is scalar.
    """
    if isinstance(partial, Mapping):
        return Structured(partial)
    return Scalar(partial)
