"""Options for the empty() filter.

Each enabled rule adds one "counts as empty" check on top of the plain
falsy test.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum

from filterkit.domain.exceptions import InvalidOptionError


class EmptyRule(Enum):
    """Override rules for empty(). Value = option field name."""

    SKIP_NUMBER = "skip_number"
    SKIP_STRING = "skip_string"
    SKIP_NOT_EMPTY = "skip_not_empty"
    SKIP_NULL = "skip_null"
    SKIP_UNDEFINED = "skip_undefined"


# camelCase spelling accepted by from_mapping()
_CAMEL_NAMES: Mapping[str, str] = {
    "skipNumber": "skip_number",
    "skipString": "skip_string",
    "skipNotEmpty": "skip_not_empty",
    "skipNull": "skip_null",
    "skipUndefined": "skip_undefined",
}


@dataclass(frozen=True, slots=True)
class EmptyFilterOptions:
    """Independent boolean flags for empty().

    Attributes:
        skip_number: Numbers count as empty.
        skip_string: Strings count as empty.
        skip_not_empty: Non-empty values (not null, not undefined, not "") count as empty.
        skip_null: None counts as empty.
        skip_undefined: UNDEFINED counts as empty.
    """

    skip_number: bool = False
    skip_string: bool = False
    skip_not_empty: bool = False
    skip_null: bool = False
    skip_undefined: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, bool):
                raise InvalidOptionError(f.name, f"must be bool, got {type(value).__name__}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, object]) -> EmptyFilterOptions:
        """Build options from a mapping of flag names.

        Accepts snake_case (skip_number) and camelCase (skipNumber) keys.

        Raises:
            InvalidOptionError: Unknown key or non-bool value.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, object] = {}
        for key, value in options.items():
            name = _CAMEL_NAMES.get(key, key)
            if name not in known:
                raise InvalidOptionError(key, "unknown empty() option")
            kwargs[name] = value
        return cls(**kwargs)  # type: ignore[arg-type]

    def enabled_rules(self) -> tuple[EmptyRule, ...]:
        """Enabled rules in declaration order."""
        return tuple(rule for rule in EmptyRule if getattr(self, rule.value))
