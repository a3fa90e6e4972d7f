"""Single-argument type classifiers."""

from collections.abc import Mapping
from numbers import Real

from filterkit.domain.model.undefined import UNDEFINED


def is_number(value: object) -> bool:
    """Real number, bool excluded. NaN and infinities are numbers."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_string(value: object) -> bool:
    return isinstance(value, str)


def is_null(value: object) -> bool:
    return value is None


def is_undefined(value: object) -> bool:
    return value is UNDEFINED


def is_not_empty(value: object) -> bool:
    """Not None, not UNDEFINED, not the empty string."""
    return value is not None and value is not UNDEFINED and value != ""


def is_plain_object(value: object) -> bool:
    """Mapping (dict-like record)."""
    return isinstance(value, Mapping)


def is_structured(value: object) -> bool:
    """Mapping, list or tuple: anything a Path can descend into."""
    return isinstance(value, (Mapping, list, tuple))
