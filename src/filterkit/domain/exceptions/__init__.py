"""Domain exceptions."""

from filterkit.domain.exceptions.base import FilterKitError
from filterkit.domain.exceptions.options import InvalidOptionError
from filterkit.domain.exceptions.probe import InvalidFilterError

__all__ = [
    "FilterKitError",
    "InvalidFilterError",
    "InvalidOptionError",
]
