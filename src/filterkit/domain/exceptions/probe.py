"""Probe exceptions."""

from filterkit.domain.exceptions.base import FilterKitError


class InvalidFilterError(FilterKitError, TypeError):
    """Probed filter must be callable.

    Inherits TypeError for semantic correctness.

    Attributes:
        name: Name the filter was registered under.
        got: Actual type received.
    """

    def __init__(self, name: str, got: type) -> None:
        """Initialize with filter name and actual type."""
        self.name = name
        self.got = got
        super().__init__(f"filter '{name}' must be callable, got {got.__name__}")
