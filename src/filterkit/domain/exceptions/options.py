"""Option validation exceptions."""

from filterkit.domain.exceptions.base import FilterKitError


class InvalidOptionError(FilterKitError, ValueError):
    """Error in filter option definition.

    Raised when an options object is built with invalid values.
    Inherits ValueError for semantic correctness.
    FAIL-FIRST: options validate at construction, filters never raise.

    Attributes:
        option: Name of invalid option (must not be empty)
        reason: Why option is invalid (must not be empty)
    """

    def __init__(self, option: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not option:
            raise ValueError("option must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.option = option
        self.reason = reason
        super().__init__(f"Invalid option '{option}': {reason}")
