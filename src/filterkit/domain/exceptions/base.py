"""Base exceptions for filterkit domain."""


class FilterKitError(Exception):
    """Root exception for all filterkit errors.

    All domain exceptions inherit from this.
    Allows catching all filterkit-specific errors.
    """
