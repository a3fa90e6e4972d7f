"""Numeric filters: rounding and range labels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterkit.infrastructure.primitives import round_to, split_range

if TYPE_CHECKING:
    from filterkit.domain.model.range_options import SplitRangeOptions
    from filterkit.infrastructure.filters.types import Filter


def round_filter(precision: int | None = None) -> Filter[float, float]:
    """Create filter: round half away from zero.

    Args:
        precision: Fractional digits. None = nearest integer.

    Returns:
        Rounding filter. Non-finite input passes through unchanged.
    """

    def _filter(number: float) -> float:
        return round_to(number, precision)

    return _filter


def split_range_filter(
    options: SplitRangeOptions | None = None,
    processor: Filter[float, float] | None = None,
) -> Filter[float, str]:
    """Create filter: number -> bucket label.

    Args:
        options: Bucket configuration. None = SplitRangeOptions() defaults.
        processor: Applied to the number before bucketing.

    Returns:
        Range label filter.
    """

    def _filter(number: float) -> str:
        return split_range(number, options, processor)

    return _filter


def round_split(
    precision: int | None = None,
    options: SplitRangeOptions | None = None,
) -> Filter[float, str]:
    """Create filter: round first, then label the rounded value."""
    return split_range_filter(options, round_filter(precision))
