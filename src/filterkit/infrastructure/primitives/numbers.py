"""Numeric primitives: rounding, zero padding, range labels."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from filterkit.domain.model.range_options import SplitRangeOptions
from filterkit.infrastructure.primitives.type_checks import is_number

if TYPE_CHECKING:
    from collections.abc import Callable

# Quantizing only ever drops digits from a float repr; this is ample
_DECIMAL_PRECISION = 400

# Label for values that cannot be bucketed
NOT_A_NUMBER = "NaN"


def round_to(number: float, precision: int | None = None) -> float:
    """Round half away from zero.

    Rounding runs on the shortest decimal repr of the float, so 2.675
    rounds to 2.68 (binary float rounding would give 2.67).

    Args:
        number: Value to round. Non-finite values are returned unchanged.
        precision: Fractional digits. None = nearest integer (returns int).
            Negative values round to tens, hundreds, ...

    Returns:
        Rounded value.
    """
    if not math.isfinite(number):
        return number

    exact = Decimal(str(number))
    places = 0 if precision is None else precision
    # Already has no more than `places` fractional digits
    if exact.as_tuple().exponent >= -places:
        return int(exact) if precision is None else float(number)

    with localcontext() as ctx:
        ctx.prec = _DECIMAL_PRECISION
        rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return int(rounded) if precision is None else float(rounded)


def num_to_length(number: int, width: int) -> str:
    """Render integer left-padded with zeros to width digits."""
    return str(number).zfill(width)


def split_range(
    value: float,
    options: SplitRangeOptions | None = None,
    processor: Callable[[float], float] | None = None,
) -> str:
    """Label the bucket value falls into.

    Args:
        value: Number to bucket.
        options: Bucket configuration. None = SplitRangeOptions() defaults.
        processor: Applied to value before bucketing.

    Returns:
        "lower<sep>upper" for in-range values, open-ended labels outside
        [minimum, maximum), "NaN" for non-numbers and non-finite numbers.
    """
    opts = options or SplitRangeOptions()
    if processor is not None:
        value = processor(value)

    if not is_number(value) or not math.isfinite(value):
        return NOT_A_NUMBER

    if opts.minimum is not None and value < opts.minimum:
        return opts.below_label.format(bound=_format_bound(opts.minimum))
    if opts.maximum is not None and value >= opts.maximum:
        return opts.above_label.format(bound=_format_bound(opts.maximum))

    quotient = (value - opts.start) / opts.step
    if not math.isfinite(quotient):
        return NOT_A_NUMBER

    lower = opts.start + math.floor(quotient) * opts.step
    upper = lower + opts.step
    if not math.isfinite(upper):
        return NOT_A_NUMBER
    return f"{_format_bound(lower)}{opts.separator}{_format_bound(upper)}"


def _format_bound(bound: float) -> str:
    """Integral bounds print without fraction, float noise trimmed."""
    bound = round(bound, 10)
    if float(bound).is_integer():
        return str(int(bound))
    return str(bound)
