"""Options for range bucketing."""

from __future__ import annotations

import math
from dataclasses import dataclass

from filterkit.domain.exceptions import InvalidOptionError


@dataclass(frozen=True, slots=True)
class SplitRangeOptions:
    """Bucket configuration for split_range().

    Buckets are half-open [lower, lower + step) intervals aligned on start.
    Values outside [minimum, maximum) get open-ended labels.

    Attributes:
        step: Bucket width (must be finite and > 0)
        start: Bucket origin
        separator: Text between lower and upper bound
        minimum: Lower open-ended bound. None = unbounded.
        maximum: Upper open-ended bound. None = unbounded.
        below_label: Format for values below minimum ({bound} = minimum)
        above_label: Format for values at or above maximum ({bound} = maximum)
    """

    step: float = 10
    start: float = 0
    separator: str = "-"
    minimum: float | None = None
    maximum: float | None = None
    below_label: str = "<{bound}"
    above_label: str = "{bound}+"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not math.isfinite(self.step) or self.step <= 0:
            raise InvalidOptionError("step", f"must be finite and > 0, got {self.step}")
        if not math.isfinite(self.start):
            raise InvalidOptionError("start", f"must be finite, got {self.start}")
        if self.minimum is not None and self.maximum is not None and self.minimum >= self.maximum:
            raise InvalidOptionError(
                "minimum",
                f"must be < maximum ({self.maximum}), got {self.minimum}",
            )
        if "{bound}" not in self.below_label:
            raise InvalidOptionError("below_label", "must contain '{bound}'")
        if "{bound}" not in self.above_label:
            raise InvalidOptionError("above_label", "must contain '{bound}'")
