"""Filter probe: evaluate named filters against sample values.

Diagnostic helper for checking filter definitions by eye. Not a pipeline:
every filter sees every sample, nothing is dropped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from filterkit.domain.exceptions import InvalidFilterError


@dataclass(frozen=True, slots=True)
class ProbeRow:
    """Outcomes of all probed filters for one sample.

    Attributes:
        sample: Value passed to the filters.
        outcomes: Filter name -> filter result.
    """

    sample: object
    outcomes: Mapping[str, object]


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Probe table.

    Attributes:
        filter_names: Filter names in registration order.
        rows: One row per sample, in sample order.
    """

    filter_names: tuple[str, ...]
    rows: tuple[ProbeRow, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        expected = set(self.filter_names)
        for row in self.rows:
            if set(row.outcomes) != expected:
                raise ValueError(f"row outcomes {sorted(row.outcomes)} != filters {sorted(expected)}")

    def passed(self, name: str) -> tuple[object, ...]:
        """Samples for which filter `name` returned a truthy result."""
        if name not in self.filter_names:
            raise KeyError(name)
        return tuple(row.sample for row in self.rows if row.outcomes[name])

    def pass_count(self, name: str) -> int:
        """Number of samples passing filter `name`."""
        return len(self.passed(name))


def probe(
    filters: Mapping[str, Callable[[object], object]],
    samples: Iterable[object],
) -> ProbeResult:
    """Evaluate every filter on every sample.

    Args:
        filters: Name -> filter.
        samples: Values to probe. Consumed once.

    Returns:
        Immutable probe table.

    Raises:
        InvalidFilterError: A filter is not callable.
    """
    # FAIL-FIRST: validate filters before touching samples
    for name, flt in filters.items():
        if not callable(flt):
            raise InvalidFilterError(name, type(flt))

    names = tuple(filters)
    rows = tuple(
        ProbeRow(
            sample=sample,
            outcomes=MappingProxyType({name: filters[name](sample) for name in names}),
        )
        for sample in samples
    )
    return ProbeResult(filter_names=names, rows=rows)
