"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from filterkit.infrastructure.filters.dates import scan_pattern

if TYPE_CHECKING:
    from filterkit.application.probe import ProbeResult


class PlainTextReporter:
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: ProbeResult) -> None:
        """Report probe result as plain text.

        Args:
            result: Probe result
        """
        self._report_header("Filter Probe Results")
        self._write(f"Filters: {', '.join(result.filter_names) or '(none)'}")
        self._write(f"Samples: {len(result.rows)}")
        self._write()

        for row in result.rows:
            self._write(repr(row.sample))
            for name in result.filter_names:
                self._write(f"  {name}: {row.outcomes[name]!r}")

        self._write("=" * 70)

    def report_pattern(self, pattern: str) -> None:
        """Report which date tokens a pattern uses.

        Args:
            pattern: Date pattern as passed to date()
        """
        self._report_header(f"Date Pattern: {pattern!r}")
        active = scan_pattern(pattern)
        if not active:
            self._write("No tokens (pattern is rendered unchanged)")
        for token in active:
            self._write(f"  {token.pattern}")
        self._write("=" * 70)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self, title: str) -> None:
        """Print report header."""
        self._write("=" * 70)
        self._write(title)
        self._write("=" * 70)
