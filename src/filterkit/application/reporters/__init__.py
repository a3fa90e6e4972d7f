"""Reporters for filter diagnostics.

ConsoleReporter renders probe tables with rich.
PlainTextReporter is stdlib-only.
"""

from filterkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from filterkit.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
