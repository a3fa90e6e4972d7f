"""Date pattern token value object."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

# Text rendered by every token for an unresolvable moment
INVALID_COMPONENT = "NaN"


@dataclass(frozen=True, slots=True)
class DateToken:
    """Literal pattern text and its renderer.

    Attributes:
        pattern: Literal substring searched in date patterns (non-empty)
        renderer: Maps a resolved moment to the token text
    """

    pattern: str
    renderer: Callable[[datetime], str]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.pattern:
            raise ValueError("pattern must not be empty")

    def render(self, moment: datetime | None) -> str:
        """Render token for moment. None = invalid moment."""
        if moment is None:
            return INVALID_COMPONENT
        return self.renderer(moment)
