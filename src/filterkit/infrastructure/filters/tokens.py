"""Date token table.

ORDER IS LOAD-BEARING. Patterns are matched by plain substring search in
table order, so a token must come before every token it contains
(YYYY before YY, MM before M, ...). Re-check containment before reordering.

All renderers read local calendar fields of the resolved datetime.
Month is 1-based.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from filterkit.domain.model.date_token import DateToken
from filterkit.infrastructure.primitives import num_to_length

if TYPE_CHECKING:
    from datetime import datetime


def _year(moment: datetime) -> str:
    return str(moment.year)


def _short_year(moment: datetime) -> str:
    return str(moment.year)[2:]


def _millis(moment: datetime) -> int:
    return moment.microsecond // 1000


DATE_TOKENS: Final[tuple[DateToken, ...]] = (
    DateToken("YYYY", _year),
    DateToken("YY", _short_year),
    DateToken("MM", lambda moment: num_to_length(moment.month, 2)),
    DateToken("M", lambda moment: str(moment.month)),
    DateToken("DD", lambda moment: num_to_length(moment.day, 2)),
    DateToken("D", lambda moment: str(moment.day)),
    DateToken("hh", lambda moment: num_to_length(moment.hour, 2)),
    DateToken("h", lambda moment: str(moment.hour)),
    DateToken("mm", lambda moment: num_to_length(moment.minute, 2)),
    DateToken("m", lambda moment: str(moment.minute)),
    DateToken("ss", lambda moment: num_to_length(moment.second, 2)),
    DateToken("s", lambda moment: str(moment.second)),
    DateToken("SSS", lambda moment: num_to_length(_millis(moment), 3)),
    DateToken("S", lambda moment: str(_millis(moment))),
)
