"""Date filter: render a datetime from a token pattern.

Two phases:
  1. Build time: scan DATE_TOKENS in order, each token claims the first
     occurrence of its text that does not overlap an earlier claim.
     Claims are tracked as an index set; the pattern itself is untouched.
  2. Call time: resolve the argument to a datetime, then replace each
     claimed token in the ORIGINAL pattern, in table order, with
     str.replace(..., 1).

Only the first occurrence of a token text is replaced per call:
date("D/D") renders "3/D". A repeated long token can be partially
rendered by its shorter sibling: date("YYYY/YYYY") renders "2020/20YY".

Every token is literal text, so letters in words are rendered too. This
includes the millisecond tokens: date("YYYY Sun") renders "2020 0un".
Patterns have no escaping: keep Y M D h m s S out of literal text.
"""

from __future__ import annotations

from datetime import date as calendar_date
from datetime import datetime, time
from typing import TYPE_CHECKING

from filterkit.infrastructure.filters.tokens import DATE_TOKENS
from filterkit.infrastructure.primitives import is_number

if TYPE_CHECKING:
    from collections.abc import Iterable

    from filterkit.domain.model.date_token import DateToken
    from filterkit.infrastructure.filters.types import Filter, Processor


def scan_pattern(
    pattern: str,
    tokens: Iterable[DateToken] = DATE_TOKENS,
) -> tuple[DateToken, ...]:
    """Find tokens used by pattern.

    Args:
        pattern: Date pattern, e.g. "YYYY-MM-DD hh:mm".
        tokens: Ordered token table. Containing tokens must come first.

    Returns:
        Active tokens in table order.
    """
    claimed: set[int] = set()
    active: list[DateToken] = []

    for token in tokens:
        start = _find_unclaimed(pattern, token.pattern, claimed)
        if start is None:
            continue
        claimed.update(range(start, start + len(token.pattern)))
        active.append(token)

    return tuple(active)


def _find_unclaimed(pattern: str, needle: str, claimed: set[int]) -> int | None:
    """First index where needle occurs over unclaimed characters only."""
    start = pattern.find(needle)
    while start != -1:
        if claimed.isdisjoint(range(start, start + len(needle))):
            return start
        start = pattern.find(needle, start + 1)
    return None


def resolve_moment(value: object) -> datetime | None:
    """Resolve a date-like value.

    Args:
        value: datetime (used as-is), date (midnight), or number
            (epoch milliseconds, local time).

    Returns:
        Resolved datetime, None for anything unresolvable.
    """
    match value:
        case datetime():
            return value
        case calendar_date():
            return datetime.combine(value, time())
        case _ if is_number(value):
            try:
                return datetime.fromtimestamp(value / 1000)  # type: ignore[operator]
            except (OverflowError, OSError, ValueError):
                return None
        case _:
            return None


def date(pattern: str, processor: Processor[object] | None = None) -> Filter[object, str]:
    """Create filter: date-like value -> text rendered from pattern.

    Tokens: YYYY YY MM M DD D hh h mm m ss s SSS S.
    Text that is not a token is copied as-is. Unresolvable values render
    every token as "NaN".

    Args:
        pattern: Token pattern. Scanned once, here.
        processor: Extracts the date-like value from the argument
            (datetime, date, or epoch milliseconds).

    Returns:
        Date formatting filter.
    """
    active = scan_pattern(pattern)

    def _filter(value: object) -> str:
        source = processor(value) if processor is not None else value
        moment = resolve_moment(source)
        result = pattern
        for token in active:
            result = result.replace(token.pattern, token.render(moment), 1)
        return result

    return _filter
