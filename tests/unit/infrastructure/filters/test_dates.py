"""Tests for the date filter.

Tests:
- scan_pattern: table-ordered token claiming
- resolve_moment: datetime / date / epoch ms / invalid
- date: rendering, processor, edge cases
"""

from datetime import date as calendar_date
from datetime import datetime

import pytest

from filterkit.infrastructure.filters import date
from filterkit.infrastructure.filters.dates import resolve_moment, scan_pattern
from tests.factories import DEFAULT_MOMENT, epoch_ms, make_moment, make_record


def _patterns(pattern: str) -> tuple[str, ...]:
    return tuple(token.pattern for token in scan_pattern(pattern))


class TestScanPattern:
    """Tests for scan_pattern."""

    def test_iso_date(self) -> None:
        assert _patterns("YYYY-MM-DD") == ("YYYY", "MM", "DD")

    def test_long_token_blocks_its_substring(self) -> None:
        assert _patterns("YYYY") == ("YYYY",)
        assert _patterns("hh:mm:ss") == ("hh", "mm", "ss")

    def test_short_and_long_of_same_field(self) -> None:
        assert _patterns("MM/M") == ("MM", "M")

    def test_table_order_not_pattern_order(self) -> None:
        assert _patterns("ss mm hh DD MM YY") == ("YY", "MM", "DD", "hh", "mm", "ss")

    def test_claims_do_not_join_across_other_tokens(self) -> None:
        # "h" + "D" + "h" never forms "hh"
        assert _patterns("hDh") == ("D", "h")

    def test_no_tokens(self) -> None:
        assert _patterns("") == ()
        assert _patterns("--/--") == ()

    def test_pattern_not_modified(self) -> None:
        pattern = "YYYY-MM"
        scan_pattern(pattern)
        assert pattern == "YYYY-MM"


class TestResolveMoment:
    """Tests for resolve_moment."""

    def test_datetime_as_is(self) -> None:
        assert resolve_moment(DEFAULT_MOMENT) is DEFAULT_MOMENT

    def test_date_is_midnight(self) -> None:
        assert resolve_moment(calendar_date(2020, 1, 5)) == datetime(2020, 1, 5)

    def test_epoch_milliseconds(self) -> None:
        moment = make_moment(hour=10, minute=30, millisecond=250)
        assert resolve_moment(epoch_ms(moment)) == moment

    @pytest.mark.parametrize("value", [None, "2020-01-05", [], float("nan"), 1e20])
    def test_unresolvable(self, value: object) -> None:
        assert resolve_moment(value) is None


class TestDate:
    """Tests for date filter."""

    def test_iso_date(self) -> None:
        assert date("YYYY-MM-DD")(datetime(2020, 1, 5)) == "2020-01-05"

    def test_short_tokens(self) -> None:
        assert date("YY/M")(datetime(2020, 1, 5)) == "20/1"

    def test_four_digit_year_not_split(self) -> None:
        assert date("YYYY")(datetime(2020, 6, 1)) == "2020"

    def test_full_timestamp(self) -> None:
        flt = date("DD.MM.YYYY hh:mm:ss")
        assert flt(make_moment(2021, 11, 3, 7, 8, 9)) == "03.11.2021 07:08:09"

    def test_unpadded_time(self) -> None:
        assert date("D/M h:m:s")(make_moment(2021, 11, 3, 7, 8, 9)) == "3/11 7:8:9"

    def test_milliseconds(self) -> None:
        flt = date("hh:mm:ss.SSS")
        assert flt(make_moment(hour=1, minute=2, second=3, millisecond=45)) == "01:02:03.045"

    def test_epoch_milliseconds(self) -> None:
        flt = date("YYYY-MM-DD hh:mm")
        assert flt(epoch_ms(make_moment(hour=10, minute=30))) == "2020-01-05 10:30"

    def test_plain_date(self) -> None:
        assert date("YYYY-MM-DD hh")(calendar_date(2020, 1, 5)) == "2020-01-05 00"

    def test_processor_returning_datetime(self) -> None:
        flt = date("YYYY", lambda row: row["when"])
        assert flt({"when": datetime(2019, 5, 1)}) == "2019"

    def test_processor_returning_milliseconds(self) -> None:
        flt = date("DD/MM/YYYY", lambda row: row["created_ms"])
        assert flt(make_record()) == "05/01/2020"

    def test_literal_text_kept(self) -> None:
        assert date("[YYYY]")(DEFAULT_MOMENT) == "[2020]"

    def test_empty_pattern(self) -> None:
        assert date("")(DEFAULT_MOMENT) == ""

    def test_pattern_without_tokens(self) -> None:
        assert date("--/--")(DEFAULT_MOMENT) == "--/--"

    def test_invalid_value_renders_nan(self) -> None:
        assert date("YYYY-MM")(None) == "NaN-NaN"
        assert date("DD")("2020-01-05") == "NaN"

    def test_repeated_token_only_first_replaced(self) -> None:
        assert date("D/D")(make_moment(day=3)) == "3/D"

    def test_repeated_long_token_partially_rendered(self) -> None:
        # second YYYY is claimed by YY, which then replaces its first two letters
        assert date("YYYY/YYYY")(DEFAULT_MOMENT) == "2020/20YY"

    def test_tokens_inside_words(self) -> None:
        assert date("Mon")(DEFAULT_MOMENT) == "1on"

    def test_same_filter_reused(self) -> None:
        flt = date("YYYY")
        assert flt(datetime(2001, 1, 1)) == "2001"
        assert flt(datetime(2002, 1, 1)) == "2002"
        assert flt(None) == "NaN"


class TestLiteralLetters:
    """Tests for letters outside tokens being rendered as tokens."""

    def test_uppercase_s_is_millisecond_token(self) -> None:
        assert date("YYYY Sun")(DEFAULT_MOMENT) == "2020 0un"

    def test_letters_free_literal_text_kept(self) -> None:
        assert date("YYYY, week of DD")(DEFAULT_MOMENT) == "2020, week of 05"
