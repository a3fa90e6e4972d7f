"""Tests for the date token table."""

from filterkit.infrastructure.filters.tokens import DATE_TOKENS
from tests.factories import make_moment


class TestTokenTable:
    """Tests for DATE_TOKENS ordering and renderers."""

    def test_fourteen_tokens(self) -> None:
        assert len(DATE_TOKENS) == 14

    def test_unique_patterns(self) -> None:
        patterns = [token.pattern for token in DATE_TOKENS]
        assert len(set(patterns)) == len(patterns)

    def test_containing_tokens_come_first(self) -> None:
        """No token is a substring of a LATER token."""
        for i, earlier in enumerate(DATE_TOKENS):
            for later in DATE_TOKENS[i + 1 :]:
                assert earlier.pattern not in later.pattern, (earlier.pattern, later.pattern)

    def test_is_immutable_sequence(self) -> None:
        assert isinstance(DATE_TOKENS, tuple)

    def test_renderers(self) -> None:
        moment = make_moment(2005, 3, 7, 4, 9, 6, millisecond=42)
        rendered = {token.pattern: token.render(moment) for token in DATE_TOKENS}

        assert rendered == {
            "YYYY": "2005",
            "YY": "05",
            "MM": "03",
            "M": "3",
            "DD": "07",
            "D": "7",
            "hh": "04",
            "h": "4",
            "mm": "09",
            "m": "9",
            "ss": "06",
            "s": "6",
            "SSS": "042",
            "S": "42",
        }

    def test_month_is_one_based(self) -> None:
        tokens = {token.pattern: token for token in DATE_TOKENS}
        assert tokens["M"].render(make_moment(month=12)) == "12"
        assert tokens["MM"].render(make_moment(month=1)) == "01"

    def test_invalid_moment_renders_nan(self) -> None:
        assert {token.render(None) for token in DATE_TOKENS} == {"NaN"}
