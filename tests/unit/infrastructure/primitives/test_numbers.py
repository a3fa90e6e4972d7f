"""Tests for numeric primitives."""

import math

import pytest

from filterkit.domain.model import SplitRangeOptions
from filterkit.infrastructure.primitives import num_to_length, round_to, split_range


class TestRoundTo:
    """Tests for round_to."""

    @pytest.mark.parametrize(
        ("number", "expected"),
        [(2.5, 3), (-2.5, -3), (2.4, 2), (0.5, 1), (3, 3)],
    )
    def test_nearest_integer_half_away_from_zero(self, number: float, expected: int) -> None:
        result = round_to(number)
        assert result == expected
        assert isinstance(result, int)

    @pytest.mark.parametrize(
        ("number", "precision", "expected"),
        [(1.005, 2, 1.01), (2.675, 2, 2.68), (-1.25, 1, -1.3), (1.2345, 3, 1.235), (7, 2, 7.0)],
    )
    def test_fractional_precision(self, number: float, precision: int, expected: float) -> None:
        assert round_to(number, precision) == expected

    def test_negative_precision(self) -> None:
        assert round_to(1250, -2) == 1300.0

    def test_zero_precision_returns_float(self) -> None:
        assert round_to(2.5, 0) == 3.0
        assert isinstance(round_to(2.5, 0), float)

    def test_non_finite_passthrough(self) -> None:
        assert math.isnan(round_to(float("nan"), 2))
        assert round_to(float("inf")) == float("inf")

    def test_large_number(self) -> None:
        assert round_to(1e300, 2) == 1e300


class TestNumToLength:
    """Tests for num_to_length."""

    def test_pads(self) -> None:
        assert num_to_length(5, 2) == "05"
        assert num_to_length(7, 3) == "007"

    def test_wider_number_unchanged(self) -> None:
        assert num_to_length(2020, 2) == "2020"


class TestSplitRange:
    """Tests for split_range."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(15, "10-20"), (0, "0-10"), (9.99, "0-10"), (-5, "-10-0"), (100, "100-110")],
    )
    def test_default_buckets(self, value: float, expected: str) -> None:
        assert split_range(value) == expected

    def test_fractional_step(self) -> None:
        options = SplitRangeOptions(step=0.5)
        assert split_range(1.2, options) == "1-1.5"
        assert split_range(1.7, options) == "1.5-2"

    def test_float_noise_trimmed(self) -> None:
        assert split_range(0.25, SplitRangeOptions(step=0.1)) == "0.2-0.3"

    def test_start_offset(self) -> None:
        assert split_range(12, SplitRangeOptions(start=5)) == "5-15"

    def test_separator(self) -> None:
        assert split_range(15, SplitRangeOptions(separator=" .. ")) == "10 .. 20"

    def test_open_ended_bounds(self) -> None:
        options = SplitRangeOptions(minimum=0, maximum=100)
        assert split_range(-1, options) == "<0"
        assert split_range(99, options) == "90-100"
        assert split_range(100, options) == "100+"

    def test_custom_open_labels(self) -> None:
        options = SplitRangeOptions(minimum=18, below_label="under {bound}")
        assert split_range(12, options) == "under 18"

    def test_processor_applied_first(self) -> None:
        assert split_range(6, processor=lambda x: x * 2) == "10-20"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), None, "12"])
    def test_not_a_number(self, value: object) -> None:
        assert split_range(value) == "NaN"  # type: ignore[arg-type]


class TestRoundToWideResults:
    """Tests for round_to with precisions wider than the input."""

    def test_precision_beyond_float_digits(self) -> None:
        assert round_to(0.5, 500) == 0.5

    def test_huge_number_with_precision(self) -> None:
        assert round_to(1e308, 100) == 1e308

    def test_tiny_number(self) -> None:
        assert round_to(1.5e-300, 301) == 1.5e-300
        assert round_to(1.5e-300, 300) == 2e-300


class TestSplitRangeOverflow:
    """Tests for split_range when bucket arithmetic overflows."""

    def test_tiny_step(self) -> None:
        assert split_range(1e10, SplitRangeOptions(step=1e-320)) == "NaN"

    def test_span_overflow(self) -> None:
        assert split_range(1e308, SplitRangeOptions(start=-1e308)) == "NaN"

    def test_upper_bound_overflow(self) -> None:
        assert split_range(1.7e308, SplitRangeOptions(step=1e308)) == "NaN"
