"""
Tests for TA-Lite oscillators.

This module tests RSI, stochastic %K, Williams %R and MACD, including the
shared boundary policy and the degenerate-window fallbacks.
"""

import pytest
from datetime import date, timedelta

from ta_lite.indicators.errors import (
    IndicatorError, IndicatorErrorKind, NEUTRAL_OSCILLATOR_VALUE
)
from ta_lite.indicators.moving_averages import ema
from ta_lite.indicators.oscillators import (
    rsi, stochastic_k, williams_r, macd, RelativeStrengthIndex, StochasticK, WilliamsR, MACD
)
from ta_lite.series.columns import CLOSE_SLOT
from ta_lite.series.models import build_series


def make_series(closes):
    """Series whose close column holds closes."""
    start = date(2024, 1, 1)
    return build_series([
        (start + timedelta(days=i), c, c + 1.0, c - 1.0, c)
        for i, c in enumerate(closes)
    ])


WAVY_CLOSES = [44.3, 44.1, 44.2, 43.6, 44.3, 44.8, 45.1, 45.4, 45.8, 46.1,
               45.9, 46.0, 45.6, 46.3, 46.3, 46.0, 46.4, 46.2, 45.6, 46.2]


class TestRSI:
    """Test cases for the Relative Strength Index."""

    def test_rising_closes(self):
        """Test that strictly rising closes give 100."""
        series = make_series([10, 11, 12, 13, 14, 15])

        assert rsi(series, 5, 3) == 100.0
        assert rsi(series, 5, 5, "close") == 100.0

    def test_falling_closes(self):
        """Test that strictly falling closes give 0."""
        series = make_series([15, 14, 13, 12])

        assert rsi(series, 3, 3) == 0.0

    def test_mixed_moves(self):
        """Test smoothing of up and down magnitudes."""
        series = make_series([10, 12, 11, 13])

        # ups (most recent first) [2, 0, 2] -> 1.5, downs [0, 1, 0] -> 0.25
        assert rsi(series, 3, 3) == pytest.approx(100 * 1.5 / 1.75)

    def test_flat_window(self):
        """Test the degenerate no-movement window."""
        series = make_series([10, 10, 10, 10])

        assert rsi(series, 3, 3) == NEUTRAL_OSCILLATOR_VALUE

        with pytest.raises(IndicatorError) as exc_info:
            rsi(series, 3, 3, strict=True)
        assert exc_info.value.kind == IndicatorErrorKind.DEGENERATE_COMPUTATION

    def test_boundary_policy(self):
        """Test the sentinel for missing series, index 0, unknown names and short history."""
        series = make_series([10, 11, 12, 13])

        assert rsi(None, 3, 2) == 0.0
        assert rsi(series, 0, 1) == 0.0
        assert rsi(series, 3, 2, "missing") == 0.0
        assert rsi(series, 2, 3) == 0.0

        with pytest.raises(IndicatorError) as exc_info:
            rsi(series, 3, 2, "missing", strict=True)
        assert exc_info.value.kind == IndicatorErrorKind.NAME_NOT_RESOLVED

        with pytest.raises(IndicatorError) as exc_info:
            rsi(series, 3, 2, "date", strict=True)
        assert exc_info.value.kind == IndicatorErrorKind.INVALID_INPUT

    def test_bounded(self):
        """Test that RSI stays within [0, 100]."""
        series = make_series(WAVY_CLOSES)

        for index in range(5, len(WAVY_CLOSES)):
            assert 0.0 <= rsi(series, index, 5) <= 100.0


class TestStochastic:
    """Test cases for stochastic %K and Williams %R."""

    def test_stochastic_k(self):
        """Test %K over the window index - period .. index."""
        series = make_series([10, 14, 12, 11, 13])

        assert stochastic_k(series, 4, 3) == pytest.approx(100 * (13 - 11) / (14 - 11))

    def test_stochastic_k_extremes(self):
        """Test %K at the top and bottom of the range."""
        series = make_series([10, 11, 12, 9, 13])

        assert stochastic_k(series, 4, 4) == 100.0
        assert stochastic_k(series, 3, 3) == 0.0

    def test_stochastic_k_bounded(self):
        """Test that %K stays within [0, 100] when the window moves."""
        series = make_series(WAVY_CLOSES)

        for period in (2, 5, 9):
            for index in range(period, len(WAVY_CLOSES)):
                assert 0.0 <= stochastic_k(series, index, period) <= 100.0

    def test_flat_window(self):
        """Test the degenerate flat window."""
        series = make_series([5, 5, 5, 5])

        assert stochastic_k(series, 3, 2) == NEUTRAL_OSCILLATOR_VALUE
        assert williams_r(series, 3, 2) == 100.0 - NEUTRAL_OSCILLATOR_VALUE

        with pytest.raises(IndicatorError) as exc_info:
            stochastic_k(series, 3, 2, strict=True)
        assert exc_info.value.kind == IndicatorErrorKind.DEGENERATE_COMPUTATION

    def test_other_source_column(self):
        """Test %K on the high column."""
        series = make_series([10, 14, 12, 11, 13])

        assert stochastic_k(series, 4, 3, "high") == pytest.approx(100 * (14 - 12) / (15 - 12))

    def test_williams_r_complements_k(self):
        """Test that Williams %R is 100 - %K wherever %K is defined."""
        series = make_series(WAVY_CLOSES)

        for period in (3, 7):
            for index in range(period, len(WAVY_CLOSES)):
                k = stochastic_k(series, index, period)
                assert williams_r(series, index, period) == pytest.approx(100.0 - k)

    def test_williams_r_boundary(self):
        """Test that Williams %R shares the insufficient-history sentinel."""
        series = make_series(WAVY_CLOSES)

        assert williams_r(series, 2, 3) == 0.0
        assert williams_r(series, 0, 1) == 0.0
        assert williams_r(series, 5, 3, "missing") == 0.0
        assert 100.0 - stochastic_k(series, 2, 3) == 100.0

        with pytest.raises(IndicatorError) as exc_info:
            williams_r(series, 2, 3, strict=True)
        assert exc_info.value.kind == IndicatorErrorKind.INSUFFICIENT_HISTORY


class TestMACD:
    """Test cases for the MACD line."""

    def test_difference_of_emas(self):
        """Test that MACD is ema(period2) - ema(period1)."""
        series = make_series(WAVY_CLOSES)

        for index in range(5, len(WAVY_CLOSES)):
            expected = ema(series, CLOSE_SLOT, index, 5) - ema(series, CLOSE_SLOT, index, 2)
            assert macd(series, index, 2, 5) == pytest.approx(expected)

    def test_insufficient_history(self):
        """Test that either period exceeding index gives the sentinel."""
        series = make_series(WAVY_CLOSES)

        assert macd(series, 4, 2, 5) == 0.0
        assert macd(series, 4, 5, 2) == 0.0
        assert macd(series, 10, 2, 5, "missing") == 0.0

    def test_constant_series(self):
        """Test that a constant series has a zero MACD line."""
        series = make_series([20.0] * 10)

        assert macd(series, 9, 2, 4) == pytest.approx(0.0)

    def test_compute_matches_point_queries(self):
        """Test that the MACD column equals macd() bar for bar."""
        series = make_series(WAVY_CLOSES)

        for period1, period2 in ((3, 6), (6, 3), (2, 2)):
            values = MACD(period1, period2).compute(series)
            expected = [macd(series, i, period1, period2) for i in range(len(WAVY_CLOSES))]

            assert values == expected


class TestOscillatorIndicators:
    """Test cases for the oscillator indicator classes."""

    def test_names(self):
        """Test canonical column names."""
        assert RelativeStrengthIndex(14).name == "rsi_14"
        assert StochasticK(14).name == "stoch_k_14"
        assert WilliamsR(14).name == "williams_r_14"
        assert MACD(12, 26).name == "macd_12_26"
        assert RelativeStrengthIndex(5, source="sma_3").name == "rsi_5_sma_3"

    def test_compute_lengths(self):
        """Test that every indicator yields one value per bar."""
        series = make_series(WAVY_CLOSES)

        for indicator in (RelativeStrengthIndex(5), StochasticK(5), WilliamsR(5), MACD(3, 6)):
            values = indicator.compute(series)
            assert len(values) == len(WAVY_CLOSES)
            assert values[0] == 0.0

    def test_macd_validates_both_periods(self):
        """Test that MACD rejects a non-positive second period."""
        series = make_series(WAVY_CLOSES)

        with pytest.raises(IndicatorError) as exc_info:
            MACD(3, 0).compute(series)
        assert exc_info.value.kind == IndicatorErrorKind.INVALID_INPUT
