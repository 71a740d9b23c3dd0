"""
Indicators package for TA-Lite.

This package contains the window statistics, smoothing functions,
oscillators and column appenders that enrich a price series.
"""

from .errors import (
    IndicatorError, IndicatorErrorKind, NEUTRAL_OSCILLATOR_VALUE, SENTINEL, sentinel_on_error
)
from .base_indicator import BaseIndicator
from .window_stats import (
    average, variance, standard_deviation, minimum, maximum, StandardDeviation
)
from .moving_averages import (
    ema, ema_values, smooth_magnitudes, SimpleMovingAverage, ExponentialMovingAverage
)
from .oscillators import (
    rsi, stochastic_k, williams_r, macd, RelativeStrengthIndex, StochasticK, WilliamsR, MACD
)
from .appenders import (
    append_indicator, add_sma, add_ema, add_standard_deviation, add_rsi,
    add_stochastic_k, add_stochastic_d, add_williams_r, add_macd
)

__all__ = [
    "IndicatorError",
    "IndicatorErrorKind",
    "NEUTRAL_OSCILLATOR_VALUE",
    "SENTINEL",
    "sentinel_on_error",
    "BaseIndicator",
    "average",
    "variance",
    "standard_deviation",
    "minimum",
    "maximum",
    "StandardDeviation",
    "ema",
    "ema_values",
    "smooth_magnitudes",
    "SimpleMovingAverage",
    "ExponentialMovingAverage",
    "rsi",
    "stochastic_k",
    "williams_r",
    "macd",
    "RelativeStrengthIndex",
    "StochasticK",
    "WilliamsR",
    "MACD",
    "append_indicator",
    "add_sma",
    "add_ema",
    "add_standard_deviation",
    "add_rsi",
    "add_stochastic_k",
    "add_stochastic_d",
    "add_williams_r",
    "add_macd"
]
