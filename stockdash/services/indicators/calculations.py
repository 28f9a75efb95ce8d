"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
All math is deterministic: same bars in, same series out.

Every series returned here has the same length as its input and is aligned
index-for-index with it. Positions where a window is not yet full hold
np.nan, never 0.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from stockdash.schemas.indicators import MACDSignal, RSISignal

EMA_PERIODS = (12, 26, 50)
SMA_PERIODS = (20, 50, 200)


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True, eq=False)
class MACDSeries:
    """MACD line, signal line and histogram."""

    macd: np.ndarray
    signal: np.ndarray
    histogram: np.ndarray


@dataclass(frozen=True, eq=False)
class BollingerSeries:
    """Upper, middle and lower Bollinger Bands."""

    upper: np.ndarray
    middle: np.ndarray
    lower: np.ndarray


@dataclass(frozen=True, eq=False)
class EMASeries:
    ema12: np.ndarray
    ema26: np.ndarray
    ema50: np.ndarray


@dataclass(frozen=True, eq=False)
class SMASeries:
    sma20: np.ndarray
    sma50: np.ndarray
    sma200: np.ndarray


@dataclass(frozen=True, eq=False)
class TechnicalIndicators:
    """All indicator series computed from one price history."""

    rsi: np.ndarray
    macd: MACDSeries
    bollinger_bands: BollingerSeries
    ema: EMASeries
    sma: SMASeries

    def __len__(self) -> int:
        return len(self.rsi)


# =============================================================================
# HELPERS
# =============================================================================


def _as_series(data: Any) -> np.ndarray:
    """Coerce input to a 1-D float64 array."""
    return np.asarray(data, dtype=np.float64).reshape(-1)


def _check_period(period: int) -> None:
    if period < 1:
        raise ValueError(f"period must be >= 1, got {period}")


def _window_sum(values: np.ndarray) -> float:
    """Sum accumulated left to right.

    np.sum uses pairwise summation, which can differ in the last bits.
    """
    if len(values) == 0:
        return 0.0
    return float(np.cumsum(values)[-1])


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def closes_from_bars(bars: Sequence[Any]) -> np.ndarray:
    """Extract closing prices from bars (objects with .close or mappings)."""
    return np.array(
        [bar["close"] if isinstance(bar, Mapping) else bar.close for bar in bars],
        dtype=np.float64,
    )


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data: Any, period: int) -> np.ndarray:
    """Simple Moving Average."""
    _check_period(period)
    data = _as_series(data)

    result = np.full(len(data), np.nan)
    for i in range(period - 1, len(data)):
        result[i] = _window_sum(data[i - period + 1 : i + 1]) / period
    return result


def ema(data: Any, period: int) -> np.ndarray:
    """Exponential Moving Average, seeded with the SMA of the first window."""
    _check_period(period)
    data = _as_series(data)

    result = np.full(len(data), np.nan)
    if len(data) < period:
        return result

    multiplier = 2 / (period + 1)

    # Start with SMA
    result[period - 1] = _window_sum(data[:period]) / period

    for i in range(period, len(data)):
        result[i] = (data[i] - result[i - 1]) * multiplier + result[i - 1]

    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes: Any, period: int = 14) -> np.ndarray:
    """
    Relative Strength Index.

    Uses the simple mean of gains and losses over each window of `period`
    differences (no Wilder smoothing). A window with no losses reads 100.
    """
    _check_period(period)
    closes = _as_series(closes)

    result = np.full(len(closes), np.nan)
    if len(closes) < 2:
        return result

    deltas = np.diff(closes)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    # deltas[i] describes closes[i + 1]
    for i in range(period - 1, len(deltas)):
        avg_gain = _window_sum(gains[i - period + 1 : i + 1]) / period
        avg_loss = _window_sum(losses[i - period + 1 : i + 1]) / period

        if avg_loss == 0:
            result[i + 1] = 100.0
        else:
            rs = avg_gain / avg_loss
            result[i + 1] = 100 - (100 / (1 + rs))

    return result


def macd(
    closes: Any,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDSeries:
    """
    MACD (Moving Average Convergence Divergence).

    The signal line is the EMA of the defined MACD values only, left-padded
    with NaN back to the length of the MACD line.
    """
    closes = _as_series(closes)

    fast_ema = ema(closes, fast_period)
    slow_ema = ema(closes, slow_period)
    macd_line = fast_ema - slow_ema

    signal = ema(macd_line[~np.isnan(macd_line)], signal_period)
    padding = np.full(len(macd_line) - len(signal), np.nan)
    signal_line = np.concatenate([padding, signal])

    histogram = macd_line - signal_line

    return MACDSeries(
        macd=_frozen(macd_line),
        signal=_frozen(signal_line),
        histogram=_frozen(histogram),
    )


# =============================================================================
# VOLATILITY INDICATORS
# =============================================================================


def bollinger_bands(
    closes: Any, period: int = 20, std_dev: float = 2.0
) -> BollingerSeries:
    """Bollinger Bands using the population standard deviation of each window."""
    closes = _as_series(closes)
    middle = sma(closes, period)

    upper = np.full(len(closes), np.nan)
    lower = np.full(len(closes), np.nan)

    for i in range(period - 1, len(closes)):
        window = closes[i - period + 1 : i + 1]
        mean = middle[i]
        variance = _window_sum((window - mean) ** 2) / period
        std = np.sqrt(variance)

        upper[i] = mean + std_dev * std
        lower[i] = mean - std_dev * std

    return BollingerSeries(
        upper=_frozen(upper),
        middle=_frozen(middle),
        lower=_frozen(lower),
    )


# =============================================================================
# AGGREGATE
# =============================================================================


def calculate_indicators(
    bars: Sequence[Any],
    *,
    rsi_period: int = 14,
    macd_fast: int = 12,
    macd_slow: int = 26,
    macd_signal: int = 9,
    bollinger_period: int = 20,
    bollinger_std_dev: float = 2.0,
) -> TechnicalIndicators:
    """
    Calculate every indicator over the closing prices of `bars`.

    Each indicator is computed independently from the same close series.
    An empty bar sequence yields empty series throughout.
    """
    closes = closes_from_bars(bars)

    ema_values = {f"ema{p}": _frozen(ema(closes, p)) for p in EMA_PERIODS}
    sma_values = {f"sma{p}": _frozen(sma(closes, p)) for p in SMA_PERIODS}

    return TechnicalIndicators(
        rsi=_frozen(rsi(closes, rsi_period)),
        macd=macd(closes, macd_fast, macd_slow, macd_signal),
        bollinger_bands=bollinger_bands(closes, bollinger_period, bollinger_std_dev),
        ema=EMASeries(**ema_values),
        sma=SMASeries(**sma_values),
    )


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_last(arr: np.ndarray) -> Optional[float]:
    """Get the value at the last position, or None if undefined there."""
    if len(arr) == 0 or np.isnan(arr[-1]):
        return None
    return float(arr[-1])


def get_last_valid(arr: np.ndarray) -> Optional[float]:
    """Get last non-NaN value from array."""
    valid = arr[~np.isnan(arr)]
    return float(valid[-1]) if len(valid) > 0 else None


def rsi_signal(
    value: Optional[float], overbought: float = 70.0, oversold: float = 30.0
) -> RSISignal:
    """Classify an RSI reading."""
    if value is None or np.isnan(value):
        return RSISignal.NEUTRAL
    if value > overbought:
        return RSISignal.OVERBOUGHT
    if value < oversold:
        return RSISignal.OVERSOLD
    return RSISignal.NEUTRAL


def macd_signal(
    macd_value: Optional[float], signal_value: Optional[float]
) -> MACDSignal:
    """Classify the MACD line against its signal line."""
    if macd_value is None or signal_value is None:
        return MACDSignal.NEUTRAL
    if macd_value > signal_value:
        return MACDSignal.BULLISH
    if macd_value < signal_value:
        return MACDSignal.BEARISH
    return MACDSignal.NEUTRAL
