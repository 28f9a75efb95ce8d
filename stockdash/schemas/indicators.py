"""
CONTRACT 2: Indicator Engine

Input: SymbolData (OHLCV bars)
Output: IndicatorOutput

Wire shape consumed by the chart/rendering layer. Series are lists aligned
with the input bars; undefined positions are null.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from stockdash.services.indicators.calculations import TechnicalIndicators


# =============================================================================
# ENUMS
# =============================================================================


class RSISignal(str, Enum):
    OVERBOUGHT = "OVERBOUGHT"
    OVERSOLD = "OVERSOLD"
    NEUTRAL = "NEUTRAL"


class MACDSignal(str, Enum):
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"
    NEUTRAL = "NEUTRAL"


Series = list[Optional[float]]


def to_series(arr: np.ndarray) -> Series:
    """Convert a NaN-padded array to a list with None for undefined positions."""
    return [None if np.isnan(v) else v for v in arr.tolist()]


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# SERIES
# =============================================================================


class MACDResponse(CamelModel):
    macd: Series
    signal: Series
    histogram: Series


class BollingerBandsResponse(CamelModel):
    upper: Series
    middle: Series
    lower: Series


class EMAResponse(CamelModel):
    ema12: Series
    ema26: Series
    ema50: Series


class SMAResponse(CamelModel):
    sma20: Series
    sma50: Series
    sma200: Series


class TechnicalIndicatorsResponse(CamelModel):
    """All indicator series for one price history."""

    rsi: Series
    macd: MACDResponse
    bollinger_bands: BollingerBandsResponse
    ema: EMAResponse
    sma: SMAResponse

    @classmethod
    def from_indicators(
        cls, indicators: "TechnicalIndicators"
    ) -> "TechnicalIndicatorsResponse":
        bands = indicators.bollinger_bands
        return cls(
            rsi=to_series(indicators.rsi),
            macd=MACDResponse(
                macd=to_series(indicators.macd.macd),
                signal=to_series(indicators.macd.signal),
                histogram=to_series(indicators.macd.histogram),
            ),
            bollinger_bands=BollingerBandsResponse(
                upper=to_series(bands.upper),
                middle=to_series(bands.middle),
                lower=to_series(bands.lower),
            ),
            ema=EMAResponse(
                ema12=to_series(indicators.ema.ema12),
                ema26=to_series(indicators.ema.ema26),
                ema50=to_series(indicators.ema.ema50),
            ),
            sma=SMAResponse(
                sma20=to_series(indicators.sma.sma20),
                sma50=to_series(indicators.sma.sma50),
                sma200=to_series(indicators.sma.sma200),
            ),
        )


# =============================================================================
# SUMMARY
# =============================================================================


class IndicatorSummary(CamelModel):
    """Latest reading of each indicator, as shown on the dashboard badges."""

    rsi: Optional[float] = None
    rsi_signal: RSISignal = RSISignal.NEUTRAL
    macd: Optional[float] = None
    macd_signal_line: Optional[float] = None
    macd_histogram: Optional[float] = None
    macd_signal: MACDSignal = MACDSignal.NEUTRAL
    sma20: Optional[float] = None
    sma50: Optional[float] = None
    sma200: Optional[float] = None
    bollinger_upper: Optional[float] = None
    bollinger_middle: Optional[float] = None
    bollinger_lower: Optional[float] = None


# =============================================================================
# OUTPUT
# =============================================================================


class IndicatorOutput(CamelModel):
    """Complete indicator analysis for a single symbol."""

    symbol: str
    timestamp: datetime
    bar_count: int = Field(..., ge=0)
    indicators: TechnicalIndicatorsResponse
    summary: IndicatorSummary
