"""
StockDash Schema Contracts

JSON contracts between the data layer, the indicator engine and the
rendering layer.
"""

from stockdash.schemas.market import (
    MarketSnapshot,
    SymbolData,
    OHLCV,
    TimeFrame,
)
from stockdash.schemas.indicators import (
    IndicatorOutput,
    IndicatorSummary,
    TechnicalIndicatorsResponse,
    MACDSignal,
    RSISignal,
)

__all__ = [
    # Market
    "MarketSnapshot",
    "SymbolData",
    "OHLCV",
    "TimeFrame",
    # Indicators
    "IndicatorOutput",
    "IndicatorSummary",
    "TechnicalIndicatorsResponse",
    "MACDSignal",
    "RSISignal",
]
