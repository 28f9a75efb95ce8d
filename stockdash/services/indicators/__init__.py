"""
Indicator Engine Service

CONTRACT:
    Input:  MarketSnapshot
    Output: dict[str, IndicatorOutput]

RESPONSIBILITIES:
    - Calculate SMA, EMA, RSI, MACD and Bollinger Bands series
    - Keep every series aligned index-for-index with the input bars
    - Summarise the latest readings into dashboard signals

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from stockdash.services.indicators.calculations import (
    TechnicalIndicators,
    calculate_indicators,
)
from stockdash.services.indicators.interface import IndicatorServiceInterface
from stockdash.services.indicators.service import (
    IndicatorService,
    get_indicator_service,
    summarize,
)

__all__ = [
    "TechnicalIndicators",
    "calculate_indicators",
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
    "summarize",
]
