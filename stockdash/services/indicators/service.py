"""
Indicator Engine Service Implementation

Calculates all technical indicators from OHLCV data.
Pure Python/NumPy calculations.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from stockdash.core.config import IndicatorSettings, get_settings
from stockdash.schemas.market import MarketSnapshot, SymbolData
from stockdash.schemas.indicators import (
    IndicatorOutput,
    IndicatorSummary,
    TechnicalIndicatorsResponse,
)
from stockdash.services.base import ServiceError, ValidationError
from stockdash.services.indicators.interface import IndicatorServiceInterface
from stockdash.services.indicators.calculations import (
    TechnicalIndicators,
    calculate_indicators,
    get_last,
    macd_signal,
    rsi_signal,
)

logger = logging.getLogger(__name__)


def summarize(
    indicators: TechnicalIndicators,
    overbought: float = 70.0,
    oversold: float = 30.0,
) -> IndicatorSummary:
    """Read the last position of each series and classify RSI and MACD."""
    rsi_val = get_last(indicators.rsi)
    macd_val = get_last(indicators.macd.macd)
    signal_val = get_last(indicators.macd.signal)

    return IndicatorSummary(
        rsi=rsi_val,
        rsi_signal=rsi_signal(rsi_val, overbought, oversold),
        macd=macd_val,
        macd_signal_line=signal_val,
        macd_histogram=get_last(indicators.macd.histogram),
        macd_signal=macd_signal(macd_val, signal_val),
        sma20=get_last(indicators.sma.sma20),
        sma50=get_last(indicators.sma.sma50),
        sma200=get_last(indicators.sma.sma200),
        bollinger_upper=get_last(indicators.bollinger_bands.upper),
        bollinger_middle=get_last(indicators.bollinger_bands.middle),
        bollinger_lower=get_last(indicators.bollinger_bands.lower),
    )


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Calculates technical indicators for chart rendering.
    All calculations are deterministic and reproducible.
    """

    def __init__(self, config: Optional[IndicatorSettings] = None):
        self.config = config or get_settings().indicators

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(
        self, input_data: MarketSnapshot
    ) -> dict[str, IndicatorOutput]:
        """Calculate indicators for all symbols in snapshot."""
        input_data = await self.validate_input(input_data)
        results = {}

        for symbol_data in input_data.symbols:
            try:
                results[symbol_data.symbol] = await self.calculate_for_symbol(
                    symbol_data
                )
            except (ServiceError, ValueError):
                # Log error but continue with other symbols
                logger.exception(
                    f"Error calculating indicators for {symbol_data.symbol}"
                )

        return results

    async def calculate_for_symbol(self, symbol_data: SymbolData) -> IndicatorOutput:
        """Calculate all indicators for a single symbol."""
        if not symbol_data.ohlcv:
            raise ValidationError(
                self.name,
                f"No bars for {symbol_data.symbol}",
                {"symbol": symbol_data.symbol},
            )

        cfg = self.config
        indicators = calculate_indicators(
            symbol_data.ohlcv,
            rsi_period=cfg.rsi_period,
            macd_fast=cfg.macd_fast,
            macd_slow=cfg.macd_slow,
            macd_signal=cfg.macd_signal,
            bollinger_period=cfg.bollinger_period,
            bollinger_std_dev=cfg.bollinger_std_dev,
        )
        logger.debug(
            f"Calculated indicators for {symbol_data.symbol} "
            f"over {len(indicators)} bars"
        )

        return IndicatorOutput(
            symbol=symbol_data.symbol,
            timestamp=datetime.now(timezone.utc),
            bar_count=len(indicators),
            indicators=TechnicalIndicatorsResponse.from_indicators(indicators),
            summary=summarize(indicators, cfg.rsi_overbought, cfg.rsi_oversold),
        )

    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
