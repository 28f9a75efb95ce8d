"""Tests for IndicatorService."""

from __future__ import annotations

import logging

import pytest

from stockdash.core.config import IndicatorSettings
from stockdash.schemas.indicators import MACDSignal, RSISignal
from stockdash.schemas.market import MarketSnapshot, SymbolData
from stockdash.services.base import ValidationError
from stockdash.services.indicators import (
    IndicatorService,
    calculate_indicators,
    get_indicator_service,
    summarize,
)


class TestSummarize:
    def test_rising_series_is_overbought(self, bar_factory) -> None:
        indicators = calculate_indicators(bar_factory([float(c) for c in range(1, 61)]))
        summary = summarize(indicators)
        assert summary.rsi == 100.0
        assert summary.rsi_signal == RSISignal.OVERBOUGHT
        assert summary.sma20 == pytest.approx(50.5)
        assert summary.sma200 is None

    def test_falling_series_is_oversold(self, bar_factory) -> None:
        indicators = calculate_indicators(bar_factory([float(c) for c in range(60, 0, -1)]))
        summary = summarize(indicators)
        assert summary.rsi == 0.0
        assert summary.rsi_signal == RSISignal.OVERSOLD

    def test_macd_reading(self, bar_factory, wave_closes) -> None:
        indicators = calculate_indicators(bar_factory(wave_closes))
        summary = summarize(indicators)
        assert summary.macd == indicators.macd.macd[-1]
        assert summary.macd_signal_line == indicators.macd.signal[-1]
        assert summary.macd_histogram == indicators.macd.histogram[-1]
        expected = MACDSignal.BULLISH if summary.macd > summary.macd_signal_line else MACDSignal.BEARISH
        assert summary.macd_signal == expected

    def test_short_history_is_neutral(self, bar_factory) -> None:
        summary = summarize(calculate_indicators(bar_factory([10.0, 11.0])))
        assert summary.rsi is None
        assert summary.rsi_signal == RSISignal.NEUTRAL
        assert summary.macd_signal == MACDSignal.NEUTRAL
        assert summary.bollinger_upper is None


class TestIndicatorService:
    async def test_calculate_for_symbol(self, symbol_data: SymbolData) -> None:
        service = IndicatorService(IndicatorSettings())
        output = await service.calculate_for_symbol(symbol_data)

        assert output.symbol == "AAPL"
        assert output.bar_count == len(symbol_data.ohlcv)
        assert len(output.indicators.rsi) == output.bar_count
        assert len(output.indicators.macd.signal) == output.bar_count
        assert output.summary.sma200 is not None

    async def test_uses_configured_periods(self, symbol_data: SymbolData) -> None:
        service = IndicatorService(IndicatorSettings(rsi_period=5, bollinger_period=10))
        output = await service.calculate_for_symbol(symbol_data)

        assert output.indicators.rsi[:5] == [None] * 5
        assert output.indicators.rsi[5] is not None
        assert output.indicators.bollinger_bands.middle[9] is not None

    async def test_empty_symbol_raises(self) -> None:
        service = IndicatorService(IndicatorSettings())
        with pytest.raises(ValidationError, match="No bars for MSFT"):
            await service.calculate_for_symbol(SymbolData(symbol="MSFT", ohlcv=[]))

    async def test_execute_skips_failed_symbols(
        self, symbol_data: SymbolData, caplog: pytest.LogCaptureFixture
    ) -> None:
        service = IndicatorService(IndicatorSettings())
        snapshot = MarketSnapshot(
            symbols=[symbol_data, SymbolData(symbol="MSFT", ohlcv=[])]
        )

        with caplog.at_level(logging.ERROR):
            results = await service.execute(snapshot)

        assert list(results) == ["AAPL"]
        assert "Error calculating indicators for MSFT" in caplog.text

    async def test_execute_empty_snapshot(self) -> None:
        service = IndicatorService(IndicatorSettings())
        assert await service.execute(MarketSnapshot()) == {}

    async def test_repeated_runs_are_identical(self, symbol_data: SymbolData) -> None:
        service = IndicatorService(IndicatorSettings())
        first = await service.calculate_for_symbol(symbol_data)
        second = await service.calculate_for_symbol(symbol_data)
        assert first.indicators == second.indicators
        assert first.summary == second.summary

    async def test_health_check(self) -> None:
        assert await IndicatorService(IndicatorSettings()).health_check() is True

    def test_name(self) -> None:
        assert IndicatorService(IndicatorSettings()).name == "IndicatorService"

    def test_singleton(self) -> None:
        assert get_indicator_service() is get_indicator_service()
