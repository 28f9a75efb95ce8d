"""Tests for Yahoo chart payload decoding."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from stockdash.schemas.market import TimeFrame
from stockdash.services.base import ValidationError
from stockdash.services.data_ingestion import chart_query, parse_chart_payload
from stockdash.services.indicators import calculate_indicators


def _payload(timestamps, **quote) -> dict:
    return {
        "chart": {
            "result": [
                {
                    "meta": {"symbol": "AAPL"},
                    "timestamp": timestamps,
                    "indicators": {"quote": [quote]},
                }
            ],
            "error": None,
        }
    }


@pytest.fixture
def chart_payload() -> dict:
    return _payload(
        [1704205800, 1704292200, 1704378600],
        open=[187.15, 184.22, 182.15],
        high=[188.44, 185.88, 183.09],
        low=[183.89, 183.43, 180.88],
        close=[185.64, 184.25, 181.91],
        volume=[82488700, 58414500, 71983600],
    )


class TestParseChartPayload:
    def test_decodes_bars(self, chart_payload: dict) -> None:
        data = parse_chart_payload(chart_payload, "AAPL")

        assert data.symbol == "AAPL"
        assert len(data.ohlcv) == 3
        first = data.ohlcv[0]
        assert first.timestamp == datetime(2024, 1, 2, 14, 30, tzinfo=timezone.utc)
        assert first.date == "2024-01-02"
        assert first.open == 187.15
        assert first.close == 185.64
        assert first.volume == 82488700

    def test_null_entries_read_as_zero(self) -> None:
        payload = _payload(
            [1704205800, 1704292200],
            open=[187.15, None],
            high=[188.44, None],
            low=[183.89, None],
            close=[185.64, None],
            volume=[82488700, None],
        )
        bar = parse_chart_payload(payload, "AAPL").ohlcv[1]
        assert bar.close == 0.0
        assert bar.volume == 0

    def test_missing_quote_field_reads_as_zero(self) -> None:
        payload = _payload([1704205800], close=[185.64])
        bar = parse_chart_payload(payload, "AAPL").ohlcv[0]
        assert bar.close == 185.64
        assert bar.open == 0.0
        assert bar.volume == 0

    @pytest.mark.parametrize(
        "payload",
        [{}, {"chart": None}, {"chart": {"result": None}}, {"chart": {"result": []}}],
    )
    def test_invalid_structure(self, payload: dict) -> None:
        with pytest.raises(ValidationError, match="Invalid historical data received for TSLA"):
            parse_chart_payload(payload, "TSLA")

    def test_no_timestamps(self) -> None:
        with pytest.raises(ValidationError, match="No historical data available for TSLA"):
            parse_chart_payload(_payload([], close=[]), "TSLA")

    def test_no_quote_block(self) -> None:
        payload = {"chart": {"result": [{"timestamp": [1704205800], "indicators": {}}]}}
        with pytest.raises(ValidationError, match="No historical data available"):
            parse_chart_payload(payload, "TSLA")

    def test_feeds_indicator_engine(self, chart_payload: dict) -> None:
        data = parse_chart_payload(chart_payload, "AAPL")
        indicators = calculate_indicators(data.ohlcv)
        assert len(indicators.rsi) == 3
        assert len(indicators.sma.sma20) == 3


class TestChartQuery:
    @pytest.mark.parametrize(
        ("timeframe", "expected"),
        [
            ("1D", {"range": "1d", "interval": "5m"}),
            ("5D", {"range": "5d", "interval": "15m"}),
            ("1M", {"range": "1mo", "interval": "1d"}),
            ("1Y", {"range": "1y", "interval": "1d"}),
            ("5Y", {"range": "5y", "interval": "1wk"}),
            ("MAX", {"range": "max", "interval": "1mo"}),
        ],
    )
    def test_mapping(self, timeframe: str, expected: dict) -> None:
        assert chart_query(timeframe) == expected

    def test_accepts_enum(self) -> None:
        assert chart_query(TimeFrame.M6) == {"range": "6mo", "interval": "1d"}

    def test_unknown_timeframe(self) -> None:
        with pytest.raises(ValueError):
            chart_query("2W")
