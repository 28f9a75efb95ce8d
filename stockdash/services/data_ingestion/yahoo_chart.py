"""
Yahoo Finance Chart Decoder

Converts an already-fetched Yahoo Finance v8 chart payload
(query1.finance.yahoo.com/v8/finance/chart/{symbol}) into OHLCV bars.
No network access happens here.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Union

from stockdash.schemas.market import OHLCV, SymbolData, TimeFrame
from stockdash.services.base import ValidationError

logger = logging.getLogger(__name__)

SOURCE = "YahooChart"

# Dashboard timeframe -> Yahoo `range` query value
YAHOO_RANGES = {
    TimeFrame.D1: "1d",
    TimeFrame.D5: "5d",
    TimeFrame.M1: "1mo",
    TimeFrame.M3: "3mo",
    TimeFrame.M6: "6mo",
    TimeFrame.Y1: "1y",
    TimeFrame.Y5: "5y",
    TimeFrame.MAX: "max",
}

# Dashboard timeframe -> Yahoo `interval` query value
YAHOO_INTERVALS = {
    TimeFrame.D1: "5m",
    TimeFrame.D5: "15m",
    TimeFrame.M1: "1d",
    TimeFrame.M3: "1d",
    TimeFrame.M6: "1d",
    TimeFrame.Y1: "1d",
    TimeFrame.Y5: "1wk",
    TimeFrame.MAX: "1mo",
}


def chart_query(timeframe: Union[TimeFrame, str]) -> dict[str, str]:
    """
    Query parameters for a chart request covering `timeframe`.

    Raises:
        ValueError: Unknown timeframe
    """
    tf = TimeFrame(timeframe)
    return {"range": YAHOO_RANGES[tf], "interval": YAHOO_INTERVALS[tf]}


def _value_at(values: Any, index: int) -> float:
    """Entry at `index`, with missing or null entries read as 0."""
    if not isinstance(values, list) or index >= len(values):
        return 0.0
    value = values[index]
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return 0.0
    return float(value)


def parse_chart_payload(payload: dict, symbol: str) -> SymbolData:
    """
    Decode a chart payload into bars for `symbol`.

    Raises:
        ValidationError: Payload has no chart result, or the result
            carries no timestamps / quote block
    """
    chart = payload.get("chart") if isinstance(payload, dict) else None
    results = chart.get("result") if isinstance(chart, dict) else None

    if not results:
        logger.warning(f"Invalid chart payload for {symbol}")
        raise ValidationError(
            SOURCE, f"Invalid historical data received for {symbol}"
        )

    result = results[0]
    timestamps = result.get("timestamp")
    quotes = (result.get("indicators") or {}).get("quote") or []
    quote = quotes[0] if quotes else None

    if not timestamps or not quote:
        logger.warning(f"Chart payload for {symbol} has no bars")
        raise ValidationError(
            SOURCE, f"No historical data available for {symbol}"
        )

    ohlcv_list = []
    for index, ts in enumerate(timestamps):
        ohlcv_list.append(
            OHLCV(
                timestamp=datetime.fromtimestamp(ts, tz=timezone.utc),
                open=_value_at(quote.get("open"), index),
                high=_value_at(quote.get("high"), index),
                low=_value_at(quote.get("low"), index),
                close=_value_at(quote.get("close"), index),
                volume=int(_value_at(quote.get("volume"), index)),
            )
        )

    return SymbolData(symbol=symbol, ohlcv=ohlcv_list)
