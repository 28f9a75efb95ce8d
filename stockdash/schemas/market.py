"""
CONTRACT 1: Market Data

Historical bars handed to the indicator engine by the data layer.
Bars are ordered ascending by time.
"""

from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class TimeFrame(str, Enum):
    """Chart range selector used by the dashboard."""

    D1 = "1D"
    D5 = "5D"
    M1 = "1M"
    M3 = "3M"
    M6 = "6M"
    Y1 = "1Y"
    Y5 = "5Y"
    MAX = "MAX"


# =============================================================================
# BARS
# =============================================================================


class OHLCV(BaseModel):
    """Single candlestick data point."""

    timestamp: datetime
    open: float = Field(..., ge=0)
    high: float = Field(..., ge=0)
    low: float = Field(..., ge=0)
    close: float = Field(..., ge=0)
    volume: int = Field(default=0, ge=0)

    @property
    def date(self) -> str:
        """Calendar date of the bar (UTC), YYYY-MM-DD."""
        ts = self.timestamp
        if ts.tzinfo is not None:
            ts = ts.astimezone(timezone.utc)
        return ts.strftime("%Y-%m-%d")


class SymbolData(BaseModel):
    """Historical bars for a single symbol."""

    symbol: str
    ohlcv: list[OHLCV] = Field(default_factory=list)


# =============================================================================
# SNAPSHOT
# =============================================================================


class MarketSnapshot(BaseModel):
    """Historical data for one or more symbols."""

    symbols: list[SymbolData] = Field(default_factory=list)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
