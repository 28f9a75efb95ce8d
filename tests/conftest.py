"""Shared test fixtures for stockdash."""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from stockdash.schemas.market import OHLCV, SymbolData

START = datetime(2024, 1, 2, tzinfo=timezone.utc)


def make_bars(closes: list[float]) -> list[OHLCV]:
    """Daily bars ascending from START, one per close."""
    return [
        OHLCV(
            timestamp=START + timedelta(days=i),
            open=close,
            high=close + 1,
            low=max(close - 1, 0),
            close=close,
            volume=1_000 + i,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def bar_factory() -> Callable[[list[float]], list[OHLCV]]:
    return make_bars


@pytest.fixture
def wave_closes() -> list[float]:
    """Trending sine wave, long enough to warm up every default period."""
    return [100 + 10 * math.sin(i / 5) + i * 0.3 for i in range(260)]


@pytest.fixture
def symbol_data(wave_closes: list[float]) -> SymbolData:
    return SymbolData(symbol="AAPL", ohlcv=make_bars(wave_closes))
