"""
Data Ingestion

Decodes historical market data payloads into the bars consumed by the
indicator engine. Fetching itself is done by the caller.
"""

from stockdash.services.data_ingestion.yahoo_chart import (
    chart_query,
    parse_chart_payload,
)

__all__ = [
    "chart_query",
    "parse_chart_payload",
]
