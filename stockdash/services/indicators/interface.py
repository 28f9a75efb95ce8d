"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from stockdash.services.base import BaseService
from stockdash.schemas.market import MarketSnapshot, SymbolData
from stockdash.schemas.indicators import IndicatorOutput


class IndicatorServiceInterface(BaseService[MarketSnapshot, dict[str, IndicatorOutput]]):
    """
    Indicator Engine Service Contract.

    INPUT: MarketSnapshot
        - symbols: List of SymbolData with OHLCV bars

    OUTPUT: dict[str, IndicatorOutput]
        - Key: symbol name
        - Value: Indicator series and latest-value summary for that symbol
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(
        self, input_data: MarketSnapshot
    ) -> dict[str, IndicatorOutput]:
        """Calculate indicators for all symbols in snapshot."""
        pass

    @abstractmethod
    async def calculate_for_symbol(self, symbol_data: SymbolData) -> IndicatorOutput:
        """
        Calculate indicators for a single symbol.

        Args:
            symbol_data: OHLCV bars for the symbol, ascending by time

        Returns:
            Indicator series aligned with the bars, plus a summary
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
