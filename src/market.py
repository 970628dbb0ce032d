"""Static market data: the listed stocks and their prices."""

from collections.abc import Iterator, Mapping
from decimal import Decimal

from .errors import InvalidSymbolError
from .models import Stock


class Market:
    """Read-only lookup of tradable stocks by symbol."""

    def __init__(self, stocks: list[Stock]) -> None:
        self._stocks: dict[str, Stock] = {stock.symbol: stock for stock in stocks}

    @classmethod
    def from_prices(cls, prices: Mapping[str, Decimal]) -> "Market":
        return cls([Stock(symbol=sym, price=price) for sym, price in prices.items()])

    def get(self, symbol: str) -> Stock:
        """Return the listed stock for ``symbol`` (case-insensitive).

        Raises:
            InvalidSymbolError: If the symbol is not listed.
        """
        stock = self._stocks.get(symbol.strip().upper())
        if stock is None:
            raise InvalidSymbolError(f"Invalid stock symbol: {symbol!r}")
        return stock

    def prices(self) -> dict[str, Decimal]:
        return {sym: stock.price for sym, stock in self._stocks.items()}

    def __iter__(self) -> Iterator[Stock]:
        return iter(self._stocks.values())
