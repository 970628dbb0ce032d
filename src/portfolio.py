from collections.abc import Mapping
from decimal import Decimal

from .errors import InsufficientHoldingsError


class Portfolio:
    """Share quantities held per symbol. Symbols with no shares are not kept."""

    def __init__(self, holdings: Mapping[str, int] | None = None) -> None:
        self.holdings: dict[str, int] = {}
        for symbol, qty in (holdings or {}).items():
            self.add_stock(symbol, qty)

    def add_stock(self, symbol: str, qty: int) -> None:
        if qty <= 0:
            raise ValueError(f"Quantity for {symbol} must be positive, got {qty}")
        self.holdings[symbol] = self.holdings.get(symbol, 0) + qty

    def remove_stock(self, symbol: str, qty: int) -> None:
        if not self.has_stock(symbol, qty):
            raise InsufficientHoldingsError(
                f"Cannot remove {qty} {symbol}: only {self.quantity(symbol)} held"
            )
        remaining = self.holdings[symbol] - qty
        if remaining <= 0:
            del self.holdings[symbol]
        else:
            self.holdings[symbol] = remaining

    def has_stock(self, symbol: str, qty: int) -> bool:
        return symbol in self.holdings and self.holdings[symbol] >= qty

    def quantity(self, symbol: str) -> int:
        return self.holdings.get(symbol, 0)

    def is_empty(self) -> bool:
        return not self.holdings

    def total_value(self, prices: Mapping[str, Decimal]) -> Decimal:
        """Market value of all holdings at the given per-share prices.

        Symbols missing from ``prices`` are valued at zero.
        """
        return sum(
            (Decimal(qty) * prices.get(symbol, Decimal("0"))
             for symbol, qty in self.holdings.items()),
            start=Decimal("0"),
        )

    def display(self) -> str:
        if not self.holdings:
            return "No holdings yet!"
        return "\n".join(
            f"{symbol} → {qty} shares" for symbol, qty in sorted(self.holdings.items())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Portfolio):
            return NotImplemented
        return self.holdings == other.holdings

    def __repr__(self) -> str:
        return f"Portfolio(holdings={self.holdings})"
