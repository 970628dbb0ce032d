"""Data models for the trading simulator."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from .errors import InvalidQuantityError


@dataclass
class Stock:
    """A listed stock and its current price."""

    symbol: str
    price: Decimal

    def __post_init__(self) -> None:
        self.symbol = self.symbol.strip().upper()
        if not self.symbol:
            raise ValueError("Stock symbol must not be empty")
        if self.price < 0:
            raise ValueError(f"Price for {self.symbol} must be >= 0, got {self.price}")

    def update_price(self, price: Decimal) -> None:
        if price < 0:
            raise ValueError(f"Price for {self.symbol} must be >= 0, got {price}")
        self.price = price

    def __str__(self) -> str:
        return f"{self.symbol} @ {self.price:,.2f}"


class TransactionKind(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class Transaction:
    """An executed buy or sell, recorded at its execution price."""

    kind: TransactionKind
    symbol: str
    quantity: int
    price: Decimal
    timestamp: datetime

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise InvalidQuantityError(
                f"Quantity must be a positive number of shares, got {self.quantity}"
            )

    @property
    def amount(self) -> Decimal:
        return Decimal(self.quantity) * self.price

    def __str__(self) -> str:
        return (
            f"{self.timestamp:%Y-%m-%d %H:%M:%S} | {self.kind.value} | "
            f"{self.symbol} | Qty: {self.quantity} @ {self.price:,.2f}"
        )
