"""Configuration constants for the trading simulator."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TradingConfig:
    """Configuration for a simulator session."""

    DATA_FILE: str = "portfolio_data.json"
    STARTING_BALANCE: Decimal = Decimal("15000")
    CURRENCY: str = "₹"
