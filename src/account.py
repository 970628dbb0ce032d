"""User account: cash balance, holdings and trade history."""

from dataclasses import dataclass, field
from decimal import Decimal

from .config import TradingConfig
from .errors import InsufficientFundsError
from .models import Transaction
from .portfolio import Portfolio


@dataclass
class User:
    name: str
    balance: Decimal
    portfolio: Portfolio = field(default_factory=Portfolio)
    history: list[Transaction] = field(default_factory=list)

    @classmethod
    def new(cls, name: str, config: TradingConfig | None = None) -> "User":
        """Create a fresh account funded with the configured starting balance."""
        config = config or TradingConfig()
        return cls(name=name, balance=config.STARTING_BALANCE)

    def credit(self, amount: Decimal) -> None:
        self.balance += amount

    def debit(self, amount: Decimal) -> None:
        if amount > self.balance:
            raise InsufficientFundsError(
                f"Balance {self.balance:,.2f} does not cover {amount:,.2f}"
            )
        self.balance -= amount

    def add_transaction(self, transaction: Transaction) -> None:
        self.history.append(transaction)

    def show_history(self) -> str:
        if not self.history:
            return "No transactions yet!"
        return "\n".join(str(t) for t in self.history)
