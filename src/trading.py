"""Trade execution against a user account.

Transactions carry their kind as data; ``execute`` looks the kind up in a
handler table. Every handler checks before it mutates, so a rejected trade
leaves the account untouched.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from .account import User
from .errors import InsufficientFundsError, InsufficientHoldingsError, InvalidQuantityError
from .market import Market
from .models import Transaction, TransactionKind

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _apply_buy(transaction: Transaction, user: User) -> None:
    cost = transaction.amount
    if user.balance < cost:
        raise InsufficientFundsError(
            f"Insufficient balance to buy {transaction.quantity} {transaction.symbol}: "
            f"cost {cost:,.2f}, available {user.balance:,.2f}"
        )
    user.debit(cost)
    user.portfolio.add_stock(transaction.symbol, transaction.quantity)


def _apply_sell(transaction: Transaction, user: User) -> None:
    held = user.portfolio.quantity(transaction.symbol)
    if held < transaction.quantity:
        raise InsufficientHoldingsError(
            f"Not enough shares to sell {transaction.quantity} {transaction.symbol}: "
            f"{held} held"
        )
    user.credit(transaction.amount)
    user.portfolio.remove_stock(transaction.symbol, transaction.quantity)


_HANDLERS: dict[TransactionKind, Callable[[Transaction, User], None]] = {
    TransactionKind.BUY: _apply_buy,
    TransactionKind.SELL: _apply_sell,
}


def execute(transaction: Transaction, user: User) -> Transaction:
    """Apply a transaction to the user and record it in their history.

    Raises:
        InsufficientFundsError: Buy cost exceeds the balance.
        InsufficientHoldingsError: Sell quantity exceeds the holding.
    """
    handler = _HANDLERS.get(transaction.kind)
    if handler is None:
        raise ValueError(f"Unknown transaction kind: {transaction.kind}")

    handler(transaction, user)
    user.add_transaction(transaction)
    logger.info(
        "%s %d %s @ %s (balance now %s)",
        transaction.kind.value,
        transaction.quantity,
        transaction.symbol,
        transaction.price,
        user.balance,
    )
    return transaction


class TradeExecutor:
    """Builds transactions from market prices and executes them."""

    def __init__(self, market: Market, clock: Clock = _utcnow) -> None:
        self.market = market
        self.clock = clock

    def buy(self, user: User, symbol: str, quantity: int) -> Transaction:
        return self._trade(TransactionKind.BUY, user, symbol, quantity)

    def sell(self, user: User, symbol: str, quantity: int) -> Transaction:
        return self._trade(TransactionKind.SELL, user, symbol, quantity)

    def _trade(
        self, kind: TransactionKind, user: User, symbol: str, quantity: int
    ) -> Transaction:
        if quantity <= 0:
            raise InvalidQuantityError(
                f"Quantity must be a positive number of shares, got {quantity}"
            )
        stock = self.market.get(symbol)
        transaction = Transaction(
            kind=kind,
            symbol=stock.symbol,
            quantity=quantity,
            price=stock.price,
            timestamp=self.clock(),
        )
        return execute(transaction, user)
