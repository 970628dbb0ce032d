"""
Stock Trading Simulator - A terminal stock trading game against a fixed price list.

Exports:
    Stock: Dataclass representing a listed stock and its price
    Transaction: Frozen record of an executed buy or sell
    TransactionKind: BUY or SELL tag carried by a Transaction
    Portfolio: Share quantities held per symbol
    User: Account with balance, portfolio and trade history
    Market: Lookup of tradable stocks by symbol
    TradeExecutor: Validates and executes trades against a user
    PortfolioStore: JSON file persistence for one user
    Session: The active user plus the market, store and executor acting on it
    TradingConfig: Simulator configuration constants
"""

from .account import User
from .config import TradingConfig
from .errors import (
    InsufficientFundsError,
    InsufficientHoldingsError,
    InvalidQuantityError,
    InvalidSymbolError,
    StoreError,
    StoreWriteError,
    TradingError,
)
from .market import Market
from .models import Stock, Transaction, TransactionKind
from .portfolio import Portfolio
from .session import Session
from .store import LoadResult, LoadStatus, PortfolioStore
from .trading import TradeExecutor, execute

__all__ = [
    "Stock",
    "Transaction",
    "TransactionKind",
    "Portfolio",
    "User",
    "Market",
    "TradeExecutor",
    "execute",
    "PortfolioStore",
    "LoadResult",
    "LoadStatus",
    "Session",
    "TradingConfig",
    "TradingError",
    "InvalidSymbolError",
    "InvalidQuantityError",
    "InsufficientFundsError",
    "InsufficientHoldingsError",
    "StoreError",
    "StoreWriteError",
]
