"""Exceptions raised by the trading simulator."""

# --- Trading ---


class TradingError(Exception):
    """A trade was rejected. No account state was changed."""


class InvalidSymbolError(TradingError):
    """The symbol is not listed on the market."""


class InvalidQuantityError(TradingError):
    """Trade quantity must be a positive whole number of shares."""


class InsufficientFundsError(TradingError):
    """The account balance does not cover the cost of the trade."""


class InsufficientHoldingsError(TradingError):
    """The portfolio holds fewer shares than the trade asks to sell."""


# --- Store ---


class StoreError(Exception):
    "Error in connection with the persisted account file."


class StoreWriteError(StoreError):
    """Raised when the account could not be written to disk."""
