"""JSON file persistence for a single user account."""

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from .account import User
from .errors import InvalidQuantityError, StoreWriteError
from .models import Transaction, TransactionKind
from .portfolio import Portfolio

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class LoadStatus(Enum):
    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of reading the account file.

    ``user`` is set only when ``status`` is LOADED; ``error`` describes why a
    CORRUPT file could not be read.
    """

    status: LoadStatus
    user: Optional[User] = None
    error: Optional[str] = None


def user_to_record(user: User) -> dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "name": user.name,
        "balance": str(user.balance),
        "holdings": dict(user.portfolio.holdings),
        "history": [
            {
                "kind": t.kind.value,
                "symbol": t.symbol,
                "quantity": t.quantity,
                "price": str(t.price),
                "timestamp": t.timestamp.isoformat(),
            }
            for t in user.history
        ],
    }


def _amount(value: Any, field: str) -> Decimal:
    """Parse a stored money value, which must be a finite amount >= 0."""
    amount = Decimal(value)
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Stored {field} must be a finite amount >= 0, got {value!r}")
    return amount


def user_from_record(record: dict[str, Any]) -> User:
    """Rebuild a User from a stored record.

    Raises:
        ValueError: If the record has an unknown version or malformed fields.
    """
    if record.get("version") != FORMAT_VERSION:
        raise ValueError(f"Unsupported record version: {record.get('version')!r}")

    try:
        name = record["name"]
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Stored name must be a non-empty string, got {name!r}")
        history = [
            Transaction(
                kind=TransactionKind(entry["kind"]),
                symbol=entry["symbol"],
                quantity=int(entry["quantity"]),
                price=_amount(entry["price"], "price"),
                timestamp=datetime.fromisoformat(entry["timestamp"]),
            )
            for entry in record["history"]
        ]
        balance = _amount(record["balance"], "balance")
        portfolio = Portfolio(
            {sym: int(qty) for sym, qty in record["holdings"].items()}
        )
    except (
        KeyError, TypeError, AttributeError, InvalidOperation, InvalidQuantityError
    ) as e:
        raise ValueError(f"Malformed account record: {e!r}") from e

    return User(name=name, balance=balance, portfolio=portfolio, history=history)


class PortfolioStore:
    """Saves and loads one user account at a fixed file path."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def save(self, user: User) -> None:
        """Overwrite the file with the full account state.

        The record is written to a temporary sibling and moved into place, so
        the previous save survives a failed write.

        Raises:
            StoreWriteError: If the file could not be written.
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(user_to_record(user), f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise StoreWriteError(f"Error saving portfolio to {self.path}: {e}") from e

        logger.info("Saved account for %s to %s", user.name, self.path)

    def load(self) -> LoadResult:
        if not self.path.exists():
            return LoadResult(LoadStatus.MISSING)

        try:
            with open(self.path, encoding="utf-8") as f:
                record = json.load(f)
            if not isinstance(record, dict):
                raise ValueError("Account record is not a JSON object")
            user = user_from_record(record)
        except (OSError, ValueError) as e:
            logger.warning("Could not read account file %s: %s", self.path, e)
            return LoadResult(LoadStatus.CORRUPT, error=str(e))

        logger.info("Loaded account for %s from %s", user.name, self.path)
        return LoadResult(LoadStatus.LOADED, user=user)
