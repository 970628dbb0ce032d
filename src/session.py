"""One run of the simulator: the active user and the services acting on it."""

import logging
from dataclasses import dataclass
from typing import Callable

from .account import User
from .config import TradingConfig
from .market import Market
from .store import LoadStatus, PortfolioStore
from .trading import TradeExecutor

logger = logging.getLogger(__name__)


@dataclass
class Session:
    user: User
    market: Market
    store: PortfolioStore
    executor: TradeExecutor
    load_status: LoadStatus
    config: TradingConfig = TradingConfig()

    @classmethod
    def start(
        cls,
        market: Market,
        store: PortfolioStore,
        ask_name: Callable[[], str],
        config: TradingConfig | None = None,
    ) -> "Session":
        """Load the saved user, or create a new one when none can be loaded.

        ``ask_name`` is only called when a new account is needed, both when no
        save exists and when the save is unreadable.
        """
        config = config or TradingConfig()
        result = store.load()

        if result.user is not None:
            user = result.user
        else:
            user = User.new(ask_name(), config)
            logger.info("Created new account for %s (save was %s)", user.name, result.status.value)

        return cls(
            user=user,
            market=market,
            store=store,
            executor=TradeExecutor(market),
            load_status=result.status,
            config=config,
        )

    def save(self) -> None:
        self.store.save(self.user)
