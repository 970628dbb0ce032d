from decimal import Decimal
from unittest.mock import MagicMock

from src.account import User
from src.config import TradingConfig
from src.market import Market
from src.session import Session
from src.store import LoadStatus, PortfolioStore

PRICES = {"AAPL": Decimal("1800"), "TSLA": Decimal("3000")}


class TestSessionStart:
    def test_new_account_when_missing(self, tmp_path):
        ask_name = MagicMock(return_value="Asha")
        session = Session.start(
            Market.from_prices(PRICES), PortfolioStore(tmp_path / "d.json"), ask_name
        )

        ask_name.assert_called_once()
        assert session.load_status is LoadStatus.MISSING
        assert session.user.name == "Asha"
        assert session.user.balance == Decimal("15000")

    def test_loads_saved_account(self, tmp_path):
        store = PortfolioStore(tmp_path / "d.json")
        saved = User.new("Ravi")
        saved.portfolio.add_stock("AAPL", 2)
        store.save(saved)

        ask_name = MagicMock()
        session = Session.start(Market.from_prices(PRICES), store, ask_name)

        ask_name.assert_not_called()
        assert session.load_status is LoadStatus.LOADED
        assert session.user == saved

    def test_corrupt_save_falls_back_to_new_account(self, tmp_path):
        store = PortfolioStore(tmp_path / "d.json")
        store.path.write_text("garbage", encoding="utf-8")

        session = Session.start(Market.from_prices(PRICES), store, lambda: "Asha")

        assert session.load_status is LoadStatus.CORRUPT
        assert session.user.name == "Asha"
        assert store.path.read_text(encoding="utf-8") == "garbage"

    def test_custom_starting_balance(self, tmp_path):
        config = TradingConfig(STARTING_BALANCE=Decimal("500"))
        session = Session.start(
            Market.from_prices(PRICES),
            PortfolioStore(tmp_path / "d.json"),
            lambda: "Asha",
            config,
        )
        assert session.user.balance == Decimal("500")
        assert session.config is config

    def test_executor_uses_session_market(self, tmp_path):
        market = Market.from_prices(PRICES)
        session = Session.start(market, PortfolioStore(tmp_path / "d.json"), lambda: "Asha")
        session.executor.buy(session.user, "TSLA", 1)
        assert session.executor.market is market
        assert session.user.balance == Decimal("12000")

    def test_save_writes_user(self, tmp_path):
        store = PortfolioStore(tmp_path / "d.json")
        session = Session.start(Market.from_prices(PRICES), store, lambda: "Asha")
        session.executor.buy(session.user, "AAPL", 1)
        session.save()
        assert store.load().user == session.user
