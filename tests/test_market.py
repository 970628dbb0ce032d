import pytest
from decimal import Decimal

from src.errors import InvalidSymbolError
from src.market import Market


class TestMarket:
    def test_lookup_case_insensitive(self):
        market = Market.from_prices({"AAPL": Decimal("1800")})
        assert market.get("aapl").price == Decimal("1800")
        assert market.get(" aapl ").symbol == "AAPL"

    def test_unknown_symbol(self):
        market = Market.from_prices({"AAPL": Decimal("1800")})
        with pytest.raises(InvalidSymbolError, match="ZZZZ"):
            market.get("ZZZZ")

    def test_prices_and_iteration(self):
        prices = {"AAPL": Decimal("1800"), "INFY": Decimal("1600")}
        market = Market.from_prices(prices)
        assert market.prices() == prices
        assert [s.symbol for s in market] == ["AAPL", "INFY"]

    def test_prices_returns_copy(self):
        market = Market.from_prices({"AAPL": Decimal("1800")})
        market.prices()["AAPL"] = Decimal("1")
        assert market.get("AAPL").price == Decimal("1800")
