#!/usr/bin/env python3
import logging
from decimal import Decimal
from typing import Callable

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table
from rich.text import Text

from src import (
    LoadStatus,
    Market,
    PortfolioStore,
    Session,
    StoreWriteError,
    TradingConfig,
    TradingError,
    Transaction,
    TransactionKind,
)

console = Console()

DEFAULT_NAME = "Trader"

# Fixed market for the whole session
MARKET_PRICES: dict[str, Decimal] = {
    "AAPL": Decimal("1800"),
    "GOOGL": Decimal("2500"),
    "TSLA": Decimal("3000"),
    "INFY": Decimal("1600"),
}


def _money(amount: Decimal, session: Session) -> str:
    return f"{session.config.CURRENCY}{amount:,.2f}"


def market_table(session: Session) -> Table:
    """Build a Rich table of listed stocks and their prices."""
    t = Table(title="Market Data", box=box.ROUNDED, title_style="bold white")
    t.add_column("Symbol", style="cyan")
    t.add_column("Price", justify="right")
    for stock in session.market:
        t.add_row(stock.symbol, _money(stock.price, session))
    return t


def holdings_table(session: Session) -> Table:
    """Build a Rich table of the user's holdings valued at market prices."""
    portfolio = session.user.portfolio
    prices = session.market.prices()

    t = Table(title="Portfolio Summary", box=box.ROUNDED, title_style="bold white")
    t.add_column("Symbol", style="cyan")
    t.add_column("Shares", justify="right")
    t.add_column("Price", justify="right")
    t.add_column("Value", justify="right", style="yellow")

    for sym, qty in sorted(portfolio.holdings.items()):
        price = prices.get(sym, Decimal("0"))
        t.add_row(sym, str(qty), _money(price, session), _money(price * qty, session))

    t.add_section()
    t.add_row(
        "", "", "Total", f"[bold]{_money(portfolio.total_value(prices), session)}[/bold]"
    )
    return t


def history_table(session: Session, history: list[Transaction]) -> Table:
    """Build a Rich table of transactions in execution order."""
    t = Table(title="Transaction History", box=box.ROUNDED, title_style="bold white")
    t.add_column("Time", style="dim")
    t.add_column("Action", no_wrap=True)
    t.add_column("Symbol", style="cyan")
    t.add_column("Shares", justify="right")
    t.add_column("Price", justify="right")
    t.add_column("Amount", justify="right")

    for tx in history:
        style = "green" if tx.kind is TransactionKind.BUY else "red"
        t.add_row(
            f"{tx.timestamp:%Y-%m-%d %H:%M:%S}",
            Text(tx.kind.value, style=f"bold {style}"),
            tx.symbol,
            str(tx.quantity),
            _money(tx.price, session),
            _money(tx.amount, session),
        )
    return t


def _prompt_trade() -> tuple[str, int]:
    symbol = Prompt.ask("  Enter stock symbol").strip().upper()
    quantity = IntPrompt.ask("  Enter quantity")
    return symbol, quantity


def view_market(session: Session) -> bool:
    console.print(market_table(session))
    return True


def buy_stock(session: Session) -> bool:
    symbol, quantity = _prompt_trade()
    try:
        tx = session.executor.buy(session.user, symbol, quantity)
    except TradingError as e:
        console.print(Text(f"  ✗ {e}", style="red"))
        return True
    console.print(
        f"[green]  ✓ Bought {tx.quantity} shares of {tx.symbol} "
        f"for {_money(tx.amount, session)}[/green]"
    )
    return True


def sell_stock(session: Session) -> bool:
    symbol, quantity = _prompt_trade()
    try:
        tx = session.executor.sell(session.user, symbol, quantity)
    except TradingError as e:
        console.print(Text(f"  ✗ {e}", style="red"))
        return True
    console.print(
        f"[green]  ✓ Sold {tx.quantity} shares of {tx.symbol} "
        f"for {_money(tx.amount, session)}[/green]"
    )
    return True


def view_portfolio(session: Session) -> bool:
    user = session.user
    if user.portfolio.is_empty():
        console.print(f"  {user.portfolio.display()}")
    else:
        console.print(holdings_table(session))

    holdings_value = user.portfolio.total_value(session.market.prices())
    console.print(f"  Available Balance: [bold]{_money(user.balance, session)}[/bold]")
    console.print(
        f"  [dim]Net worth:[/dim] {_money(user.balance + holdings_value, session)}"
    )
    return True


def view_history(session: Session) -> bool:
    user = session.user
    if not user.history:
        console.print(f"  {user.show_history()}")
    else:
        console.print(history_table(session, user.history))
    return True


def save_and_exit(session: Session) -> bool:
    try:
        session.save()
    except StoreWriteError as e:
        console.print(Text(f"  {e}", style="red"))
    else:
        console.print("  Portfolio saved successfully!")
    console.print(f"  Goodbye, {session.user.name}!")
    return False


# Each entry: choice -> (label, handler). A handler returns False to end the session.
MENU: dict[str, tuple[str, Callable[[Session], bool]]] = {
    "1": ("View Market", view_market),
    "2": ("Buy Stock", buy_stock),
    "3": ("Sell Stock", sell_stock),
    "4": ("View Portfolio", view_portfolio),
    "5": ("View Transaction History", view_history),
    "6": ("Save & Exit", save_and_exit),
}


def _render_menu() -> Panel:
    lines = "\n".join(f"[cyan]{key}.[/cyan] {label}" for key, (label, _) in MENU.items())
    return Panel(lines, title="Stock Trading Menu", box=box.ROUNDED, expand=False)


def run_cli_loop(session: Session) -> None:
    while True:
        console.print()
        console.print(_render_menu())
        choice = Prompt.ask("  Enter your choice").strip()

        entry = MENU.get(choice)
        if entry is None:
            console.print("[yellow]  Invalid choice![/yellow]")
            continue

        _, handler = entry
        console.print()
        if not handler(session):
            break


def _ask_name() -> str:
    return Prompt.ask("  Enter your name", default=DEFAULT_NAME).strip() or DEFAULT_NAME


def open_session(config: TradingConfig) -> Session:
    """Load the saved account or create a new one, reporting which happened."""
    market = Market.from_prices(MARKET_PRICES)
    store = PortfolioStore(config.DATA_FILE)
    session = Session.start(market, store, _ask_name, config)

    if session.load_status is LoadStatus.LOADED:
        console.print(f"  Loaded portfolio data for user: [bold]{session.user.name}[/bold]")
    else:
        if session.load_status is LoadStatus.CORRUPT:
            console.print(
                f"[yellow]  Saved data in {store.path} could not be read; "
                "it will be replaced when you save.[/yellow]"
            )
        console.print(
            f"  Welcome, [bold]{session.user.name}[/bold]! "
            f"Starting balance {_money(session.user.balance, session)}"
        )
    return session


def main() -> None:
    """Entry point for the CLI application."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    console.print()
    console.print(Panel("[bold]Stock Trading Simulator[/bold] · paper trading", box=box.DOUBLE))
    console.print()

    session = open_session(TradingConfig())
    run_cli_loop(session)


if __name__ == "__main__":
    main()
