"""finagg CLI application using Typer.

Command-line front end for the financial aggregator: loads the account
collection, shows the overview, refreshes accounts and lists transactions.
"""

import asyncio
import logging
import sys
from datetime import datetime
from functools import lru_cache
from typing import NoReturn, Optional, TypeVar

import typer
from rich.console import Console

from finagg.application.commands import LoadAccountsCommand
from finagg.application.queries import (
    AccountSummaryQuery,
    GetAccountQuery,
    GetTransactionQuery,
    HealthCheckQuery,
    ListTransactionsQuery,
)
from finagg.application.services import RefreshOrchestrator
from finagg.domain.banking.account_store import AccountStore
from finagg.domain.banking.value_objects import (
    DEFAULT_PAGE_LIMIT,
    TransactionKind,
    TransactionStatus,
)
from finagg.domain.integration.exceptions import TransportError
from finagg.domain.shared.exceptions import DomainException
from finagg.domain.shared.result import Err, Result
from finagg.presentation.cli.dependencies import create_api_client
from finagg.presentation.cli.formatting import (
    format_currency,
    format_timestamp,
    render_account_details,
    render_accounts_table,
    render_summary,
    render_transaction_details,
    render_transactions_table,
)
from finagg_config.settings import get_settings

T = TypeVar("T")


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    - Output to stderr with timestamps and module names, keeping stdout
      for command output
    - Configurable log level for finagg modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=logging.WARNING,
        format=log_format,
        datefmt=date_format,
        stream=sys.stderr,
        force=True,
    )

    logging.getLogger("finagg").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


app = typer.Typer(
    name="finagg",
    help="finagg - Financial aggregator client CLI",
    no_args_is_help=True,
)
console = Console()

accounts_app = typer.Typer(
    name="accounts",
    help="View and refresh bank accounts",
    no_args_is_help=True,
)
app.add_typer(accounts_app)

transactions_app = typer.Typer(
    name="transactions",
    help="Browse transactions",
    no_args_is_help=True,
)
app.add_typer(transactions_app)


@app.callback()
def main() -> None:
    """Financial aggregator client."""
    _configure_logging()


def _fail(error: DomainException, hint: str | None = None) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {error.message}")
    if hint:
        console.print(f"[dim]{hint}[/dim]")
    raise typer.Exit(code=1)


def _unwrap(result: Result[T], hint: str | None = None) -> T:
    if isinstance(result, Err):
        if isinstance(result.error, TransportError) and hint is None:
            hint = "Please make sure the backend is running."
        _fail(result.error, hint)
    return result.value


# =============================================================================
# Health
# =============================================================================


@app.command("health")
def health() -> None:
    """Check whether the aggregator backend is up."""

    async def _health():
        async with create_api_client() as api:
            return await HealthCheckQuery(api).execute()

    status = _unwrap(asyncio.run(_health()))
    style = "green" if status.is_healthy else "yellow"
    console.print(f"Backend status: [{style}]{status.status}[/{style}]")
    if status.timestamp:
        console.print(f"[dim]Reported at {status.timestamp}[/dim]")
    if not status.is_healthy:
        raise typer.Exit(code=1)


# =============================================================================
# Accounts
# =============================================================================


@accounts_app.command("list")
def list_accounts() -> None:
    """Show all accounts with balance overview."""

    async def _load():
        store = AccountStore()
        async with create_api_client() as api:
            result = await LoadAccountsCommand(api, store).execute()
        return store, result

    store, result = asyncio.run(_load())
    _unwrap(result)

    for line in render_summary(AccountSummaryQuery(store).execute()):
        console.print(line)
    console.print(render_accounts_table(store.accounts))


@accounts_app.command("show")
def show_account(
    account_id: str = typer.Argument(..., help="Account id"),
) -> None:
    """Show a single account."""

    async def _show():
        async with create_api_client() as api:
            return await GetAccountQuery(api).execute(account_id)

    account = _unwrap(asyncio.run(_show()))
    for line in render_account_details(account):
        console.print(line)


@accounts_app.command("refresh")
def refresh_accounts(
    account_ids: list[str] = typer.Argument(..., help="Account ids to refresh"),
) -> None:
    """Refresh one or more accounts from their banks.

    The accounts are refreshed concurrently. Each outcome is reported on its
    own line; the command exits with code 1 if any refresh failed.
    """

    async def _refresh():
        store = AccountStore()
        async with create_api_client() as api:
            loaded = await LoadAccountsCommand(api, store).execute()
            if isinstance(loaded, Err):
                return store, loaded, []
            orchestrator = RefreshOrchestrator(api, store)
            results = await orchestrator.refresh_many(account_ids)
        return store, loaded, results

    store, loaded, results = asyncio.run(_refresh())
    _unwrap(loaded)

    failed = 0
    for account_id, result in zip(account_ids, results):
        if isinstance(result, Err):
            failed += 1
            console.print(f"[red]✗[/red] {account_id}: {result.error.message}")
            continue
        refreshed = result.value
        balance = (
            "balance unchanged"
            if refreshed.new_balance is None
            else "new balance "
            f"{format_currency(refreshed.new_balance, store.get(account_id).currency)}"
        )
        console.print(
            f"[green]✓[/green] {account_id}: {refreshed.message or 'refreshed'} "
            f"({balance}, updated {format_timestamp(refreshed.last_updated)})"
        )

    console.print(render_accounts_table(store.accounts))
    if failed:
        raise typer.Exit(code=1)


@accounts_app.command("transactions")
def account_transactions(
    account_id: str = typer.Argument(..., help="Account id"),
    limit: int = typer.Option(DEFAULT_PAGE_LIMIT, "--limit", "-n", min=1),
) -> None:
    """Show the most recent transactions of an account."""

    async def _list():
        async with create_api_client() as api:
            return await ListTransactionsQuery(api).for_account(account_id, limit)

    transactions = _unwrap(asyncio.run(_list()))
    if not transactions:
        console.print("[dim]No transactions found.[/dim]")
        return
    console.print(render_transactions_table(transactions))


# =============================================================================
# Transactions
# =============================================================================


@transactions_app.command("list")
def list_transactions(
    account_id: Optional[str] = typer.Option(None, "--account-id", "-a"),
    kind: Optional[TransactionKind] = typer.Option(None, "--type", "-t"),
    category: Optional[str] = typer.Option(None, "--category", "-c"),
    status: Optional[TransactionStatus] = typer.Option(None, "--status", "-s"),
    start_date: Optional[datetime] = typer.Option(
        None,
        "--start-date",
        formats=["%Y-%m-%d"],
    ),
    end_date: Optional[datetime] = typer.Option(
        None,
        "--end-date",
        formats=["%Y-%m-%d"],
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1),
    offset: Optional[int] = typer.Option(None, "--offset", min=0),
) -> None:
    """List transactions, optionally filtered."""

    async def _list():
        async with create_api_client() as api:
            return await ListTransactionsQuery(api).execute(
                account_id=account_id,
                kind=kind,
                category=category,
                status=status,
                start_date=start_date.date() if start_date else None,
                end_date=end_date.date() if end_date else None,
                limit=limit,
                offset=offset,
            )

    page = _unwrap(asyncio.run(_list()))
    if not page.transactions:
        console.print("[dim]No transactions found.[/dim]")
    else:
        console.print(render_transactions_table(page.transactions))

    meta = page.meta
    current_page = meta.offset // meta.limit + 1 if meta.limit else 1
    console.print(
        f"Showing {len(page)} of {meta.total} transactions "
        f"(page {current_page} of {max(meta.pages, 1)})"
    )


@transactions_app.command("show")
def show_transaction(
    transaction_id: str = typer.Argument(..., help="Transaction id"),
) -> None:
    """Show a single transaction."""

    async def _show():
        async with create_api_client() as api:
            return await GetTransactionQuery(api).execute(transaction_id)

    txn = _unwrap(asyncio.run(_show()))
    for line in render_transaction_details(txn):
        console.print(line)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
