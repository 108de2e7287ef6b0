"""Rich renderables for accounts and transactions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable

from rich.table import Table

from finagg.application.dtos import AccountSummary
from finagg.domain.banking.value_objects import Account, AccountType, Transaction

ACCOUNT_TYPE_STYLES = {
    AccountType.CHECKING: "blue",
    AccountType.SAVINGS: "green",
    AccountType.CREDIT: "red",
    AccountType.INVESTMENT: "magenta",
    AccountType.OTHER: "white",
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_currency(amount: Decimal, currency: str = "USD") -> str:
    """Format an amount with two decimals and thousands separators."""
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.2f}"
    if symbol:
        return f"{sign}{symbol}{digits}"
    return f"{sign}{digits} {currency.upper()}"


def format_timestamp(value: datetime) -> str:
    return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def balance_style(account: Account) -> str:
    return "green" if account.is_in_good_standing else "red"


def format_balance(account: Account) -> str:
    """Account balance; a negative credit balance is marked as owed."""
    text = format_currency(account.balance, account.currency)
    if account.is_credit and account.balance < 0:
        return f"{text} owed"
    return text


def render_summary(summary: AccountSummary) -> list[str]:
    return [
        f"Total Accounts:   [bold]{summary.total_accounts}[/bold]",
        f"Total Balance:    [bold]{format_currency(summary.total_balance)}[/bold]",
        f"Positive Balance: [bold green]{summary.positive_count}[/bold green]",
        f"Negative Balance: [bold red]{summary.negative_count}[/bold red]",
    ]


def render_accounts_table(accounts: Iterable[Account]) -> Table:
    table = Table(title="Account Details", show_lines=False)
    table.add_column("Account")
    table.add_column("Type")
    table.add_column("Bank")
    table.add_column("Balance", justify="right")
    table.add_column("Last Updated")

    for account in accounts:
        kind_style = ACCOUNT_TYPE_STYLES[account.kind]
        table.add_row(
            f"{account.name}\n[dim]{account.id}[/dim]",
            f"[{kind_style}]{account.account_type}[/{kind_style}]",
            account.bank,
            f"[{balance_style(account)}]{format_balance(account)}"
            f"[/{balance_style(account)}]",
            format_timestamp(account.last_updated),
        )
    return table


def render_account_details(account: Account) -> list[str]:
    style = balance_style(account)
    return [
        f"[bold]{account.name}[/bold] ({account.id})",
        f"Bank:         {account.bank}",
        f"Type:         {account.account_type}",
        f"Balance:      [{style}]{format_balance(account)}[/{style}]",
        f"Last Updated: {format_timestamp(account.last_updated)}",
        f"Active:       {'yes' if account.is_active else 'no'}",
    ]


def render_transactions_table(transactions: Iterable[Transaction]) -> Table:
    table = Table(title="Transactions")
    table.add_column("Date")
    table.add_column("Description")
    table.add_column("Category")
    table.add_column("Type")
    table.add_column("Amount", justify="right")
    table.add_column("Status")
    table.add_column("Account")

    for txn in transactions:
        amount_style = "red" if txn.is_outgoing else "green"
        table.add_row(
            format_timestamp(txn.date),
            txn.description,
            txn.category,
            txn.kind.value,
            f"[{amount_style}]"
            f"{format_currency(txn.amount, txn.currency)}[/{amount_style}]",
            txn.status.value,
            txn.account_id,
        )
    return table


def render_transaction_details(txn: Transaction) -> list[str]:
    lines = [
        f"[bold]{txn.description or txn.id}[/bold] ({txn.id})",
        f"Account:   {txn.account_id}",
        f"Date:      {format_timestamp(txn.date)}",
        f"Amount:    {format_currency(txn.amount, txn.currency)}",
        f"Type:      {txn.kind.value}",
        f"Category:  {txn.category}",
        f"Status:    {txn.status.value}",
    ]
    if txn.reference:
        lines.append(f"Reference: {txn.reference}")
    return lines
