"""Application queries - read operations for the presentation layer."""

from finagg.application.queries.account_summary_query import AccountSummaryQuery
from finagg.application.queries.get_account_query import GetAccountQuery
from finagg.application.queries.get_transaction_query import GetTransactionQuery
from finagg.application.queries.health_check_query import HealthCheckQuery
from finagg.application.queries.list_transactions_query import (
    ListTransactionsQuery,
)

__all__ = [
    "AccountSummaryQuery",
    "GetAccountQuery",
    "GetTransactionQuery",
    "HealthCheckQuery",
    "ListTransactionsQuery",
]
