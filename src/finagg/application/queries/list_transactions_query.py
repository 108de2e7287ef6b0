"""List transactions query - filtered, paginated transaction listing."""

from __future__ import annotations

import logging
from datetime import date

from finagg.domain.banking.value_objects import (
    DEFAULT_PAGE_LIMIT,
    Transaction,
    TransactionFilter,
    TransactionKind,
    TransactionPage,
    TransactionStatus,
)
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.exceptions import ValidationError
from finagg.domain.shared.result import Err, Result

logger = logging.getLogger(__name__)


class ListTransactionsQuery:
    """Query transactions, either across accounts or for one account.

    Transactions are returned in exactly the order the server sends them.
    """

    def __init__(self, api: FinanceApiPort):
        self._api = api

    async def execute(
        self,
        account_id: str | None = None,
        kind: TransactionKind | None = None,
        category: str | None = None,
        status: TransactionStatus | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Result[TransactionPage]:
        if start_date and end_date and start_date > end_date:
            return Err(
                ValidationError(
                    "start_date must not be after end_date",
                    details={"start_date": start_date, "end_date": end_date},
                )
            )

        transaction_filter = TransactionFilter(
            account_id=account_id,
            kind=kind,
            category=category,
            status=status,
            start_date=start_date,
            end_date=end_date,
            limit=limit,
            offset=offset,
        )
        logger.debug(
            "Listing transactions with %s",
            transaction_filter.to_query_params(),
        )
        return await self._api.list_transactions(transaction_filter)

    async def for_account(
        self,
        account_id: str,
        limit: int = DEFAULT_PAGE_LIMIT,
    ) -> Result[list[Transaction]]:
        return await self._api.get_account_transactions(account_id, limit=limit)
