"""Aggregator REST client implementing FinanceApiPort."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable, TypeVar

import httpx

from finagg.domain.banking.value_objects import (
    DEFAULT_PAGE_LIMIT,
    Account,
    HealthStatus,
    RefreshResult,
    Transaction,
    TransactionFilter,
    TransactionPage,
)
from finagg.domain.integration.exceptions import ProtocolError, TransportError
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.result import Err, Ok, Result
from finagg.infrastructure.http.envelope_normalizer import EnvelopeNormalizer

if TYPE_CHECKING:
    from finagg.infrastructure.http.transport_gateway import HttpTransportGateway

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FinanceApiClient(FinanceApiPort):
    """Bind the backend endpoints to the envelope normalizer.

    Transport failures come back as ``Err(TransportError)``; envelope
    problems as ``Err(ProtocolError)``. Nothing is retried here.
    """

    def __init__(
        self,
        gateway: HttpTransportGateway,
        normalizer: EnvelopeNormalizer | None = None,
    ):
        self._gateway = gateway
        self._normalizer = normalizer or EnvelopeNormalizer()

    async def close(self) -> None:
        await self._gateway.close()

    async def __aenter__(self) -> FinanceApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def check_health(self) -> Result[HealthStatus]:
        return await self._call(
            self._gateway.send("GET", "/health"),
            self._normalizer.health,
        )

    async def get_accounts(self) -> Result[list[Account]]:
        return await self._call(
            self._gateway.send("GET", "/api/accounts"),
            lambda response: self._normalizer.sequence(
                response,
                Account,
                "Failed to fetch accounts",
            ),
        )

    async def get_account(self, account_id: str) -> Result[Account]:
        return await self._call(
            self._gateway.send("GET", f"/api/accounts/{account_id}"),
            lambda response: self._normalizer.single(
                response,
                Account,
                "Account not found",
            ),
        )

    async def refresh_account(self, account_id: str) -> Result[RefreshResult]:
        result = await self._call(
            self._gateway.send("POST", f"/api/accounts/{account_id}/refresh"),
            lambda response: self._normalizer.single(
                response,
                RefreshResult,
                "Failed to refresh account",
            ),
        )
        if isinstance(result, Ok) and not result.value.success:
            return Err(
                ProtocolError.application_failure(
                    result.value.message or "Failed to refresh account",
                    account_id=account_id,
                )
            )
        return result

    async def list_transactions(
        self,
        transaction_filter: TransactionFilter | None = None,
    ) -> Result[TransactionPage]:
        transaction_filter = transaction_filter or TransactionFilter()
        page = await self._call(
            self._gateway.send(
                "GET",
                "/api/transactions",
                params=transaction_filter.to_query_params(),
            ),
            lambda response: self._normalizer.page(
                response,
                Transaction,
                requested_limit=transaction_filter.limit,
                default_message="Failed to fetch transactions",
            ),
        )
        return page.map(
            lambda items_meta: TransactionPage(
                transactions=items_meta[0],
                meta=items_meta[1],
            )
        )

    async def get_transaction(self, transaction_id: str) -> Result[Transaction]:
        return await self._call(
            self._gateway.send("GET", f"/api/transactions/{transaction_id}"),
            lambda response: self._normalizer.single(
                response,
                Transaction,
                "Transaction not found",
            ),
        )

    async def get_account_transactions(
        self,
        account_id: str,
        limit: int = DEFAULT_PAGE_LIMIT,
    ) -> Result[list[Transaction]]:
        return await self._call(
            self._gateway.send(
                "GET",
                f"/api/accounts/{account_id}/transactions",
                params={"limit": limit},
            ),
            lambda response: self._normalizer.sequence(
                response,
                Transaction,
                "Failed to fetch account transactions",
            ),
        )

    async def _call(
        self,
        request: Awaitable[httpx.Response],
        normalize: Callable[[httpx.Response], Result[T]],
    ) -> Result[T]:
        try:
            response = await request
        except TransportError as e:
            return Err(e)

        result = normalize(response)
        if isinstance(result, Err):
            logger.info("Request failed: %r", result.error)
        return result
