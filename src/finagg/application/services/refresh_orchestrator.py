"""Coordinate single-account refreshes against the local account store."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from finagg.application.services.refresh_state import RefreshState
from finagg.domain.banking.account_store import AccountStore
from finagg.domain.banking.exceptions import (
    AccountNotFoundError,
    RefreshAlreadyInProgressError,
)
from finagg.domain.banking.value_objects import RefreshResult
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class RefreshOrchestrator:
    """Refresh accounts one id at a time, merging results into the store.

    Per account id the orchestrator is either idle or refreshing. A second
    request for an id that is refreshing is rejected before any network
    call. Refreshes for different ids run independently. Whatever the
    outcome, the id returns to idle; failures leave the store untouched and
    are never retried automatically.
    """

    def __init__(
        self,
        api: FinanceApiPort,
        store: AccountStore,
        state: RefreshState | None = None,
    ):
        self._api = api
        self._store = store
        self._state = state or RefreshState()

    @property
    def state(self) -> RefreshState:
        return self._state

    @property
    def refreshing(self) -> frozenset[str]:
        return self._state.account_ids

    def is_refreshing(self, account_id: str) -> bool:
        return self._state.is_refreshing(account_id)

    async def refresh(self, account_id: str) -> Result[RefreshResult]:
        try:
            self._state.begin(account_id)
        except RefreshAlreadyInProgressError as e:
            logger.info("Refresh for %s rejected: already in progress", account_id)
            return Err(e)

        try:
            logger.info("Refreshing account %s", account_id)
            result = await self._api.refresh_account(account_id)
            if isinstance(result, Err):
                logger.warning(
                    "Refresh for %s failed: %s",
                    account_id,
                    result.error,
                )
                return result

            refreshed = result.value
            try:
                self._store.merge(
                    account_id,
                    last_updated=refreshed.last_updated,
                    balance=refreshed.new_balance,
                )
            except AccountNotFoundError as e:
                logger.warning(
                    "Refreshed account %s is no longer in the store",
                    account_id,
                )
                return Err(e)

            logger.info(
                "Account %s refreshed (balance %s)",
                account_id,
                "unchanged" if refreshed.new_balance is None else refreshed.new_balance,
            )
            return Ok(refreshed)
        finally:
            self._state.finish(account_id)

    async def refresh_many(
        self,
        account_ids: Iterable[str],
    ) -> list[Result[RefreshResult]]:
        """Refresh several accounts concurrently.

        Results are returned in argument order. A repeated id is rejected
        like any concurrent duplicate.
        """
        results = await asyncio.gather(
            *(self.refresh(account_id) for account_id in account_ids)
        )
        return list(results)
