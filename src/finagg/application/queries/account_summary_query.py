"""Account summary query - the overview cards above the account table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from finagg.application.dtos import AccountSummary
from finagg.domain.banking.account_store import AccountStore

if TYPE_CHECKING:
    from finagg.application.services import RefreshOrchestrator


class AccountSummaryQuery:
    """Compute aggregates from the local store on every call."""

    def __init__(
        self,
        store: AccountStore,
        orchestrator: RefreshOrchestrator | None = None,
    ):
        self._store = store
        self._orchestrator = orchestrator

    def execute(self) -> AccountSummary:
        refreshing = (
            self._orchestrator.refreshing if self._orchestrator else frozenset()
        )
        return AccountSummary(
            total_accounts=len(self._store),
            total_balance=self._store.total_balance,
            positive_count=self._store.positive_count,
            negative_count=self._store.negative_count,
            refreshing=refreshing,
        )
