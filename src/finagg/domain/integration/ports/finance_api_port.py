"""Port for the remote financial aggregator service.

The application layer talks to the backend only through this interface.
Every method resolves to an explicit ``Ok``/``Err`` result and never
raises for transport or protocol failures.
"""

from abc import ABC, abstractmethod

from finagg.domain.banking.value_objects import (
    DEFAULT_PAGE_LIMIT,
    Account,
    HealthStatus,
    RefreshResult,
    Transaction,
    TransactionFilter,
    TransactionPage,
)
from finagg.domain.shared.result import Result


class FinanceApiPort(ABC):
    """Read and refresh operations offered by the aggregator backend."""

    @abstractmethod
    async def check_health(self) -> Result[HealthStatus]:
        """Probe the liveness endpoint."""

    @abstractmethod
    async def get_accounts(self) -> Result[list[Account]]:
        """Fetch the full account collection in server order."""

    @abstractmethod
    async def get_account(self, account_id: str) -> Result[Account]:
        """Fetch a single account."""

    @abstractmethod
    async def refresh_account(self, account_id: str) -> Result[RefreshResult]:
        """Ask the backend to refresh an account from its bank."""

    @abstractmethod
    async def list_transactions(
        self,
        transaction_filter: TransactionFilter | None = None,
    ) -> Result[TransactionPage]:
        """List transactions matching a filter, one page at a time."""

    @abstractmethod
    async def get_transaction(self, transaction_id: str) -> Result[Transaction]:
        """Fetch a single transaction."""

    @abstractmethod
    async def get_account_transactions(
        self,
        account_id: str,
        limit: int = DEFAULT_PAGE_LIMIT,
    ) -> Result[list[Transaction]]:
        """Fetch the most recent transactions of one account."""
