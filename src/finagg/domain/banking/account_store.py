"""In-memory account collection.

The store is the single local copy of the user's accounts. It is replaced
wholesale by a full load and afterwards only updated by merging refresh
results into individual entries. Aggregates are recomputed on every read
so they always agree with the collection.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Iterator

from finagg.domain.banking.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
)
from finagg.domain.banking.value_objects import Account
from finagg.domain.shared.time import ensure_tz_aware

logger = logging.getLogger(__name__)


class AccountStore:
    """Ordered collection of accounts keyed by id."""

    def __init__(self, accounts: Iterable[Account] = ()):
        self._accounts: dict[str, Account] = {}
        self.reload(accounts)

    def reload(self, accounts: Iterable[Account]) -> None:
        """Replace the whole collection, keeping the given order.

        Raises DuplicateAccountError (and leaves the store untouched) if the
        same id occurs twice.
        """
        replacement: dict[str, Account] = {}
        for account in accounts:
            if account.id in replacement:
                raise DuplicateAccountError(account.id)
            replacement[account.id] = account

        self._accounts = replacement
        logger.debug("Account store reloaded with %d accounts", len(replacement))

    def merge(
        self,
        account_id: str,
        last_updated: datetime,
        balance: Decimal | None = None,
    ) -> Account:
        """Apply a partial update to one account and return the new entry.

        ``last_updated`` is always written, even when the balance did not
        change. ``balance`` is written only when it is not ``None``.
        """
        current = self._accounts.get(account_id)
        if current is None:
            raise AccountNotFoundError(account_id)

        changes: dict[str, object] = {"last_updated": ensure_tz_aware(last_updated)}
        if balance is not None:
            changes["balance"] = balance

        updated = current.model_copy(update=changes)
        # Reassigning an existing key keeps its position in the dict
        self._accounts[account_id] = updated
        return updated

    def get(self, account_id: str) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    @property
    def accounts(self) -> list[Account]:
        return list(self._accounts.values())

    @property
    def total_balance(self) -> Decimal:
        return sum(
            (account.balance for account in self._accounts.values()),
            Decimal("0"),
        )

    @property
    def positive_count(self) -> int:
        return sum(1 for account in self._accounts.values() if account.balance > 0)

    @property
    def negative_count(self) -> int:
        return sum(1 for account in self._accounts.values() if account.balance < 0)

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)
