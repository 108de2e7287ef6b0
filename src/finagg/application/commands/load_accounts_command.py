"""Load the full account collection into the local store."""

from __future__ import annotations

import logging

from finagg.domain.banking.account_store import AccountStore
from finagg.domain.banking.exceptions import DuplicateAccountError
from finagg.domain.banking.value_objects import Account
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class LoadAccountsCommand:
    """Fetch all accounts and replace the store's collection.

    Used for the initial load and for "refresh all". On failure the store
    keeps whatever it held before.
    """

    def __init__(self, api: FinanceApiPort, store: AccountStore):
        self._api = api
        self._store = store

    async def execute(self) -> Result[list[Account]]:
        result = await self._api.get_accounts()
        if isinstance(result, Err):
            logger.warning("Failed to load accounts: %s", result.error)
            return result

        try:
            self._store.reload(result.value)
        except DuplicateAccountError as e:
            logger.warning("Server returned a duplicate account id: %s", e.account_id)
            return Err(e)

        logger.info("Loaded %d accounts", len(self._store))
        return Ok(self._store.accounts)
