"""Get account query - fetch one account straight from the backend."""

from finagg.domain.banking.value_objects import Account
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.result import Result


class GetAccountQuery:
    def __init__(self, api: FinanceApiPort):
        self._api = api

    async def execute(self, account_id: str) -> Result[Account]:
        return await self._api.get_account(account_id)
