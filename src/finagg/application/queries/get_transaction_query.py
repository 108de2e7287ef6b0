"""Get transaction query."""

from finagg.domain.banking.value_objects import Transaction
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.result import Result


class GetTransactionQuery:
    def __init__(self, api: FinanceApiPort):
        self._api = api

    async def execute(self, transaction_id: str) -> Result[Transaction]:
        return await self._api.get_transaction(transaction_id)
