"""Health check query - probe the backend liveness endpoint."""

from finagg.domain.banking.value_objects import HealthStatus
from finagg.domain.integration.ports import FinanceApiPort
from finagg.domain.shared.result import Result


class HealthCheckQuery:
    def __init__(self, api: FinanceApiPort):
        self._api = api

    async def execute(self) -> Result[HealthStatus]:
        return await self._api.check_health()
