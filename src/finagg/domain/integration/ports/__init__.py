from finagg.domain.integration.ports.finance_api_port import FinanceApiPort

__all__ = ["FinanceApiPort"]
