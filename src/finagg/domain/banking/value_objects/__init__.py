from finagg.domain.banking.value_objects.account import Account, AccountType
from finagg.domain.banking.value_objects.health_status import HealthStatus
from finagg.domain.banking.value_objects.pagination import (
    DEFAULT_PAGE_LIMIT,
    PaginationMeta,
    TransactionPage,
)
from finagg.domain.banking.value_objects.refresh_result import RefreshResult
from finagg.domain.banking.value_objects.transaction import (
    Transaction,
    TransactionFilter,
    TransactionKind,
    TransactionStatus,
)

__all__ = [
    "DEFAULT_PAGE_LIMIT",
    "Account",
    "AccountType",
    "HealthStatus",
    "PaginationMeta",
    "RefreshResult",
    "Transaction",
    "TransactionFilter",
    "TransactionKind",
    "TransactionPage",
    "TransactionStatus",
]
