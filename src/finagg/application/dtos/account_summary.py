"""DTO for the account overview cards."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class AccountSummary:
    """Aggregates over the local account collection."""

    total_accounts: int
    total_balance: Decimal
    positive_count: int
    negative_count: int
    refreshing: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        return {
            "total_accounts": self.total_accounts,
            "total_balance": str(self.total_balance),
            "positive_count": self.positive_count,
            "negative_count": self.negative_count,
            "refreshing": sorted(self.refreshing),
        }
