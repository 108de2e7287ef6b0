"""Pagination value objects for list endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from finagg.domain.banking.value_objects.transaction import Transaction

DEFAULT_PAGE_LIMIT = 50


class PaginationMeta(BaseModel):
    """Pagination metadata as reported by the server."""

    total: int = Field(default=0, ge=0)
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=0)
    offset: int = Field(default=0, ge=0)
    pages: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def empty(cls, limit: int | None = None) -> "PaginationMeta":
        """Metadata used when the server sends none."""
        return cls(total=0, limit=limit or DEFAULT_PAGE_LIMIT, offset=0, pages=0)


class TransactionPage(BaseModel):
    """One page of transactions in server order."""

    transactions: list[Transaction]
    meta: PaginationMeta

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.transactions)
