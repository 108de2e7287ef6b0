"""Transaction value objects."""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from finagg.domain.shared.time import ensure_tz_aware


class TransactionKind(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"
    TRANSFER = "transfer"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class Transaction(BaseModel):
    """A booked or pending transaction. Read-only on the client."""

    id: str = Field(..., min_length=1)
    account_id: str = Field(..., description="Account the transaction belongs to")
    amount: Decimal
    currency: str = Field(default="USD", max_length=3)
    kind: TransactionKind = Field(..., alias="type")
    category: str = ""
    description: str = ""
    date: datetime
    status: TransactionStatus = TransactionStatus.COMPLETED
    reference: str | None = None

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: datetime) -> datetime:
        return ensure_tz_aware(v)

    @field_validator("reference")
    @classmethod
    def validate_reference(cls, v: str | None) -> str | None:
        # The backend omits empty references, but be lenient with ""
        return v or None

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return str(value)

    @property
    def is_outgoing(self) -> bool:
        return self.amount < 0


class TransactionFilter(BaseModel):
    """Query filter for the transaction listing endpoint."""

    account_id: str | None = None
    kind: TransactionKind | None = None
    category: str | None = None
    status: TransactionStatus | None = None
    start_date: date | None = None
    end_date: date | None = None
    limit: int | None = Field(default=None, gt=0)
    offset: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True)

    def to_query_params(self) -> dict[str, Any]:
        """Return the filter as query parameters, omitting unset fields."""
        params: dict[str, Any] = {
            "account_id": self.account_id,
            "type": self.kind.value if self.kind else None,
            "category": self.category,
            "status": self.status.value if self.status else None,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "limit": self.limit,
            "offset": self.offset,
        }
        return {key: value for key, value in params.items() if value is not None}
