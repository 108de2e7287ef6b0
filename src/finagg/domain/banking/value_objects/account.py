"""Account value object."""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from finagg.domain.shared.time import ensure_tz_aware


class AccountType(str, Enum):
    """Known account types; anything else is reported as OTHER."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"
    INVESTMENT = "investment"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "AccountType":
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


class Account(BaseModel):
    """
    Value object representing a bank account as served by the aggregator.

    Instances are immutable. The account store replaces an entry with an
    updated copy when a refresh is merged.
    """

    id: str = Field(..., min_length=1, description="Opaque account identifier")
    name: str = Field(..., description="Display name of the account")
    bank: str = Field(..., description="Name of the holding bank")
    account_type: str = Field(
        ...,
        description="Raw account type (checking, savings, credit, investment, ...)",
    )
    balance: Decimal = Field(..., description="Signed current balance")
    currency: str = Field(default="USD", max_length=3, description="ISO-4217 code")
    last_updated: datetime = Field(..., description="When the balance was last checked")
    is_active: bool = Field(default=True)

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("last_updated")
    @classmethod
    def validate_last_updated(cls, v: datetime) -> datetime:
        return ensure_tz_aware(v)

    @field_serializer("balance")
    def serialize_balance(self, value: Decimal) -> str:
        return str(value)

    @property
    def kind(self) -> AccountType:
        return AccountType.parse(self.account_type)

    @property
    def is_credit(self) -> bool:
        return self.kind == AccountType.CREDIT

    @property
    def is_in_good_standing(self) -> bool:
        """Whether the balance reads as healthy for this kind of account.

        For credit accounts a negative balance is money owed by the holder
        and a positive one is a credit owed to the holder. For every other
        kind a negative balance is an overdraft. Either way the negative
        side is the one to flag.
        """
        return self.balance >= 0

    def __str__(self) -> str:
        return f"{self.name} ({self.bank}) - {self.balance} {self.currency}"
