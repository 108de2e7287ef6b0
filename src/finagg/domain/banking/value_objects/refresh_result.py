"""Account refresh result value object."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from finagg.domain.shared.time import ensure_tz_aware


class RefreshResult(BaseModel):
    """
    Outcome of a server-side account refresh.

    ``new_balance`` is ``None`` when the server did not report a balance;
    a reported balance of zero is a real value and must be applied.
    """

    account_id: str
    success: bool
    message: str = ""
    last_updated: datetime
    new_balance: Decimal | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("last_updated")
    @classmethod
    def validate_last_updated(cls, v: datetime) -> datetime:
        return ensure_tz_aware(v)
