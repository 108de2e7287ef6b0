"""Wire models for the response envelopes used by the aggregator backend.

Only the envelope is described here; payloads stay untyped until the
normalizer validates them against the expected domain model.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool

from finagg.domain.banking.value_objects import PaginationMeta


class SingleResourceEnvelope(BaseModel):
    """``{success, data?, message?, error?}``"""

    success: StrictBool
    data: Any = None
    message: str | None = None
    error: str | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def failure_message(self) -> str | None:
        return self.message or self.error


class PaginatedEnvelope(BaseModel):
    """``{success, data: [...], meta: {total, limit, offset, pages}}``"""

    success: StrictBool
    data: list[Any] | None = None
    meta: PaginationMeta | None = None
    message: str | None = None
    error: str | None = None

    model_config = ConfigDict(extra="ignore")

    @property
    def failure_message(self) -> str | None:
        return self.message or self.error
