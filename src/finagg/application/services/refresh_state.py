"""Per-account in-flight refresh registry."""

from __future__ import annotations

from datetime import datetime

from finagg.domain.banking.exceptions import RefreshAlreadyInProgressError
from finagg.domain.shared.time import utc_now


class RefreshState:
    """Set of account ids with a refresh in flight.

    ``begin`` and ``finish`` are plain synchronous calls. On a single event
    loop this makes check-and-register atomic: no other task can run
    between the membership test and the insert.
    """

    def __init__(self) -> None:
        self._in_flight: dict[str, datetime] = {}

    def begin(self, account_id: str) -> None:
        if account_id in self._in_flight:
            raise RefreshAlreadyInProgressError(account_id)
        self._in_flight[account_id] = utc_now()

    def finish(self, account_id: str) -> None:
        # pop with default: a second finish for the same id is a no-op
        self._in_flight.pop(account_id, None)

    def is_refreshing(self, account_id: str) -> bool:
        return account_id in self._in_flight

    def started_at(self, account_id: str) -> datetime | None:
        return self._in_flight.get(account_id)

    @property
    def account_ids(self) -> frozenset[str]:
        return frozenset(self._in_flight)

    def __len__(self) -> int:
        return len(self._in_flight)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._in_flight
