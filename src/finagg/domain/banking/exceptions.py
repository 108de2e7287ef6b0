"""Banking domain exceptions.

Errors raised by the local account collection and by the refresh
orchestration on top of it. None of them is fatal; the caller decides how
to present them and whether to retry.
"""

from finagg.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class AccountNotFoundError(EntityNotFoundError):
    """Raised when an account id is not present in the local collection."""

    def __init__(self, account_id: str) -> None:
        super().__init__(
            message=f"Account '{account_id}' not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account_id": account_id},
        )
        self.account_id = account_id


class DuplicateAccountError(ConflictError):
    """Raised when a collection reload contains the same id twice."""

    def __init__(self, account_id: str) -> None:
        super().__init__(
            message=f"Account '{account_id}' appears more than once",
            code=ErrorCode.DUPLICATE_ACCOUNT,
            details={"account_id": account_id},
        )
        self.account_id = account_id


class RefreshAlreadyInProgressError(ConflictError):
    """Raised when a refresh is requested for an account that is in flight."""

    def __init__(self, account_id: str) -> None:
        super().__init__(
            message=f"A refresh for account '{account_id}' is already in progress",
            code=ErrorCode.REFRESH_IN_PROGRESS,
            details={"account_id": account_id},
        )
        self.account_id = account_id
