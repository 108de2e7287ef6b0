"""Application DTOs."""

from finagg.application.dtos.account_summary import AccountSummary

__all__ = [
    "AccountSummary",
]
