"""Application commands - operations that change local state."""

from finagg.application.commands.load_accounts_command import LoadAccountsCommand

__all__ = [
    "LoadAccountsCommand",
]
