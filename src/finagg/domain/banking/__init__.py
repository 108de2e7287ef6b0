"""Banking domain package.

This package contains the client-side model of accounts and transactions
and the in-memory account store that refreshes are merged into.
"""
