"""finagg - client for the financial aggregator service."""
