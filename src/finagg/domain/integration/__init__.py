"""Integration domain package.

Contracts and failure types for talking to the remote aggregator service.
"""

from finagg.domain.integration.exceptions import (
    IntegrationError,
    ProtocolError,
    ProtocolErrorKind,
    TransportError,
    TransportErrorKind,
)

__all__ = [
    "IntegrationError",
    "ProtocolError",
    "ProtocolErrorKind",
    "TransportError",
    "TransportErrorKind",
]
