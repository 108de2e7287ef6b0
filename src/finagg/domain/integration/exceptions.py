"""Integration exceptions for the remote aggregator service.

TransportError covers calls that never produced a response. ProtocolError
covers responses that arrived but could not be turned into a result, either
because the envelope was malformed or because the server reported failure.
"""

from enum import Enum
from typing import Any

from finagg.domain.shared.exceptions import DomainException, ErrorCode


class TransportErrorKind(str, Enum):
    TIMEOUT = "timeout"
    UNREACHABLE = "unreachable"


class ProtocolErrorKind(str, Enum):
    MALFORMED_ENVELOPE = "malformed_envelope"
    APPLICATION_FAILURE = "application_failure"


class IntegrationError(DomainException):
    """Base exception for failures talking to the aggregator service."""


class TransportError(IntegrationError):
    """Raised when a request times out or the service cannot be reached."""

    def __init__(
        self,
        kind: TransportErrorKind,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if kind == TransportErrorKind.TIMEOUT:
            code = ErrorCode.SERVICE_TIMEOUT
            default = "The aggregator service did not respond in time"
        else:
            code = ErrorCode.SERVICE_UNREACHABLE
            default = "The aggregator service could not be reached"
        super().__init__(message=message or default, code=code, details=details)
        self.kind = kind


class ProtocolError(IntegrationError):
    """Raised when a response envelope is malformed or reports failure."""

    def __init__(
        self,
        kind: ProtocolErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        code = (
            ErrorCode.MALFORMED_ENVELOPE
            if kind == ProtocolErrorKind.MALFORMED_ENVELOPE
            else ErrorCode.APPLICATION_FAILURE
        )
        super().__init__(message=message, code=code, details=details)
        self.kind = kind

    @classmethod
    def malformed(cls, reason: str, **details: Any) -> "ProtocolError":
        return cls(
            ProtocolErrorKind.MALFORMED_ENVELOPE,
            f"Malformed response envelope: {reason}",
            details=details or None,
        )

    @classmethod
    def application_failure(cls, message: str, **details: Any) -> "ProtocolError":
        return cls(
            ProtocolErrorKind.APPLICATION_FAILURE,
            message,
            details=details or None,
        )
