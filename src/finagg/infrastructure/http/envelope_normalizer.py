"""Turn raw backend responses into typed results.

The backend uses three response shapes:

- single-resource envelope ``{success, data?, message?, error?}``
- paginated envelope ``{success, data: [...], meta: {...}}``
- bare health payload ``{status, timestamp}``

The normalizer is the only place that looks at envelope fields. Callers
receive ``Ok(value)`` or ``Err(ProtocolError)``. HTTP status codes are not
consulted; the envelope's ``success`` flag decides.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from finagg.domain.banking.value_objects import HealthStatus, PaginationMeta
from finagg.domain.integration.exceptions import ProtocolError
from finagg.domain.shared.result import Err, Ok, Result
from finagg.infrastructure.http.envelopes import (
    PaginatedEnvelope,
    SingleResourceEnvelope,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

GENERIC_FAILURE_MESSAGE = "Request failed"


class EnvelopeNormalizer:
    """Validate envelopes and payloads against the expected models."""

    def single(
        self,
        response: httpx.Response,
        model: type[M],
        default_message: str = GENERIC_FAILURE_MESSAGE,
    ) -> Result[M]:
        """Normalize an endpoint that returns exactly one entity.

        A false ``success`` or a missing ``data`` is an application failure
        carrying the envelope's message, its error, or ``default_message``.
        """
        envelope = self._parse(response, SingleResourceEnvelope)
        if isinstance(envelope, Err):
            return envelope

        if not envelope.success or envelope.data is None:
            return Err(
                ProtocolError.application_failure(
                    envelope.failure_message or default_message,
                    status_code=response.status_code,
                )
            )

        return self._validate_item(response, model, envelope.data)

    def sequence(
        self,
        response: httpx.Response,
        model: type[M],
        default_message: str = GENERIC_FAILURE_MESSAGE,
    ) -> Result[list[M]]:
        """Normalize a single-resource envelope whose ``data`` is a list.

        A missing ``data`` is an empty collection, not an error.
        """
        envelope = self._parse(response, SingleResourceEnvelope)
        if isinstance(envelope, Err):
            return envelope

        if not envelope.success:
            return Err(
                ProtocolError.application_failure(
                    envelope.failure_message or default_message,
                    status_code=response.status_code,
                )
            )

        if envelope.data is None:
            return Ok([])
        if not isinstance(envelope.data, list):
            return Err(
                ProtocolError.malformed(
                    "expected a list in 'data'",
                    status_code=response.status_code,
                )
            )
        return self._validate_items(response, model, envelope.data)

    def page(
        self,
        response: httpx.Response,
        model: type[M],
        requested_limit: int | None = None,
        default_message: str = GENERIC_FAILURE_MESSAGE,
    ) -> Result[tuple[list[M], PaginationMeta]]:
        """Normalize a paginated envelope.

        A missing ``data`` becomes an empty list and a missing ``meta``
        becomes zeroed metadata using the requested limit.
        """
        envelope = self._parse(response, PaginatedEnvelope)
        if isinstance(envelope, Err):
            return envelope

        if not envelope.success:
            return Err(
                ProtocolError.application_failure(
                    envelope.failure_message or default_message,
                    status_code=response.status_code,
                )
            )

        meta = envelope.meta or PaginationMeta.empty(requested_limit)
        items = self._validate_items(response, model, envelope.data or [])
        if isinstance(items, Err):
            return items
        return Ok((items.value, meta))

    def health(self, response: httpx.Response) -> Result[HealthStatus]:
        """Normalize the bare liveness payload."""
        body = self._json_object(response)
        if isinstance(body, Err):
            return body
        return self._validate_item(response, HealthStatus, body)

    def _parse(
        self,
        response: httpx.Response,
        envelope_model: type[M],
    ) -> M | Err:
        body = self._json_object(response)
        if isinstance(body, Err):
            return body
        try:
            return envelope_model.model_validate(body)
        except PydanticValidationError as e:
            logger.warning(
                "Malformed envelope (HTTP %d): %s",
                response.status_code,
                e.errors(include_url=False),
            )
            return Err(
                ProtocolError.malformed(
                    "unexpected envelope structure",
                    status_code=response.status_code,
                )
            )

    def _json_object(self, response: httpx.Response) -> dict[str, Any] | Err:
        try:
            body = response.json()
        except ValueError:
            return Err(
                ProtocolError.malformed(
                    "body is not JSON",
                    status_code=response.status_code,
                )
            )
        if not isinstance(body, dict):
            return Err(
                ProtocolError.malformed(
                    "body is not a JSON object",
                    status_code=response.status_code,
                )
            )
        return body

    def _validate_item(
        self,
        response: httpx.Response,
        model: type[M],
        data: Any,
    ) -> Result[M]:
        try:
            return Ok(model.model_validate(data))
        except PydanticValidationError as e:
            logger.warning(
                "Invalid %s payload (HTTP %d): %s",
                model.__name__,
                response.status_code,
                e.errors(include_url=False),
            )
            return Err(
                ProtocolError.malformed(
                    f"invalid {model.__name__} payload",
                    status_code=response.status_code,
                )
            )

    def _validate_items(
        self,
        response: httpx.Response,
        model: type[M],
        data: list[Any],
    ) -> Result[list[M]]:
        items: list[M] = []
        for raw in data:
            item = self._validate_item(response, model, raw)
            if isinstance(item, Err):
                return item
            items.append(item.value)
        return Ok(items)
