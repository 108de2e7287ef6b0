"""Object construction for CLI commands.

Each command runs in its own event loop, so a fresh API client is built per
command and closed when the command finishes.
"""

import logging

import httpx

from finagg.infrastructure.http import FinanceApiClient, HttpTransportGateway
from finagg_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_api_client(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FinanceApiClient:
    """Build an API client from settings."""
    settings = settings or get_settings()
    gateway = HttpTransportGateway(
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
        transport=transport,
    )
    logger.debug(
        "Using base URL %s (timeout %.1fs)",
        gateway.base_label,
        gateway.timeout,
    )
    return FinanceApiClient(gateway)
