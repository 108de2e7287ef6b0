"""HTTP integration with the aggregator backend."""

from finagg.infrastructure.http.envelope_normalizer import EnvelopeNormalizer
from finagg.infrastructure.http.finance_api_client import FinanceApiClient
from finagg.infrastructure.http.transport_gateway import HttpTransportGateway

__all__ = [
    "EnvelopeNormalizer",
    "FinanceApiClient",
    "HttpTransportGateway",
]
