"""Async client for the Erply API with bulk request support."""

from .bulk import (
    MAX_BULK_REQUESTS_COUNT,
    BatchEnvelope,
    BatchItemResult,
    NamedRequest,
    compose_batch,
    reconcile,
)
from .erply_client import ErplyClient, ErplyTransport
from .errors import (
    ApiStatusError,
    BatchSizeExceeded,
    BatchStatusError,
    DecodeError,
    ErplyClientError,
    ItemStatusError,
    TransportError,
)

__all__ = [
    "MAX_BULK_REQUESTS_COUNT",
    "ApiStatusError",
    "BatchEnvelope",
    "BatchItemResult",
    "BatchSizeExceeded",
    "BatchStatusError",
    "DecodeError",
    "ErplyClient",
    "ErplyClientError",
    "ErplyTransport",
    "ItemStatusError",
    "NamedRequest",
    "TransportError",
    "compose_batch",
    "reconcile",
]
