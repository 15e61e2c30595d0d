"""Bulk request composition and response reconciliation.

A bulk call packs up to ``MAX_BULK_REQUESTS_COUNT`` named requests into one
HTTP request. The response carries a status for the whole call plus one
status and ``records`` array per request, in submission order.

Validation is fail-fast on both levels:

1. The body must decode to an object with a ``status`` object.
2. A non-ok outer status fails the whole batch. Items are not looked at.
3. Items are checked in response order and the first non-ok item raises
   :class:`ItemStatusError` with its index.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
)

from pydantic import ValidationError

from .errors import (
    ApiStatusError,
    BatchSizeExceeded,
    BatchStatusError,
    DecodeError,
    ItemStatusError,
)
from .models.common import Status, decode_records
from .options import as_params

logger = logging.getLogger("erply_api.bulk")

MAX_BULK_REQUESTS_COUNT = 1000

T = TypeVar("T")

MethodResolver = Union[str, Callable[[Any], str], None]


@dataclass(frozen=True)
class NamedRequest:
    """One logical API call inside a bulk request."""

    method_name: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def to_wire(self, request_id: int) -> Dict[str, Any]:
        entry: Dict[str, Any] = {"requestName": self.method_name, "requestID": request_id}
        entry.update(self.params)
        return entry


def _resolve_method(method: MethodResolver, item: Any) -> str:
    if method is None:
        name = getattr(item, "method_name", None)
        if not name:
            raise TypeError(f"cannot resolve an API method for bulk item {item!r}")
        return name
    if callable(method):
        return method(item)
    return method


def compose_batch(
    method: MethodResolver,
    per_item_params: Sequence[Any],
    limit: int = MAX_BULK_REQUESTS_COUNT,
) -> List[NamedRequest]:
    """Build the ordered list of named requests for a bulk call.

    ``method`` is the API method for every item, or a callable picking the
    method per item, or ``None`` to use each item's own ``method_name``.
    Items are mappings or option objects with ``to_params()``.

    Raises :class:`BatchSizeExceeded` when more than ``limit`` items are given.
    """
    if len(per_item_params) > limit:
        raise BatchSizeExceeded(limit, len(per_item_params))

    return [
        NamedRequest(_resolve_method(method, item), as_params(item))
        for item in per_item_params
    ]


# ----------------------------- Responses -----------------------------


@dataclass
class BatchItemResult(Generic[T]):
    status: Status
    records: List[T] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.to_dict(),
            "records": [r.to_dict() if hasattr(r, "to_dict") else r for r in self.records],
        }


@dataclass
class BatchEnvelope(Generic[T]):
    """A validated bulk response. ``items[i]`` answers the i-th request."""

    status: Status
    items: List[BatchItemResult[T]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[BatchItemResult[T]]:
        return iter(self.items)

    def __getitem__(self, index: int) -> BatchItemResult[T]:
        return self.items[index]

    def records(self) -> List[T]:
        """All item records, flattened in request order."""
        return [record for item in self.items for record in item.records]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.to_dict(),
            "requests": [item.to_dict() for item in self.items],
        }


@dataclass
class ApiResponse:
    """A validated single-request response. ``records`` is the raw payload."""

    status: Status
    records: Any
    raw: bytes = b""


def _load_object(raw: bytes) -> Dict[str, Any]:
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise DecodeError(e, raw) from e
    if not isinstance(data, dict):
        raise DecodeError(TypeError(f"expected a JSON object, got {type(data).__name__}"), raw)
    return data


def _decode_status(data: Any, raw: bytes) -> Status:
    if not isinstance(data, dict):
        raise DecodeError(TypeError("response has no status object"), raw)
    try:
        return Status.from_dict(data)
    except ValidationError as e:
        raise DecodeError(e, raw) from e


def decode_response(raw: bytes) -> ApiResponse:
    """Decode a single-request response and check its status."""
    data = _load_object(raw)
    status = _decode_status(data.get("status"), raw)
    if not status.ok:
        raise ApiStatusError(status.error_code, status.request, status.message)
    return ApiResponse(status=status, records=data.get("records"), raw=raw)


def all_records(response: ApiResponse, record_type: Type[T]) -> List[T]:
    try:
        return decode_records(record_type, response.records)
    except (ValidationError, TypeError) as e:
        raise DecodeError(e, response.raw) from e


def first_record(response: ApiResponse, record_type: Type[T]) -> Optional[T]:
    """First record of the response, or ``None`` when there are none."""
    records = all_records(response, record_type)
    if not records:
        return None
    return records[0]


def object_record(response: ApiResponse, record_type: Type[T]) -> Optional[T]:
    """Decode a ``records`` payload sent as a single object instead of an array."""
    payload = response.records
    if isinstance(payload, list):
        return first_record(response, record_type)
    if not payload:
        return None
    try:
        return record_type.model_validate(payload)  # type: ignore[attr-defined]
    except ValidationError as e:
        raise DecodeError(e, response.raw) from e


def reconcile(raw: bytes, record_type: Type[T]) -> BatchEnvelope[T]:
    """Decode and validate a bulk response into a :class:`BatchEnvelope`."""
    data = _load_object(raw)
    status = _decode_status(data.get("status"), raw)
    if not status.ok:
        logger.debug("Bulk call failed at batch level: %s", status.message)
        raise BatchStatusError(status.error_code, status.request, status.message)

    entries = data.get("requests") or []
    if not isinstance(entries, list):
        raise DecodeError(TypeError("bulk response 'requests' is not an array"), raw)

    items: List[BatchItemResult[T]] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise DecodeError(TypeError("bulk response item is not an object"), raw)
        item_status = _decode_status(entry.get("status"), raw)
        if not item_status.ok:
            logger.debug("Bulk item %d failed: %s", index, item_status.message)
            raise ItemStatusError(
                index,
                item_status.error_code,
                item_status.request_name or item_status.request,
                item_status.message,
            )
        try:
            records = decode_records(record_type, entry.get("records"))
        except (ValidationError, TypeError) as e:
            raise DecodeError(e, raw) from e
        items.append(BatchItemResult(status=item_status, records=records))

    return BatchEnvelope(status=status, items=items)
