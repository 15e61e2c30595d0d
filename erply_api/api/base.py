"""Request plumbing shared by the resource mixins."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Type, TypeVar

from ..bulk import (
    ApiResponse,
    BatchEnvelope,
    MethodResolver,
    compose_batch,
    decode_response,
    reconcile,
)
from ..options import ParamsLike, as_params

logger = logging.getLogger("erply_api.api")

T = TypeVar("T")


class ApiMixin:
    """Decode-and-check helpers on top of the transport's send methods.

    Mixed into a class that provides ``send_request`` and ``send_request_bulk``.
    """

    async def _call(
        self,
        method_name: str,
        params: ParamsLike = None,
        timeout: Optional[float] = None,
    ) -> ApiResponse:
        raw = await self.send_request(method_name, as_params(params), timeout=timeout)
        return decode_response(raw)

    async def _call_bulk(
        self,
        method: MethodResolver,
        items: Sequence[Any],
        record_type: Type[T],
        base_params: ParamsLike = None,
        timeout: Optional[float] = None,
    ) -> BatchEnvelope[T]:
        requests = compose_batch(method, items)
        logger.debug(
            "Bulk call: %d request(s) %s",
            len(requests),
            sorted({r.method_name for r in requests}),
        )
        raw = await self.send_request_bulk(requests, as_params(base_params), timeout=timeout)
        return reconcile(raw, record_type)
