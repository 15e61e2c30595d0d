"""Session status and service discovery tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..erply_client import ErplyClient
from ..utils.logging import truncate
from ..utils.projection import project_dict

logger = logging.getLogger("erply_api.resources.auth")


async def erply_status() -> Dict[str, Any]:
    """Verify the configured Erply session by fetching its expiry times."""
    logger.debug("Tool call: erply_status()")
    client = ErplyClient.from_env()
    info = await client.get_session_key_info()
    result = {
        "ok": True,
        "client_code": client.client_code,
        "base_url": client.base_url,
        "session": info.to_dict() if info else None,
    }
    logger.debug("Tool result: erply_status() -> %s", truncate(str(result)))
    return result


async def erply_service_endpoints(fields: list[str] | None = None) -> Dict[str, Any]:
    """List the account's Erply service endpoints (PIM, WMS, reports, ...).

    Parameters:
    - fields: Additional services to include beyond defaults, or ["*"] for all

    Available fields: cafa, pim, wms, promotion, reports, json, assignments
        Default returns: pim, wms
    """
    logger.debug("Tool call: erply_service_endpoints()")
    client = ErplyClient.from_env()
    endpoints = await client.get_service_endpoints()
    if endpoints is None:
        return {}
    result = project_dict(endpoints.to_dict(), fields, base_fields={"pim", "wms"})
    logger.debug("Tool result: erply_service_endpoints -> %s", truncate(str(result)))
    return result
