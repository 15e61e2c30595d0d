"""Supplier tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..api.suppliers import SupplierFilters
from ..erply_client import ErplyClient
from ..utils.logging import truncate
from ..utils.projection import project_items

logger = logging.getLogger("erply_api.resources.suppliers")

SUPPLIER_BASE_FIELDS = {"supplierID", "fullName"}


async def erply_suppliers(
    limit: int = 100,
    cursor: str | None = None,
    name: str | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List suppliers with pagination and optional name filter.

    Parameters:
    - limit: Items per page (Erply allows up to 100)
    - cursor: Opaque cursor for next page (pass from previous response)
    - name: Optional partial name filter
    - fields: Additional fields to include beyond defaults, or ["*"] for all

    Available fields: supplierID, supplierType, fullName, companyName, groupName,
        phone, email, code, currencyCode, countryName, address, attributes
        Default returns: supplierID, fullName
    """
    logger.debug(
        "Tool call: erply_suppliers(limit=%s, cursor=%s, name=%s)",
        limit, cursor, name,
    )
    page = int(cursor) if cursor else 1
    client = ErplyClient.from_env()
    suppliers = await client.get_suppliers(
        SupplierFilters(search_name=name, records_on_page=limit, page_no=page)
    )

    items = project_items([s.to_dict() for s in suppliers], fields, SUPPLIER_BASE_FIELDS)

    has_more = len(suppliers) == limit
    result = {
        "results": items,
        "has_more": has_more,
        "cursor": str(page + 1) if has_more else None,
        "total_returned": len(items),
    }
    logger.debug("Tool result: erply_suppliers -> %s", truncate(str(result)))
    return result


async def erply_save_supplier(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Create or update an Erply supplier via saveSupplier.

    Pass supplierID to update an existing supplier; omit it to create one.
    For a new supplier give either companyName or firstName and lastName.

    Docs: https://learn-api.erply.com/requests/savesupplier
    """
    logger.debug("Tool call: erply_save_supplier(payload=%s)", truncate(str(payload)))
    client = ErplyClient.from_env()
    report = await client.save_supplier(payload)
    result = report.to_dict() if report else {}
    logger.debug("Tool result: erply_save_supplier -> %s", truncate(str(result)))
    return result


async def erply_save_suppliers_bulk(suppliers: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Create or update up to 1000 suppliers in one bulk call.

    Each entry is a saveSupplier payload. Results are returned in input order.
    If any supplier fails, the error names its position in the list.
    """
    logger.debug("Tool call: erply_save_suppliers_bulk(count=%d)", len(suppliers))
    client = ErplyClient.from_env()
    envelope = await client.save_supplier_bulk(suppliers)
    result = {
        "results": [
            item.records[0].to_dict() if item.records else None
            for item in envelope.items
        ],
        "total_returned": len(envelope),
    }
    logger.debug("Tool result: erply_save_suppliers_bulk -> %s", truncate(str(result)))
    return result


async def erply_delete_supplier(supplier_id: int) -> Dict[str, Any]:
    """Delete a supplier by supplierID."""
    logger.debug("Tool call: erply_delete_supplier(supplier_id=%s)", supplier_id)
    client = ErplyClient.from_env()
    status = await client.delete_supplier(supplier_id)
    return {"deleted": supplier_id, "responseStatus": status.response_status}
