"""Supplier price list tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..api.prices import (
    PriceListFilters,
    ProductPriceListFilters,
    UpdatePriceListProduct,
    price_list_change_from_params,
)
from ..erply_client import ErplyClient
from ..utils.logging import truncate
from ..utils.projection import project_items

logger = logging.getLogger("erply_api.resources.prices")


async def erply_supplier_price_lists(
    limit: int = 100,
    cursor: str | None = None,
    supplier_id: int | None = None,
    name: str | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List supplier price lists.

    Parameters:
    - limit: Items per page (Erply allows up to 100)
    - cursor: Opaque cursor for next page (pass from previous response)
    - supplier_id: Only price lists of this supplier
    - name: Price list name filter
    - fields: Additional fields to include beyond defaults, or ["*"] for all

    Available fields: supplierPriceListID, supplierID, supplierName, name,
        startDate, endDate, active, pricelistRules, attributes
        Default returns: supplierPriceListID, supplierID, name
    """
    logger.debug(
        "Tool call: erply_supplier_price_lists(limit=%s, cursor=%s, supplier_id=%s, name=%s)",
        limit, cursor, supplier_id, name,
    )
    page = int(cursor) if cursor else 1
    client = ErplyClient.from_env()
    price_lists = await client.get_supplier_price_lists(
        PriceListFilters(supplier_id=supplier_id, name=name, records_on_page=limit, page_no=page)
    )

    base_fields = {"supplierPriceListID", "supplierID", "name"}
    items = project_items([p.to_dict() for p in price_lists], fields, base_fields)

    has_more = len(price_lists) == limit
    result = {
        "results": items,
        "has_more": has_more,
        "cursor": str(page + 1) if has_more else None,
        "total_returned": len(items),
    }
    logger.debug("Tool result: erply_supplier_price_lists -> %s", truncate(str(result)))
    return result


async def erply_price_list_products(
    supplier_price_list_id: int,
    limit: int = 100,
    cursor: str | None = None,
    fields: list[str] | None = None,
) -> Dict[str, Any]:
    """List the product rows of one supplier price list.

    Available fields: supplierPriceListProductID, productID, price, amount,
        countryID, supplierCode, importCode, masterPackQuantity, minimumOrderQuantity
        Default returns: supplierPriceListProductID, productID, price
    """
    logger.debug(
        "Tool call: erply_price_list_products(supplier_price_list_id=%s, limit=%s, cursor=%s)",
        supplier_price_list_id, limit, cursor,
    )
    page = int(cursor) if cursor else 1
    client = ErplyClient.from_env()
    rows = await client.get_product_price_lists(
        ProductPriceListFilters(
            supplier_price_list_id=supplier_price_list_id,
            records_on_page=limit,
            page_no=page,
        )
    )

    base_fields = {"supplierPriceListProductID", "productID", "price"}
    items = project_items([r.to_dict() for r in rows], fields, base_fields)

    has_more = len(rows) == limit
    result = {
        "results": items,
        "has_more": has_more,
        "cursor": str(page + 1) if has_more else None,
        "total_returned": len(items),
    }
    logger.debug("Tool result: erply_price_list_products -> %s", truncate(str(result)))
    return result


async def erply_change_price_list_products_bulk(products: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Add or edit up to 1000 price list product rows in one bulk call.

    Rows carrying supplierPriceListProductID edit that row
    (editProductInSupplierPriceList); rows without it are added
    (addProductToSupplierPriceList). Each row needs supplierPriceListID,
    productID and price when added.

    Results are returned in input order. If any row fails, the error names
    its position in the list and no later rows are reported.
    """
    logger.debug("Tool call: erply_change_price_list_products_bulk(count=%d)", len(products))
    changes = [price_list_change_from_params(p) for p in products]
    client = ErplyClient.from_env()
    envelope = await client.change_product_to_supplier_price_list_bulk(changes)

    results = []
    for change, item in zip(changes, envelope.items):
        row = item.records[0].to_dict() if item.records else {}
        row["action"] = "edit" if isinstance(change, UpdatePriceListProduct) else "add"
        results.append(row)

    result = {"results": results, "total_returned": len(results)}
    logger.debug("Tool result: erply_change_price_list_products_bulk -> %s", truncate(str(result)))
    return result


async def erply_save_price_list(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Create or update a supplier price list via saveSupplierPriceList.

    Pass supplierPriceListID to update; omit it to create. Product rows go as
    numbered fields: productID1, price1, amount1, productID2, ...
    """
    logger.debug("Tool call: erply_save_price_list(payload=%s)", truncate(str(payload)))
    client = ErplyClient.from_env()
    saved = await client.save_supplier_price_list(payload)
    result = saved.to_dict() if saved else {}
    logger.debug("Tool result: erply_save_price_list -> %s", truncate(str(result)))
    return result
