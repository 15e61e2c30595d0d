"""Supplier price list requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Union

from ..bulk import BatchEnvelope, all_records, first_record
from ..errors import ErplyClientError
from ..models.prices import (
    ChangeProductToSupplierPriceListResult,
    DeleteProductsFromSupplierPriceListResult,
    PriceList,
    PriceListRule,
    ProductPriceList,
    SaveSupplierPriceListResult,
)
from ..options import ParamsLike, RequestOptions, as_params, param
from .base import ApiMixin

ADD_PRODUCT_METHOD = "addProductToSupplierPriceList"
EDIT_PRODUCT_METHOD = "editProductInSupplierPriceList"
PRODUCT_ID_KEY = "supplierPriceListProductID"


@dataclass
class PriceListFilters(RequestOptions):
    """Filters for getSupplierPriceLists."""

    supplier_price_list_id: Optional[int] = param("supplierPriceListID")
    supplier_price_list_ids: Optional[Sequence[int]] = param("supplierPriceListIDs")
    supplier_id: Optional[int] = param("supplierID")
    name: Optional[str] = param("name")
    changed_since: Optional[int] = param("changedSince", doc="unix timestamp")
    records_on_page: Optional[int] = param("recordsOnPage")
    page_no: Optional[int] = param("pageNo")
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ProductPriceListFilters(RequestOptions):
    """Filters for getProductsInSupplierPriceList."""

    supplier_price_list_id: Optional[int] = param("supplierPriceListID")
    product_ids: Optional[Sequence[int]] = param("productIDs")
    records_on_page: Optional[int] = param("recordsOnPage")
    page_no: Optional[int] = param("pageNo")
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PriceListProductInput(RequestOptions):
    """Fields of a product row in a supplier price list."""

    supplier_price_list_id: Optional[int] = param("supplierPriceListID")
    product_id: Optional[int] = param("productID")
    price: Optional[float] = param("price")
    amount: Optional[int] = param("amount", doc="quantity the price applies from")
    country_id: Optional[int] = param("countryID")
    supplier_code: Optional[str] = param("supplierCode")
    import_code: Optional[str] = param("importCode")
    master_pack_quantity: Optional[int] = param("masterPackQuantity")
    minimum_order_quantity: Optional[int] = param("minimumOrderQuantity")
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SupplierPriceListInput(RequestOptions):
    """Fields for saveSupplierPriceList. ``rules`` become numbered product rows."""

    supplier_price_list_id: Optional[int] = param("supplierPriceListID")
    supplier_id: Optional[int] = param("supplierID")
    name: Optional[str] = param("name")
    start_date: Optional[str] = param("startDate", doc="YYYY-MM-DD")
    end_date: Optional[str] = param("endDate", doc="YYYY-MM-DD")
    rules: List[PriceListRule] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_params(self) -> Dict[str, Any]:
        params = super().to_params()
        for n, rule in enumerate(self.rules, start=1):
            params[f"productID{n}"] = rule.product_id
            params[f"price{n}"] = str(rule.price)
            params[f"amount{n}"] = rule.amount
        return params


@dataclass
class DeletePriceListProductsInput(RequestOptions):
    """Fields for deleteProductsFromSupplierPriceList."""

    supplier_price_list_id: Optional[int] = param("supplierPriceListID")
    product_ids: Optional[Sequence[int]] = param("supplierPriceListProductIDs")
    extra: Dict[str, Any] = field(default_factory=dict)


# ----------------------------- Create / update -----------------------------


@dataclass
class CreatePriceListProduct:
    """Add a product row to a supplier price list."""

    params: ParamsLike = None
    method_name: ClassVar[str] = ADD_PRODUCT_METHOD

    def to_params(self) -> Dict[str, Any]:
        return as_params(self.params)


@dataclass
class UpdatePriceListProduct:
    """Edit an existing product row, identified by its supplierPriceListProductID."""

    supplier_price_list_product_id: Any
    params: ParamsLike = None
    method_name: ClassVar[str] = EDIT_PRODUCT_METHOD

    def to_params(self) -> Dict[str, Any]:
        params = as_params(self.params)
        params[PRODUCT_ID_KEY] = self.supplier_price_list_product_id
        return params


PriceListProductChange = Union[CreatePriceListProduct, UpdatePriceListProduct]


def price_list_change_from_params(params: Mapping[str, Any]) -> PriceListProductChange:
    """Turn a raw parameter map into a create or an update.

    The presence of supplierPriceListProductID selects an update, whatever
    its value.
    """
    if PRODUCT_ID_KEY in params:
        rest = dict(params)
        product_id = rest.pop(PRODUCT_ID_KEY)
        return UpdatePriceListProduct(product_id, rest)
    return CreatePriceListProduct(dict(params))


class PricesMixin(ApiMixin):

    async def get_supplier_price_lists(self, filters: ParamsLike = None) -> List[PriceList]:
        res = await self._call("getSupplierPriceLists", filters)
        return all_records(res, PriceList)

    async def get_supplier_price_lists_bulk(
        self,
        bulk_filters: Sequence[ParamsLike],
        base_filters: ParamsLike = None,
    ) -> BatchEnvelope[PriceList]:
        return await self._call_bulk("getSupplierPriceLists", bulk_filters, PriceList, base_filters)

    async def get_product_price_lists(self, filters: ParamsLike = None) -> List[ProductPriceList]:
        """List the product rows of supplier price lists."""
        res = await self._call("getProductsInSupplierPriceList", filters)
        return all_records(res, ProductPriceList)

    async def get_product_price_lists_bulk(
        self,
        bulk_filters: Sequence[ParamsLike],
        base_filters: ParamsLike = None,
    ) -> BatchEnvelope[ProductPriceList]:
        return await self._call_bulk(
            "getProductsInSupplierPriceList", bulk_filters, ProductPriceList, base_filters
        )

    async def add_product_to_supplier_price_list(
        self, product: ParamsLike
    ) -> Optional[ChangeProductToSupplierPriceListResult]:
        return await self._persist_price_list_product(CreatePriceListProduct(product))

    async def edit_product_in_supplier_price_list(
        self, product: ParamsLike
    ) -> Optional[ChangeProductToSupplierPriceListResult]:
        """Edit a product row. ``product`` must carry supplierPriceListProductID."""
        params = as_params(product)
        if PRODUCT_ID_KEY not in params:
            raise ErplyClientError(f"{EDIT_PRODUCT_METHOD} requires {PRODUCT_ID_KEY}")
        return await self._persist_price_list_product(price_list_change_from_params(params))

    async def _persist_price_list_product(
        self, change: PriceListProductChange
    ) -> Optional[ChangeProductToSupplierPriceListResult]:
        res = await self._call(change.method_name, change)
        return first_record(res, ChangeProductToSupplierPriceListResult)

    async def change_product_to_supplier_price_list_bulk(
        self,
        changes: Sequence[Union[PriceListProductChange, Mapping[str, Any]]],
        base_params: ParamsLike = None,
    ) -> BatchEnvelope[ChangeProductToSupplierPriceListResult]:
        """Add and edit price list products in one bulk call.

        Plain mappings are classified with :func:`price_list_change_from_params`.
        """
        items = [
            c if isinstance(c, (CreatePriceListProduct, UpdatePriceListProduct))
            else price_list_change_from_params(c)
            for c in changes
        ]
        return await self._call_bulk(
            None, items, ChangeProductToSupplierPriceListResult, base_params
        )

    async def delete_products_from_supplier_price_list(
        self, params: ParamsLike
    ) -> Optional[DeleteProductsFromSupplierPriceListResult]:
        res = await self._call("deleteProductsFromSupplierPriceList", params)
        return first_record(res, DeleteProductsFromSupplierPriceListResult)

    async def delete_products_from_supplier_price_list_bulk(
        self,
        bulk_params: Sequence[ParamsLike],
        base_params: ParamsLike = None,
    ) -> BatchEnvelope[DeleteProductsFromSupplierPriceListResult]:
        return await self._call_bulk(
            "deleteProductsFromSupplierPriceList",
            bulk_params,
            DeleteProductsFromSupplierPriceListResult,
            base_params,
        )

    async def save_supplier_price_list(
        self, price_list: ParamsLike
    ) -> Optional[SaveSupplierPriceListResult]:
        res = await self._call("saveSupplierPriceList", price_list)
        return first_record(res, SaveSupplierPriceListResult)

    async def save_supplier_price_list_bulk(
        self,
        price_lists: Sequence[ParamsLike],
        base_params: ParamsLike = None,
    ) -> BatchEnvelope[SaveSupplierPriceListResult]:
        return await self._call_bulk(
            "saveSupplierPriceList", price_lists, SaveSupplierPriceListResult, base_params
        )
