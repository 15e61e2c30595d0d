"""Supplier price list records."""

from __future__ import annotations

from typing import List

from pydantic import Field, field_serializer

from .common import LaxFloat, LaxInt, ObjAttribute, Record


class PriceListRule(Record):
    product_id: LaxInt = Field(0, alias="productID")
    # Sent by the service as a JSON string
    price: LaxFloat = Field(0.0, alias="price")
    amount: LaxInt = Field(0, alias="amount")

    @field_serializer("price")
    def serialize_price(self, value: float) -> str:
        return str(value)


class PriceList(Record):
    id: LaxInt = Field(0, alias="supplierPriceListID")
    supplier_id: LaxInt = Field(0, alias="supplierID")
    supplier_name: str = Field("", alias="supplierName")
    name: str = Field("", alias="name")
    valid_from: str = Field("", alias="startDate")
    valid_to: str = Field("", alias="endDate")
    active: str = Field("", alias="active")
    added_timestamp: LaxInt = Field(0, alias="added")
    last_modified_timestamp: LaxInt = Field(0, alias="lastModified")
    added_by_user_name: str = Field("", alias="addedByUserName")
    last_modified_by_user_name: str = Field("", alias="lastModifiedByUserName")
    rules: List[PriceListRule] = Field(default_factory=list, alias="pricelistRules")
    attributes: List[ObjAttribute] = Field(default_factory=list, alias="attributes")


class ProductPriceList(Record):
    """A product row of a supplier price list (getProductsInSupplierPriceList)."""

    price_id: LaxInt = Field(0, alias="supplierPriceListProductID")
    product_id: LaxInt = Field(0, alias="productID")
    price: LaxFloat = Field(0.0, alias="price")
    amount: LaxInt = Field(0, alias="amount")
    country_id: LaxInt = Field(0, alias="countryID")
    product_supplier_code: str = Field("", alias="supplierCode")
    import_code: str = Field("", alias="importCode")
    master_pack_quantity: LaxInt = Field(0, alias="masterPackQuantity")
    minimum_order_quantity: LaxInt = Field(0, alias="minimumOrderQuantity")


class ChangeProductToSupplierPriceListResult(Record):
    supplier_price_list_product_id: LaxInt = Field(0, alias="supplierPriceListProductID")


class DeleteProductsFromSupplierPriceListResult(Record):
    # Comma-separated ID lists
    deleted_ids: str = Field("", alias="deletedIDs")
    non_existing_ids: str = Field("", alias="nonExistingIDs")


class SaveSupplierPriceListResult(Record):
    supplier_price_list_id: LaxInt = Field(0, alias="supplierPriceListID")
