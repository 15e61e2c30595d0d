"""Supplier requests: getSuppliers, saveSupplier, deleteSupplier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from ..bulk import BatchEnvelope, all_records, first_record
from ..models.common import Status
from ..models.suppliers import Supplier, SupplierImportReport
from ..options import ParamsLike, RequestOptions, param
from .base import ApiMixin


@dataclass
class SupplierFilters(RequestOptions):
    """Filters for getSuppliers."""

    supplier_id: Optional[int] = param("supplierID")
    supplier_ids: Optional[Sequence[int]] = param("supplierIDs", doc="sent comma-separated")
    search_name: Optional[str] = param("searchName", doc="partial match on name")
    group_id: Optional[int] = param("groupID")
    changed_since: Optional[int] = param("changedSince", doc="unix timestamp")
    response_mode: Optional[str] = param("responseMode", doc="'detail' adds bank and contact fields")
    records_on_page: Optional[int] = param("recordsOnPage", doc="max 100")
    page_no: Optional[int] = param("pageNo")
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SupplierInput(RequestOptions):
    """Fields for saveSupplier. Setting ``supplier_id`` updates that supplier."""

    supplier_id: Optional[int] = param("supplierID")
    supplier_type: Optional[str] = param("supplierType", doc="PERSON or COMPANY")
    company_name: Optional[str] = param("companyName")
    first_name: Optional[str] = param("firstName")
    last_name: Optional[str] = param("lastName")
    group_id: Optional[int] = param("groupID")
    code: Optional[str] = param("code")
    vat_number: Optional[str] = param("vatNumber")
    phone: Optional[str] = param("phone")
    mobile: Optional[str] = param("mobile")
    email: Optional[str] = param("email")
    fax: Optional[str] = param("fax")
    country_id: Optional[int] = param("countryID")
    currency_code: Optional[str] = param("currencyCode")
    integration_code: Optional[str] = param("integrationCode")
    notes: Optional[str] = param("notes")
    extra: Dict[str, Any] = field(default_factory=dict)


class SuppliersMixin(ApiMixin):

    async def get_suppliers(self, filters: ParamsLike = None) -> List[Supplier]:
        """List suppliers according to the given filters."""
        res = await self._call("getSuppliers", filters)
        return all_records(res, Supplier)

    async def get_suppliers_bulk(
        self,
        bulk_filters: Sequence[ParamsLike],
        base_filters: ParamsLike = None,
    ) -> BatchEnvelope[Supplier]:
        """List suppliers with one getSuppliers request per filter set.

        Used to page past the per-request record limit in a single call.
        """
        return await self._call_bulk("getSuppliers", bulk_filters, Supplier, base_filters)

    async def save_supplier(self, supplier: ParamsLike) -> Optional[SupplierImportReport]:
        res = await self._call("saveSupplier", supplier)
        return first_record(res, SupplierImportReport)

    async def save_supplier_bulk(
        self,
        suppliers: Sequence[ParamsLike],
        base_params: ParamsLike = None,
    ) -> BatchEnvelope[SupplierImportReport]:
        return await self._call_bulk("saveSupplier", suppliers, SupplierImportReport, base_params)

    async def delete_supplier(self, supplier_id: int) -> Status:
        """Delete a supplier. Returns the response status."""
        res = await self._call("deleteSupplier", {"supplierID": supplier_id})
        return res.status

    async def delete_supplier_bulk(
        self,
        suppliers: Sequence[Union[int, ParamsLike]],
        base_params: ParamsLike = None,
    ) -> BatchEnvelope[Any]:
        """Delete several suppliers. Items are supplier IDs or parameter maps."""
        items = [
            {"supplierID": s} if isinstance(s, int) else s
            for s in suppliers
        ]
        return await self._call_bulk("deleteSupplier", items, dict, base_params)
