"""Tests for supplier requests."""

from __future__ import annotations

import pytest

from erply_api.api.suppliers import SupplierFilters, SupplierInput
from erply_api.bulk import MAX_BULK_REQUESTS_COUNT
from erply_api.errors import (
    ApiStatusError,
    BatchSizeExceeded,
    BatchStatusError,
    DecodeError,
    ItemStatusError,
)
from erply_api.models.suppliers import Supplier, SupplierImportReport

from tests.fixtures.common import ERROR_SESSION_EXPIRED, bulk_body, single_body
from tests.fixtures.suppliers import (
    SUPPLIER_LIST,
    SUPPLIER_SAVE_RECORDS,
    SUPPLIER_SECOND,
    SUPPLIER_SINGLE,
)


class TestGetSuppliers:

    async def test_returns_typed_records(self, api_client):
        api_client.send_request.return_value = single_body("getSuppliers", SUPPLIER_LIST)

        suppliers = await api_client.get_suppliers(SupplierFilters(search_name="acme"))

        assert [s.supplier_id for s in suppliers] == [12, 13]
        assert suppliers[0].attributes[0].attribute_value == "4"
        method, params = api_client.send_request.call_args[0]
        assert method == "getSuppliers"
        assert params == {"searchName": "acme"}

    async def test_plain_mapping_filters(self, api_client):
        api_client.send_request.return_value = single_body("getSuppliers", [])

        suppliers = await api_client.get_suppliers({"supplierID": 12})

        assert suppliers == []
        assert api_client.send_request.call_args[0][1] == {"supplierID": 12}

    async def test_error_status_raises(self, api_client):
        api_client.send_request.return_value = single_body(
            "getSuppliers", [], "error", ERROR_SESSION_EXPIRED
        )

        with pytest.raises(ApiStatusError) as exc_info:
            await api_client.get_suppliers()

        assert exc_info.value.code == ERROR_SESSION_EXPIRED

    async def test_malformed_body_raises_decode_error(self, api_client):
        api_client.send_request.return_value = b"{not json"

        with pytest.raises(DecodeError) as exc_info:
            await api_client.get_suppliers()

        assert exc_info.value.raw_body == b"{not json"


class TestGetSuppliersBulk:

    async def test_pages_come_back_in_order(self, api_client):
        api_client.send_request_bulk.return_value = bulk_body([
            ("getSuppliers", "ok", [SUPPLIER_SINGLE]),
            ("getSuppliers", "ok", [SUPPLIER_SECOND]),
        ])

        envelope = await api_client.get_suppliers_bulk(
            [SupplierFilters(page_no=1), SupplierFilters(page_no=2)],
            {"recordsOnPage": 1},
        )

        assert [item.records[0].supplier_id for item in envelope] == [12, 13]
        requests, shared = api_client.send_request_bulk.call_args[0]
        assert [r.method_name for r in requests] == ["getSuppliers", "getSuppliers"]
        assert [r.params["pageNo"] for r in requests] == [1, 2]
        assert shared == {"recordsOnPage": 1}

    async def test_batch_error(self, api_client):
        api_client.send_request_bulk.return_value = bulk_body(
            [("getSuppliers", "ok", [SUPPLIER_SINGLE])], "error", 1002
        )

        with pytest.raises(BatchStatusError):
            await api_client.get_suppliers_bulk([{}])


class TestSaveSupplier:

    async def test_returns_first_report(self, api_client):
        api_client.send_request.return_value = single_body("saveSupplier", SUPPLIER_SAVE_RECORDS)

        report = await api_client.save_supplier(SupplierInput(company_name="New Co", email="a@b.c"))

        assert report == SupplierImportReport(supplier_id=14, already_exists=False)
        method, params = api_client.send_request.call_args[0]
        assert method == "saveSupplier"
        assert params == {"companyName": "New Co", "email": "a@b.c"}

    async def test_no_records_returns_none(self, api_client):
        api_client.send_request.return_value = single_body("saveSupplier", [])

        assert await api_client.save_supplier({"companyName": "X"}) is None

    async def test_bulk_item_failure(self, api_client):
        api_client.send_request_bulk.return_value = bulk_body([
            ("saveSupplier", "ok", SUPPLIER_SAVE_RECORDS),
            ("saveSupplier", "error", []),
        ])

        with pytest.raises(ItemStatusError) as exc_info:
            await api_client.save_supplier_bulk([{"companyName": "A"}, {"companyName": "B"}])

        assert exc_info.value.index == 1

    async def test_bulk_over_limit_makes_no_call(self, api_client):
        suppliers = [{"companyName": f"S{n}"} for n in range(MAX_BULK_REQUESTS_COUNT + 1)]

        with pytest.raises(BatchSizeExceeded):
            await api_client.save_supplier_bulk(suppliers)

        api_client.send_request_bulk.assert_not_called()


class TestDeleteSupplier:

    async def test_delete_sends_supplier_id(self, api_client):
        api_client.send_request.return_value = single_body("deleteSupplier", [])

        status = await api_client.delete_supplier(12)

        assert status.ok
        assert api_client.send_request.call_args[0] == ("deleteSupplier", {"supplierID": 12})

    async def test_delete_bulk_accepts_ids(self, api_client):
        api_client.send_request_bulk.return_value = bulk_body([
            ("deleteSupplier", "ok", []),
            ("deleteSupplier", "ok", []),
        ])

        envelope = await api_client.delete_supplier_bulk([12, {"supplierID": 13}])

        assert len(envelope) == 2
        requests = api_client.send_request_bulk.call_args[0][0]
        assert [dict(r.params) for r in requests] == [{"supplierID": 12}, {"supplierID": 13}]

    async def test_delete_bulk_over_limit(self, api_client):
        with pytest.raises(BatchSizeExceeded):
            await api_client.delete_supplier_bulk(list(range(MAX_BULK_REQUESTS_COUNT + 1)))

        api_client.send_request_bulk.assert_not_called()


class TestSupplierRecord:

    def test_missing_fields_use_defaults(self):
        supplier = Supplier.from_dict({"supplierID": "12"})

        assert supplier.supplier_id == 12
        assert supplier.full_name == ""
        assert supplier.attributes == []

    def test_null_fields_use_defaults(self):
        supplier = Supplier.from_dict({"supplierID": 12, "fullName": None, "attributes": None})

        assert supplier.full_name == ""
        assert supplier.attributes == []

    def test_numbers_in_text_fields_become_strings(self):
        supplier = Supplier.from_dict({"supplierID": 12, "code": 4711, "phone": 5551234})

        assert supplier.code == "4711"
        assert supplier.phone == "5551234"

    def test_built_by_field_name_dumps_wire_names(self):
        supplier = Supplier(supplier_id=12, full_name="Acme Supplies")

        data = supplier.to_dict()

        assert data["supplierID"] == 12
        assert data["fullName"] == "Acme Supplies"
        assert Supplier.from_dict(data) == supplier

    def test_import_report_flag_from_string(self):
        report = SupplierImportReport.from_dict({"supplierID": "14", "alreadyExists": "1"})

        assert report == SupplierImportReport(supplier_id=14, already_exists=True)
