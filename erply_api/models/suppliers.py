"""Supplier records."""

from __future__ import annotations

from typing import List

from pydantic import Field

from .common import LaxBool, LaxInt, ObjAttribute, Record


class Supplier(Record):
    supplier_id: LaxInt = Field(0, alias="supplierID")
    supplier_type: str = Field("", alias="supplierType")
    full_name: str = Field("", alias="fullName")
    company_name: str = Field("", alias="companyName")
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    group_id: LaxInt = Field(0, alias="groupID")
    group_name: str = Field("", alias="groupName")
    phone: str = Field("", alias="phone")
    mobile: str = Field("", alias="mobile")
    email: str = Field("", alias="email")
    fax: str = Field("", alias="fax")
    code: str = Field("", alias="code")
    integration_code: str = Field("", alias="integrationCode")
    vatrate_id: LaxInt = Field(0, alias="vatrateID")
    currency_code: str = Field("", alias="currencyCode")
    delivery_terms_id: LaxInt = Field(0, alias="deliveryTermsID")
    country_id: LaxInt = Field(0, alias="countryID")
    country_name: str = Field("", alias="countryName")
    country_code: str = Field("", alias="countryCode")
    address: str = Field("", alias="address")
    gln: str = Field("", alias="GLN")
    attributes: List[ObjAttribute] = Field(default_factory=list, alias="attributes")

    # Returned with responseMode=detail
    vat_number: str = Field("", alias="vatNumber")
    skype: str = Field("", alias="skype")
    website: str = Field("", alias="website")
    bank_name: str = Field("", alias="bankName")
    bank_account_number: str = Field("", alias="bankAccountNumber")
    bank_iban: str = Field("", alias="bankIBAN")
    bank_swift: str = Field("", alias="bankSWIFT")
    birthday: str = Field("", alias="birthday")
    company_id: LaxInt = Field(0, alias="companyID")
    parent_company_name: str = Field("", alias="parentCompanyName")
    supplier_manager_id: LaxInt = Field(0, alias="supplierManagerID")
    supplier_manager_name: str = Field("", alias="supplierManagerName")
    payment_days: LaxInt = Field(0, alias="paymentDays")
    notes: str = Field("", alias="notes")
    last_modified: str = Field("", alias="lastModified")
    added: LaxInt = Field(0, alias="added")


class SupplierImportReport(Record):
    """Result record of saveSupplier."""

    supplier_id: LaxInt = Field(0, alias="supplierID")
    already_exists: LaxBool = Field(False, alias="alreadyExists")
