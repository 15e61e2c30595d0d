"""Supplier mock API records."""

SUPPLIER_SINGLE = {
    "supplierID": 12,
    "supplierType": "COMPANY",
    "fullName": "Acme Supplies",
    "companyName": "Acme Supplies",
    "firstName": "",
    "lastName": "",
    "groupID": 3,
    "groupName": "Wholesale",
    "phone": "555-0100",
    "mobile": "",
    "email": "orders@acme-supplies.com",
    "fax": "",
    "code": "ACME",
    "integrationCode": "",
    "vatrateID": 1,
    "currencyCode": "EUR",
    "deliveryTermsID": 0,
    "countryID": 5,
    "countryName": "Estonia",
    "countryCode": "EE",
    "address": "Tartu mnt 1, Tallinn",
    "GLN": "",
    "attributes": [
        {"attributeName": "rating", "attributeType": "int", "attributeValue": "4"},
    ],
    "added": 1600000000,
    "lastModified": "1650000000",
}

SUPPLIER_SECOND = {
    "supplierID": 13,
    "supplierType": "PERSON",
    "fullName": "Jane Smith",
    "firstName": "Jane",
    "lastName": "Smith",
    "groupID": 3,
    "groupName": "Wholesale",
    "phone": "555-0200",
    "email": "jane@example.com",
    "currencyCode": "EUR",
    "attributes": [],
    "added": 1600000500,
}

SUPPLIER_LIST = [SUPPLIER_SINGLE, SUPPLIER_SECOND]

SUPPLIER_SAVE_RECORDS = [{"supplierID": 14, "alreadyExists": False}]
