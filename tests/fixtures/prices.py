"""Supplier price list mock API records."""

PRICE_LIST_SINGLE = {
    "supplierPriceListID": 7,
    "supplierID": 12,
    "supplierName": "Acme Supplies",
    "name": "Acme 2024",
    "startDate": "2024-01-01",
    "endDate": "2024-12-31",
    "active": "1",
    "added": 1700000000,
    "lastModified": 1700000500,
    "addedByUserName": "admin",
    "lastModifiedByUserName": "admin",
    "pricelistRules": [
        {"productID": 101, "price": "12.50", "amount": 1},
        {"productID": 102, "price": "3.99", "amount": 10},
    ],
    "attributes": [],
}

PRICE_LIST_SECOND = {
    "supplierPriceListID": 8,
    "supplierID": 13,
    "supplierName": "Jane Smith",
    "name": "Jane Q1",
    "startDate": "2024-01-01",
    "endDate": "2024-03-31",
    "active": "0",
    "added": 1700001000,
    "lastModified": 1700001000,
    "pricelistRules": [],
    "attributes": [],
}

PRODUCT_PRICE_LIST_ROWS = [
    {
        "supplierPriceListProductID": 501,
        "productID": 101,
        "price": 12.5,
        "amount": 1,
        "countryID": 5,
        "supplierCode": "ACME-101",
        "importCode": "",
        "masterPackQuantity": 12,
        "minimumOrderQuantity": 24,
    },
    {
        "supplierPriceListProductID": 502,
        "productID": 102,
        "price": 3.99,
        "amount": 10,
        "countryID": 5,
        "supplierCode": "ACME-102",
        "importCode": "",
        "masterPackQuantity": 1,
        "minimumOrderQuantity": 1,
    },
]

CHANGE_PRODUCT_RECORDS = [{"supplierPriceListProductID": 503}]

DELETE_PRODUCTS_RECORDS = [{"deletedIDs": "501,502", "nonExistingIDs": "999"}]

SAVE_PRICE_LIST_RECORDS = [{"supplierPriceListID": 9}]
