"""Common mock API responses: statuses, envelopes, errors."""

import json


def status(request, response_status="ok", error_code=0, **extra):
    body = {
        "request": request,
        "requestUnixTime": 1700000000,
        "responseStatus": response_status,
        "errorCode": error_code,
        "generationTime": 0.0123,
        "recordsTotal": 0,
        "recordsInResponse": 0,
    }
    body.update(extra)
    return body


def item_status(request_name, request_id, response_status="ok", error_code=0):
    return {
        "requestName": request_name,
        "requestID": request_id,
        "responseStatus": response_status,
        "errorCode": error_code,
        "generationTime": 0.001,
        "recordsTotal": 0,
        "recordsInResponse": 0,
    }


def single_body(request, records, response_status="ok", error_code=0):
    return json.dumps({
        "status": status(request, response_status, error_code),
        "records": records,
    }).encode()


def bulk_body(items, response_status="ok", error_code=0):
    """Build a bulk response from (request_name, response_status, records) tuples."""
    return json.dumps({
        "status": status("", response_status, error_code),
        "requests": [
            {
                "status": item_status(name, i, item_response, 0 if item_response == "ok" else 1011),
                "records": records,
            }
            for i, (name, item_response, records) in enumerate(items)
        ],
    }).encode()


SESSION_KEY_INFO_RESPONSE = {
    "creationUnixTime": "1700000000",
    "expireUnixTime": "1700003600",
}

SERVICE_ENDPOINTS_RESPONSE = {
    "cafa": {"url": "https://cafa.erply.com/", "documentation": "https://cafa.erply.com/documentation"},
    "pim": {"url": "https://pim.erply.com/", "documentation": "https://pim.erply.com/documentation"},
    "wms": {"url": "https://wms.erply.com/", "documentation": "https://wms.erply.com/documentation"},
    "promotion": {"url": "https://promo.erply.com/", "documentation": ""},
    "reports": {"url": "https://reports.erply.com/", "documentation": ""},
    "json": {"url": "https://json.erply.com/", "documentation": ""},
    "assignments": {"url": "https://assignments.erply.com/", "documentation": ""},
}

ERROR_SESSION_EXPIRED = 1054

ERROR_HTML_BODY = b"<html><body>502 Bad Gateway</body></html>"
