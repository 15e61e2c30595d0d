from __future__ import annotations

import asyncio
import dataclasses
import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

import httpx

from .api.auth import AuthMixin
from .api.prices import PricesMixin
from .api.service_discovery import ServiceDiscoveryMixin
from .api.suppliers import SuppliersMixin
from .bulk import NamedRequest
from .errors import ErplyClientError, TransportError


logger = logging.getLogger("erply_api.http")

MAX_RETRIES = 3
RETRY_DELAYS = [1.0, 2.0, 4.0]

DEFAULT_BASE_URL = "https://{client_code}.erply.com/api/"

_SECRET_PARAMS = {"sessionkey", "partnerkey", "password", "jwt", "pin"}


def _redact_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    redacted = {}
    for k, v in params.items():
        if str(k).lower() in _SECRET_PARAMS:
            redacted[k] = "[REDACTED]"
        else:
            redacted[k] = v
    return redacted


def _truncate(text: str, max_len: int = 1000) -> str:
    if text is None:
        return ""
    if len(text) <= max_len:
        return text
    return text[:max_len] + "... [truncated]"


def _form_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


@dataclass
class ErplyTransport:
    """Async transport for the Erply JSON API.

    Every call is a form-encoded POST to the account's API URL. Uses a
    per-request httpx.AsyncClient with automatic retry on transient errors.
    """

    client_code: str
    session_key: str = ""
    partner_key: str = ""
    base_url: str = ""
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.client_code:
            raise ErplyClientError("Erply client code is required.")
        if not self.base_url:
            self.base_url = DEFAULT_BASE_URL.format(client_code=self.client_code)
        if not self.base_url.endswith("/"):
            self.base_url = self.base_url + "/"

    @classmethod
    def from_env(cls) -> "ErplyTransport":
        """Create a client using environment variables loaded via dotenv.

        Required env vars:
        - ERPLY_CLIENT_CODE
        Optional:
        - ERPLY_SESSION_KEY (not needed for verifyUser)
        - ERPLY_PARTNER_KEY
        - ERPLY_BASE_URL (defaults to https://<client code>.erply.com/api/)
        """
        client_code = os.getenv("ERPLY_CLIENT_CODE")
        if not client_code:
            raise ErplyClientError("Missing ERPLY_CLIENT_CODE in environment.")

        return cls(
            client_code=client_code,
            session_key=os.getenv("ERPLY_SESSION_KEY", ""),
            partner_key=os.getenv("ERPLY_PARTNER_KEY", ""),
            base_url=os.getenv("ERPLY_BASE_URL", ""),
        )

    def with_session_key(self, session_key: str) -> "ErplyTransport":
        """Return a copy of this client that authenticates with ``session_key``."""
        return dataclasses.replace(self, session_key=session_key)

    def _credentials(self) -> Dict[str, str]:
        creds = {"clientCode": self.client_code}
        if self.session_key:
            creds["sessionKey"] = self.session_key
        if self.partner_key:
            creds["partnerKey"] = self.partner_key
        return creds

    async def _request(
        self, data: Dict[str, str], timeout: Optional[float] = None
    ) -> httpx.Response:
        """Execute HTTP request with per-request client and retry logic."""
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(timeout or self.timeout, connect=10.0),
        ) as client:
            return await self._execute_with_retry(client, data)

    async def _execute_with_retry(
        self, client: httpx.AsyncClient, data: Dict[str, str]
    ) -> httpx.Response:
        label = data.get("request", "bulk")
        last_error: Exception | None = None
        for attempt in range(MAX_RETRIES):
            try:
                start = time.perf_counter()
                response = await client.post("", data=data)
                elapsed_ms = (time.perf_counter() - start) * 1000.0

                logger.debug(
                    "HTTP POST %s status=%s elapsed_ms=%.2f params=%s",
                    label,
                    response.status_code,
                    elapsed_ms,
                    _truncate(str(_redact_params(data))),
                )

                # Don't retry client errors (4xx except 429)
                if 400 <= response.status_code < 500 and response.status_code != 429:
                    return response

                # Retry on rate limit (429) and server errors (5xx)
                if response.status_code == 429 or response.status_code >= 500:
                    if attempt < MAX_RETRIES - 1:
                        logger.warning(
                            "Retrying %s (status %s, attempt %d/%d)",
                            label, response.status_code,
                            attempt + 1, MAX_RETRIES,
                        )
                        await asyncio.sleep(RETRY_DELAYS[attempt])
                        continue

                return response

            except (httpx.TimeoutException, httpx.NetworkError) as e:
                last_error = e
                if attempt < MAX_RETRIES - 1:
                    logger.warning(
                        "Retrying %s (%s, attempt %d/%d)",
                        label, type(e).__name__,
                        attempt + 1, MAX_RETRIES,
                    )
                    await asyncio.sleep(RETRY_DELAYS[attempt])
                    continue

        raise TransportError(f"Request failed after {MAX_RETRIES} retries: {last_error}")

    async def _dispatch(
        self, data: Dict[str, str], label: str, timeout: Optional[float]
    ) -> bytes:
        response = await self._request(data, timeout=timeout)
        if not 200 <= response.status_code < 300:
            text = response.text or ""
            raise TransportError(
                f"{label} error: {response.status_code} {text[:200]}",
                status_code=response.status_code,
                body=_truncate(text),
            )
        return response.content

    # ----------------------------- Transport API -----------------------------

    async def send_request(
        self,
        method_name: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Call one API method and return the raw response body."""
        data: Dict[str, str] = {"request": method_name}
        data.update(self._credentials())
        for key, value in (params or {}).items():
            data[key] = _form_value(value)
        return await self._dispatch(data, method_name, timeout)

    async def send_request_bulk(
        self,
        requests: Sequence[NamedRequest],
        shared_params: Optional[Mapping[str, Any]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Send several named requests in one bulk call and return the raw body.

        ``shared_params`` go alongside the credentials and apply to every request.
        """
        data: Dict[str, str] = self._credentials()
        for key, value in (shared_params or {}).items():
            data[key] = _form_value(value)
        data["requests"] = json.dumps([r.to_wire(i) for i, r in enumerate(requests)])
        return await self._dispatch(data, "bulk request", timeout)


@dataclass
class ErplyClient(
    SuppliersMixin,
    PricesMixin,
    AuthMixin,
    ServiceDiscoveryMixin,
    ErplyTransport,
):
    """Erply API client: transport plus the supplier, price list, auth and
    service discovery requests."""
