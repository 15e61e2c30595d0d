"""Exceptions raised by the Erply client."""

from __future__ import annotations

from typing import Optional, Union


class ErplyClientError(Exception):
    """Represents an error when communicating with the Erply API."""


class BatchSizeExceeded(ErplyClientError):
    """Raised before dispatch when a bulk call carries too many requests."""

    def __init__(self, limit: int, actual: int) -> None:
        self.limit = limit
        self.actual = actual
        super().__init__(
            f"cannot send more than {limit} requests in one bulk call (got {actual})"
        )


class TransportError(ErplyClientError):
    """HTTP-level failure: network error, timeout, or non-2xx response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class DecodeError(ErplyClientError):
    """The response body could not be decoded. Keeps the raw body."""

    def __init__(self, cause: Exception, raw_body: Union[bytes, str]) -> None:
        self.cause = cause
        self.raw_body = raw_body
        if isinstance(raw_body, bytes):
            text = raw_body.decode("utf-8", errors="replace")
        else:
            text = str(raw_body)
        if len(text) > 200:
            text = text[:200] + "... [truncated]"
        super().__init__(f"failed to decode Erply response from '{text}': {cause}")


class ApiStatusError(ErplyClientError):
    """The API answered with a non-ok responseStatus."""

    def __init__(self, code: int, request: str, message: str) -> None:
        self.code = code
        self.request = request
        self.message = message
        super().__init__(f"ERPLY API error {code}: {message}")


class BatchStatusError(ApiStatusError):
    """The outer status of a bulk response is not ok; no item was inspected."""


class ItemStatusError(ApiStatusError):
    """The first failing item of a bulk response."""

    def __init__(self, index: int, code: int, request: str, message: str) -> None:
        self.index = index
        super().__init__(code, request, message)
        self.args = (f"ERPLY API error {code} in bulk item {index}: {message}",)
