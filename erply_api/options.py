"""Structured request options.

Each operation takes a small dataclass naming the parameters the service
recognizes. ``extra`` forwards anything else verbatim, for parameters the
dataclass does not know about yet.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Mapping, Optional, Union

ParamsLike = Union["RequestOptions", Mapping[str, Any], None]


def param(name: str, default: Any = None, *, doc: str = "") -> Any:
    """Declare an option sent under ``name``. ``None`` values are omitted."""
    return dataclasses.field(default=default, metadata={"param": name, "doc": doc})


def _encode_param(value: Any) -> Any:
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(v) for v in value)
    return value


class RequestOptions:
    """Base for option dataclasses. Subclasses must declare an ``extra`` field."""

    extra: Dict[str, Any]

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        for f in dataclasses.fields(self):
            name = f.metadata.get("param")
            if name is None:
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            params[name] = _encode_param(value)
        params.update(self.extra or {})
        return params


def as_params(options: ParamsLike) -> Dict[str, Any]:
    """Normalize options, a plain mapping, or ``None`` into a parameter dict."""
    if options is None:
        return {}
    to_params = getattr(options, "to_params", None)
    if callable(to_params):
        return dict(to_params())
    return dict(options)


def merge_params(base: Optional[Mapping[str, Any]], **kwargs: Any) -> Dict[str, Any]:
    """Copy ``base`` and add the keyword parameters that are not ``None``."""
    params = dict(base or {})
    for key, value in kwargs.items():
        if value is not None:
            params[key] = _encode_param(value)
    return params
