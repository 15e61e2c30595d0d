"""Field projection for tool results."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


def project_dict(
    data: dict[str, Any],
    fields: list[str] | None,
    base_fields: set[str],
) -> dict[str, Any]:
    """Project a single dict to base_fields + requested fields.

    - fields=None: returns only base_fields (minimal default)
    - fields=["x"]: returns base_fields + x
    - fields=["*"]: returns full data (no projection)
    """
    if fields is not None and "*" in fields:
        return data

    allowed = base_fields | set(fields or [])
    return {k: v for k, v in data.items() if k in allowed}


def project_items(
    items: List[Dict[str, Any]],
    fields: Optional[List[str]],
    base_fields: set[str],
) -> List[Dict[str, Any]]:
    """Project a list of dicts to only include base fields + requested fields."""
    if fields is not None and "*" in fields:
        return items
    return [project_dict(it, fields, base_fields) if isinstance(it, dict) else it for it in items]
