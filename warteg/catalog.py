"""Menu catalogue: the item type and loading it from JSON."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any

__all__ = ["MenuItem", "CatalogError", "parse_menu", "fetch_menu"]


class CatalogError(Exception):
    """Raised when the menu cannot be fetched or decoded."""


@dataclass(frozen=True)
class MenuItem:
    """One dish on the menu."""

    no: str
    name: str
    price: int
    category: str


def _field(record: dict[str, Any], key: str) -> Any:
    """Look a key up case-insensitively, preferring an exact match."""
    if key in record:
        return record[key]
    lowered = key.lower()
    for name, value in record.items():
        if name.lower() == lowered:
            return value
    return None


def _as_text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise CatalogError(f"field {key!r} must be a string, got {value!r}")
    return value


def _as_price(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogError(f"field 'Price' must be an integer, got {value!r}")
    return value


def _to_item(record: Any) -> MenuItem:
    if not isinstance(record, dict):
        raise CatalogError(f"menu entry must be an object, got {record!r}")
    return MenuItem(
        no=_as_text(_field(record, "No"), "No"),
        name=_as_text(_field(record, "Name"), "Name"),
        price=_as_price(_field(record, "Price")),
        category=_as_text(_field(record, "Category"), "Category"),
    )


def parse_menu(payload: str | bytes) -> list[MenuItem]:
    """Decode a JSON array of menu entries.

    Keys match case-insensitively; missing fields take empty values.
    A JSON ``null`` yields an empty menu.
    """
    try:
        decoded = json.loads(payload)
    except (ValueError, UnicodeDecodeError) as exc:
        raise CatalogError(f"invalid menu JSON: {exc}") from exc
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise CatalogError("menu JSON must be an array")
    return [_to_item(record) for record in decoded]


def fetch_menu(url: str, timeout: float = 10.0) -> list[MenuItem]:
    """Download the menu from ``url`` and decode it."""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise CatalogError(f"failed to fetch menu: {exc}") from exc
    return parse_menu(body)