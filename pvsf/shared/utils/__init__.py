"""Shared utilities: datetime helpers."""

from pvsf.shared.utils.datetime import ensure_utc, from_timestamp_utc, to_js_iso

__all__ = [
    "ensure_utc",
    "from_timestamp_utc",
    "to_js_iso",
]
