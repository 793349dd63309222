"""Firestore REST API value encoding.

Queries only ever filter on scalars, so encoding covers strings, booleans
and numbers. Decoding covers every value type a stored document can hold.
"""

import base64
from datetime import datetime
from typing import Any


def encode_filter_value(v: Any) -> dict:
    """Encode a scalar used as a query filter operand."""
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, str):
        return {"stringValue": v}
    raise TypeError(f"Unsupported filter value type: {type(v)}")


def _parse_timestamp(raw: str) -> datetime:
    # Firestore emits up to nanosecond precision; fromisoformat accepts at most microseconds.
    raw = raw.replace("Z", "+00:00")
    if "." in raw:
        head, rest = raw.split(".", 1)
        frac, _, offset = rest.partition("+")
        raw = f"{head}.{frac[:6].ljust(6, '0')}+{offset}" if offset else f"{head}.{frac[:6]}"
    return datetime.fromisoformat(raw)


def _decode_value(obj: dict) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return float(obj["doubleValue"])
    if "timestampValue" in obj:
        return _parse_timestamp(obj["timestampValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "referenceValue" in obj:
        return obj["referenceValue"]
    if "geoPointValue" in obj:
        return dict(obj["geoPointValue"])
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: _decode_value(x) for k, x in fields.items()}
    return None


def decode_fields(fields: dict | None) -> dict:
    """Convert a Firestore REST Document.fields mapping to a Python dict."""
    if not fields:
        return {}
    return {k: _decode_value(v) for k, v in fields.items()}
