"""Decode Firestore REST API 'fields' values into Python values."""

import base64
from datetime import datetime
from typing import Any


def _decode_value(obj: dict) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return obj["doubleValue"]
    if "timestampValue" in obj:
        return datetime.fromisoformat(obj["timestampValue"].replace("Z", "+00:00"))
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "referenceValue" in obj:
        return obj["referenceValue"]
    if "geoPointValue" in obj:
        point = obj["geoPointValue"]
        return {
            "latitude": point.get("latitude", 0.0),
            "longitude": point.get("longitude", 0.0),
        }
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: _decode_value(x) for k, x in fields.items()}
    return None


def decode_document(document: dict | None) -> dict:
    """Convert a Firestore REST Document resource's fields to a Python dict."""
    if not document:
        return {}
    return {k: _decode_value(v) for k, v in (document.get("fields") or {}).items()}


def resource_id(document: dict) -> str:
    """Return the last path segment of a Document resource's name."""
    name = document.get("name", "")
    return name.split("/")[-1] if name else ""
