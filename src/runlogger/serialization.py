"""
JSON serialization for log entries.

Library: orjson (compact output, native datetime/dataclass/enum support).
"""

from __future__ import annotations

from typing import Any

import orjson

from .exceptions import LogSerializationError

# Non-string field keys (e.g. status-code histograms) are written as strings
_OPTIONS = orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC | orjson.OPT_NON_STR_KEYS


def encode_entry(entry: dict[str, Any]) -> bytes:
    """Encode a structured entry as a single JSON line (without newline).

    Raises:
        LogSerializationError: If any value is not JSON serializable.
    """
    try:
        return orjson.dumps(entry, option=_OPTIONS)
    except orjson.JSONEncodeError as exc:
        raise LogSerializationError(severity=str(entry.get("severity", "")), reason=str(exc)) from exc
