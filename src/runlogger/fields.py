"""
Structured fields attached to a log record.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

RESERVED_KEY = "message"
RENAMED_KEY = "_message_"


@dataclass(frozen=True, slots=True)
class Field:
    """A key/value pair rendered into the record's JSON payload."""

    key: str
    value: Any


FieldsLike = Union[Mapping[str, Any], Iterable[Union[Field, tuple[str, Any]]], None]


def field(key: str, value: Any) -> Field:
    """Build a Field."""
    return Field(key, value)


def normalize_fields(fields: FieldsLike) -> tuple[Field, ...]:
    """Coerce a mapping or an iterable of Field/(key, value) into a tuple of Fields."""
    if fields is None:
        return ()
    if isinstance(fields, Mapping):
        return tuple(Field(str(k), v) for k, v in fields.items())

    normalized = []
    for item in fields:
        if isinstance(item, Field):
            normalized.append(item)
        else:
            key, value = item
            normalized.append(Field(str(key), value))
    return tuple(normalized)


def build_payload(fields: Iterable[Field]) -> dict[str, Any]:
    """Collapse fields into a payload dict.

    Later duplicates win. The key ``message`` is stored as ``_message_`` so the
    record's own message is never overwritten.
    """
    payload: dict[str, Any] = {}
    for item in fields:
        key = RENAMED_KEY if item.key == RESERVED_KEY else item.key
        payload[key] = item.value
    return payload
