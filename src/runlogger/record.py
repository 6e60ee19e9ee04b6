"""
Log record model and its Cloud Logging wire representation.

Wire schema: https://cloud.google.com/logging/docs/structured-logging
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .severity import Severity

ERROR_REPORT_TYPE = "type.googleapis.com/google.devtools.clouderrorreporting.v1beta1.ReportedErrorEvent"
SOURCE_LOCATION_KEY = "logging.googleapis.com/sourceLocation"
ENTRY_SOURCE_LOCATION_KEY = "sourceLocation"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    file: str
    line: int
    function: str

    def to_dict(self) -> dict[str, str]:
        # Cloud Logging expects the line number as a string (int64 format)
        return {"file": self.file, "line": str(self.line), "function": self.function}


@dataclass(frozen=True, slots=True)
class ServiceContext:
    service: str

    def to_dict(self) -> dict[str, str]:
        return {"service": self.service}


@dataclass(frozen=True, slots=True)
class ResourceDescriptor:
    """Monitored resource attached to every record of a resolving emitter."""

    log_name: str
    resource_type: str
    labels: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.resource_type, "labels": dict(self.labels)}


@dataclass(frozen=True, slots=True)
class LogRecord:
    """A single log entry, built once per call and written exactly once."""

    severity: Severity
    message: str
    timestamp: datetime
    source_location: SourceLocation
    payload: Mapping[str, Any] = field(default_factory=dict)
    service_context: Optional[ServiceContext] = None
    resource: Optional[ResourceDescriptor] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    def to_entry(self) -> dict[str, Any]:
        """Render the record as a structured log entry (insertion order is wire order)."""
        entry: dict[str, Any] = {"message": self.message}
        if self.payload:
            entry["jsonPayload"] = dict(self.payload)
        entry["severity"] = self.severity.value
        entry["timestamp"] = self.timestamp

        location_key = ENTRY_SOURCE_LOCATION_KEY if self.resource else SOURCE_LOCATION_KEY
        entry[location_key] = self.source_location.to_dict()

        if self.severity.is_error:
            entry["@type"] = ERROR_REPORT_TYPE
        if self.service_context:
            entry["serviceContext"] = self.service_context.to_dict()
        if self.resource:
            entry["logName"] = self.resource.log_name
            entry["resource"] = self.resource.to_dict()
        return entry
