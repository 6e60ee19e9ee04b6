"""
Structlog processors that compose a LogRecord from an emission call.

The chain ends in `RecordBuilder`, which hands the finished record to the
wrapped sink's `emit` method.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from .fields import build_payload
from .record import LogRecord, ResourceDescriptor, ServiceContext
from .severity import Severity
from .source import SourceLocator


def filter_by_severity(minimum: Severity) -> Processor:
    """Drop events below ``minimum``."""

    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        if event_dict["severity"] < minimum:
            raise structlog.DropEvent
        return event_dict

    return processor


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the emission time (UTC) to the event."""
    event_dict["timestamp"] = datetime.now(timezone.utc)
    return event_dict


class SourceLocationAdder:
    """Attach the call-site, unless the caller already supplied one."""

    def __init__(self, locator: SourceLocator):
        self._locator = locator

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        if event_dict.get("source") is None:
            event_dict["source"] = self._locator.locate()
        return event_dict


class RecordBuilder:
    """Freeze the event into a LogRecord and pass it on as the sink's argument."""

    def __init__(
        self,
        service_context: Optional[ServiceContext] = None,
        resource: Optional[ResourceDescriptor] = None,
    ):
        self._service_context = service_context
        self._resource = resource

    def __call__(
        self, logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> tuple[tuple[Any, ...], dict[str, Any]]:
        record = LogRecord(
            severity=event_dict["severity"],
            message=event_dict["event"],
            timestamp=event_dict["timestamp"],
            source_location=event_dict["source"],
            payload=build_payload(event_dict.get("fields", ())),
            service_context=self._service_context,
            resource=self._resource,
        )
        return (record,), {}


def build_processors(
    locator: SourceLocator,
    *,
    level: Severity = Severity.DEFAULT,
    service_context: Optional[ServiceContext] = None,
    resource: Optional[ResourceDescriptor] = None,
) -> list[Processor]:
    processors: list[Processor] = []
    if level > Severity.DEFAULT:
        processors.append(filter_by_severity(level))
    processors += [
        add_timestamp,
        SourceLocationAdder(locator),
        RecordBuilder(service_context, resource),
    ]
    return processors
