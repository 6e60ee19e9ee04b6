"""
LogEmitter: the public logging facade.

Every call builds one LogRecord and writes it synchronously through the
emitter's sink. Three call shapes exist for each severity:

- ``info("a", "b")``: values joined by spaces
- ``infof("%s items", 3)``: %-style template substitution
- ``info_fields("saved", {"id": 7})``: message plus structured fields
"""

from __future__ import annotations

from functools import partialmethod
from typing import Any, Optional

import structlog

from .fields import FieldsLike, normalize_fields
from .processors import build_processors
from .record import ResourceDescriptor, ServiceContext, SourceLocation
from .severity import Severity
from .sinks import BaseSink, StructuredSink
from .source import SourceLocator


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError):
        return " ".join([fmt, *(str(a) for a in args)])


class LogEmitter:
    """Formats and writes log records through a sink.

    Args:
        sink: ConsoleSink (plain) or StructuredSink (JSON)
        prefix_path: Directory stripped from source file paths. Defaults to the
            directory of the module constructing the emitter.
        level: Minimum severity written
        service: Service name for the structured ``serviceContext``
        resource: Resource descriptor for entries with ``logName``/``resource``
    """

    def __init__(
        self,
        sink: BaseSink,
        *,
        prefix_path: str | None = None,
        level: Severity = Severity.DEFAULT,
        service: str | None = None,
        resource: Optional[ResourceDescriptor] = None,
    ):
        self._sink = sink
        self._locator = SourceLocator(prefix_path)
        self._level = level
        self._resource = resource
        service_context = ServiceContext(service) if service else None
        self._logger = structlog.wrap_logger(
            sink,
            processors=build_processors(
                self._locator,
                level=level,
                service_context=service_context,
                resource=resource,
            ),
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sink={type(self._sink).__name__}, level={self._level})"

    @property
    def sink(self) -> BaseSink:
        return self._sink

    @property
    def structured(self) -> bool:
        return isinstance(self._sink, StructuredSink)

    @property
    def prefix_path(self) -> str:
        return self._locator.prefix

    @property
    def level(self) -> Severity:
        return self._level

    @property
    def locator(self) -> SourceLocator:
        return self._locator

    @property
    def resource(self) -> Optional[ResourceDescriptor]:
        return self._resource

    # -------------------------------------------------------------------------
    # Call shapes
    # -------------------------------------------------------------------------

    def emit(self, severity: Severity, *values: Any) -> None:
        """Log ``values`` joined by single spaces."""
        self.log(severity, " ".join(str(v) for v in values))

    def emitf(self, severity: Severity, fmt: str, *args: Any) -> None:
        """Log ``fmt % args``; ``fmt`` is used verbatim when no args are given.

        A template that does not match its arguments never raises: the
        template and the arguments are logged space-joined instead.
        """
        self.log(severity, _render(fmt, args))

    def emit_with_fields(self, severity: Severity, message: str, fields: FieldsLike) -> None:
        """Log ``message`` with structured fields in the JSON payload."""
        self.log(severity, message, fields=fields)

    def log(
        self,
        severity: Severity,
        message: str,
        *,
        fields: FieldsLike = None,
        source: Optional[SourceLocation] = None,
    ) -> None:
        """Write one record. ``source`` overrides the captured call-site."""
        self._logger.emit(
            message,
            severity=Severity.parse(severity),
            fields=normalize_fields(fields),
            source=source,
        )

    # -------------------------------------------------------------------------
    # Per-severity shorthands
    # -------------------------------------------------------------------------

    default = partialmethod(emit, Severity.DEFAULT)
    debug = partialmethod(emit, Severity.DEBUG)
    info = partialmethod(emit, Severity.INFO)
    notice = partialmethod(emit, Severity.NOTICE)
    warning = partialmethod(emit, Severity.WARNING)
    error = partialmethod(emit, Severity.ERROR)
    critical = partialmethod(emit, Severity.CRITICAL)
    alert = partialmethod(emit, Severity.ALERT)
    emergency = partialmethod(emit, Severity.EMERGENCY)

    defaultf = partialmethod(emitf, Severity.DEFAULT)
    debugf = partialmethod(emitf, Severity.DEBUG)
    infof = partialmethod(emitf, Severity.INFO)
    noticef = partialmethod(emitf, Severity.NOTICE)
    warningf = partialmethod(emitf, Severity.WARNING)
    errorf = partialmethod(emitf, Severity.ERROR)
    criticalf = partialmethod(emitf, Severity.CRITICAL)
    alertf = partialmethod(emitf, Severity.ALERT)
    emergencyf = partialmethod(emitf, Severity.EMERGENCY)

    default_fields = partialmethod(emit_with_fields, Severity.DEFAULT)
    debug_fields = partialmethod(emit_with_fields, Severity.DEBUG)
    info_fields = partialmethod(emit_with_fields, Severity.INFO)
    notice_fields = partialmethod(emit_with_fields, Severity.NOTICE)
    warning_fields = partialmethod(emit_with_fields, Severity.WARNING)
    error_fields = partialmethod(emit_with_fields, Severity.ERROR)
    critical_fields = partialmethod(emit_with_fields, Severity.CRITICAL)
    alert_fields = partialmethod(emit_with_fields, Severity.ALERT)
    emergency_fields = partialmethod(emit_with_fields, Severity.EMERGENCY)
