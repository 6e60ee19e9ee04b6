"""
runlogger: structured logging for Cloud Run and Cloud Logging.

Provides one facade with two output shapes:
- structured: a single-line JSON entry per call (severity, sourceLocation, jsonPayload)
- plain: ``SEVERITY in [file:line]: message`` for local development

Design Pattern: Strategy Pattern for the sink variants.
Library: structlog for the record pipeline, orjson for serialization.
"""

import logging

from .bootstrap import from_environment, plain_logger, resolving_logger, structured_logger
from .config import RunLoggerSettings
from .emitter import LogEmitter
from .exceptions import LogSerializationError, MetadataFetchError, RunLoggerError
from .fields import Field, field
from .interceptors import EmitterHandler, install_handler
from .record import LogRecord, ResourceDescriptor, ServiceContext, SourceLocation
from .severity import Severity
from .sinks import BaseSink, ConsoleSink, StructuredSink

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BaseSink",
    "ConsoleSink",
    "EmitterHandler",
    "Field",
    "LogEmitter",
    "LogRecord",
    "LogSerializationError",
    "MetadataFetchError",
    "ResourceDescriptor",
    "RunLoggerError",
    "RunLoggerSettings",
    "ServiceContext",
    "Severity",
    "SourceLocation",
    "StructuredSink",
    "field",
    "from_environment",
    "install_handler",
    "plain_logger",
    "resolving_logger",
    "structured_logger",
]
