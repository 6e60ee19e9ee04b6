"""
Bridge from standard library logging into a LogEmitter.
"""

from __future__ import annotations

import logging

from .emitter import LogEmitter
from .exceptions import LogSerializationError
from .severity import Severity
from .source import function_label

# Ascending thresholds; a level maps to the last entry it reaches
_LEVEL_MAP = (
    (logging.NOTSET, Severity.DEFAULT),
    (logging.DEBUG, Severity.DEBUG),
    (logging.INFO, Severity.INFO),
    (logging.WARNING, Severity.WARNING),
    (logging.ERROR, Severity.ERROR),
    (logging.CRITICAL, Severity.CRITICAL),
)

_STANDARD_RECORD_KEYS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def severity_for_level(levelno: int) -> Severity:
    """Map a stdlib level number to a severity (intermediate levels round down)."""
    severity = Severity.DEFAULT
    for threshold, candidate in _LEVEL_MAP:
        if levelno >= threshold:
            severity = candidate
    return severity


class EmitterHandler(logging.Handler):
    """
    Forward stdlib logging records to a LogEmitter.

    The record's own pathname/lineno/funcName become the source location, and
    attributes passed through ``extra=`` become structured fields.
    """

    def __init__(self, emitter: LogEmitter, level: int = logging.NOTSET):
        super().__init__(level)
        self.emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info:
                message = f"{message}\n{self.formatException(record.exc_info)}"
            elif record.exc_text:
                message = f"{message}\n{record.exc_text}"

            fields = {
                key: value
                for key, value in vars(record).items()
                if key not in _STANDARD_RECORD_KEYS and not key.startswith("_")
            }
            source = self.emitter.locator.from_path(
                record.pathname,
                record.lineno,
                function_label(record.pathname, record.funcName),
            )
            self.emitter.log(severity_for_level(record.levelno), message, fields=fields, source=source)
        except (RecursionError, LogSerializationError):
            raise
        except Exception:
            self.handleError(record)

    def formatException(self, exc_info) -> str:
        formatter = self.formatter or logging.Formatter()
        return formatter.formatException(exc_info)


def install_handler(emitter: LogEmitter, level: int | str = logging.INFO) -> EmitterHandler:
    """Route the root logger exclusively through ``emitter``."""
    handler = EmitterHandler(emitter)
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    return handler
