"""
Log sink abstractions and concrete implementations.

A sink turns a LogRecord into text and writes it to stdout or stderr,
depending on the record's severity.
"""

from __future__ import annotations

import dataclasses
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, TextIO

from .formatters import ConsoleFormatter
from .record import LogRecord
from .serialization import encode_entry
from .severity import Severity

logger = logging.getLogger(__name__)

MAX_ENTRY_BYTES = 102400
MAX_EXCERPT_CHARS = 100000


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for log sinks.

    Args:
        stdout: Stream for non-error severities (default: sys.stdout at write time)
        stderr: Stream for error severities (default: sys.stderr at write time)
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None):
        self._stdout = stdout
        self._stderr = stderr

    @abstractmethod
    def emit(self, record: LogRecord) -> None:
        """Write a record to the sink."""
        ...

    def _write(self, severity: Severity, text: str) -> None:
        stream = severity.stream(self._stdout, self._stderr)
        stream.write(text + "\n")
        stream.flush()

    def _use_color(self, severity: Severity) -> bool:
        stream = severity.stream(self._stdout, self._stderr)
        return bool(getattr(stream, "isatty", lambda: False)())


class ConsoleSink(BaseSink):
    """Human-readable sink, used when no structured log ingestion is available."""

    def emit(self, record: LogRecord) -> None:
        use_color = self._use_color(record.severity)
        self._write(record.severity, ConsoleFormatter.format(record, use_color=use_color))


class StructuredSink(BaseSink):
    """Single-line JSON sink for Cloud Logging ingestion.

    Entries whose encoded size reaches ``MAX_ENTRY_BYTES`` are replaced by an
    ERROR entry carrying an excerpt of the oversized JSON.
    """

    def emit(self, record: LogRecord) -> None:
        self._emit(record, MAX_EXCERPT_CHARS)

    def _emit(self, record: LogRecord, excerpt_chars: int) -> None:
        encoded = encode_entry(record.to_entry())
        if len(encoded) < MAX_ENTRY_BYTES:
            self._write(record.severity, encoded.decode())
            return

        logger.debug("Log entry of %d bytes exceeds %d bytes, emitting excerpt", len(encoded), MAX_ENTRY_BYTES)
        # Each nested substitution halves the excerpt, so this always terminates
        self._emit(self._oversize_notice(record, encoded, excerpt_chars), excerpt_chars // 2)

    @staticmethod
    def _oversize_notice(record: LogRecord, encoded: bytes, excerpt_chars: int) -> LogRecord:
        excerpt = encoded.decode()[:excerpt_chars]
        return dataclasses.replace(
            record,
            severity=Severity.ERROR,
            message=f"log entry exceeded max size of {MAX_ENTRY_BYTES} bytes: {excerpt}",
            timestamp=datetime.now(timezone.utc),
            payload={},
        )


def make_sink(structured: bool, **kwargs: Any) -> BaseSink:
    """Pick the sink variant."""
    if structured:
        return StructuredSink(**kwargs)
    return ConsoleSink(**kwargs)
