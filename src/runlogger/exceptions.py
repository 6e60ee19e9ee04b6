"""
runlogger exception hierarchy.

Only two conditions ever leave the library: a record that cannot be
serialized, and a failed cloud metadata lookup while building a
resource-resolving emitter. Oversized records are recovered inside the sink
and never raised.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class RunLoggerError(Exception):
    """Base exception for runlogger.

    Root of every error raised by the package, so callers can catch them in one place.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class LogSerializationError(RunLoggerError, TypeError):
    """A log record could not be encoded as JSON.

    Treated as a programming error: the library never catches it, so an
    unhandled occurrence terminates the process.
    """

    def __init__(self, *, severity: str, reason: str) -> None:
        super().__init__(
            f"could not log because of err: {reason}",
            code="LOG_SERIALIZATION_FAILED",
            details={"severity": severity, "reason": reason},
        )


class MetadataFetchError(RunLoggerError):
    """The cloud metadata server did not return a required value."""

    def __init__(self, *, path: str, reason: str) -> None:
        super().__init__(
            f"Failed to fetch metadata '{path}': {reason}",
            code="METADATA_FETCH_FAILED",
            details={"path": path, "reason": reason},
        )
