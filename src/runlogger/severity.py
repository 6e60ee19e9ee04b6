"""
Log severity levels.

Mirrors the LogSeverity enumeration of Google Cloud Logging:
https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry#LogSeverity
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Severity(str, Enum):
    DEFAULT = "DEFAULT"  # No assigned severity level
    DEBUG = "DEBUG"  # Debug or trace information
    INFO = "INFO"  # Routine information, such as ongoing status
    NOTICE = "NOTICE"  # Normal but significant events (start up, shut down)
    WARNING = "WARNING"  # Events that might cause problems
    ERROR = "ERROR"  # Events likely to cause problems
    CRITICAL = "CRITICAL"  # Events that cause severe problems or outages
    ALERT = "ALERT"  # A person must take an action immediately
    EMERGENCY = "EMERGENCY"  # One or more systems are unusable

    @property
    def code(self) -> int:
        """Numeric Cloud Logging code (0, 100, ..., 800)."""
        return _CODES[self]

    @property
    def is_error(self) -> bool:
        """Error-class severities are reported to Error Reporting and go to stderr."""
        return self in ERROR_SEVERITIES

    def stream(self, stdout: TextIO | None = None, stderr: TextIO | None = None) -> TextIO:
        """Pick the output stream for this severity."""
        if self.is_error:
            return stderr if stderr is not None else sys.stderr
        return stdout if stdout is not None else sys.stdout

    @classmethod
    def parse(cls, value: str | Severity) -> Severity:
        """Parse a case-insensitive severity name."""
        if isinstance(value, Severity):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown severity: {value!r}") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.code < other.code

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.code <= other.code

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.code > other.code

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Severity):
            return NotImplemented
        return self.code >= other.code

    def __str__(self) -> str:
        return self.value


_CODES = {severity: index * 100 for index, severity in enumerate(Severity)}

ERROR_SEVERITIES = frozenset(
    {
        Severity.ERROR,
        Severity.CRITICAL,
        Severity.ALERT,
        Severity.EMERGENCY,
    }
)
