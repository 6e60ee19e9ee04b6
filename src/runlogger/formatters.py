"""
Plain-mode formatter and color utilities.
"""

from __future__ import annotations

from .record import LogRecord
from .serialization import encode_entry
from .severity import Severity

# =============================================================================
# ANSI Colors
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "default": "\033[37m",
    "debug": "\033[36m",
    "info": "\033[32m",
    "notice": "\033[1;32m",
    "warning": "\033[33m",
    "error": "\033[31m",
    "critical": "\033[1;31m",
    "alert": "\033[1;35m",
    "emergency": "\033[1;41m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


# =============================================================================
# Console Formatter
# =============================================================================


class ConsoleFormatter:
    """Renders a record as ``SEVERITY in [file:line]: message``.

    Attached fields follow on a second line as a JSON object.
    """

    TEMPLATE = "{severity} in [{file}:{line}]: {message}"

    @classmethod
    def _severity_text(cls, severity: Severity, use_color: bool) -> str:
        if not use_color:
            return severity.value
        return colorize(severity.value, severity.value.lower())

    @classmethod
    def format(cls, record: LogRecord, *, use_color: bool = False) -> str:
        """Format a record into one or two lines (no trailing newline)."""
        line = cls.TEMPLATE.format(
            severity=cls._severity_text(record.severity, use_color),
            file=record.source_location.file,
            line=record.source_location.line,
            message=record.message,
        )
        if not record.payload:
            return line

        fields_json = encode_entry(dict(record.payload)).decode()
        if use_color:
            fields_json = colorize(fields_json, "dim")
        return f"{line}\n{fields_json}"
