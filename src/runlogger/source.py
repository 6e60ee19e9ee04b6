"""
Call-site capture and path relativization.
"""

from __future__ import annotations

import inspect
import os
from types import FrameType
from typing import Optional

from .record import SourceLocation

# Frames from these modules are never reported as the call-site
_INTERNAL_MODULES = ("runlogger", "structlog", "logging", "functools")


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module.split(".")[0] in _INTERNAL_MODULES


def find_caller_frame() -> Optional[FrameType]:
    """Return the first frame outside the logging machinery, or None."""
    frame = inspect.currentframe()
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    return frame


def function_label(path: str, name: str) -> str:
    """``<file stem>.<function>``, the same form as stdlib ``module.funcName``."""
    return f"{os.path.splitext(os.path.basename(path))[0]}.{name}"


def caller_directory() -> str:
    """Directory of the calling module, with a trailing separator."""
    frame = find_caller_frame()
    if frame is None:
        return ""
    return os.path.dirname(frame.f_code.co_filename) + os.sep


class SourceLocator:
    """Captures source locations relative to a prefix fixed at construction.

    Args:
        prefix_path: Directory stripped from reported file paths. When omitted,
            the directory of the code constructing the locator is used.
    """

    def __init__(self, prefix_path: str | None = None):
        if prefix_path is None:
            prefix_path = caller_directory()
        elif prefix_path and not prefix_path.endswith(os.sep):
            prefix_path += os.sep
        self._prefix = prefix_path

    @property
    def prefix(self) -> str:
        return self._prefix

    def relative(self, path: str) -> str:
        if self._prefix and path.startswith(self._prefix):
            return path[len(self._prefix) :]
        return path

    def locate(self) -> SourceLocation:
        """Source location of the current call-site."""
        frame = find_caller_frame()
        if frame is None:
            return SourceLocation(file="<unknown>", line=0, function="<unknown>")
        code = frame.f_code
        return SourceLocation(
            file=self.relative(code.co_filename),
            line=frame.f_lineno,
            function=function_label(code.co_filename, code.co_name),
        )

    def from_path(self, path: str, line: int, function: str) -> SourceLocation:
        """Build a location from an already-known call-site (e.g. a stdlib LogRecord)."""
        return SourceLocation(file=self.relative(path), line=line, function=function)
