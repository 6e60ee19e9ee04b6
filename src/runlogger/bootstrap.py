"""
Emitter construction entry points.

Usage:
    from runlogger import from_environment

    log = from_environment()  # JSON on Cloud Run (K_SERVICE set), plain text elsewhere
    log.info("listening on port", 8080)
"""

from __future__ import annotations

from typing import Optional, TextIO

import httpx

from .config import RunLoggerSettings
from .emitter import LogEmitter
from .metadata import fetch_resource_descriptor
from .sinks import make_sink


def structured_logger(
    *,
    settings: Optional[RunLoggerSettings] = None,
    prefix_path: str | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> LogEmitter:
    """Emitter writing one Cloud Logging JSON entry per call."""
    settings = settings or RunLoggerSettings()
    return LogEmitter(
        make_sink(structured=True, stdout=stdout, stderr=stderr),
        prefix_path=prefix_path,
        level=settings.level,
        service=settings.service,
    )


def plain_logger(
    *,
    settings: Optional[RunLoggerSettings] = None,
    prefix_path: str | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> LogEmitter:
    """Emitter writing human-readable lines, for use outside Cloud Run."""
    settings = settings or RunLoggerSettings()
    return LogEmitter(
        make_sink(structured=False, stdout=stdout, stderr=stderr),
        prefix_path=prefix_path,
        level=settings.level,
    )


def resolving_logger(
    *,
    settings: Optional[RunLoggerSettings] = None,
    prefix_path: str | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    client: Optional[httpx.Client] = None,
) -> LogEmitter:
    """Structured emitter that also attaches ``logName`` and ``resource``.

    Blocks on the metadata server once.

    Raises:
        MetadataFetchError: If the project ID or region cannot be fetched
    """
    settings = settings or RunLoggerSettings()
    resource = fetch_resource_descriptor(settings, client=client)
    return LogEmitter(
        make_sink(structured=True, stdout=stdout, stderr=stderr),
        prefix_path=prefix_path,
        level=settings.level,
        service=settings.service,
        resource=resource,
    )


def from_environment(
    settings: Optional[RunLoggerSettings] = None,
    *,
    prefix_path: str | None = None,
) -> LogEmitter:
    """Structured when a service name is configured, plain otherwise."""
    settings = settings or RunLoggerSettings()
    if not settings.structured:
        return plain_logger(settings=settings, prefix_path=prefix_path)
    if settings.resolve_resource:
        return resolving_logger(settings=settings, prefix_path=prefix_path)
    return structured_logger(settings=settings, prefix_path=prefix_path)
