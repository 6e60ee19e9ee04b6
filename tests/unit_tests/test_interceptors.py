from __future__ import annotations

import inspect
import logging

import orjson
import pytest

from runlogger import EmitterHandler, LogSerializationError, Severity, install_handler, plain_logger, structured_logger
from runlogger.interceptors import severity_for_level


@pytest.fixture
def bridged(settings, stdout, stderr):
    """A non-propagating stdlib logger routed into a structured emitter."""
    emitter = structured_logger(settings=settings, stdout=stdout, stderr=stderr)
    stdlib_logger = logging.getLogger("runlogger-tests.bridge")
    stdlib_logger.handlers = [EmitterHandler(emitter)]
    stdlib_logger.setLevel(logging.DEBUG)
    stdlib_logger.propagate = False
    yield stdlib_logger
    stdlib_logger.handlers = []


class TestSeverityForLevel:
    """Stdlib level numbers to severities"""

    @pytest.mark.parametrize(
        ("levelno", "expected"),
        [
            (logging.NOTSET, Severity.DEFAULT),
            (5, Severity.DEFAULT),
            (logging.DEBUG, Severity.DEBUG),
            (15, Severity.DEBUG),
            (logging.INFO, Severity.INFO),
            (25, Severity.INFO),
            (logging.WARNING, Severity.WARNING),
            (logging.ERROR, Severity.ERROR),
            (logging.CRITICAL, Severity.CRITICAL),
            (60, Severity.CRITICAL),
        ],
    )
    def test_mapping(self, levelno: int, expected: Severity) -> None:
        """Levels map to the highest severity they reach"""
        assert severity_for_level(levelno) is expected


class TestEmitterHandler:
    """Stdlib records forwarded to an emitter"""

    def test_message_fields_and_location(self, bridged, stdout) -> None:
        """Message, extra fields and call-site of the stdlib record"""
        line = inspect.currentframe().f_lineno + 1
        bridged.warning("hello %s", "bob", extra={"order_id": 5})

        entry = orjson.loads(stdout.getvalue())
        assert entry["severity"] == "WARNING"
        assert entry["message"] == "hello bob"
        assert entry["jsonPayload"] == {"order_id": 5}
        location = entry["logging.googleapis.com/sourceLocation"]
        assert location["file"] == "test_interceptors.py"
        assert location["line"] == str(line)
        assert location["function"] == "test_interceptors.test_message_fields_and_location"

    def test_exception_text_appended(self, bridged, stderr) -> None:
        """Tracebacks from logger.exception are appended to the message"""
        try:
            raise ValueError("bad input")
        except ValueError:
            bridged.exception("request failed")

        entry = orjson.loads(stderr.getvalue())
        assert entry["severity"] == "ERROR"
        assert entry["message"].startswith("request failed\nTraceback")
        assert "ValueError: bad input" in entry["message"]

    def test_serialization_error_propagates(self, bridged) -> None:
        """Serialization failures are not swallowed by handleError"""
        with pytest.raises(LogSerializationError):
            bridged.info("payload", extra={"handle": object()})

    def test_function_matches_direct_calls(self, bridged, stdout) -> None:
        """Direct and bridged calls from one function report the same function"""
        bridged.handlers[0].emitter.info("direct")
        bridged.info("bridged")

        direct, forwarded = (orjson.loads(line) for line in stdout.getvalue().splitlines())
        key = "logging.googleapis.com/sourceLocation"
        assert direct[key]["function"] == forwarded[key]["function"]
        assert direct[key]["function"] == "test_interceptors.test_function_matches_direct_calls"


class TestInstallHandler:
    """Root logger replacement"""

    def test_routes_root_logger(self, restore_root_logger, settings, stdout, stderr) -> None:
        """install_handler makes the emitter the only root handler"""
        emitter = plain_logger(settings=settings, stdout=stdout, stderr=stderr)
        handler = install_handler(emitter, "debug")

        assert restore_root_logger.handlers == [handler]
        assert restore_root_logger.level == logging.DEBUG

        logging.getLogger("some.library").debug("connected")
        assert stdout.getvalue().startswith("DEBUG in [test_interceptors.py:")
        assert stdout.getvalue().rstrip("\n").endswith("]: connected")
