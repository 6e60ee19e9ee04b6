import io
import logging

import pytest

from runlogger import RunLoggerSettings

CLOUD_RUN_VARS = ("K_SERVICE", "K_REVISION", "K_CONFIGURATION")


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stderr() -> io.StringIO:
    return io.StringIO()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """
    Removes Cloud Run and RUNLOG_ variables so tests start from a local environment.
    """
    for name in CLOUD_RUN_VARS:
        monkeypatch.delenv(name, raising=False)
    for name in (
        "RUNLOG_LEVEL",
        "RUNLOG_LOG_NAME",
        "RUNLOG_RESOLVE_RESOURCE",
        "RUNLOG_METADATA_URL",
        "RUNLOG_METADATA_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def make_settings():
    """Build settings from the environment only (no .env file)."""

    def _make() -> RunLoggerSettings:
        return RunLoggerSettings(_env_file=None)

    return _make


@pytest.fixture
def settings(make_settings) -> RunLoggerSettings:
    return make_settings()


@pytest.fixture
def restore_root_logger():
    """Restores root logger handlers and level after a test rewires them."""
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield root_logger
    root_logger.handlers = handlers
    root_logger.setLevel(level)
