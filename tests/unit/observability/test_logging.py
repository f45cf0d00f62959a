"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from kblog.config import DiagnosticsSettings
from kblog.observability.logging import Logger, LoggerFactory, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


class TestGetLogger:
    def test_returns_usable_logger(self) -> None:
        with capture_logs() as logs:
            get_logger("kblog.test").info("opened", storage="hashes")
        assert logs == [{"event": "opened", "storage": "hashes", "log_level": "info"}]

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("kblog.test", world="main").warning("slow")
        assert logs[0]["world"] == "main"

    def test_satisfies_logger_protocol(self) -> None:
        logger: Logger = get_logger()
        for method in ("debug", "info", "warning", "error", "critical"):
            assert callable(getattr(logger, method))


@pytest.mark.usefixtures("restore_logging")
class TestLoggerFactory:
    def test_configure_installs_single_handler(self) -> None:
        LoggerFactory.configure(logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        LoggerFactory.configure(logging.INFO, json=True)

        structlog.get_logger("kblog.json").info("indexed", triples=12)

        err = capsys.readouterr().err
        assert '"event": "indexed"' in err
        assert '"triples": 12' in err

    def test_from_settings(self) -> None:
        LoggerFactory.from_settings(DiagnosticsSettings(log_level="error"))
        assert logging.getLogger().level == logging.ERROR
