"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from aidctl.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    aid = logging.getLogger("aidctl")
    aid_level = aid.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    aid.setLevel(aid_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("aidctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("aidctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("aidctl.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "aidctl.test"
        assert "timestamp" in parsed

    def test_generator_debug_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        from aidctl.domain.generator import AidGenerator

        configure_logging(verbose=True, log_json=True)
        aid = AidGenerator().generate_goal_id("Logged goal")

        captured = capfd.readouterr()
        lines = [json.loads(line) for line in captured.err.strip().splitlines()]
        issued = [entry for entry in lines if aid in entry["event"]]
        assert issued
        assert issued[0]["level"] == "debug"
        assert issued[0]["logger"] == "aidctl.domain.generator"

    def test_quiet_mode_suppresses_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        from aidctl.domain.generator import AidGenerator

        configure_logging(verbose=False, log_json=True)
        AidGenerator().generate_goal_id("Silent goal")
        assert capfd.readouterr().err == ""

    def test_sqlalchemy_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("sqlalchemy.engine").debug("sql noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
