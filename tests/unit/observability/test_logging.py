"""Unit tests for the structlog helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from mp_http.observability import JsonLoggerFactory, get_logger, nop_logger


@pytest.fixture()
def reset_structlog():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("svc", component="http").info("hello", n=1)
        assert logs == [{"event": "hello", "component": "http", "n": 1, "log_level": "info"}]

    def test_without_name(self) -> None:
        with capture_logs() as logs:
            get_logger().warning("w")
        assert logs[0]["log_level"] == "warning"


class TestNopLogger:
    def test_emits_nothing(self) -> None:
        log = nop_logger()
        assert log.error("boom", x=1) is None
        assert log.debug("quiet") is None

    def test_bind_keeps_dropping(self) -> None:
        assert nop_logger().bind(a=1).info("x") is None


class TestJsonLoggerFactory:
    @pytest.mark.usefixtures("reset_structlog")
    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        structlog.get_logger("json-test").info("request_completed", status=200)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "request_completed"
        assert payload["status"] == 200
        assert payload["level"] == "info"
        assert payload["logger"] == "json-test"
