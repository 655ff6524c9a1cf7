"""Tests for message_center.logging."""

from __future__ import annotations

import logging

import structlog

from message_center.logging import setup_logging


class TestSetupLogging:
    def test_json_mode(self):
        setup_logging(json=True, level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_console_mode(self):
        setup_logging(json=False, level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_level_case_insensitive(self):
        setup_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_replaces_existing_handlers(self):
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())
        setup_logging()
        assert len(root.handlers) == 1

    def test_structlog_produces_output(self):
        setup_logging(json=True, level="DEBUG")
        structlog.get_logger("test_logger").info("test_event", key="value")

    def test_service_bound_into_context(self):
        setup_logging(service="mc-test")
        assert structlog.contextvars.get_contextvars()["service"] == "mc-test"

    def test_uvicorn_loggers_propagate_to_root(self):
        setup_logging()
        assert logging.getLogger("uvicorn.access").propagate is True
        assert logging.getLogger("uvicorn.access").handlers == []
