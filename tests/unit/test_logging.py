"""Tests for the vcsdriver.logging module."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import structlog

from vcsdriver.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    def test_configure_logging_default(self) -> None:
        configure_logging()
        assert structlog.get_logger() is not None

    def test_configure_logging_json_via_env(self) -> None:
        with patch.dict(os.environ, {"VCSDRIVER_LOG_FORMAT": "json"}):
            configure_logging()
        assert structlog.get_logger() is not None

    def test_configure_logging_custom_level(self) -> None:
        configure_logging(level=logging.DEBUG)
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_level_from_env(self) -> None:
        with patch.dict(os.environ, {"VCSDRIVER_LOG_LEVEL": "ERROR"}):
            configure_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_invalid_level_falls_back_to_info(self) -> None:
        with patch.dict(os.environ, {"VCSDRIVER_LOG_LEVEL": "CHATTY"}):
            configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_single_handler_after_reconfigure(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1


class TestContext:
    def test_bind_and_clear(self) -> None:
        clear_context()
        bind_context(working_dir="/srv/repos/app")
        assert structlog.contextvars.get_contextvars() == {
            "working_dir": "/srv/repos/app"
        }

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}


def test_get_logger_logs_without_error() -> None:
    configure_logging(force_json=True, level=logging.DEBUG)
    log = get_logger("vcsdriver.test")
    log.info("test_event", revision="a" * 40)
