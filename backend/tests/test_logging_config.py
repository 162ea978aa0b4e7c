"""Tests for setup_logging / get_logger"""
import logging

import pytest

from backend.app.core.logging_config import LOG_FORMAT, get_logger, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


def test_setup_logging_is_repeatable(restore_root_logging):
    setup_logging("INFO")
    setup_logging("DEBUG")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT
    assert root.level == logging.DEBUG


def test_uvicorn_loggers_share_root_handler(restore_root_logging):
    logging.getLogger("uvicorn.access").addHandler(logging.NullHandler())
    setup_logging()
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uv_logger = logging.getLogger(name)
        assert uv_logger.handlers == []
        assert uv_logger.propagate is True


def test_get_logger_namespaces_under_backend():
    assert get_logger("api.profile").name == "backend.api.profile"
