"""Fixtures for CLI tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def cli_isolation(isolated_env, tmp_path, monkeypatch):
    """Isolate settings and restore logging changed by the CLI callback."""
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
