"""
pytest configuration for vectordash-core tests.

Each test starts from fresh settings and an unconfigured package logger.
"""

import logging

import pytest

from vectordash_core.config import (
    ENV_CONFIG_DIR,
    ENV_MAX_QUERY_DEPTH,
    ENV_SAMPLE_SIZE,
    clear_settings_cache,
)
from vectordash_core.logging_config import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """Drop env overrides and cached settings around every test."""
    for var in (ENV_CONFIG_DIR, ENV_MAX_QUERY_DEPTH, ENV_SAMPLE_SIZE):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() so caplog sees package records again."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def item_documents():
    """Four "item" documents and two "user" documents."""
    return [
        {"_type": "item", "_id": "i1", "title": "Lamp", "price": 12.5},
        {"_type": "item", "_id": "i2", "title": "Desk", "price": 120},
        {"_type": "item", "_id": "i3", "title": "Chair"},
        {"_type": "item", "_id": "i4", "title": "Shelf", "price": 45},
        {"_type": "user", "_id": "u1", "email": "a@example.com", "active": True},
        {"_type": "user", "_id": "u2", "email": "b@example.com", "active": False},
    ]
