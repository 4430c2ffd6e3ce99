"""
Pytest configuration and fixtures for sqlmask tests.
Provides shared fixtures for DuckDB connections and environment setup.
"""

import logging

import pytest

from sqlmask.udf import connect


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "property: mark test as property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def duckdb_connection():
    """In-memory DuckDB connection with the masking functions registered."""
    connection = connect()
    yield connection
    connection.close()


@pytest.fixture(autouse=True)
def clear_mask_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure a developer's environment does not change default mask characters."""
    monkeypatch.delenv("SQLMASK_DEFAULT_MASK_CHAR", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo setup_logging() calls made by a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
