"""Pytest configuration and fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def original_error():
    """Error handed to handlers and must()."""
    return ValueError("original error")


@pytest.fixture
def handler_error():
    """Error returned by a rewriting handler."""
    return RuntimeError("handler error")
