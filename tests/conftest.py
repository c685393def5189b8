"""Pytest configuration and shared fixtures for har-profiler tests.

This module provides HAR document factories and common fixtures used across
unit tests.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from typing import Any

import pytest

# ============================================================================
# Test Data Factories
# ============================================================================


def create_har_entry(method: str = "GET", url: str = "http://example.com/", status: int = 200) -> dict[str, Any]:
    """Create a HAR entry.

    Args:
        method: Request method.
        url: Request URL.
        status: Response status code.

    Returns:
        A dictionary matching the HAR entry format, with extra fields a real
        browser export would carry.
    """
    return {
        "startedDateTime": "2024-01-01T00:00:00.000Z",
        "time": 12.5,
        "request": {
            "method": method,
            "url": url,
            "httpVersion": "HTTP/1.1",
            "headers": [{"name": "Accept", "value": "application/json"}],
        },
        "response": {
            "status": status,
            "statusText": "OK",
            "headers": [],
        },
    }


def create_har(*requests: tuple[str, str, int]) -> str:
    """Create a HAR JSON document.

    Args:
        requests: (method, url, status) tuples in capture order.

    Returns:
        HAR JSON text.
    """
    entries = [create_har_entry(method, url, status) for method, url, status in requests]
    return json.dumps(
        {
            "log": {
                "version": "1.2",
                "creator": {"name": "pytest", "version": "1.0"},
                "entries": entries,
            }
        }
    )


# ============================================================================
# Capture Fixtures
# ============================================================================


@pytest.fixture
def users_har() -> str:
    """Capture with a single GET on an integer-parameterized users path."""
    return create_har(("GET", "http://example.com/api/v1/users/12345", 200))


@pytest.fixture
def cart_session_har() -> str:
    """Sequential cart session: view cart, then check out."""
    return create_har(
        ("GET", "http://example.com/cart", 200),
        ("POST", "http://example.com/cart/checkout", 201),
    )


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove har-profiler environment variables for every test."""
    monkeypatch.delenv("HAR_PROFILER_URL_ERROR_POLICY", raising=False)
    monkeypatch.delenv("HAR_PROFILER_LOG_LEVEL", raising=False)


@pytest.fixture
def reset_logger() -> Generator[logging.Logger, None, None]:
    """Yield the package logger and restore its handlers afterwards."""
    logger = logging.getLogger("har_profiler")
    saved_handlers = logger.handlers[:]
    saved_level = logger.level
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
