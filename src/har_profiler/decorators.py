"""Decorators for MCP tool handlers.

Provides common error handling for tools that build graphs from captures.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec

from har_profiler.models import ParseError

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def handle_parse_error(
    func: Callable[P, Awaitable[str]],
) -> Callable[P, Awaitable[str]]:
    """Decorator to catch and format ParseError exceptions.

    If ParseError is raised, it is logged with its traceback and returned to
    the caller as an error message. Other exceptions are propagated.

    Usage:
        @handle_parse_error
        async def my_handler(content: str) -> str:
            graph = build_api_graph(content)
            return graph.to_json()

    Args:
        func: The async function to wrap.

    Returns:
        Wrapped function that catches ParseError exceptions.
    """

    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> str:
        try:
            return await func(*args, **kwargs)
        except ParseError as e:
            logger.error(
                "ParseError in %s: code=%s, message=%s",
                func.__name__,
                e.code.value,
                e.message,
                exc_info=True,
            )
            return f"Error [{e.code.value}]: {e.message}"

    return wrapper
