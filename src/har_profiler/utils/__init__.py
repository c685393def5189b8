"""Utility modules for har-profiler."""

from har_profiler.utils.logging import get_logger, setup_logging

__all__ = ["setup_logging", "get_logger"]
