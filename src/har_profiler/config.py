"""Configuration utilities.

Provides environment-based configuration for graph builds and logging.
"""

import logging
import os

from har_profiler.models import BuildOptions, UrlErrorPolicy

logger = logging.getLogger(__name__)

# Environment variable names
URL_ERROR_POLICY_ENV_VAR = "HAR_PROFILER_URL_ERROR_POLICY"
LOG_LEVEL_ENV_VAR = "HAR_PROFILER_LOG_LEVEL"


def get_url_error_policy() -> UrlErrorPolicy:
    """Get the URL error policy from HAR_PROFILER_URL_ERROR_POLICY.

    Default: strict (a malformed request URL aborts the build)
    Set HAR_PROFILER_URL_ERROR_POLICY=skip to drop malformed entries instead.

    Returns:
        Configured UrlErrorPolicy
    """
    raw = os.environ.get(URL_ERROR_POLICY_ENV_VAR, UrlErrorPolicy.STRICT.value).strip().lower()
    try:
        return UrlErrorPolicy(raw)
    except ValueError:
        logger.warning("Unknown %s value %r, using 'strict'", URL_ERROR_POLICY_ENV_VAR, raw)
        return UrlErrorPolicy.STRICT


def get_log_level() -> int:
    """Get the logging level from HAR_PROFILER_LOG_LEVEL.

    Accepts standard level names (DEBUG, INFO, WARNING, ...). Default: INFO.

    Returns:
        Logging level as an int
    """
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_build_options() -> BuildOptions:
    """Build options resolved from the environment."""
    return BuildOptions(url_error_policy=get_url_error_policy())
