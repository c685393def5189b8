"""Secure logging configuration for har-profiler.

Provides logging setup that masks secrets carried in URL query strings.
Captured request URLs are logged when entries are skipped or rejected, and
they often contain tokens or API keys.
"""

import logging
import re


class QuerySecretMaskingFilter(logging.Filter):
    """Logging filter that masks sensitive query parameter values.

    Values of parameters such as ``token`` or ``api_key`` are replaced with
    [MASKED] to prevent credential leakage in logs.
    """

    SENSITIVE_PARAMS = (
        "access_token",
        "api_key",
        "apikey",
        "auth",
        "key",
        "password",
        "secret",
        "session",
        "sig",
        "signature",
        "token",
    )

    # Match name=VALUE after ? or & (VALUE stops at &, #, whitespace or quote)
    QUERY_PATTERN = re.compile(
        r"([?&](?:" + "|".join(SENSITIVE_PARAMS) + r")=)([^&#\s\"']+)",
        re.IGNORECASE,
    )

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter and mask secret query values in log records.

        Args:
            record: Log record to process

        Returns:
            Always True (record is always passed through, just modified)
        """
        if record.msg:
            record.msg = self._mask_query_secrets(str(record.msg))
        if isinstance(record.args, tuple) and record.args:
            new_args: list[object] = []
            for arg in record.args:
                if isinstance(arg, str):
                    new_args.append(self._mask_query_secrets(arg))
                else:
                    new_args.append(arg)
            record.args = tuple(new_args)
        return True

    def _mask_query_secrets(self, text: str) -> str:
        """Mask all sensitive query values in text.

        Args:
            text: Text potentially containing URLs

        Returns:
            Text with sensitive values replaced by [MASKED]
        """
        return self.QUERY_PATTERN.sub(lambda m: m.group(1) + "[MASKED]", text)


def setup_logging(level: int = logging.INFO, name: str | None = None) -> logging.Logger:
    """Set up logging with query secret masking.

    Args:
        level: Logging level (default: INFO)
        name: Logger name (default: "har_profiler")

    Returns:
        Configured logger instance
    """
    logger_name = name or "har_profiler"
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    handler.addFilter(QuerySecretMaskingFilter())

    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the har_profiler namespace.

    Args:
        name: Logger name suffix (e.g., "graph" for "har_profiler.graph")

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"har_profiler.{name}")
    return logging.getLogger("har_profiler")
