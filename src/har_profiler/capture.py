"""HAR capture parsing.

Decodes HAR JSON documents into typed entries and tokenizes request URLs
into path segments. Only ``log.entries[].request.method``,
``log.entries[].request.url`` and ``log.entries[].response.status`` are read.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote, urlsplit

from pydantic import ValidationError

from har_profiler.models import ErrorCode, HarDocument, ParseError

logger = logging.getLogger(__name__)

# ASCII control characters are never valid in a URL
_CONTROL_CHAR_PATTERN = re.compile(r"[\x00-\x1f\x7f]")

# A '%' that does not start a two-digit hex escape
_BAD_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_har(content: str) -> HarDocument:
    """Parse a HAR JSON document.

    Args:
        content: Raw HAR JSON text

    Returns:
        Parsed HarDocument (possibly without entries)

    Raises:
        ParseError: If the content is not valid JSON or does not match the HAR shape
    """
    # A JSON null document carries no entries
    if content.strip() == "null":
        logger.debug("Parsed null HAR document")
        return HarDocument()

    try:
        document = HarDocument.model_validate_json(content)
    except ValidationError as e:
        raise ParseError(
            code=ErrorCode.INVALID_CAPTURE,
            message=f"failed to parse HAR: {e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e

    logger.debug("Parsed HAR document with %d entries", len(document.entries))
    return document


def extract_path_segments(raw_url: str) -> list[str]:
    """Split the path of a URL into segments.

    The path is percent-decoded, then leading and trailing slashes are
    trimmed before splitting, so ``http://example.com/api/v1/`` yields
    ``["api", "v1"]`` and a root path yields an empty list. An encoded slash
    (``%2F``) splits like a literal one.

    Args:
        raw_url: Absolute request URL

    Returns:
        Path tokens in order

    Raises:
        ParseError: If the URL is malformed
    """
    if _CONTROL_CHAR_PATTERN.search(raw_url):
        raise ParseError(
            code=ErrorCode.INVALID_URL,
            message="invalid control character in URL",
            details={"url": raw_url},
        )
    if _BAD_ESCAPE_PATTERN.search(raw_url):
        raise ParseError(
            code=ErrorCode.INVALID_URL,
            message="invalid URL escape",
            details={"url": raw_url},
        )

    try:
        path = urlsplit(raw_url).path
    except ValueError as e:
        raise ParseError(
            code=ErrorCode.INVALID_URL,
            message=f"failed to parse URL: {e}",
            details={"url": raw_url},
        ) from e

    trimmed = unquote(path).strip("/")
    if not trimmed:
        return []
    return trimmed.split("/")
