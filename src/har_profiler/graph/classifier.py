"""Path segment classification.

Decides whether a single path token is a literal (static) segment or a
parameter, and infers the parameter type.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from har_profiler.models import ParameterType

# Canonical 8-4-4-4-12 hex form
UUID_PATTERN = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")

# One or more ASCII digits, no sign, no decimal point
INTEGER_PATTERN = re.compile(r"[0-9]+")

# Marker for parameter positions in endpoint patterns and identity prefixes
PARAM_MARKER = "{param}"

_PLACEHOLDER_NAMES = {
    ParameterType.UUID: "uuid",
    ParameterType.INTEGER: "int",
    ParameterType.UNSPECIFIED: "param",
}


@dataclass(frozen=True)
class SegmentKind:
    """Classification of a path token.

    Attributes:
        is_param: True if the token is a parameter
        param_type: Inferred type for parameters, None for static tokens
    """

    is_param: bool
    param_type: ParameterType | None = None


STATIC = SegmentKind(is_param=False)


def is_uuid(token: str) -> bool:
    return UUID_PATTERN.fullmatch(token) is not None


def is_integer(token: str) -> bool:
    return INTEGER_PATTERN.fullmatch(token) is not None


def is_parameter(token: str) -> bool:
    """Check whether a token looks like a path parameter (UUID or integer)."""
    return is_uuid(token) or is_integer(token)


def guess_param_type(token: str) -> ParameterType:
    """Infer the type of a parameter token.

    Args:
        token: Path token

    Returns:
        UUID, INTEGER, or UNSPECIFIED when neither matches
    """
    if is_uuid(token):
        return ParameterType.UUID
    if is_integer(token):
        return ParameterType.INTEGER
    return ParameterType.UNSPECIFIED


def classify_segment(token: str) -> SegmentKind:
    """Classify a single path token.

    Args:
        token: Path token (contains no "/")

    Returns:
        SegmentKind describing the token
    """
    if is_parameter(token):
        return SegmentKind(is_param=True, param_type=guess_param_type(token))
    return STATIC


def param_placeholder(param_type: ParameterType) -> str:
    """Human-facing placeholder name for a parameter type."""
    return _PLACEHOLDER_NAMES[param_type]


def normalize_tokens(tokens: Sequence[str]) -> list[str]:
    """Replace every parameter token with the parameter marker."""
    return [PARAM_MARKER if is_parameter(token) else token for token in tokens]


def normalize_path(tokens: Sequence[str]) -> str:
    """Build the endpoint pattern for a list of path tokens.

    Every parameter token is replaced by ``{param}`` regardless of its type.

    Example:
        >>> normalize_path(["users", "42", "orders"])
        'users/{param}/orders'

    Args:
        tokens: Path tokens

    Returns:
        Endpoint pattern joined with "/"
    """
    return "/".join(normalize_tokens(tokens))
