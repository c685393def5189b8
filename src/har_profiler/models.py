"""Pydantic data models for har-profiler.

This module defines the API graph produced from HTTP captures, the subset of
the HAR document that the builder reads, build options, and error types.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# =============================================================================
# API Graph Models
# =============================================================================


class ParameterType(str, Enum):
    """Inferred type of a parameterized path segment."""

    UNSPECIFIED = "unspecified"
    UUID = "uuid"
    INTEGER = "integer"


class StaticSegment(BaseModel):
    """A literal path segment.

    Attributes:
        id: Segment identity
        name: Literal token (e.g. "users")
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Parameter(BaseModel):
    """A parameterized path segment.

    Attributes:
        id: Segment identity
        name: Placeholder name ("uuid", "int" or "param")
        type: Inferred parameter type
        example: First raw value observed at this position
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: ParameterType
    example: str


class PathSegment(BaseModel):
    """A node in the path graph.

    Exactly one of ``static`` and ``param`` is set.
    """

    model_config = ConfigDict(frozen=True)

    static: StaticSegment | None = None
    param: Parameter | None = None

    @model_validator(mode="after")
    def _check_single_variant(self) -> PathSegment:
        if (self.static is None) == (self.param is None):
            raise ValueError("PathSegment requires exactly one of 'static' or 'param'")
        return self

    @property
    def id(self) -> str:
        """Identity of the populated variant."""
        if self.static is not None:
            return self.static.id
        if self.param is not None:
            return self.param.id
        raise ValueError("PathSegment has no variant")

    @property
    def is_param(self) -> bool:
        return self.param is not None


class Edge(BaseModel):
    """Directed adjacency between two path segments.

    ``to_id`` appears immediately after ``from_id`` in some observed path.
    Serialized with ``from`` / ``to`` keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_id: str = Field(alias="from")
    to_id: str = Field(alias="to")


class Operation(BaseModel):
    """A distinct (HTTP method, endpoint pattern) pair.

    Attributes:
        id: Operation identity (``op::<method>::<endpoint pattern>``)
        method: HTTP method (upper case)
        path_segment_id: Identity of the terminal path segment
        status_codes: Distinct response status codes, ascending
    """

    model_config = ConfigDict(frozen=True)

    id: str
    method: str
    path_segment_id: str
    status_codes: list[int] = []


class Transition(BaseModel):
    """Two operations observed consecutively within one sequential capture."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_id: str = Field(alias="from")
    to_id: str = Field(alias="to")


class APIGraph(BaseModel):
    """Graph of the API surface exercised by one or more captures.

    All collections are in first-seen order.
    """

    model_config = ConfigDict(frozen=True)

    segments: list[PathSegment] = []
    edges: list[Edge] = []
    operations: list[Operation] = []
    transitions: list[Transition] = []

    def find_segment(self, segment_id: str) -> PathSegment | None:
        """Look up a segment by identity.

        Args:
            segment_id: Segment identity

        Returns:
            Matching segment, or None if the graph has no such segment
        """
        for segment in self.segments:
            if segment.id == segment_id:
                return segment
        return None

    def find_operation(self, method: str, endpoint: str) -> Operation | None:
        """Look up an operation by method and endpoint pattern.

        Args:
            method: HTTP method (case-insensitive)
            endpoint: Endpoint pattern (e.g. "users/{param}")

        Returns:
            Matching operation, or None
        """
        op_id = operation_id(method, endpoint)
        for operation in self.operations:
            if operation.id == op_id:
                return operation
        return None

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the graph to JSON using ``from`` / ``to`` edge keys."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def operation_id(method: str, endpoint: str) -> str:
    """Build the operation identity for a method and endpoint pattern.

    Args:
        method: HTTP method
        endpoint: Endpoint pattern

    Returns:
        Operation identity string
    """
    return f"op::{method.lower()}::{endpoint}"


# =============================================================================
# Build Input Models
# =============================================================================


class CaptureInput(BaseModel):
    """One capture in a batch build request.

    Attributes:
        content: Raw HAR JSON document
        is_sequence: Whether the entries form one ordered user session
    """

    content: str
    is_sequence: bool = False


class UrlErrorPolicy(str, Enum):
    """How the builder treats request URLs that fail to parse."""

    STRICT = "strict"  # Abort the whole build
    SKIP = "skip"  # Drop the entry and keep going


class BuildOptions(BaseModel):
    """Options for a graph build.

    Attributes:
        url_error_policy: Handling of malformed request URLs
    """

    model_config = ConfigDict(frozen=True)

    url_error_policy: UrlErrorPolicy = UrlErrorPolicy.STRICT


# =============================================================================
# HAR Document Models
# =============================================================================
# Only the fields used to build the graph are declared. Anything else in the
# capture is ignored.


class HarRequest(BaseModel):
    """Request part of a HAR entry."""

    method: str = ""
    url: str = ""


class HarResponse(BaseModel):
    """Response part of a HAR entry."""

    status: int = 0


class HarEntry(BaseModel):
    """A single request/response pair."""

    request: HarRequest = Field(default_factory=HarRequest)
    response: HarResponse = Field(default_factory=HarResponse)


class HarLog(BaseModel):
    """The ``log`` object of a HAR document."""

    entries: list[HarEntry] | None = None


class HarDocument(BaseModel):
    """A HAR document.

    A document without ``log.entries`` is valid and has no entries.
    """

    log: HarLog | None = None

    @property
    def entries(self) -> list[HarEntry]:
        if self.log is None or self.log.entries is None:
            return []
        return self.log.entries


# =============================================================================
# Errors
# =============================================================================


class ErrorCode(str, Enum):
    """Error codes for har-profiler parse errors."""

    INVALID_CAPTURE = "invalid_capture"
    INVALID_URL = "invalid_url"


class ParseError(Exception):
    """Raised when a capture document or one of its request URLs cannot be parsed.

    Always fatal to the build it occurs in. The underlying failure is chained
    as ``__cause__``.

    Attributes:
        code: Error code
        message: Human-readable error message
        details: Additional error details
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, object] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            details: Additional context (e.g., the offending URL, entry index)
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)
