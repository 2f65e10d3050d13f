"""
GraphQL request and envelope models.

This module defines the operation type accepted by the client and the mutable
envelopes threaded through the middleware and afterware chains.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypedDict, Union

from multidict import CIMultiDict


@dataclass
class GraphQLRequest:
    """A single GraphQL operation."""

    query: Optional[str] = None
    variables: Dict[str, Any] = field(default_factory=dict)
    operation_name: Optional[str] = None
    extensions: Optional[Dict[str, Any]] = None
    # Client-side only, never sent over the wire
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: Dict[str, Any] = {}

        if self.query is not None:
            result["query"] = self.query
        if self.variables:
            result["variables"] = self.variables
        if self.operation_name:
            result["operationName"] = self.operation_name
        if self.extensions:
            result["extensions"] = self.extensions

        return result


Operation = Union[GraphQLRequest, Mapping[str, Any]]
OperationOrBatch = Union[Operation, Sequence[Operation]]


class FetchResult(TypedDict, total=False):
    """Decoded GraphQL response body."""

    data: Any
    errors: List[Dict[str, Any]]
    extensions: Dict[str, Any]


def is_batch(request: Any) -> bool:
    """Batches are told apart from single operations by shape alone."""
    return isinstance(request, (list, tuple))


def normalize_operation(operation: Operation) -> Dict[str, Any]:
    """Return ``operation`` as the plain dict middleware works on."""
    if isinstance(operation, GraphQLRequest):
        return operation.to_dict()
    if isinstance(operation, dict):
        return operation
    if isinstance(operation, Mapping):
        return dict(operation)
    raise TypeError(
        f"GraphQL operation must be a mapping or GraphQLRequest, got {type(operation).__name__}"
    )


def normalize_request(request: OperationOrBatch) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    """Normalize a single operation or a batch of operations."""
    if is_batch(request):
        return [normalize_operation(op) for op in request]  # type: ignore[union-attr]
    return normalize_operation(request)  # type: ignore[arg-type]


@dataclass
class RequestAndOptions:
    """
    Envelope passed through the middleware chain.

    ``request`` is one operation dict or a list of them; ``options`` holds
    transport settings such as ``headers`` and ``method``. Middleware edits
    both in place.
    """

    request: Union[Dict[str, Any], List[Dict[str, Any]]]
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ParsedResponse:
    """
    Transport response metadata plus the body text and its JSON decoding.

    Attributes:
        status: HTTP status code
        status_text: HTTP reason phrase
        headers: Response headers, case-insensitive and keeping repeated names
        url: Final URL of the response
        raw: Response body as text
        parsed: Decoded JSON body, None when decoding failed
        original: The response object returned by the transport
    """

    status: int
    status_text: str = ""
    headers: "CIMultiDict[str]" = field(default_factory=CIMultiDict)
    url: Optional[str] = None
    raw: str = ""
    parsed: Any = None
    original: Any = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        """Check if the status is in the 2xx range."""
        return 200 <= self.status < 300

    @classmethod
    def from_transport(cls, response: Any, raw: str) -> "ParsedResponse":
        """Copy metadata off a transport response."""
        status_text = getattr(response, "status_text", None)
        if status_text is None:
            status_text = getattr(response, "reason", None) or ""

        headers = getattr(response, "headers", None) or {}
        items = headers.items() if hasattr(headers, "items") else headers
        url = getattr(response, "url", None)

        return cls(
            status=int(getattr(response, "status", 0) or 0),
            status_text=str(status_text),
            headers=CIMultiDict((str(k), str(v)) for k, v in items),
            url=str(url) if url is not None else None,
            raw=raw,
            original=response,
        )


@dataclass
class ResponseAndOptions:
    """Envelope passed through the afterware chain."""

    response: ParsedResponse
    options: Dict[str, Any] = field(default_factory=dict)
