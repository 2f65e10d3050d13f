"""
Transport option construction.

Turns the request and the options collected by middleware into the final
keyword set handed to the transport.
"""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Dict, List, Union

from .exceptions import SerializationError

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "*/*",
    "Content-Type": "application/json",
}

RequestPayload = Union[Dict[str, Any], List[Dict[str, Any]]]
OptionBuilder = Callable[
    [RequestPayload, Dict[str, Any]],
    Union[Dict[str, Any], Awaitable[Dict[str, Any]]],
]


def serialize_request(request: RequestPayload) -> str:
    """
    Encode a request or batch as JSON text.

    Raises:
        SerializationError: If the payload cannot be encoded
    """
    try:
        return json.dumps(request)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Network request failed. Payload is not serializable: {e}", cause=e
        ) from e


def construct_default_options(
    request: RequestPayload, options: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Build JSON-body transport options.

    Values already present in ``options`` win over the defaults, and
    caller headers win over the default headers.

    Args:
        request: Operation dict or list of operation dicts
        options: Options collected by middleware

    Returns:
        New options dict with ``body``, ``method`` and ``headers``

    Raises:
        SerializationError: If the request cannot be encoded
    """
    body = serialize_request(request)

    return {
        "body": body,
        "method": "POST",
        **options,
        "headers": {
            **DEFAULT_HEADERS,
            **(options.get("headers") or {}),
        },
    }
