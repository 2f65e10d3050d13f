"""
Convenience functions for one-off GraphQL requests.

These create a short-lived client, send one request and close the client's
HTTP session before returning.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .client import GraphQLFetch
from .config.models import FetchConfig
from .models import FetchResult, GraphQLRequest


async def execute(
    uri: str,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    config: Optional[FetchConfig] = None,
) -> FetchResult:
    """
    Send a single GraphQL operation.

    Args:
        uri: Absolute GraphQL endpoint URL
        query: GraphQL document
        variables: Operation variables
        operation_name: Operation to run when the document holds several
        headers: Extra request headers
        config: Optional base configuration; ``uri`` replaces its endpoint

    Returns:
        Decoded response body

    Example:
        ```python
        result = await execute(
            "https://api.example.com/graphql",
            "query User($id: ID!) { user(id: $id) { name } }",
            variables={"id": "1"},
        )
        print(result["data"]["user"]["name"])
        ```
    """
    request = GraphQLRequest(
        query=query, variables=variables or {}, operation_name=operation_name
    )

    async with GraphQLFetch(config, uri=uri) as client:
        if headers:
            client.use(_with_headers(headers))
        return await client(request)  # type: ignore[return-value]


async def execute_batch(
    uri: str,
    requests: List[GraphQLRequest],
    headers: Optional[Dict[str, str]] = None,
    config: Optional[FetchConfig] = None,
) -> List[FetchResult]:
    """Send several operations as one batched request."""
    async with GraphQLFetch(config, uri=uri) as client:
        if headers:
            client.batch_use(_with_headers(headers))
        return await client(requests)  # type: ignore[return-value]


def _with_headers(headers: Dict[str, str]):
    def add_headers(envelope, next):
        envelope.options.setdefault("headers", {}).update(headers)
        next()

    return add_headers
