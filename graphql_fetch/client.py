"""
GraphQL fetch client.

This module provides the request pipeline: middleware, option construction,
transport call, JSON decoding, afterware and result extraction.
"""

from __future__ import annotations

import inspect
import json
import logging
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

from .chain import AFTERWARE, MIDDLEWARE, Handler, normalize_handler, run_chain
from .config.models import FetchConfig
from .exceptions import BatchShapeError, ConfigurationError, HTTPError
from .models import (
    FetchResult,
    OperationOrBatch,
    ParsedResponse,
    RequestAndOptions,
    ResponseAndOptions,
    is_batch,
    normalize_request,
)
from .options import OptionBuilder, construct_default_options
from .transport import AiohttpTransport, Transport

logger = logging.getLogger(__name__)


def _is_present(parsed: Any) -> bool:
    """Objects and arrays always count; ``null``, ``false``, ``0`` and ``""`` do not."""
    if isinstance(parsed, (dict, list)):
        return True
    return bool(parsed)


class GraphQLFetch:
    """
    GraphQL-over-HTTP client with middleware and afterware chains.

    Middleware runs before the request is sent and may edit the operation and
    the transport options; afterware runs after the response is decoded and
    may edit or replace it. Single operations and batches (lists of
    operations) each have their own pair of handler lists.

    Examples:
        Basic query:
        ```python
        async with GraphQLFetch(uri="https://api.example.com/graphql") as client:
            result = await client({"query": "{ viewer { login } }"})
            print(result["data"])
        ```

        Adding an auth header:
        ```python
        def auth(envelope, next):
            envelope.options.setdefault("headers", {})["Authorization"] = "Bearer token"
            next()

        client.use(auth)
        ```

        Rescuing a non-JSON error response:
        ```python
        def rescue(envelope, next):
            if envelope.response.status == 401:
                envelope.response.parsed = {"data": None, "errors": [{"message": "unauthorized"}]}
            next()

        client.use_after(rescue)
        ```
    """

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        **overrides: Any,
    ) -> None:
        """
        Initialize client.

        Args:
            config: Client configuration
            **overrides: FetchConfig fields overriding ``config``

        Raises:
            ConfigurationError: If the default transport cannot reach ``uri``
        """
        if overrides:
            base = config.model_dump() if config is not None else {}
            config = FetchConfig(**{**base, **overrides})
        self.config = config or FetchConfig()

        self.uri = self.config.uri
        self._construct_options: OptionBuilder = (
            self.config.construct_options or construct_default_options
        )

        self._owns_transport = self.config.custom_fetch is None
        if self._owns_transport:
            if not urlparse(self.uri).scheme and not self.config.base_url:
                raise ConfigurationError(
                    f"Relative uri {self.uri!r} needs base_url when no custom_fetch is provided",
                    url=self.uri,
                )
            self._transport: Transport = AiohttpTransport(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                headers=self.config.headers,
                user_agent=self.config.user_agent,
            )
        else:
            self._transport = self.config.custom_fetch  # type: ignore[assignment]

        self._middlewares: List[Handler] = []
        self._afterwares: List[Handler] = []
        self._batched_middlewares: List[Handler] = []
        self._batched_afterwares: List[Handler] = []

    @property
    def transport(self) -> Transport:
        """Transport used for every request."""
        return self._transport

    def _register(self, target: List[Handler], handlers: Any, kind: str) -> "GraphQLFetch":
        # Validate everything before appending anything
        normalized = [normalize_handler(h, kind) for h in handlers]
        target.extend(normalized)
        return self

    def use(self, *middlewares: Any) -> "GraphQLFetch":
        """Register middleware for single operations."""
        return self._register(self._middlewares, middlewares, MIDDLEWARE)

    def use_after(self, *afterwares: Any) -> "GraphQLFetch":
        """Register afterware for single operations."""
        return self._register(self._afterwares, afterwares, AFTERWARE)

    def batch_use(self, *middlewares: Any) -> "GraphQLFetch":
        """Register middleware for batched operations."""
        return self._register(self._batched_middlewares, middlewares, MIDDLEWARE)

    def batch_use_after(self, *afterwares: Any) -> "GraphQLFetch":
        """Register afterware for batched operations."""
        return self._register(self._batched_afterwares, afterwares, AFTERWARE)

    async def _build_options(self, envelope: RequestAndOptions) -> Dict[str, Any]:
        options = self._construct_options(envelope.request, envelope.options)
        if inspect.isawaitable(options):
            options = await options
        return options

    async def _read_response(self, response: Any) -> ParsedResponse:
        raw = response.text()
        if inspect.isawaitable(raw):
            raw = await raw
        return ParsedResponse.from_transport(response, raw)

    async def invoke(
        self, request: OperationOrBatch
    ) -> Union[FetchResult, List[FetchResult]]:
        """
        Send one operation, or a batch of operations, and return the result.

        Args:
            request: An operation (``GraphQLRequest`` or mapping) or a list of them

        Returns:
            The decoded response body, or the list of results for a batch

        Raises:
            SerializationError: If the request cannot be encoded
            HTTPError: If the response holds no usable JSON
            BatchShapeError: If a batch is answered with a non-list
            Exception: Anything raised by a handler or the transport, unchanged
        """
        try:
            return await self._send(request)
        except Exception as e:
            logger.warning("GraphQL request to %s failed: %s", self.uri, e)
            raise

    __call__ = invoke

    async def _send(
        self, request: OperationOrBatch
    ) -> Union[FetchResult, List[FetchResult]]:
        batched = is_batch(request)
        envelope = RequestAndOptions(request=normalize_request(request), options={})

        await run_chain(
            self._batched_middlewares if batched else self._middlewares, envelope
        )

        options = await self._build_options(envelope)

        logger.debug(
            "Sending %s request to %s",
            f"batched ({len(envelope.request)})" if batched else "single",
            self.uri,
        )
        transport_response = await self._transport(self.uri, options)

        response = await self._read_response(transport_response)

        parse_error: Optional[ValueError] = None
        try:
            response.parsed = json.loads(response.raw)
        except ValueError as e:
            # Afterware still sees ``raw`` and may supply ``parsed`` itself
            parse_error = e
            logger.debug("Response from %s is not valid JSON: %s", self.uri, e)

        response_envelope = ResponseAndOptions(response=response, options=options)
        await run_chain(
            self._batched_afterwares if batched else self._afterwares,
            response_envelope,
        )

        return self._extract_result(response_envelope.response, batched, parse_error)

    def _extract_result(
        self,
        response: ParsedResponse,
        batched: bool,
        parse_error: Optional[BaseException],
    ) -> Union[FetchResult, List[FetchResult]]:
        parsed = response.parsed

        if not _is_present(parsed):
            raise HTTPError.from_response(response, parse_error)

        if batched:
            if isinstance(parsed, list):
                return parsed
            raise BatchShapeError(
                "A batched operation must be answered with a list of results",
                response=response,
            )

        if isinstance(parsed, dict):
            return dict(parsed)  # type: ignore[return-value]
        return parsed

    async def close(self) -> None:
        """Close the default transport. Custom transports are left open."""
        if self._owns_transport:
            await self._transport.close()  # type: ignore[attr-defined]

    async def __aenter__(self) -> "GraphQLFetch":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


def create_graphql_fetch(
    config: Optional[FetchConfig] = None, **overrides: Any
) -> GraphQLFetch:
    """
    Create a GraphQL fetch client.

    Args:
        config: Client configuration
        **overrides: FetchConfig fields, e.g. ``uri`` or ``custom_fetch``

    Returns:
        Configured GraphQLFetch instance
    """
    return GraphQLFetch(config, **overrides)
