"""
HTTP transport adapters.

A transport is any async callable ``(uri, options) -> response`` where the
response exposes ``status``, ``reason`` (or ``status_text``), ``headers``,
``url`` and ``text()``. ``AiohttpTransport`` is the default.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Dict, Mapping, Optional, Protocol, Union
from urllib.parse import urljoin, urlparse

import aiohttp
from multidict import CIMultiDictProxy

from .exceptions import ErrorHandler

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "graphql-fetch/1.0"


class TransportResponse(Protocol):
    """Response shape the client reads from a transport."""

    status: int
    headers: Mapping[str, str]

    def text(self) -> Union[str, Awaitable[str]]:
        ...


class Transport(Protocol):
    """Callable issuing one HTTP request."""

    def __call__(self, uri: str, options: Dict[str, Any]) -> Awaitable[Any]:
        ...


class AiohttpResponse:
    """Wraps an aiohttp response so the body is read on ``text()``."""

    def __init__(self, response: aiohttp.ClientResponse) -> None:
        self._response = response

    @property
    def status(self) -> int:
        return self._response.status

    @property
    def reason(self) -> str:
        return self._response.reason or ""

    @property
    def headers(self) -> "CIMultiDictProxy[str]":
        return self._response.headers

    @property
    def url(self) -> str:
        return str(self._response.url)

    async def text(self) -> str:
        """Read the body and release the connection."""
        try:
            # Undecodable bytes are replaced so error pages still reach afterware
            return await self._response.text(errors="replace")
        finally:
            self._response.release()


class AiohttpTransport:
    """
    Default transport backed by an ``aiohttp.ClientSession``.

    The session is created on first use and closed by ``close()``. aiohttp
    failures are raised as ``TransportError`` subclasses.

    Examples:
        ```python
        async with AiohttpTransport(base_url="https://api.example.com") as transport:
            response = await transport("/graphql", {"method": "POST", "body": "{}"})
            text = await response.text()
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        """
        Initialize transport.

        Args:
            base_url: Base URL relative endpoints are resolved against
            timeout: Total request timeout in seconds
            headers: Headers sent with every request
            user_agent: User-Agent header value
            session: Existing session to use instead of creating one
        """
        self.base_url = base_url
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent, **(headers or {})}
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=self.headers,
                raise_for_status=False,
            )
            self._owns_session = True
            logger.debug("HTTP session created")
        return self._session

    def resolve_url(self, uri: str) -> str:
        """Resolve ``uri`` against ``base_url`` when it is relative."""
        if self.base_url and not urlparse(uri).scheme:
            return urljoin(self.base_url, uri)
        return uri

    async def __call__(self, uri: str, options: Dict[str, Any]) -> AiohttpResponse:
        session = await self._get_session()
        method = str(options.get("method", "POST")).upper()
        url = self.resolve_url(uri)

        try:
            response = await session.request(
                method,
                url,
                headers=options.get("headers"),
                data=options.get("body"),
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug("Transport error for %s: %s", url, e)
            raise ErrorHandler.handle_aiohttp_error(e, url=url) from e

        logger.debug("%s %s -> %s", method, url, response.status)
        return AiohttpResponse(response)

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "AiohttpTransport":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
