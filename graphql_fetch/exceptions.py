"""
Exception hierarchy for graphql_fetch.

This module provides the errors raised by the request pipeline and the helper
that maps aiohttp failures raised by the default transport onto them.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Optional

import aiohttp

if TYPE_CHECKING:
    from .models import ParsedResponse


class GraphQLFetchError(Exception):
    """
    Base exception for all graphql_fetch operations.

    Attributes:
        message: Human-readable error message
        url: Endpoint that caused the error (if applicable)
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.details = kwargs


class ConfigurationError(GraphQLFetchError):
    """Raised when a client is constructed with an unusable configuration."""

    pass


class RegistrationError(GraphQLFetchError):
    """
    Raised when a value registered as middleware or afterware is not a handler.

    Raised synchronously by the registration methods, before anything is
    appended to the handler list.
    """

    def __init__(self, message: str, handler: Any = None) -> None:
        super().__init__(message)
        self.handler = handler


class SerializationError(GraphQLFetchError):
    """
    Raised when an operation cannot be encoded as JSON.

    Always raised before the transport is called.

    Attributes:
        cause: The exception raised by the JSON encoder
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class TransportError(GraphQLFetchError):
    """
    Raised by the default transport for network-level failures.

    Covers DNS resolution failures, refused connections and other problems
    that prevent a response from being received.
    """

    pass


class TransportTimeoutError(TransportError):
    """Raised when the default transport times out."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timeout_value: Optional[float] = None,
    ) -> None:
        super().__init__(message, url)
        self.timeout_value = timeout_value


class TransportConnectionError(TransportError):
    """Raised when the default transport cannot connect to the endpoint."""

    pass


class HTTPError(GraphQLFetchError):
    """
    Raised when a response was received but holds no usable data.

    Either the status was 300 or above, or the body was not valid JSON and no
    afterware supplied a parsed value.

    Attributes:
        response: The parsed response as it left the afterware chain
        status_code: HTTP status code of the response
        raw: Response body text
        parse_error: The JSON decode error, if decoding failed
    """

    def __init__(
        self,
        message: str,
        response: Optional["ParsedResponse"] = None,
        parse_error: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, url=response.url if response is not None else None)
        self.response = response
        self.status_code = response.status if response is not None else None
        self.raw = response.raw if response is not None else None
        self.parse_error = parse_error

    @classmethod
    def from_response(
        cls,
        response: Optional["ParsedResponse"],
        parse_error: Optional[BaseException] = None,
    ) -> "HTTPError":
        """
        Build the error for a response that produced no parsed data.

        The status takes priority over the parse failure in the message.
        """
        if response is not None and response.status >= 300:
            message = (
                f"Network request failed with status {response.status} - "
                f'"{response.status_text}"'
            )
        else:
            message = "Network request failed to return valid JSON"
        return cls(message, response=response, parse_error=parse_error)


class BatchShapeError(GraphQLFetchError):
    """Raised when a batched request is answered with something other than a list."""

    def __init__(self, message: str, response: Optional["ParsedResponse"] = None) -> None:
        super().__init__(message, url=response.url if response is not None else None)
        self.response = response


class ErrorHandler:
    """Converts aiohttp exceptions raised by the default transport."""

    @staticmethod
    def handle_aiohttp_error(
        error: BaseException, url: Optional[str] = None
    ) -> TransportError:
        """
        Convert an aiohttp exception to a TransportError subclass.

        Args:
            error: The original exception
            url: The endpoint that caused the error

        Returns:
            Appropriate TransportError subclass
        """
        if isinstance(error, (asyncio.TimeoutError, aiohttp.ServerTimeoutError)):
            return TransportTimeoutError(f"Request timed out: {error}", url=url)

        elif isinstance(error, aiohttp.ClientSSLError):
            return TransportConnectionError(f"SSL error: {error}", url=url)

        elif isinstance(error, aiohttp.ClientConnectorError):
            return TransportConnectionError(f"Connector error: {error}", url=url)

        elif isinstance(error, aiohttp.ClientConnectionError):
            return TransportConnectionError(f"Connection error: {error}", url=url)

        else:
            return TransportError(f"Unexpected network error: {error}", url=url)
