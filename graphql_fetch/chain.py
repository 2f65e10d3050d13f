"""
Interceptor chain execution.

Middleware and afterware share one calling convention: ``handler(envelope,
next)``. A handler edits the envelope in place and calls ``next()`` once to
hand control to the following handler, or raises to abort the request.
Handlers may be plain functions, coroutine functions, or objects exposing
``apply_middleware`` / ``apply_afterware``.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, List, Optional, Sequence, TypeVar, Union

from .exceptions import RegistrationError

logger = logging.getLogger(__name__)

E = TypeVar("E")

Next = Callable[[], None]
Handler = Callable[[Any, Next], Union[None, Awaitable[None]]]

MIDDLEWARE = "middleware"
AFTERWARE = "afterware"

_HANDLER_METHODS = {
    MIDDLEWARE: "apply_middleware",
    AFTERWARE: "apply_afterware",
}


def normalize_handler(value: Any, kind: str = MIDDLEWARE) -> Handler:
    """
    Adapt a registered value to the ``(envelope, next)`` calling convention.

    Args:
        value: A callable, or an object exposing the method for ``kind``
        kind: Either ``"middleware"`` or ``"afterware"``

    Returns:
        A callable taking ``(envelope, next)``

    Raises:
        RegistrationError: If ``value`` offers neither form
    """
    method_name = _HANDLER_METHODS[kind]

    method = getattr(value, method_name, None)
    if callable(method):
        return method

    if callable(value):
        return value

    raise RegistrationError(
        f"{kind.capitalize()} must be a function or define {method_name}()",
        handler=value,
    )


def _describe(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__


async def run_chain(handlers: Sequence[Handler], envelope: E) -> E:
    """
    Run ``handlers`` in order over ``envelope``.

    The handler list is copied before the first handler runs, so
    registrations made while the chain is in flight only affect later
    calls. Each handler receives the same envelope object.

    Args:
        handlers: Normalized handlers in registration order
        envelope: Mutable envelope shared by every handler

    Returns:
        The envelope once the last handler has continued

    Raises:
        Exception: Whatever a handler raised, unchanged
    """
    stack: List[Handler] = list(handlers)
    if not stack:
        return envelope

    loop = asyncio.get_running_loop()

    while stack:
        handler = stack.pop(0)
        advanced: asyncio.Future[None] = loop.create_future()

        def next_handler(_advanced: asyncio.Future = advanced, _handler: Handler = handler) -> None:
            if _advanced.done():
                logger.warning("%s called next() more than once", _describe(_handler))
                return
            _advanced.set_result(None)

        logger.debug("Running %s", _describe(handler))
        result: Optional[Any] = handler(envelope, next_handler)
        if inspect.isawaitable(result):
            await result

        await advanced

    return envelope
