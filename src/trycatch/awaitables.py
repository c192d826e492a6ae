"""Settling awaitables and promise-style thenables on the running loop.

``await`` only understands ``__await__``. Objects that follow the
``then(on_fulfilled, on_rejected)`` convention are adapted onto an
``asyncio.Future`` so both kinds resolve the same way.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any

logger = logging.getLogger(__name__)


class ThenableRejection(Exception):
    """Carries a thenable's rejection reason out of ``settle`` unchanged.

    The reason is never raised itself: it may not be an exception at all, and
    ``StopIteration`` can neither be set on a Future nor raised through a
    coroutine.
    """

    def __init__(self, reason: object) -> None:
        super().__init__("thenable rejected")
        self.reason = reason


def rejection_reason(exc: Exception) -> object:
    """Return the original failure behind *exc*, unwrapping ThenableRejection."""
    if isinstance(exc, ThenableRejection):
        return exc.reason
    return exc


def is_thenable(value: object) -> bool:
    """Return True for non-awaitable objects exposing a callable ``then``.

    Classes are excluded: a class defining ``then`` is a thunk, not a promise.
    """
    if isinstance(value, type) or inspect.isawaitable(value):
        return False
    return callable(getattr(value, "then", None))


def is_pending(value: object) -> bool:
    """Return True when *value* still has to be awaited or adopted."""
    return inspect.isawaitable(value) or is_thenable(value)


async def adopt_thenable(thenable: Any) -> Any:
    """Wait for the first callback *thenable* invokes and return its value.

    Raises:
        ThenableRejection: When the thenable rejects, or when ``then`` raises
            before any callback settled it.
    """
    # (fulfilled, payload); set_result accepts any payload, set_exception does not.
    fut: asyncio.Future[tuple[bool, Any]] = asyncio.get_running_loop().create_future()

    def on_fulfilled(value: object = None) -> None:
        if not fut.done():
            fut.set_result((True, value))

    def on_rejected(reason: object = None) -> None:
        if not fut.done():
            fut.set_result((False, reason))

    try:
        thenable.then(on_fulfilled, on_rejected)
    except Exception as exc:
        if not fut.done():
            fut.set_result((False, exc))
        else:
            logger.debug(
                "Ignoring %s raised by then() after it settled", type(exc).__name__
            )

    fulfilled, payload = await fut
    if not fulfilled:
        raise ThenableRejection(payload)
    return payload


async def settle(value: Any) -> Any:
    """Await *value* until it is neither awaitable nor thenable.

    Nested awaitables and thenables are flattened the way ``await`` flattens
    promises. A plain value still yields to the event loop once, so every
    call suspends at least one time.
    """
    if not is_pending(value):
        await asyncio.sleep(0)
        return value
    while is_pending(value):
        if inspect.isawaitable(value):
            value = await value
        else:
            value = await adopt_thenable(value)
    return value
