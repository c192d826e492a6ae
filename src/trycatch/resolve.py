"""Single-level resolvers: turn raised exceptions into returned values.

Similar to Go/Rust error handling patterns:

    data, error = await try_catch(client.get("/api/users"))
    result = try_catch_sync(lambda: json.loads(payload))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from trycatch.awaitables import rejection_reason, settle
from trycatch.errors import as_error
from trycatch.result import ResultPair, make_result

if TYPE_CHECKING:
    from trycatch.types import AwaitableLike, Thunk

logger = logging.getLogger(__name__)


def _captured(exc: Exception) -> ResultPair[Any]:
    error = as_error(rejection_reason(exc))
    logger.debug("Captured %s into a failed result", type(error).__name__)
    return make_result(error=error)


async def try_catch[T](value: AwaitableLike[T]) -> ResultPair[T]:
    """Await *value* and return its outcome as a ResultPair.

    Args:
        value: A coroutine, Future, thenable, or plain value. Nested
            awaitables/thenables are flattened; callables are returned as
            data, not invoked.

    Returns:
        ``(data, None)`` on success or ``(None, error)`` when awaiting raised.
        Never raises an ``Exception``; cancellation still propagates.
    """
    try:
        data = await settle(value)
    except Exception as exc:
        return _captured(exc)
    return make_result(data)


def try_catch_sync[T](value: T | Thunk[T]) -> ResultPair[T]:
    """Call *value* if it is callable, else wrap it, capturing any exception.

    Callability is the only test: a function or class meant as a literal
    value is invoked like any other thunk. Never suspends.
    """
    try:
        data = value() if callable(value) else value
    except Exception as exc:
        return _captured(exc)
    return make_result(data)
