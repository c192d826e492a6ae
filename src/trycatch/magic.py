"""Recursive resolver that unwraps nested thunks and awaitables.

Tries harder than ``try_catch`` to fully resolve its input and to unify sync
and async producers:

    data, error = await try_magic(lambda: lambda: fetch_user(user_id))

Each level is settled (awaited or adopted), then invoked again while the
result is callable. Results produced here carry a private tag so feeding one
back in returns it unchanged instead of wrapping it a second time.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from trycatch.awaitables import rejection_reason, settle
from trycatch.config import Config
from trycatch.errors import RecursionDepthError, as_error
from trycatch.result import ResultPair, make_result

if TYPE_CHECKING:
    from trycatch.types import AwaitableLike, NestableThunk

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = Config()


class _MagicResultPair(ResultPair):
    """ResultPair produced by try_magic; the type itself is the tag."""

    __slots__ = ()

    def _replace(self, **changes: Any) -> ResultPair[Any]:
        unknown = changes.keys() - set(self._fields)
        if unknown:
            raise ValueError(f"Got unexpected field names: {sorted(unknown)!r}")
        # Edited copies are no longer resolver output.
        return make_result(**{**self._asdict(), **changes})


def _magic_failure(error: object) -> ResultPair[Any]:
    logger.debug("try_magic resolved to failure: %s", type(error).__name__)
    return _MagicResultPair.failure(error)


async def try_magic[In, Out](
    value_or_thunk: AwaitableLike[In] | NestableThunk[In],
    *,
    config: Config | None = None,
) -> ResultPair[Out]:
    """Resolve *value_or_thunk* until a terminal value or failure remains.

    Args:
        value_or_thunk: A plain value, awaitable, thenable, thunk, or any
            finite nesting of those (thunk returning a coroutine returning a
            thunk, ...). A result previously returned by ``try_magic`` is
            passed through as is.
        config: Optional Config. Defaults to ``Config()``, which leaves
            unwrapping unbounded and never reads the environment. Pass
            ``resolve_config()`` to opt in to ``TRYCATCH_*`` settings.

    Returns:
        ``(data, None)`` or ``(None, error)``. A settled ``Exception`` is
        treated as a failure. Never raises an ``Exception``.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG
    current: Any = value_or_thunk
    depth = 0
    try:
        while True:
            settled = await settle(current)
            if isinstance(settled, _MagicResultPair):
                return settled
            if not callable(settled):
                break
            if cfg.max_depth is not None and depth >= cfg.max_depth:
                return _magic_failure(RecursionDepthError(cfg.max_depth))
            depth += 1
            logger.debug("try_magic invoking thunk at depth %d", depth)
            current = settled()
    except Exception as exc:
        return _magic_failure(rejection_reason(exc))

    if isinstance(settled, Exception):
        return _magic_failure(settled)
    return _MagicResultPair.success(settled)
