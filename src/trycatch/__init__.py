"""trycatch: exceptions as return values for sync and async code.

Public API:
    - try_catch(): Await a value, coroutine, Future, or thenable once
    - try_catch_sync(): Call a thunk (or wrap a value) synchronously
    - try_magic(): Recursively unwrap nested thunks and awaitables
    - ResultPair: Result usable as ``(data, error)`` or ``.data`` / ``.error``
    - as_error(): Normalize any caught value into an Exception

Example:
    data, error = await try_catch(client.get("/api/users"))
    if error is not None:
        log.warning("lookup failed: %s", error)
"""

from __future__ import annotations

import logging

from trycatch.config import Config, resolve_config
from trycatch.errors import (
    WRAPPED_VALUE_MESSAGE,
    ConfigurationError,
    InternalError,
    RecursionDepthError,
    TryCatchError,
    WrappedValueError,
    as_error,
)
from trycatch.magic import try_magic
from trycatch.resolve import try_catch, try_catch_sync
from trycatch.result import ResultPair, make_result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("trycatch")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("trycatch").addHandler(logging.NullHandler())

__all__ = [
    "WRAPPED_VALUE_MESSAGE",
    "Config",
    "ConfigurationError",
    "InternalError",
    "RecursionDepthError",
    "ResultPair",
    "TryCatchError",
    "WrappedValueError",
    "as_error",
    "make_result",
    "resolve_config",
    "try_catch",
    "try_catch_sync",
    "try_magic",
]
