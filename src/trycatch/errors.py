"""Exception hierarchy and failure normalization for trycatch."""

from __future__ import annotations

from typing import Final

WRAPPED_VALUE_MESSAGE: Final[str] = (
    "wrapped value because it is not an instance of Exception"
)


class TryCatchError(Exception):
    """Base exception for all trycatch errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class WrappedValueError(TryCatchError):
    """A caught value that was not an ``Exception``.

    The original value is kept, unchanged, on ``cause``. It is not chained via
    ``__cause__`` because Python only accepts exceptions there.
    """

    def __init__(self, cause: object) -> None:
        # type() never fails, unlike repr() on arbitrary user objects.
        super().__init__(
            WRAPPED_VALUE_MESSAGE,
            hint=f"The original {type(cause).__name__} value is available as .cause",
        )
        self.cause = cause


class RecursionDepthError(TryCatchError):
    """try_magic gave up after unwrapping ``max_depth`` thunks."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(
            f"thunk chain is deeper than max_depth={max_depth}",
            hint="Raise Config.max_depth or set it to None for unbounded unwrapping.",
        )
        self.max_depth = max_depth


class ConfigurationError(TryCatchError):
    """Configuration validation or resolution failed."""


class InternalError(TryCatchError):
    """A trycatch internal error (bug) or invariant violation."""


def as_error(maybe_error: object) -> Exception:
    """Return *maybe_error* if it is an ``Exception``, else wrap it.

    Use this on any caught or rejected value when a proper exception is
    required. Exceptions pass through by identity; everything else becomes a
    ``WrappedValueError`` carrying the original value as ``.cause``.
    """
    if isinstance(maybe_error, Exception):
        return maybe_error
    return WrappedValueError(maybe_error)
