"""ResultPair: a result that is both a ``(data, error)`` tuple and a record.

Unpack it positionally or read it by attribute; both views share one storage:

    data, error = try_catch_sync(parse)
    result = try_catch_sync(parse)
    if result.error is None:
        use(result.data)
"""

from __future__ import annotations

from typing import Generic, NamedTuple, TypeVar

from trycatch.errors import InternalError, as_error

T = TypeVar("T")

_BUG_HINT = "This is a bug in trycatch, not in the wrapped computation."


class ResultPair(NamedTuple, Generic[T]):
    """Outcome of a resolution: ``(data, None)`` or ``(None, error)``.

    Build instances with :func:`make_result` or the ``success`` / ``failure``
    classmethods, which enforce the data-xor-error invariant. A falsy value
    (``0``, ``""``, ``None``) is still a success as long as ``error`` is None.

    Calling ``ResultPair(data, error)`` directly is not supported: the
    NamedTuple constructor cannot be overridden and skips that check.
    """

    data: T | None
    error: Exception | None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> ResultPair[T]:
        return _validated(cls, value, None)

    @classmethod
    def failure(cls, error: object) -> ResultPair[T]:
        """Build a failed result, normalizing *error* with :func:`as_error`."""
        return _validated(cls, None, as_error(error))

    def __repr__(self) -> str:
        return f"ResultPair(data={self.data!r}, error={self.error!r})"


def _validated(
    cls: type[ResultPair[T]], data: T | None, error: Exception | None
) -> ResultPair[T]:
    if error is not None:
        if not isinstance(error, Exception):
            raise InternalError(
                "ResultPair error must be an Exception, "
                f"got {type(error).__name__}",
                hint=_BUG_HINT,
            )
        if data is not None:
            raise InternalError(
                "ResultPair must have one of data xor error", hint=_BUG_HINT
            )
    return cls(data, error)


def make_result(data: T | None = None, error: Exception | None = None) -> ResultPair[T]:
    """Construct a ResultPair, asserting that data and error are exclusive.

    Success is decided by ``error is None`` alone. Passing both slots, or a
    non-``Exception`` error, is an invariant violation and raises
    ``InternalError`` instead of producing a result.
    """
    return _validated(ResultPair, data, error)
