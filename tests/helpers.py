"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: promise-style thenables and a few
producers shared by the resolver suites.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trycatch.result import ResultPair


def check(
    actual: ResultPair[Any], expected_data: object, expected_error: object
) -> None:
    """Assert the tuple view and the record view agree with the expectation."""
    data, error = actual
    assert (data, error) == (expected_data, expected_error)
    assert isinstance(actual, tuple)
    assert len(actual) == 2
    assert actual.data is actual[0]
    assert actual.error is actual[1]
    assert actual._asdict() == {"data": expected_data, "error": expected_error}


@dataclass
class Thenable:
    """Promise-style double settled synchronously inside ``then()``.

    Fulfils with ``value`` unless ``rejects`` is set, in which case it rejects
    with ``reason``. ``value`` may itself be another thenable.
    """

    value: Any = None
    reason: Any = None
    rejects: bool = False
    then_calls: int = 0

    def then(self, on_fulfilled: Any, on_rejected: Any = None) -> None:
        self.then_calls += 1
        if self.rejects:
            on_rejected(self.reason)
        else:
            on_fulfilled(self.value)


@dataclass
class LaterThenable(Thenable):
    """Thenable that settles on a later loop iteration via ``call_soon``."""

    def then(self, on_fulfilled: Any, on_rejected: Any = None) -> None:
        self.then_calls += 1
        loop = asyncio.get_running_loop()
        if self.rejects:
            loop.call_soon(on_rejected, self.reason)
        else:
            loop.call_soon(on_fulfilled, self.value)


class NoisyThenable:
    """Fulfils twice, rejects, then raises; only the first call counts."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def then(self, on_fulfilled: Any, on_rejected: Any) -> None:
        on_fulfilled(self.value)
        on_fulfilled("second")
        on_rejected(ValueError("late"))
        raise RuntimeError("then() blew up after settling")


class BrokenThenable:
    """``then()`` raises before settling."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def then(self, on_fulfilled: Any, on_rejected: Any) -> None:
        raise self.exc


def make_nested_thenable(value: Any) -> Thenable:
    """A thenable fulfilled with another thenable (the MDN example shape)."""
    return Thenable(value=Thenable(value=value))


def make_nested_rejecting_thenable(reason: Any) -> Thenable:
    return Thenable(value=Thenable(reason=reason, rejects=True))


async def resolved(value: Any) -> Any:
    """Coroutine analogue of ``Promise.resolve(value)``."""
    await asyncio.sleep(0)
    return value


async def rejected(exc: Exception) -> Any:
    """Coroutine analogue of ``Promise.reject(exc)``."""
    await asyncio.sleep(0)
    raise exc


def raiser(exc: Exception) -> Any:
    """Return a thunk that raises *exc* when called."""

    def thunk() -> Any:
        raise exc

    return thunk
