"""Public type aliases for values accepted by the resolvers.

Example:
    ```python
    from trycatch import try_magic, types

    def load() -> types.NestableThunk[int]:
        return lambda: fetch_count()

    data, error = await try_magic(load)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol


class Thenable[T](Protocol):
    """Promise-style object settled through ``then(on_fulfilled, on_rejected)``."""

    def then(  # noqa: D102
        self,
        on_fulfilled: Callable[[T], object],
        on_rejected: Callable[[object], object],
        /,
    ) -> object: ...


type AwaitableLike[T] = T | Awaitable[T] | Thenable[T]
type Thunk[T] = Callable[[], T]
type NestableThunk[T] = Callable[[], AwaitableLike[T] | NestableThunk[T]]

__all__ = ["AwaitableLike", "NestableThunk", "Thenable", "Thunk"]
