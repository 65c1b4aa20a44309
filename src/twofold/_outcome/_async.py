from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Generator
from inspect import isawaitable
from types import TracebackType
from typing import Any, cast

from .._core import Pipeable, get_config
from ._outcome import Error, Outcome, Success

logger = logging.getLogger(__name__)


class AsyncOutcome[S, E](Pipeable):
    """A pending computation of an `Outcome[S, E]`, with the combinators of `Outcome`.

    Each method awaits the wrapped computation, then applies its synchronous counterpart.

    This allows chaining on an async result without awaiting it at each step.

    Nothing runs until the `AsyncOutcome` (or a terminal method such as `when`) is awaited, and each stage starts only once the previous one resolved.

    Args:
        pending (Awaitable[Outcome[S, E]]): A coroutine, future, task or other `AsyncOutcome`.

    Example:
    ```python
    >>> import asyncio
    >>> import twofold as tf
    >>> async def fetch_count() -> tf.Outcome[int, str]:
    ...     return tf.Success(10)
    >>> async def main() -> tf.Outcome[int, str]:
    ...     return await tf.AsyncOutcome(fetch_count()).map_success(lambda v: v + 1)
    >>> asyncio.run(main())
    Success(11)

    ```
    """

    __slots__ = ("_pending",)

    def __init__(self, pending: Awaitable[Outcome[S, E]]) -> None:
        self._pending = pending

    def __await__(self) -> Generator[Any, None, Outcome[S, E]]:
        return self._pending.__await__()

    def __repr__(self) -> str:
        return f"AsyncOutcome({self._pending!r})"

    def _then[T, F](
        self, step: Callable[[Outcome[S, E]], Outcome[T, F]]
    ) -> AsyncOutcome[T, F]:
        async def _run() -> Outcome[T, F]:
            return step(await self._pending)

        return AsyncOutcome(_run())

    async def resolve(self) -> Outcome[S, E]:
        """Await the wrapped computation, as a coroutine.

        Useful where a coroutine is required, such as `asyncio.run` or `asyncio.create_task`.
        """
        return await self._pending

    # construction

    @classmethod
    def of(cls, outcome: Outcome[S, E]) -> AsyncOutcome[S, E]:
        """Lift an already known `outcome`."""

        async def _resolved() -> Outcome[S, E]:
            return outcome

        return cls(_resolved())

    @classmethod
    def success(cls, value: S) -> AsyncOutcome[S, E]:
        """A pending outcome resolving to `Success(value)`."""
        return cls.of(Success(value))

    @classmethod
    def error(cls, err: E) -> AsyncOutcome[S, E]:
        """A pending outcome resolving to `Error(err)`."""
        return cls.of(Error(err))

    @staticmethod
    def from_condition[T, F](
        condition: bool,  # noqa: FBT001
        success: Callable[[], Awaitable[T]],
        error: Callable[[], Awaitable[F]],
    ) -> AsyncOutcome[T, F]:
        """Await `success()` if `condition` holds, else `error()`, and wrap the result.

        The other thunk is never called.

        Args:
            condition (bool): Selects the variant.
            success (Callable[[], Awaitable[T]]): Awaited when `condition` is true.
            error (Callable[[], Awaitable[F]]): Awaited when `condition` is false.

        Returns:
            AsyncOutcome[T, F]: The pending wrapped result.

        Example:
        ```python
        >>> import asyncio
        >>> import twofold as tf
        >>> async def fetch_user() -> str:
        ...     return "alice"
        >>> async def not_logged_in() -> str:
        ...     return "Not logged in"
        >>> async def main(logged_in: bool) -> tf.Outcome[str, str]:
        ...     return await tf.AsyncOutcome.from_condition(logged_in, fetch_user, not_logged_in)
        >>> asyncio.run(main(False))
        Error('Not logged in')

        ```
        """

        async def _run() -> Outcome[T, F]:
            if condition:
                return Success(await success())
            return Error(await error())

        return AsyncOutcome(_run())

    @staticmethod
    def try_catch[T, F](
        action: Callable[[], Awaitable[T]],
        on_error: Callable[[Exception, TracebackType | None], F],
    ) -> AsyncOutcome[T, F]:
        """Call and await `action`, converting any raised exception into an `Error`.

        Exceptions raised by the call itself, before anything is awaited, are converted too.

        `asyncio.CancelledError` is not an `Exception` and propagates to the awaiting caller.

        Args:
            action (Callable[[], Awaitable[T]]): The fallible async computation.
            on_error (Callable[[Exception, TracebackType | None], F]): Maps the exception and its traceback to an error payload.

        Returns:
            AsyncOutcome[T, F]: Resolves to `Success` with the awaited value, or `Error` with `on_error(exc, traceback)`.

        Example:
        ```python
        >>> import asyncio
        >>> import twofold as tf
        >>> async def fetch_data() -> str:
        ...     raise ConnectionError("unreachable host")
        >>> async def main() -> tf.Outcome[str, str]:
        ...     return await tf.AsyncOutcome.try_catch(fetch_data, lambda exc, _: str(exc))
        >>> asyncio.run(main())
        Error('unreachable host')

        ```
        """

        async def _run() -> Outcome[T, F]:
            try:
                value = await action()
            except Exception as exc:  # noqa: BLE001
                if get_config().log_captured_faults:
                    logger.debug(
                        "async try_catch captured %s: %s", type(exc).__name__, exc
                    )
                return Error(on_error(exc, exc.__traceback__))
            return Success(value)

        return AsyncOutcome(_run())

    # transformation

    def map_success[T](self, transform: Callable[[S], T]) -> AsyncOutcome[T, E]:
        """Async counterpart of `Outcome.map_success`."""
        return self._then(lambda outcome: outcome.map_success(transform))

    def map_error[F](self, transform: Callable[[E], F]) -> AsyncOutcome[S, F]:
        """Async counterpart of `Outcome.map_error`."""
        return self._then(lambda outcome: outcome.map_error(transform))

    def flat_map_success[T](
        self,
        transform: Callable[[S], Awaitable[Outcome[T, E]] | Outcome[T, E]],
    ) -> AsyncOutcome[T, E]:
        """Chains another step after a `Success`, awaiting it if it is async.

        If the operand resolves to an `Error`, it is propagated unchanged and `transform` is never called,
        so no coroutine is created for the skipped step.

        Args:
            transform (Callable[[S], Awaitable[Outcome[T, E]] | Outcome[T, E]]): The next step, async or not.

        Returns:
            AsyncOutcome[T, E]: The result of the next step, or the original `Error`.

        Example:
        ```python
        >>> import asyncio
        >>> import twofold as tf
        >>> async def fetch_user(token: str) -> tf.Outcome[str, str]:
        ...     return tf.Success(f"user for {token}")
        >>> async def main(token: tf.Outcome[str, str]) -> tf.Outcome[str, str]:
        ...     return await tf.AsyncOutcome.of(token).flat_map_success(fetch_user)
        >>> asyncio.run(main(tf.Success("abc")))
        Success('user for abc')
        >>> asyncio.run(main(tf.Error("expired")))
        Error('expired')

        ```
        """

        async def _run() -> Outcome[T, E]:
            outcome = await self._pending
            if outcome.is_error():
                return cast(Outcome[T, E], outcome)
            nxt = transform(outcome.success_unsafe())
            if isawaitable(nxt):
                return await nxt
            return nxt

        return AsyncOutcome(_run())

    def swap(self) -> AsyncOutcome[E, S]:
        """Async counterpart of `Outcome.swap`."""
        return self._then(lambda outcome: outcome.swap())

    # consumption

    async def when[T](
        self,
        on_success: Callable[[S], T] | None = None,
        on_error: Callable[[E], T] | None = None,
    ) -> T | None:
        """Async counterpart of `Outcome.when`.

        Example:
        ```python
        >>> import asyncio
        >>> import twofold as tf
        >>> asyncio.run(tf.AsyncOutcome.success(5).when(on_success=lambda v: v + 1))
        6
        >>> print(asyncio.run(tf.AsyncOutcome.success(5).when(on_error=lambda e: "error")))
        None

        ```
        """
        outcome = await self._pending
        return outcome.when(on_success=on_success, on_error=on_error)

    # fallback

    async def get_or_else(self, default: S) -> S:
        """Async counterpart of `Outcome.get_or_else`."""
        outcome = await self._pending
        return outcome.get_or_else(default)

    async def get_or_else_get(self, fallback: Callable[[], S]) -> S:
        """Async counterpart of `Outcome.get_or_else_get`."""
        outcome = await self._pending
        return outcome.get_or_else_get(fallback)
