from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from types import TracebackType
from typing import Never, TypeIs, cast, overload

from .._core import Pipeable, deprecated, get_config, payload_repr

logger = logging.getLogger(__name__)


class OutcomeStateError(RuntimeError):
    """Raised when an unsafe accessor is called on the other variant."""


class Side(Enum):
    """Which variant of an `Outcome` is active."""

    SUCCESS = "success"
    ERROR = "error"


class Outcome[S, E](ABC, Pipeable):
    """Either a successful value `S` or an error value `E`.

    `Outcome` has exactly two implementations, `Success` and `Error`.
    Instances are immutable, and every combinator returns a new `Outcome`.

    Example:
    ```python
    >>> import twofold as tf
    >>> def parse(text: str) -> tf.Outcome[int, str]:
    ...     return tf.Outcome.try_catch(lambda: int(text), lambda exc, _: "not a number")
    >>> match parse("12"):
    ...     case tf.Success(value):
    ...         print(f"Success: {value}")
    ...     case tf.Error(error):
    ...         print(f"Error: {error}")
    Success: 12

    ```
    """

    __slots__ = ()

    # construction

    @staticmethod
    def success(value: S) -> Outcome[S, E]:
        """Wrap `value` in the `Success` variant.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Outcome.success(42)
        Success(42)

        ```
        """
        return Success(value)

    @staticmethod
    def error(err: E) -> Outcome[S, E]:
        """Wrap `err` in the `Error` variant.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Outcome.error("Something went wrong")
        Error('Something went wrong')

        ```
        """
        return Error(err)

    @staticmethod
    def from_condition[T, F](
        condition: bool,  # noqa: FBT001
        success: Callable[[], T],
        error: Callable[[], F],
    ) -> Outcome[T, F]:
        """Build a `Success` from `success()` if `condition` holds, else an `Error` from `error()`.

        Only the selected thunk is called.

        Args:
            condition (bool): Selects the variant.
            success (Callable[[], T]): Called when `condition` is true.
            error (Callable[[], F]): Called when `condition` is false.

        Returns:
            Outcome[T, F]: The wrapped result of the called thunk.

        Example:
        ```python
        >>> import twofold as tf
        >>> age = 16
        >>> tf.Outcome.from_condition(age >= 18, lambda: age, lambda: "User must be at least 18")
        Error('User must be at least 18')

        ```
        """
        if condition:
            return Success(success())
        return Error(error())

    @staticmethod
    def try_catch[T, F](
        action: Callable[[], T],
        on_error: Callable[[Exception, TracebackType | None], F],
    ) -> Outcome[T, F]:
        """Call `action`, converting any raised exception into an `Error`.

        This is the boundary between exceptions and outcomes: no `Exception` raised by `action` escapes.

        Exceptions raised by `on_error` itself are not caught.

        Args:
            action (Callable[[], T]): The fallible computation.
            on_error (Callable[[Exception, TracebackType | None], F]): Maps the exception and its traceback to an error payload.

        Returns:
            Outcome[T, F]: `Success` with the return value, or `Error` with `on_error(exc, traceback)`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Outcome.try_catch(lambda: int("abc"), lambda exc, _: "Invalid number format")
        Error('Invalid number format')
        >>> tf.Outcome.try_catch(lambda: int("7"), lambda exc, _: "Invalid number format")
        Success(7)

        ```
        """
        try:
            value = action()
        except Exception as exc:  # noqa: BLE001
            if get_config().log_captured_faults:
                logger.debug("try_catch captured %s: %s", type(exc).__name__, exc)
            return Error(on_error(exc, exc.__traceback__))
        return Success(value)

    # inspection

    @abstractmethod
    def is_success(self) -> TypeIs[Success[S, E]]:  # type: ignore[misc]
        """Returns True if this is a `Success`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(1).is_success()
        True
        >>> tf.Error("x").is_success()
        False

        ```
        """
        ...

    @abstractmethod
    def is_error(self) -> TypeIs[Error[S, E]]:  # type: ignore[misc]
        """Returns True if this is an `Error`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Error("x").is_error()
        True

        ```
        """
        ...

    @abstractmethod
    def success_unsafe(self) -> S:
        """Returns the success value.

        Only call this once the variant is known, through `is_success()` or pattern matching.

        Raises:
            OutcomeStateError: If this is an `Error`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(5).success_unsafe()
        5
        >>> tf.Error("boom").success_unsafe()
        Traceback (most recent call last):
            ...
        twofold._outcome._outcome.OutcomeStateError: called `success_unsafe` on Error('boom')

        ```
        """
        ...

    @abstractmethod
    def error_unsafe(self) -> E:
        """Returns the error value.

        Raises:
            OutcomeStateError: If this is a `Success`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Error("boom").error_unsafe()
        'boom'

        ```
        """
        ...

    def success_or_none(self) -> S | None:
        """Returns the success value, or `None` for an `Error`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(3).success_or_none()
        3
        >>> print(tf.Error("x").success_or_none())
        None

        ```
        """
        return self.success_unsafe() if self.is_success() else None

    def error_or_none(self) -> E | None:
        """Returns the error value, or `None` for a `Success`."""
        return self.error_unsafe() if self.is_error() else None

    def side(self) -> Side:
        """Returns the `Side` of the active variant.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Error("x").side()
        <Side.ERROR: 'error'>

        ```
        """
        return Side.SUCCESS if self.is_success() else Side.ERROR

    # transformation

    def map_success[T](self, transform: Callable[[S], T]) -> Outcome[T, E]:
        """Applies `transform` to the success value, leaving an `Error` untouched.

        Args:
            transform (Callable[[S], T]): Function applied to the success value.

        Returns:
            Outcome[T, E]: `Success(transform(value))` if `Success`, otherwise the same `Error`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(42).map_success(lambda v: v * 2)
        Success(84)
        >>> tf.Error("x").map_success(lambda v: v * 2)
        Error('x')

        ```
        """
        if self.is_success():
            return Success(transform(self.success_unsafe()))
        return cast(Outcome[T, E], self)

    def map_error[F](self, transform: Callable[[E], F]) -> Outcome[S, F]:
        """Applies `transform` to the error value, leaving a `Success` untouched.

        Args:
            transform (Callable[[E], F]): Function applied to the error value.

        Returns:
            Outcome[S, F]: `Error(transform(error))` if `Error`, otherwise the same `Success`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Error(404).map_error(lambda code: f"Error {code}")
        Error('Error 404')

        ```
        """
        if self.is_error():
            return Error(transform(self.error_unsafe()))
        return cast(Outcome[S, F], self)

    def flat_map_success[T](
        self, transform: Callable[[S], Outcome[T, E]]
    ) -> Outcome[T, E]:
        """Chains a fallible step after a `Success`.

        `transform` is only called for a `Success`, and its result is returned as is.

        An `Error` short-circuits: it is returned unchanged and `transform` is never called.

        Args:
            transform (Callable[[S], Outcome[T, E]]): The next step.

        Returns:
            Outcome[T, E]: The result of `transform(value)`, or the original `Error`.

        Example:
        ```python
        >>> import twofold as tf
        >>> def parse(text: str) -> tf.Outcome[int, str]:
        ...     return tf.Outcome.try_catch(lambda: int(text), lambda exc, _: "bad")
        >>> tf.Success("10").flat_map_success(parse)
        Success(10)
        >>> tf.Success("ten").flat_map_success(parse)
        Error('bad')
        >>> tf.Error("missing").flat_map_success(parse)
        Error('missing')

        ```
        """
        if self.is_success():
            return transform(self.success_unsafe())
        return cast(Outcome[T, E], self)

    @abstractmethod
    def swap(self) -> Outcome[E, S]:
        """Turns a `Success` into an `Error` and vice versa, keeping the payload.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(42).swap()
        Error(42)
        >>> tf.Error("invalid").swap()
        Success('invalid')

        ```
        """
        ...

    # consumption

    @overload
    def when[T](
        self,
        on_success: Callable[[S], T],
        on_error: Callable[[E], T],
    ) -> T: ...
    @overload
    def when[T](
        self,
        on_success: Callable[[S], T] | None = None,
        on_error: Callable[[E], T] | None = None,
    ) -> T | None: ...
    def when[T](
        self,
        on_success: Callable[[S], T] | None = None,
        on_error: Callable[[E], T] | None = None,
    ) -> T | None:
        """Dispatches to the callback matching the active variant.

        Works both for side effects and for folding into a value.

        A missing callback is skipped: if the matching one was not given, `None` is returned.

        Args:
            on_success (Callable[[S], T] | None): Called with the success value.
            on_error (Callable[[E], T] | None): Called with the error value.

        Returns:
            T | None: The result of the called callback, or `None`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(3).when(on_success=lambda v: f"Got {v}", on_error=lambda e: f"Failed: {e}")
        'Got 3'
        >>> tf.Error("x").when(on_success=print) is None
        True
        >>> tf.Error("x").when(on_error=print)
        x

        ```
        """
        if self.is_success():
            return on_success(self.success_unsafe()) if on_success is not None else None
        return on_error(self.error_unsafe()) if on_error is not None else None

    def fold[T](self, on_success: Callable[[S], T], on_error: Callable[[E], T]) -> T:
        """Like `when`, with both callbacks required, so a value is always produced.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Error("timeout").fold(lambda v: v, lambda e: -1)
        -1

        ```
        """
        if self.is_success():
            return on_success(self.success_unsafe())
        return on_error(self.error_unsafe())

    def to_list(self) -> list[S | E]:
        """Returns the active payload in a one-element list.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(1).to_list()
        [1]

        ```
        """
        return [self.fold(lambda v: v, lambda e: e)]

    # fallback

    def get_or_else(self, default: S) -> S:
        """Returns the success value, or `default` for an `Error`.

        `default` is evaluated by the caller even when unused, see `get_or_else_get` for a lazy fallback.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(10).get_or_else(0)
        10
        >>> tf.Error("failed").get_or_else(0)
        0

        ```
        """
        return self.success_unsafe() if self.is_success() else default

    def get_or_else_get(self, fallback: Callable[[], S]) -> S:
        """Returns the success value, or computes it with `fallback()` for an `Error`.

        `fallback` is never called for a `Success`.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Error("network").get_or_else_get(lambda: 99)
        99

        ```
        """
        return self.success_unsafe() if self.is_success() else fallback()

    # legacy names

    @deprecated("map_success")
    def map[T](self, transform: Callable[[S], T]) -> Outcome[T, E]:
        return self.map_success(transform)

    @deprecated("map_error")
    def map_left[F](self, transform: Callable[[E], F]) -> Outcome[S, F]:
        return self.map_error(transform)

    @deprecated("flat_map_success")
    def flat_map[T](self, transform: Callable[[S], Outcome[T, E]]) -> Outcome[T, E]:
        return self.flat_map_success(transform)


@dataclass(slots=True, frozen=True)
class Success[S, E](Outcome[S, E]):
    """The successful variant, holding `value`."""

    value: S

    def __repr__(self) -> str:
        return f"Success({payload_repr(self.value)})"

    def __hash__(self) -> int:
        return hash((Success, self.value))

    def is_success(self) -> TypeIs[Success[S, E]]:  # type: ignore[misc]
        return True

    def is_error(self) -> TypeIs[Error[S, E]]:  # type: ignore[misc]
        return False

    def success_unsafe(self) -> S:
        return self.value

    def error_unsafe(self) -> Never:
        msg = f"called `error_unsafe` on {self!r}"
        raise OutcomeStateError(msg)

    def swap(self) -> Outcome[E, S]:
        return Error(self.value)


@dataclass(slots=True, frozen=True)
class Error[S, E](Outcome[S, E]):
    """The failed variant, holding `error`."""

    error: E = field()  # type: ignore[assignment]  # shadows `Outcome.error`

    def __repr__(self) -> str:
        return f"Error({payload_repr(self.error)})"

    def __hash__(self) -> int:
        return hash((Error, self.error))

    def is_success(self) -> TypeIs[Success[S, E]]:  # type: ignore[misc]
        return False

    def is_error(self) -> TypeIs[Error[S, E]]:  # type: ignore[misc]
        return True

    def success_unsafe(self) -> Never:
        msg = f"called `success_unsafe` on {self!r}"
        raise OutcomeStateError(msg)

    def error_unsafe(self) -> E:
        return self.error

    def swap(self) -> Outcome[E, S]:
        return Success(self.error)
