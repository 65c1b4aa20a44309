from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into a function that converts `Self` into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import twofold as tf
        >>> def describe(outcome: tf.Outcome[int, str]) -> str:
        ...     match outcome:
        ...         case tf.Success(value):
        ...             return f"got {value}"
        ...         case tf.Error(error):
        ...             return f"failed: {error}"
        ...     return "unreachable"
        >>> tf.Success(3).into(describe)
        'got 3'

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass the instance to a function to perform side effects without altering it.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import twofold as tf
        >>> tf.Success(2).inspect(print).map_success(lambda x: x * 10)
        Success(2)
        Success(20)

        ```
        """
        func(self, *args, **kwargs)
        return self
