"""Pytest helpers asserting on the variant of an `Outcome`.

Example:
```python
>>> import twofold as tf
>>> from twofold.testing import expect_success
>>> def check(value: int) -> None:
...     assert value == 42
>>> expect_success(tf.Success(42), check)

```
"""

from collections.abc import Callable

import pytest

from ._outcome import Error, Outcome, Success


def expect_success[S, E](outcome: Outcome[S, E], verify: Callable[[S], object]) -> None:
    """Fail the current test unless `outcome` is a `Success`, then pass its value to `verify`."""
    match outcome:
        case Success(value):
            verify(value)
        case Error(error):
            pytest.fail(f"Expected Success but got Error({error!r})")


def expect_error[S, E](outcome: Outcome[S, E], verify: Callable[[E], object]) -> None:
    """Fail the current test unless `outcome` is an `Error`, then pass its error to `verify`."""
    match outcome:
        case Error(error):
            verify(error)
        case Success(value):
            pytest.fail(f"Expected Error but got Success({value!r})")
