from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings of the library.

    Args:
        repr_max_length (int): Maximum length of a payload `repr` inside `Success(...)` / `Error(...)`.
        log_captured_faults (bool): Whether `try_catch` logs the exceptions it converts, at DEBUG level.
    """

    repr_max_length: int = 80
    log_captured_faults: bool = True


_CONFIG = Config()


def get_config() -> Config:
    """Return the current configuration.

    Example:
    ```python
    >>> import twofold as tf
    >>> tf.get_config().repr_max_length
    80

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace the current configuration with a copy holding `changes`.

    Args:
        **changes (Any): Fields of `Config` to override.

    Returns:
        Config: The new configuration.

    Raises:
        ValueError: If `repr_max_length` is not strictly positive.
        TypeError: If a name is not a field of `Config`.
    """
    global _CONFIG  # noqa: PLW0603
    new = replace(_CONFIG, **changes)
    if new.repr_max_length <= 0:
        msg = f"repr_max_length must be positive, got {new.repr_max_length}"
        raise ValueError(msg)
    _CONFIG = new
    return new
