import logging

from ._core import Config, get_config, set_config
from ._outcome import AsyncOutcome, Error, Outcome, OutcomeStateError, Side, Success

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AsyncOutcome",
    "Config",
    "Error",
    "Outcome",
    "OutcomeStateError",
    "Side",
    "Success",
    "get_config",
    "set_config",
]
