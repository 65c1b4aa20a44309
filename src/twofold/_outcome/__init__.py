from ._async import AsyncOutcome
from ._outcome import Error, Outcome, OutcomeStateError, Side, Success

__all__ = [
    "AsyncOutcome",
    "Error",
    "Outcome",
    "OutcomeStateError",
    "Side",
    "Success",
]
