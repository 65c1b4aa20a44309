from ._config import Config, get_config, set_config
from ._depreciation import deprecated
from ._format import payload_repr
from ._main import Pipeable

__all__ = [
    "Config",
    "Pipeable",
    "deprecated",
    "get_config",
    "payload_repr",
    "set_config",
]
