from ._config import Config, get_config
from ._main import Pipeable
from ._protocols import IntoLazy, LazySeq

__all__ = [
    "Config",
    "IntoLazy",
    "LazySeq",
    "Pipeable",
    "get_config",
]
