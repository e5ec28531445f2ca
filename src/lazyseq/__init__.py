from ._adapters import is_lazy, items, range
from ._core import Config, IntoLazy, LazySeq, get_config
from ._pipeline import Pipeline, PipelineConsumedError, make_pipeline
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._transforms import filter, map, unique

__all__ = [
    "NONE",
    "Config",
    "IntoLazy",
    "LazySeq",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Pipeline",
    "PipelineConsumedError",
    "Some",
    "filter",
    "get_config",
    "is_lazy",
    "items",
    "make_pipeline",
    "map",
    "range",
    "unique",
]
