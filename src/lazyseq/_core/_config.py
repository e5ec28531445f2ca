from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final


@dataclass(slots=True)
class Config:
    """Display settings shared by all lazyseq objects.

    Only affects `__repr__` output, never evaluation.
    """

    max_ops_repr: int = 8
    """Maximum number of operations shown in a `Pipeline` repr before truncating."""

    def ops_repr(self, ops: Sequence[object]) -> str:
        shown = ".".join(repr(op) for op in ops[: self.max_ops_repr])
        suffix = "..." if len(ops) > self.max_ops_repr else ""
        return shown + suffix


_CONFIG: Final = Config()


def get_config() -> Config:
    """Return the process-wide `Config` instance.

    Fields can be mutated in place to change the display settings.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> pipe = ls.make_pipeline([1]).unique().unique().unique()
    >>> ls.get_config().max_ops_repr = 2
    >>> pipe
    Pipeline(unique().unique()...)
    >>> ls.get_config().max_ops_repr = 8

    ```
    """
    return _CONFIG
