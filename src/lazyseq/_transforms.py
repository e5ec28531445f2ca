"""Free-standing lazy operations.

Each one consumes its source (adapted through `items()` when it is a concrete collection) exactly once.

Use a `Pipeline` to apply several of them in a single pass.
"""

from __future__ import annotations

import builtins
from collections.abc import Callable

import cytoolz as cz

from ._adapters import items
from ._core import IntoLazy, LazySeq


def unique[T](source: IntoLazy[T]) -> LazySeq[T]:
    """Yield each value the first time it is seen, and drop every later equal value.

    Values must be hashable.

    Args:
        source (IntoLazy[T]): The values to deduplicate.

    Returns:
        LazySeq[T]: The first occurrences, in source order.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> list(ls.unique([1, 2, 3, 2, 5]))
    [1, 2, 3, 5]
    >>> list(ls.unique(iter([1, 1, 1, 1, 2, 1, 1, 1, 1, 1])))
    [1, 2]

    ```
    """
    return cz.itertoolz.unique(items(source))


def map[T, R](source: IntoLazy[T], func: Callable[[T], R]) -> LazySeq[R]:  # noqa: A001
    """Yield `func(value)` for every value of **source**.

    Args:
        source (IntoLazy[T]): The values to transform.
        func (Callable[[T], R]): Function to apply to each value.

    Returns:
        LazySeq[R]: The transformed values.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> list(ls.map([1, 2, 3, 4], lambda x: x * x))
    [1, 4, 9, 16]
    >>> list(ls.map(ls.range(4, inclusive=True), lambda x: x * x))
    [0, 1, 4, 9, 16]

    ```
    """
    return builtins.map(func, items(source))


def filter[T](source: IntoLazy[T], predicate: Callable[[T], bool]) -> LazySeq[T]:  # noqa: A001
    """Yield the values of **source** for which **predicate** returns true.

    Args:
        source (IntoLazy[T]): The values to filter.
        predicate (Callable[[T], bool]): Function to evaluate each value.

    Returns:
        LazySeq[T]: The values satisfying the predicate.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> list(ls.filter({"a": 1, "b": 2, "c": 4}, lambda x: x % 2 == 0))
    [2, 4]

    ```
    """
    return builtins.filter(predicate, items(source))
