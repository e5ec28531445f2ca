from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from functools import singledispatch
from typing import Any, TypeIs

from ._core import LazySeq


def is_lazy(value: object) -> TypeIs[Iterator[Any]]:
    """Check whether **value** already is a lazy sequence.

    Lazy sequences are iterators: they can be advanced with `next()` and abandoned at any point.

    Concrete collections are not, and must go through `items()` first.

    Args:
        value (object): The candidate.

    Returns:
        TypeIs[Iterator[Any]]: `True` if **value** is an iterator.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> ls.is_lazy([1, 2, 3])
    False
    >>> ls.is_lazy(ls.range(3))
    True
    >>> ls.is_lazy(ls.make_pipeline({"a": 1}))
    True

    ```
    """
    return isinstance(value, Iterator)


def range(max: int, inclusive: bool = False) -> LazySeq[int]:  # noqa: A001, A002, FBT001, FBT002
    """Iterate from 0 up to **max**.

    Args:
        max (int): Upper bound, excluded unless **inclusive** is set.
        inclusive (bool): Whether **max** itself is yielded. Defaults to False.

    Returns:
        LazySeq[int]: The ascending integers.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> list(ls.range(4))
    [0, 1, 2, 3]
    >>> list(ls.range(4, inclusive=True))
    [0, 1, 2, 3, 4]
    >>> list(ls.range(-2))
    []

    ```
    """
    if inclusive:
        max += 1
    i = 0
    while i < max:
        yield i
        i += 1


@singledispatch
def items[T](collection: Any) -> LazySeq[T]:
    """Iterate on the values of a list-like or dict-like collection.

    - `Sequence`: values by ascending index.
    - `Mapping`: values in key enumeration order (insertion order for `dict`). Keys are not yielded.
    - `Iterator`: returned as is, it already is lazy.

    Args:
        collection (Sequence[T] | Mapping[Any, T] | Iterator[T]): The collection to iterate on.

    Returns:
        LazySeq[T]: The values of the collection.

    Raises:
        TypeError: If **collection** is none of the supported types.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> list(ls.items(["a", "b"]))
    ['a', 'b']
    >>> list(ls.items({"foo": 1, "bar": 2, "moo": 3}))
    [1, 2, 3]
    >>> ls.items({1, 2})
    Traceback (most recent call last):
        ...
    TypeError: cannot iterate on values of 'set', expected a Sequence, a Mapping or an Iterator

    ```
    """
    msg = f"cannot iterate on values of {type(collection).__name__!r}, expected a Sequence, a Mapping or an Iterator"
    raise TypeError(msg)


@items.register(Iterator)
def _(collection: Iterator[Any]) -> LazySeq[Any]:
    return collection


@items.register(Sequence)
def _(collection: Sequence[Any]) -> LazySeq[Any]:
    return (collection[idx] for idx in range(len(collection)))


@items.register(Mapping)
def _(collection: Mapping[Any, Any]) -> LazySeq[Any]:
    return (collection[key] for key in collection)
