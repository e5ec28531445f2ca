from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from dataclasses import dataclass, field
from typing import Any, Self, cast

from ._adapters import items
from ._core import IntoLazy, LazySeq, Pipeable, get_config
from ._results import NONE, Option, Some


class PipelineConsumedError(RuntimeError): ...


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__name__", repr(func))


@dataclass(slots=True, frozen=True)
class MapOp[T, R]:
    func: Callable[[T], R]

    def __repr__(self) -> str:
        return f"map({_name(self.func)})"

    def apply(self, value: T) -> Option[R]:
        return Some(self.func(value))


@dataclass(slots=True, frozen=True)
class FilterOp[T]:
    predicate: Callable[[T], bool]

    def __repr__(self) -> str:
        return f"filter({_name(self.predicate)})"

    def apply(self, value: T) -> Option[T]:
        return Some(value) if self.predicate(value) else NONE


@dataclass(slots=True, frozen=True)
class UniqueOp[T]:
    seen: set[T] = field(default_factory=set)

    def __repr__(self) -> str:
        return "unique()"

    def apply(self, value: T) -> Option[T]:
        if value in self.seen:
            return NONE
        self.seen.add(value)
        return Some(value)


type Operation = MapOp[Any, Any] | FilterOp[Any] | UniqueOp[Any]


class Pipeline[T](Pipeable, Iterator[T]):
    """Wraps a collection or an iterator, and runs the registered operations on each of its values.

    Operations are recorded by chaining `map()`, `filter()` and `unique()`, and run in the order they were added.

    Nothing is evaluated until the first value is requested.

    Each source value then goes through the whole chain before the next one is read, so no intermediate collection is ever built.

    A `Pipeline` is itself an `Iterator`: it can be consumed only once, and can be passed anywhere an iterator is expected, including another `Pipeline`.

    Once consumption has started, adding operations raises a `PipelineConsumedError`.

    Args:
        source (IntoLazy[T]): A `Sequence`, a `Mapping` (only values are used) or an `Iterator`.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> data = [1, 2, 3, 2, 5, 5]
    >>> ls.Pipeline(data).map(lambda x: x * x).unique().into(list)
    [1, 4, 9, 25]
    >>> ls.Pipeline(data).map(lambda x: x * x).filter(lambda x: x % 2 == 0).into(list)
    [4, 4]

    ```
    """

    __slots__ = ("_ops", "_source", "_stream")

    _source: LazySeq[Any]
    _ops: list[Operation]
    _stream: Generator[T, None, None] | None

    def __init__(self, source: IntoLazy[T]) -> None:
        self._source = items(source)
        self._ops = []
        self._stream = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().ops_repr(self._ops)})"

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        if self._stream is None:
            self._stream = self._run()
        return next(self._stream)

    def _push(self, op: Operation) -> None:
        if self._stream is not None:
            msg = f"cannot add {op!r} to a pipeline which is already being consumed"
            raise PipelineConsumedError(msg)
        self._ops.append(op)

    def _apply(self, value: Any) -> Option[T]:
        current: Option[Any] = Some(value)
        for op in self._ops:
            current = op.apply(current.unwrap())
            if current.is_none():
                return NONE
        return current

    def _run(self) -> Generator[T, None, None]:
        for value in self._source:
            match self._apply(value):
                case Some(result):
                    yield result
                case _:
                    continue

    def map[R](self, func: Callable[[T], R]) -> Pipeline[R]:
        """Add a map operation: each value is replaced by `func(value)`.

        Args:
            func (Callable[[T], R]): Function to apply to each value.

        Returns:
            Pipeline[R]: The same pipeline, now yielding the transformed values.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Pipeline([1, 2, 3]).map(lambda x: x * x).into(list)
        [1, 4, 9]

        ```
        """
        self._push(MapOp(func))
        return cast("Pipeline[R]", self)

    def filter(self, predicate: Callable[[T], bool]) -> Self:
        """Add a filter operation: values for which **predicate** returns false are dropped.

        A dropped value skips all the operations registered after this one.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each value.

        Returns:
            Self: The same pipeline.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Pipeline({"user1": 1, "user2": 2, "user3": 4}).filter(lambda x: x > 1).into(list)
        [2, 4]

        ```
        """
        self._push(FilterOp(predicate))
        return self

    def unique(self) -> Self:
        """Remove duplicate values at this point of the operation chain.

        Each call keeps its own record of the values already seen, independent of any other `unique()` in the chain.

        Values reaching this operation must be hashable.

        Returns:
            Self: The same pipeline.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Pipeline([1, -1, 2, 1]).unique().map(abs).into(list)
        [1, 1, 2]
        >>> ls.Pipeline([1, -1, 2, 1]).map(abs).unique().into(list)
        [1, 2]

        ```
        """
        self._push(UniqueOp())
        return self

    def next(self) -> Option[T]:
        """Get the next value of the pipeline.

        Returns:
            Option[T]: `Some(value)`, or `NONE` once the pipeline is exhausted.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> pipe = ls.Pipeline([1, 2]).map(str)
        >>> pipe.next()
        Some(value='1')
        >>> pipe.next()
        Some(value='2')
        >>> pipe.next()
        NONE

        ```
        """
        try:
            return Some(self.__next__())
        except StopIteration:
            return NONE

    def close(self) -> None:
        """Stop the consumption early.

        Any further value request ends immediately, and no more operation can be added.

        The source is closed too when it supports it, so a generator source runs its cleanup right away.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> pipe = ls.Pipeline(ls.range(10))
        >>> pipe.next()
        Some(value=0)
        >>> pipe.close()
        >>> pipe.into(list)
        []

        ```
        """
        if self._stream is None:
            self._stream = self._run()
        self._stream.close()
        close_source = getattr(self._source, "close", None)
        if close_source is not None:
            close_source()


def make_pipeline[T](source: IntoLazy[T]) -> Pipeline[T]:
    """Create a `Pipeline` over **source**.

    Args:
        source (IntoLazy[T]): A `Sequence`, a `Mapping` (only values are used) or an `Iterator`.

    Returns:
        Pipeline[T]: A new pipeline, with no operation registered yet.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> from math import sqrt
    >>> (
    ...     ls.make_pipeline([1, 2, 3, 2, 5, 5])
    ...     .map(lambda x: x * x)
    ...     .filter(lambda x: x % 2 == 0)
    ...     .map(sqrt)
    ...     .into(list)
    ... )
    [2.0, 2.0]

    ```
    """
    return Pipeline(source)
