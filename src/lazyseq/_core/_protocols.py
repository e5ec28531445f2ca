from collections.abc import Iterator, Mapping, Sequence

type LazySeq[T] = Iterator[T]
"""A one-shot, ordered producer of values."""
type IntoLazy[T] = Iterator[T] | Sequence[T] | Mapping[object, T]
"""Any source accepted by the public functions, adapted to a `LazySeq` at the boundary."""
