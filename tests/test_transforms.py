"""Tests for the free-standing unique, map and filter functions."""

import pytest

import lazyseq as ls


def _square(x: int) -> int:
    return x * x


def _dup_gen():  # noqa: ANN202
    yield from [1, 1, 1, 1, 2, 1, 1, 1, 1, 1]


def test_unique_on_list() -> None:
    """Test that duplicates are dropped, keeping first occurrences."""
    assert list(ls.unique([1, 2, 3, 2, 5])) == [1, 2, 3, 5]


def test_unique_on_generator() -> None:
    """Test unique on a one-shot generator."""
    assert list(ls.unique(_dup_gen())) == [1, 2]


def test_unique_on_dict() -> None:
    """Test that unique works on the values of a mapping."""
    assert list(ls.unique({"a": 1, "b": 1, "c": 2})) == [1, 2]


def test_unique_calls_do_not_share_state() -> None:
    """Test that each call keeps its own record of seen values."""
    first = ls.unique([1, 2])
    second = ls.unique([2, 1])
    assert list(first) == [1, 2]
    assert list(second) == [2, 1]


def test_map_on_list() -> None:
    """Test that map preserves length and order."""
    assert list(ls.map([1, 2, 3, 4], _square)) == [1, 4, 9, 16]


def test_map_on_generator() -> None:
    """Test map on a range."""
    assert list(ls.map(ls.range(4, inclusive=True), _square)) == [0, 1, 4, 9, 16]


def test_filter_keeps_order() -> None:
    """Test that filter drops exactly the rejected values."""
    data = [5, 2, 8, 1, 4]
    assert list(ls.filter(data, lambda x: x > 3)) == [5, 8, 4]


def test_filter_on_generator() -> None:
    """Test that filter consumes a generator source once."""
    assert list(ls.filter(ls.range(10), lambda x: x % 3 == 0)) == [0, 3, 6, 9]


def test_transforms_are_lazy() -> None:
    """Test that callbacks only run when values are requested."""
    calls: list[int] = []

    def _track(x: int) -> int:
        calls.append(x)
        return x

    mapped = ls.map([1, 2, 3], _track)
    assert calls == []
    assert next(mapped) == 1
    assert calls == [1]


def test_transforms_compose() -> None:
    """Test that the output of one function feeds another."""
    squares = ls.map([1, 2, 3, 2, 5, 5], _square)
    assert list(ls.filter(ls.unique(squares), lambda x: x > 1)) == [4, 9, 25]


def test_callback_errors_propagate() -> None:
    """Test that an exception in a callback stops the iteration."""

    def _boom(x: int) -> int:
        if x == 2:
            raise ValueError(x)
        return x

    it = ls.map([1, 2, 3], _boom)
    assert next(it) == 1
    with pytest.raises(ValueError, match="2"):
        next(it)


def test_transforms_reject_unsupported_sources() -> None:
    """Test that an unsupported source fails at the boundary."""
    with pytest.raises(TypeError):
        ls.filter({1, 2}, bool)
