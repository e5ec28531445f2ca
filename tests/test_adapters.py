"""Tests for items, range and is_lazy."""

import pytest

import lazyseq as ls


def test_items_on_list_preserves_order() -> None:
    """Test that a list is iterated by ascending index."""
    data = [3, 1, 2]
    assert list(ls.items(data)) == data


def test_items_on_dict_yields_values_in_insertion_order() -> None:
    """Test that a dict yields its values only, in key order."""
    data = {"foo": 1, "bar": 2, "moo": 3}
    assert list(ls.items(data)) == [1, 2, 3]


def test_items_on_tuple_and_str() -> None:
    """Test that any Sequence is supported, not only lists."""
    assert list(ls.items((1, 2))) == [1, 2]
    assert list(ls.items("ab")) == ["a", "b"]


def test_items_passes_iterators_through() -> None:
    """Test that an iterator is returned untouched."""
    it = iter([1, 2, 3])
    assert ls.items(it) is it


def test_items_on_empty_collections() -> None:
    """Test that empty collections yield nothing."""
    assert list(ls.items([])) == []
    assert list(ls.items({})) == []


def test_items_is_lazy() -> None:
    """Test that values are only read when requested."""
    data = [1, 2, 3]
    it = ls.items(data)
    data[0] = 10
    assert next(it) == 10


def test_items_rejects_unsupported_types() -> None:
    """Test that sets and scalars are a precondition violation."""
    with pytest.raises(TypeError, match="'set'"):
        ls.items({1, 2})
    with pytest.raises(TypeError, match="'int'"):
        ls.items(42)


def test_range_exclusive() -> None:
    """Test that range excludes its bound by default."""
    assert list(ls.range(5)) == [0, 1, 2, 3, 4]
    assert list(ls.range(0)) == []
    assert list(ls.range(-3)) == []


def test_range_inclusive() -> None:
    """Test that the inclusive flag yields the bound too."""
    assert list(ls.range(5, inclusive=True)) == [0, 1, 2, 3, 4, 5]
    assert list(ls.range(0, True)) == [0]  # noqa: FBT003


@pytest.mark.parametrize("n", [1, 7, 100])
def test_range_length(n: int) -> None:
    """Test that range(n) has n values and range(n, inclusive=True) has n + 1."""
    assert sum(1 for _ in ls.range(n)) == n
    assert sum(1 for _ in ls.range(n, inclusive=True)) == n + 1


def test_range_is_one_shot() -> None:
    """Test that an exhausted range stays exhausted."""
    r = ls.range(3)
    assert list(r) == [0, 1, 2]
    assert list(r) == []


def test_is_lazy() -> None:
    """Test the capability check on collections and iterators."""
    assert not ls.is_lazy([1])
    assert not ls.is_lazy({"a": 1})
    assert not ls.is_lazy(range(3))
    assert ls.is_lazy(iter([1]))
    assert ls.is_lazy(ls.range(3))
    assert ls.is_lazy(x for x in [1])
    assert ls.is_lazy(ls.make_pipeline([1]))
