"""Tests for the Option type."""

import pytest

import lazyseq as ls


def test_option_pattern_matching() -> None:
    """Test that both variants can be matched structurally."""

    def _describe(opt: ls.Option[int]) -> str:
        match opt:
            case ls.Some(value):
                return f"some {value}"
            case _:
                return "none"

    assert _describe(ls.Some(3)) == "some 3"
    assert _describe(ls.NONE) == "none"


def test_some_can_hold_none() -> None:
    """Test that Some(None) is still a value."""
    opt = ls.Some(None)
    assert opt.is_some()
    assert opt.unwrap() is None


def test_unwrap_none_raises() -> None:
    """Test that unwrapping NONE raises OptionUnwrapError."""
    with pytest.raises(ls.OptionUnwrapError):
        ls.NONE.unwrap()
    with pytest.raises(ls.OptionUnwrapError, match="empty"):
        ls.NONE.expect("empty")


def test_combinators() -> None:
    """Test map, and_then and unwrap_or on both variants."""
    assert ls.Some(2).map(lambda x: x + 1) == ls.Some(3)
    assert ls.NONE.map(lambda x: x + 1) is ls.NONE
    assert ls.Some(2).and_then(lambda _: ls.NONE) is ls.NONE
    assert ls.NONE.unwrap_or(5) == 5
    assert ls.Some(1).unwrap_or(5) == 1


def test_option_is_abstract() -> None:
    """Test that Option cannot be instantiated directly."""
    with pytest.raises(TypeError):
        ls.Option()  # type: ignore[abstract]
