from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Either `Some(value)` or `NONE`.

    Used wherever "no value" must stay distinguishable from any legitimate value, including `None` itself.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Example:
            ```python
            >>> from lazyseq import Some, NONE
            >>> Some(None).is_some()
            True
            >>> NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is `NONE`.

        Example:
            ```python
            >>> from lazyseq import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from lazyseq import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            lazyseq._results._option.OptionUnwrapError: called `unwrap` on a `NONE`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises with the provided message.

        Args:
            msg: The message to include in the exception if the option is `NONE`.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> from lazyseq import Some, NONE
            >>> Some("value").expect("pipeline is empty")
            'value'
            >>> NONE.expect("pipeline is empty")
            Traceback (most recent call last):
                ...
            lazyseq._results._option.OptionUnwrapError: pipeline is empty (called `expect` on a `NONE`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `NONE`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Example:
            ```python
            >>> from lazyseq import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving `NONE` untouched.

        Example:
            ```python
            >>> from lazyseq import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls **f** with the contained value if the option is `Some`, otherwise returns `NONE`.

        Example:
            ```python
            >>> from lazyseq import Some, NONE, Option
            >>> def half(x: int) -> Option[int]:
            ...     return Some(x // 2) if x % 2 == 0 else NONE
            >>> Some(8).and_then(half).and_then(half)
            Some(value=2)
            >>> Some(6).and_then(half).and_then(half)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        """Raises `OptionUnwrapError`, since `NONE` contains no value."""
        raise OptionUnwrapError("called `unwrap` on a `NONE`")


NONE: Option[Any] = NoneOption()
