"""Explicit presence container for optional API fields."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_ABSENT: Any = object()


class AbsentValueError(LookupError):
    """Raised when reading the value of an empty :class:`Maybe`."""


class Maybe(Generic[T]):
    """A value that is either explicitly present or explicitly absent.

    Unlike ``None`` this distinguishes "field is absent" from "field is present
    and set to a value", which is what the outbound API models need.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _ABSENT) -> None:
        self._value = value

    @classmethod
    def of(cls, value: T) -> "Maybe[T]":
        """Wrap ``value``, which must not be ``None``."""

        if value is None:
            raise ValueError("Maybe.of() requires a value; use Maybe.of_nullable() for None")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> "Maybe[T]":
        if value is None:
            return cls.empty()
        return cls(value)

    @classmethod
    def empty(cls) -> "Maybe[Any]":
        return cls()

    @property
    def is_present(self) -> bool:
        return self._value is not _ABSENT

    @property
    def is_empty(self) -> bool:
        return self._value is _ABSENT

    def get(self) -> T:
        if self._value is _ABSENT:
            raise AbsentValueError("no value present")
        return self._value

    def or_else(self, default: U) -> T | U:
        return default if self._value is _ABSENT else self._value

    def map(self, fn: Callable[[T], U | None]) -> "Maybe[U]":
        if self._value is _ABSENT:
            return Maybe.empty()
        return Maybe.of_nullable(fn(self._value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value is other._value or (
            self.is_present and other.is_present and self._value == other._value
        )

    def __hash__(self) -> int:
        return hash(("Maybe", None if self.is_empty else self._value))

    def __bool__(self) -> bool:
        return self.is_present

    def __repr__(self) -> str:
        if self.is_empty:
            return "Maybe.empty()"
        return f"Maybe.of({self._value!r})"


__all__ = ["AbsentValueError", "Maybe"]
