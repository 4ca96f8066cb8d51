"""A container that holds either one value or nothing."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from akrt.runtime import verify

T = TypeVar("T")

_NOTHING: Any = object()


class Optional(Generic[T]):
    """Either holds a single value or is empty.

    Unlike a bare ``None``, an empty Optional is distinct from an Optional
    that holds ``None``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T = _NOTHING) -> None:
        self._value = value

    def has_value(self) -> bool:
        return self._value is not _NOTHING

    def value(self) -> T:
        """Return the held value; it is an error to ask an empty Optional."""
        verify(self.has_value(), "Optional has no value")
        return self._value

    def release_value(self) -> T:
        """Return the held value and leave the Optional empty."""
        verify(self.has_value(), "Optional has no value")
        released, self._value = self._value, _NOTHING
        return released

    def value_or(self, fallback: T) -> T:
        return self._value if self.has_value() else fallback

    def value_or_lazy_evaluated(self, callback: Callable[[], T]) -> T:
        """Return the held value, or call callback only when empty."""
        return self._value if self.has_value() else callback()

    def clear(self) -> None:
        self._value = _NOTHING

    def emplace(self, value: T) -> None:
        """Replace whatever is held with value."""
        self._value = value

    def __bool__(self) -> bool:
        return self.has_value()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Optional):
            if self.has_value() != other.has_value():
                return False
            return not self.has_value() or self._value == other._value
        return self.has_value() and self._value == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.has_value():
            return f"Optional({self._value!r})"
        return "Optional()"