"""A value-or-error outcome, and the helper that insists on the value."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from akrt.optional import Optional
from akrt.runtime import verify

V = TypeVar("V")
E = TypeVar("E")

_NOTHING: Any = object()


class Result(Generic[V, E]):
    """Holds either a value or an error.

    ``Result(value)`` is a success, ``Result(error=e)`` a failure, and
    ``Result()`` a success that carries no value.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: V = None, *, error: E = _NOTHING) -> None:
        if error is not _NOTHING:
            if value is not None:
                raise TypeError("a Result holds a value or an error, not both")
            self._value: Optional[V] = Optional()
            self._error: Optional[E] = Optional(error)
        else:
            self._value = Optional(value)
            self._error = Optional()

    def value(self) -> V:
        return self._value.value()

    def error(self) -> E:
        return self._error.value()

    def is_error(self) -> bool:
        return self._error.has_value()

    def release_value(self) -> V:
        return self._value.release_value()

    def release_error(self) -> E:
        return self._error.release_value()

    def __repr__(self) -> str:
        if self.is_error():
            return f"Result(error={self._error.value()!r})"
        return f"Result({self._value.value_or(None)!r})"


def must(result: Result[V, Any]) -> V:
    """Return the value of result, verifying that it is not an error."""
    verify(not result.is_error(), "result must not be an error")
    return result.release_value()