"""A tagged union that holds exactly one value of one of a fixed set of types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from akrt.runtime import verify

_NOTHING: Any = object()

Handler = Union[Callable[[Any], Any], Tuple[type, Callable[[Any], Any]]]


@dataclass(frozen=True)
class Empty:
    """The value of a variant that holds nothing in particular."""


def _deduplicate(kinds: tuple[type, ...]) -> tuple[type, ...]:
    unique: list[type] = []
    for kind in kinds:
        if not isinstance(kind, type):
            raise TypeError(f"{kind!r} is not a type")
        if kind not in unique:
            unique.append(kind)
    return tuple(unique)


class Variant:
    """Holds one value whose type is exactly one of the declared kinds.

    Duplicate kinds are collapsed. Without an initial value the variant
    holds ``Empty()``, which requires Empty to be among its kinds.
    """

    __slots__ = ("_kinds", "_value")

    def __init__(self, *kinds: type, value: Any = _NOTHING) -> None:
        if not kinds:
            raise TypeError("a variant needs at least one kind")
        self._kinds = _deduplicate(kinds)
        if value is _NOTHING:
            if Empty not in self._kinds:
                raise TypeError("a variant without Empty needs an initial value")
            value = Empty()
        self._require_contained(type(value))
        self._value = value

    @property
    def kinds(self) -> tuple[type, ...]:
        return self._kinds

    @property
    def index(self) -> int:
        """Position of the held value's type among the kinds."""
        return self._kinds.index(type(self._value))

    def _require_contained(self, kind: type) -> None:
        if not self.can_contain(kind):
            names = ", ".join(k.__name__ for k in self._kinds)
            raise TypeError(f"{kind.__name__} is not one of ({names})")

    def can_contain(self, kind: type) -> bool:
        return kind in self._kinds

    def has(self, kind: type) -> bool:
        """Whether the held value is of exactly this kind."""
        self._require_contained(kind)
        return type(self._value) is kind

    def get(self, kind: type) -> Any:
        """Return the held value, verifying it is of this kind."""
        verify(self.has(kind), f"variant does not hold a {kind.__name__}")
        return self._value

    def get_pointer(self, kind: type) -> Optional[Any]:
        """Return the held value if it is of this kind, otherwise None."""
        return self._value if self.has(kind) else None

    def set(self, value: Any) -> None:
        """Replace the held value; its type must be one of the kinds."""
        self._require_contained(type(value))
        self._value = value

    def visit(self, *args: Handler) -> Any:
        """Call the handler that fits the held value and return its result.

        Each handler is either a ``(kind, function)`` pair, chosen when the
        held value is of exactly that kind, or a plain function that accepts
        any value. Typed handlers are preferred over plain ones.
        """
        kind = type(self._value)
        generic: Optional[Callable[[Any], Any]] = None
        for handler in args:
            if isinstance(handler, tuple):
                handled_kind, function = handler
                if handled_kind is kind:
                    return function(self._value)
            elif callable(handler):
                if generic is None:
                    generic = handler
            else:
                raise TypeError(f"{handler!r} is not a visitor")
        if generic is None:
            raise TypeError(f"no visitor accepts a {kind.__name__}")
        return generic(self._value)

    def downcast(self, *args: type) -> "Variant":
        """Return a variant over other kinds holding the same value."""
        kinds = _deduplicate(args)
        verify(type(self._value) in kinds, "downcast target cannot hold the value")
        return Variant(*kinds, value=self._value)

    def __repr__(self) -> str:
        names = ", ".join(k.__name__ for k in self._kinds)
        return f"Variant[{names}]({self._value!r})"