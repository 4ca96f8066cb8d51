"""Fixed-size heterogeneous tuples and helpers over lists of types."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Sequence


class Tuple:
    """A fixed-size sequence of values whose elements can be replaced."""

    __slots__ = ("_values",)

    def __init__(self, *values: Any) -> None:
        self._values = list(values)

    def get(self, index: int) -> Any:
        """Return the element at index."""
        if not 0 <= index < len(self._values):
            raise IndexError(f"tuple index {index} out of range")
        return self._values[index]

    def get_by_type(self, kind: type) -> Any:
        """Return the first element whose type is exactly kind."""
        for value in self._values:
            if type(value) is kind:
                return value
        raise TypeError(f"tuple has no element of type {kind.__name__}")

    def apply_as_args(self, f: Callable[..., Any]) -> Any:
        """Call f with the elements as positional arguments."""
        return f(*self._values)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"tuple index {index} out of range")
        self._values[index] = value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tuple):
            return self._values == other._values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tuple({', '.join(map(repr, self._values))})"


def for_each_type(types: Sequence[type], f: Callable[[type], Any]) -> None:
    """Call f once for each type, in order."""
    for kind in types:
        f(kind)


def for_each_type_zipped(
    types_a: Sequence[type],
    types_b: Sequence[type],
    f: Callable[[type, type], Any],
) -> None:
    """Call f with each pair of types at the same position in two lists."""
    if len(types_a) != len(types_b):
        raise ValueError("can't zip type lists that aren't the same size")
    for kind_a, kind_b in zip(types_a, types_b):
        f(kind_a, kind_b)