"""A growable sequence with bounds checks and vector capacity rules."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional as _Opt

from akrt.optional import Optional
from akrt.runtime import verify
from akrt.span import Span
from akrt.storage import VectorStorage

Predicate = Callable[[Any], bool]


class Vector(VectorStorage):
    """An ordered, growable collection whose accesses are bounds-checked.

    Appends grow the capacity with padding, so the capacity usually runs
    ahead of the size; clear() returns it to the inline capacity.
    """

    def __init__(
        self,
        values: Iterable[Any] = (),
        inline_capacity: int = 0,
        default_factory: _Opt[Callable[[], Any]] = None,
    ) -> None:
        super().__init__(inline_capacity, default_factory)
        initial = list(values)
        self.ensure_capacity(len(initial))
        self._items.extend(initial)

    def at(self, index: int) -> Any:
        """Return the element at index, which must be within the size."""
        verify(0 <= index < len(self._items), f"vector index {index} out of range")
        return self._items[index]

    def first(self) -> Any:
        return self.at(0)

    def last(self) -> Any:
        return self.at(len(self._items) - 1)

    def span(self) -> Span:
        """A span over all elements; writes through it change the vector."""
        return Span(self._items)

    def first_matching(self, predicate: Predicate) -> Optional:
        """The first element for which predicate is true, if any."""
        for item in self._items:
            if predicate(item):
                return Optional(item)
        return Optional()

    def last_matching(self, predicate: Predicate) -> Optional:
        """The last element for which predicate is true, if any."""
        for item in reversed(self._items):
            if predicate(item):
                return Optional(item)
        return Optional()

    def contains_slow(self, value: Any) -> bool:
        return any(item == value for item in self._items)

    def contains_in_range(self, value: Any, start: int, end: int) -> bool:
        """Whether value occurs between start and end, both inclusive."""
        verify(0 <= start <= end, "range start is past its end")
        verify(end < len(self._items), "range end out of range")
        return any(item == value for item in self._items[start:end + 1])

    def append(self, value: Any) -> None:
        self.grow_capacity(len(self._items) + 1)
        self._items.append(value)

    def extend(self, other: Iterable[Any]) -> None:
        """Append every element of other, in order."""
        values = list(other)
        self.grow_capacity(len(self._items) + len(values))
        self._items.extend(values)

    def prepend(self, value: Any) -> None:
        self.insert(0, value)

    def insert(self, index: int, value: Any) -> None:
        """Insert value before index; index may equal the size."""
        verify(0 <= index <= len(self._items), f"insert index {index} out of range")
        if index == len(self._items):
            self.append(value)
            return
        self.grow_capacity(len(self._items) + 1)
        self._items.insert(index, value)

    def insert_before_matching(
        self, value: Any, predicate: Predicate, first_index: int = 0
    ) -> int:
        """Insert value before the first match at or after first_index.

        Without a match the value is appended. Returns where it was placed.
        """
        for index in range(first_index, len(self._items)):
            if predicate(self._items[index]):
                self.insert(index, value)
                return index
        self.append(value)
        return len(self._items) - 1

    def remove(self, index: int, count: _Opt[int] = None) -> None:
        """Remove the element at index, or count elements starting there."""
        if count is None:
            verify(0 <= index < len(self._items), f"remove index {index} out of range")
            del self._items[index]
            return
        if count == 0:
            return
        verify(index >= 0 and count > 0, "remove bounds must be positive")
        verify(index + count <= len(self._items), "remove range exceeds vector")
        del self._items[index:index + count]

    def remove_first_matching(self, predicate: Predicate) -> bool:
        for index, item in enumerate(self._items):
            if predicate(item):
                del self._items[index]
                return True
        return False

    def remove_all_matching(self, predicate: Predicate) -> bool:
        kept = [item for item in self._items if not predicate(item)]
        removed = len(kept) != len(self._items)
        self._items[:] = kept
        return removed

    def take_last(self) -> Any:
        verify(bool(self._items), "take_last from an empty vector")
        return self._items.pop()

    def take_first(self) -> Any:
        verify(bool(self._items), "take_first from an empty vector")
        return self._items.pop(0)

    def take(self, index: int) -> Any:
        verify(0 <= index < len(self._items), f"take index {index} out of range")
        return self._items.pop(index)

    def unstable_take(self, index: int) -> Any:
        """Remove and return the element at index, moving the last one there."""
        verify(0 <= index < len(self._items), f"take index {index} out of range")
        items = self._items
        items[index], items[-1] = items[-1], items[index]
        return self.take_last()

    def find_first_index(self, value: Any) -> Optional:
        for index, item in enumerate(self._items):
            if item == value:
                return Optional(index)
        return Optional()

    def reverse(self) -> None:
        self._items.reverse()

    def in_reverse(self) -> Iterator[Any]:
        """Iterate from the last element to the first."""
        return reversed(self._items)

    def __getitem__(self, index: int) -> Any:
        return self.at(index)

    def __setitem__(self, index: int, value: Any) -> None:
        verify(0 <= index < len(self._items), f"vector index {index} out of range")
        self._items[index] = value

    def __contains__(self, value: object) -> bool:
        return self.contains_slow(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"