"""A bounds-checked view over a window of a mutable sequence."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterator, MutableSequence, Optional, Sequence

from akrt.runtime import verify


class Span:
    """A window of ``size`` elements starting at ``start`` in a backing sequence.

    Writes through a span change the backing sequence. A span created
    without a backing sequence is null and empty.
    """

    __slots__ = ("_backing", "_start", "_size")

    def __init__(
        self,
        values: Optional[MutableSequence[Any]] = None,
        start: int = 0,
        length: Optional[int] = None,
    ) -> None:
        if values is None:
            verify(start == 0 and not length, "a null span has no elements")
            self._backing: Optional[MutableSequence[Any]] = None
            self._start = 0
            self._size = 0
            return
        if length is None:
            length = len(values) - start
        verify(start >= 0 and length >= 0, "span bounds must not be negative")
        verify(start + length <= len(values), "span exceeds its backing sequence")
        self._backing = values
        self._start = start
        self._size = length

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_null(self) -> bool:
        return self._backing is None

    def _view(self, start: int, length: int) -> "Span":
        if self._backing is None:
            return Span()
        return Span(self._backing, self._start + start, length)

    def slice(self, start: int, length: Optional[int] = None) -> "Span":
        """A sub-span; without length it runs to the end of this span."""
        if length is None:
            verify(0 <= start <= self._size, "slice start out of range")
            return self._view(start, self._size - start)
        verify(start >= 0 and length >= 0, "slice bounds must not be negative")
        verify(start + length <= self._size, "slice exceeds span")
        return self._view(start, length)

    def slice_from_end(self, count: int) -> "Span":
        """The last count elements."""
        verify(0 <= count <= self._size, "slice_from_end count out of range")
        return self._view(self._size - count, count)

    def trim(self, length: int) -> "Span":
        """The first length elements, or the whole span if it is shorter."""
        verify(length >= 0, "trim length must not be negative")
        return self._view(0, min(self._size, length))

    def overwrite(self, offset: int, data: Sequence[Any]) -> None:
        """Write data into the span starting at offset."""
        verify(offset >= 0, "overwrite offset must not be negative")
        verify(offset + len(data) <= self._size, "overwrite past the end of span")
        if not data:
            return
        begin = self._start + offset
        self._backing[begin:begin + len(data)] = list(data)  # type: ignore[index]

    def _write_prefix(self, other: "Span", count: int) -> int:
        if count == 0:
            return 0
        # Snapshot first so overlapping spans copy like memmove.
        values = list(islice(self, count))
        other._backing[other._start:other._start + count] = values  # type: ignore[index]
        return count

    def copy_to(self, other: "Span") -> int:
        """Copy every element into other, which must be at least as large."""
        verify(other.size() >= self._size, "copy_to target is too small")
        return self._write_prefix(other, self._size)

    def copy_trimmed_to(self, other: "Span") -> int:
        """Copy as many elements as fit into other; return how many."""
        return self._write_prefix(other, min(self._size, other.size()))

    def fill(self, value: Any) -> int:
        """Set every element to value; return the number set."""
        if self._size:
            self._backing[self._start:self._start + self._size] = (  # type: ignore[index]
                [value] * self._size
            )
        return self._size

    def contains_slow(self, value: Any) -> bool:
        return any(element == value for element in self)

    def starts_with(self, other: "Span") -> bool:
        """Whether the first elements of this span equal all of other."""
        if self._size < other.size():
            return False
        return list(islice(self, other.size())) == list(other)

    def at(self, index: int) -> Any:
        verify(0 <= index < self._size, f"span index {index} out of range")
        return self._backing[self._start + index]  # type: ignore[index]

    def last(self) -> Any:
        return self.at(self._size - 1)

    def __getitem__(self, index: int) -> Any:
        return self.at(index)

    def __setitem__(self, index: int, value: Any) -> None:
        verify(0 <= index < self._size, f"span index {index} out of range")
        self._backing[self._start + index] = value  # type: ignore[index]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._backing is None:
            return iter(())
        return islice(self._backing, self._start, self._start + self._size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._backing is None:
            return "Span()"
        return f"Span({list(self)!r})"