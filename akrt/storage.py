"""Element storage with the capacity rules of a growable vector."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from akrt.runtime import verify


def padded_capacity(capacity: int) -> int:
    """The capacity to grow to when at least capacity elements are needed."""
    return max(4, capacity + capacity // 4 + 4)


class VectorStorage:
    """Holds elements and tracks a capacity that grows ahead of the size.

    The capacity starts at ``inline_capacity`` and returns to it when the
    storage is cleared. New slots created by resize() are filled from
    ``default_factory``, or with None when no factory is given.
    """

    def __init__(
        self,
        inline_capacity: int = 0,
        default_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        verify(inline_capacity >= 0, "inline capacity must not be negative")
        self._items: list[Any] = []
        self._inline_capacity = inline_capacity
        self._capacity = inline_capacity
        self._default_factory = default_factory

    def size(self) -> int:
        return len(self._items)

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every element and give up any capacity beyond the inline one."""
        self.clear_with_capacity()
        self._capacity = self._inline_capacity

    def clear_with_capacity(self) -> None:
        """Remove every element but keep the capacity."""
        self._items.clear()

    def grow_capacity(self, needed_capacity: int) -> None:
        """Make room for needed_capacity elements, growing with padding."""
        if self._capacity >= needed_capacity:
            return
        self.ensure_capacity(padded_capacity(needed_capacity))

    def ensure_capacity(self, needed_capacity: int) -> None:
        """Make room for exactly needed_capacity elements if there is less."""
        if self._capacity >= needed_capacity:
            return
        self._capacity = needed_capacity

    def shrink(self, new_size: int, keep_capacity: bool = False) -> None:
        """Drop elements past new_size, which must not exceed the size."""
        verify(0 <= new_size <= self.size(), "shrink cannot grow the storage")
        if new_size == self.size():
            return
        if new_size == 0:
            if keep_capacity:
                self.clear_with_capacity()
            else:
                self.clear()
            return
        del self._items[new_size:]

    def resize(self, new_size: int, keep_capacity: bool = False) -> None:
        """Grow with default values or shrink to exactly new_size elements."""
        verify(new_size >= 0, "size must not be negative")
        if new_size <= self.size():
            self.shrink(new_size, keep_capacity)
            return
        self.ensure_capacity(new_size)
        factory = self._default_factory
        self._items.extend(
            factory() if factory is not None else None
            for _ in range(new_size - self.size())
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)