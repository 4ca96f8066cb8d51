"""Context managers that run a callback when a block is left."""

from __future__ import annotations

from typing import Any, Callable


class ScopeGuard:
    """Runs callback whenever the ``with`` block is left."""

    def __init__(self, callback: Callable[[], Any]) -> None:
        self._callback = callback

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._callback()


class ArmedScopeGuard:
    """Like ScopeGuard, but the callback can be cancelled with disarm()."""

    def __init__(self, callback: Callable[[], Any]) -> None:
        self._callback = callback
        self._armed = True

    def disarm(self) -> None:
        self._armed = False

    def __enter__(self) -> "ArmedScopeGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._armed:
            self._callback()