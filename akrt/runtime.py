"""Process-level runtime support: panics, verification, and the program entry."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional, Sequence


class Panic(Exception):
    """Raised when the runtime panics; the program cannot continue."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class VerificationError(AssertionError):
    """Raised when an internal invariant does not hold."""


def panic(message: str) -> None:
    """Report a panic on standard output and abort by raising Panic."""
    print(f"Panic: {message}", flush=True)
    raise Panic(message)


def verify(condition: object, message: str = "verification failed") -> None:
    """Raise VerificationError unless condition is true."""
    if not condition:
        raise VerificationError(message)


def dbgputstr(text: str) -> None:
    """Write debug text to standard error, unchanged."""
    sys.stderr.write(text)
    sys.stderr.flush()


def run_main(
    entry: Callable[[list[str]], int],
    argv: Optional[Iterable[str]] = None,
) -> int:
    """Call entry with the argument list and turn its outcome into an exit code.

    An ordinary exception from entry is reported as a runtime error and gives
    exit code 1. Panics and failed verifications are not recoverable and
    propagate unchanged.
    """
    args: Sequence[str] = list(sys.argv if argv is None else argv)
    try:
        return entry(list(args))
    except (Panic, VerificationError):
        raise
    except Exception as error:  # noqa: BLE001 - any error ends the program
        print(f"Runtime error: {error}", file=sys.stderr, flush=True)
        return 1