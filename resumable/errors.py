from __future__ import annotations

from typing import Any


class CoroutineError(Exception):
    """Base class for errors raised while driving a coroutine."""


class PostCompletionResumeError(CoroutineError):
    """Raised when a coroutine is resumed after it already completed."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        label = f"coroutine {name!r}" if name else "coroutine"
        super().__init__(
            f"{label} resumed after completion\n"
            "Hint: create a fresh Coroutine to run the body again"
        )


class ReentrantResumeError(CoroutineError):
    """Raised when a coroutine is resumed from inside its own running body."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        label = f"coroutine {name!r}" if name else "coroutine"
        super().__init__(f"{label} is already running; it cannot resume itself")


class ExchangeProtocolError(CoroutineError, RuntimeError):
    """The exchange slot was used out of order. Always a driver bug."""


class OverwriteError(ExchangeProtocolError):
    def __init__(self, pending: Any, incoming: Any) -> None:
        self.pending = pending
        self.incoming = incoming
        super().__init__(
            f"exchange slot already holds {pending!r}; refusing to overwrite it with {incoming!r}"
        )


class MissingValueError(ExchangeProtocolError):
    def __init__(self, expected: type, found: Any) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"expected an {expected.__name__} message in the exchange slot, found {found!r}"
        )


class UnsupportedAwaitError(CoroutineError):
    """Thrown into a body that awaited something only an event loop can drive."""

    def __init__(self, awaited: Any) -> None:
        self.awaited = awaited
        super().__init__(
            f"coroutine body awaited {type(awaited).__name__}, which cannot be driven "
            "synchronously\n"
            "Hint: only handle.yield_() and plain `async def` calls may be awaited inside a body"
        )


__all__ = [
    "CoroutineError",
    "ExchangeProtocolError",
    "MissingValueError",
    "OverwriteError",
    "PostCompletionResumeError",
    "ReentrantResumeError",
    "UnsupportedAwaitError",
]
