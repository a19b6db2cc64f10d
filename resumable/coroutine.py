"""Public coroutine objects: ``Coroutine``, ``Generator`` and the body-side ``Handle``.

Usage::

    from resumable import Coroutine, Complete, Yield

    async def running_total(handle, first):
        total = first
        while total < 100:
            total += await handle.yield_(total)
        return total

    co = Coroutine(running_total)
    assert co.resume_with(10) == Yield(10)
    assert co.resume_with(95) == Complete(105)

The caller drives the body synchronously: ``resume_with`` returns only once
the body has awaited ``handle.yield_`` again or returned. The body may await
ordinary ``async def`` helpers, and those helpers may yield through the same
handle.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from loguru import logger

from resumable.driver import Ready, StepDriver, suspend
from resumable.errors import PostCompletionResumeError, ReentrantResumeError
from resumable.slot import ExchangeSlot, Inbound, Outbound
from resumable.state import Complete, State, Yield

Y = TypeVar("Y")
R = TypeVar("R")
C = TypeVar("C")

log = logger.bind(component="coroutine")


class Lifecycle(Enum):
    CREATED = "created"
    RUNNING = "running"
    SUSPENDED = "suspended"
    COMPLETED = "completed"


class Handle(Generic[Y, C]):
    """The body's capability to suspend and exchange values with its caller."""

    __slots__ = ("_slot",)

    def __init__(self, slot: ExchangeSlot) -> None:
        self._slot = slot

    async def yield_(self, value: Y) -> C:
        """Hand ``value`` to the caller and wait for the next resume value.

        Nothing is exchanged until the returned awaitable is awaited.
        """
        self._slot.put(Outbound(value))
        await suspend()
        return self._slot.expect(Inbound)


Body = Callable[[Handle[Y, C], C], Awaitable[R]]


async def _launch(body: Body[Y, C, R], handle: Handle[Y, C], slot: ExchangeSlot) -> R:
    # Runs on the first poll; the first resume value is already in the slot.
    initial = slot.expect(Inbound)
    computation = body(handle, initial)
    if not inspect.isawaitable(computation):
        raise TypeError(
            f"Coroutine body must return an awaitable, got {type(computation).__name__}"
        )
    return await computation


class Coroutine(Generic[Y, R, C]):
    """A body that yields ``Y`` values, receives ``C`` values and returns ``R``.

    No body code runs until the first ``resume_with``; its value is passed to
    the body as the ``initial`` argument. ``body`` itself is only called at
    that point, so a body that does not return an awaitable raises
    ``TypeError`` from the first ``resume_with`` rather than from the
    constructor.
    """

    def __init__(self, body: Body[Y, C, R], *, name: str | None = None) -> None:
        self.name = name or getattr(body, "__qualname__", None)
        self._slot = ExchangeSlot()
        self._handle: Handle[Y, C] = Handle(self._slot)
        self._driver: StepDriver[R] = StepDriver(
            _launch(body, self._handle, self._slot), self._slot, name=self.name
        )
        self._lifecycle = Lifecycle.CREATED

    @property
    def lifecycle(self) -> Lifecycle:
        return self._lifecycle

    @property
    def completed(self) -> bool:
        return self._lifecycle is Lifecycle.COMPLETED

    def resume_with(self, value: C) -> State[Y, R]:
        """Run the body until its next yield or its return.

        Exceptions raised by the body propagate unchanged and complete the
        coroutine.
        """
        if self._lifecycle is Lifecycle.COMPLETED:
            raise PostCompletionResumeError(self.name)
        if self._lifecycle is Lifecycle.RUNNING:
            raise ReentrantResumeError(self.name)

        self._slot.put(Inbound(value))
        self._lifecycle = Lifecycle.RUNNING
        try:
            outcome = self._driver.advance()
        except BaseException:
            self._finish()
            raise

        if isinstance(outcome, Ready):
            self._finish()
            log.debug("{}: completed after {} polls", self.name, self._driver.polls)
            return Complete(outcome.value)

        self._lifecycle = Lifecycle.SUSPENDED
        return Yield(outcome.value)

    def close(self) -> None:
        """Abandon the body, releasing whatever it holds.

        ``finally`` clauses and ``with`` blocks around the current suspension
        point run now. A resume value the body never observed is discarded.
        """
        if self._lifecycle is Lifecycle.RUNNING:
            raise ReentrantResumeError(self.name)
        if self._lifecycle is Lifecycle.COMPLETED:
            return
        self._finish()
        self._driver.close()

    def _finish(self) -> None:
        self._lifecycle = Lifecycle.COMPLETED
        self._slot.take()

    def __enter__(self) -> Coroutine[Y, R, C]:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} {self._lifecycle.value}>"


class Generator(Coroutine[Y, R, None]):
    """A coroutine whose caller never sends values back.

    ``body(handle)`` takes only the handle, and ``resume()`` drives it.
    """

    def __init__(
        self,
        body: Callable[[Handle[Y, None]], Awaitable[R]],
        *,
        name: str | None = None,
    ) -> None:
        def start(handle: Handle[Y, None], _initial: None) -> Awaitable[R]:
            return body(handle)

        super().__init__(start, name=name or getattr(body, "__qualname__", None))

    def resume(self) -> State[Y, R]:
        return self.resume_with(None)


__all__ = [
    "Body",
    "Coroutine",
    "Generator",
    "Handle",
    "Lifecycle",
]
