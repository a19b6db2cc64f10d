"""Step driver: advances a native coroutine object by hand, without an event loop.

A body is polled with ``send(None)``. Each poll either finishes the body
(``StopIteration``, reported as ``Ready``) or leaves it suspended on whatever
object it awaited (``Pending``). ``advance`` keeps polling until the body has
written a value into the exchange slot and suspended, or has returned.

Nothing ever wakes the driver asynchronously; progress happens only when the
owner calls ``advance``, so no waker or readiness callback exists.
"""

from __future__ import annotations

import types
from collections.abc import Coroutine
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from loguru import logger

from resumable.errors import PostCompletionResumeError, UnsupportedAwaitError
from resumable.slot import ExchangeSlot, Outbound

R = TypeVar("R")

log = logger.bind(component="driver")


class _SuspendMarker:
    __slots__ = ()

    def __repr__(self) -> str:
        return "SUSPEND"


SUSPEND = _SuspendMarker()


@types.coroutine
def suspend():
    """Suspend the running body for exactly one poll.

    The next poll resumes right after the ``await``, so a body that is resumed
    always makes progress before it can suspend again.
    """
    yield SUSPEND


@dataclass(frozen=True)
class Pending:
    awaited: Any


@dataclass(frozen=True)
class Ready(Generic[R]):
    value: R


@dataclass(frozen=True)
class Yielded:
    value: Any


Poll = Pending | Ready[Any]


def _is_driveable(awaited: Any) -> bool:
    # ``None`` is a bare suspension such as ``await asyncio.sleep(0)``.
    return awaited is SUSPEND or awaited is None


class StepDriver(Generic[R]):
    """Owns one suspended computation and polls it on demand."""

    def __init__(
        self,
        computation: Coroutine[Any, Any, R],
        slot: ExchangeSlot,
        *,
        name: str | None = None,
    ) -> None:
        self._computation = computation
        self._slot = slot
        self._finished = False
        self._pending_error: BaseException | None = None
        self.name = name
        self.polls = 0

    @property
    def finished(self) -> bool:
        return self._finished

    def poll(self) -> Poll:
        if self._finished:
            raise PostCompletionResumeError(self.name)

        self.polls += 1
        error, self._pending_error = self._pending_error, None
        try:
            if error is None:
                awaited = self._computation.send(None)
            else:
                awaited = self._computation.throw(error)
        except StopIteration as e:
            self._finished = True
            log.trace("{}: poll #{} returned {!r}", self.name, self.polls, e.value)
            return Ready(e.value)
        except BaseException as e:
            self._finished = True
            log.debug("{}: body raised {} on poll #{}", self.name, type(e).__name__, self.polls)
            raise

        if not _is_driveable(awaited):
            # Delivered at the offending await on the next poll.
            self._pending_error = UnsupportedAwaitError(awaited)
        log.trace("{}: poll #{} pending on {!r}", self.name, self.polls, awaited)
        return Pending(awaited)

    def advance(self) -> Yielded | Ready[R]:
        """Poll until the body yields a value through the slot or returns."""
        while True:
            outcome = self.poll()
            if isinstance(outcome, Ready):
                return outcome
            if self._slot.is_empty:
                continue
            return Yielded(self._slot.expect(Outbound))

    def close(self) -> None:
        """Discard the computation, running its ``finally`` blocks.

        A body that never started is closed without running any of its code.
        """
        if self._finished:
            return
        self._finished = True
        log.debug("{}: closing after {} polls", self.name, self.polls)
        self._computation.close()

    def __del__(self) -> None:
        if not getattr(self, "_finished", True):
            self._finished = True
            self._computation.close()


__all__ = [
    "SUSPEND",
    "Pending",
    "Poll",
    "Ready",
    "StepDriver",
    "Yielded",
    "suspend",
]
