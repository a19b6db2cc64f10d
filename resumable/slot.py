"""Single-value handoff cell shared by a coroutine body and its driver.

The slot carries one message at a time across a suspension boundary:
``Inbound`` for a resume value travelling into the body, ``Outbound`` for a
value the body yields back to its caller. The caller and the body alternate
strictly, so every put is preceded by a take of the previous message; a put
into an occupied slot is a protocol violation and raises ``OverwriteError``.

Not thread safe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from resumable.errors import MissingValueError, OverwriteError

T = TypeVar("T")


@dataclass(frozen=True)
class Inbound(Generic[T]):
    value: T


@dataclass(frozen=True)
class Outbound(Generic[T]):
    value: T


Message = Inbound[Any] | Outbound[Any]


class ExchangeSlot:
    __slots__ = ("_message",)

    def __init__(self) -> None:
        self._message: Message | None = None

    @property
    def is_empty(self) -> bool:
        return self._message is None

    def put(self, message: Message) -> None:
        if self._message is not None:
            raise OverwriteError(self._message, message)
        self._message = message

    def take(self) -> Message | None:
        message, self._message = self._message, None
        return message

    def expect(self, kind: type[Inbound[Any]] | type[Outbound[Any]]) -> Any:
        """Take a message of ``kind`` and return its payload.

        The slot is left untouched when it holds a message of the other
        direction.
        """
        message = self._message
        if not isinstance(message, kind):
            raise MissingValueError(kind, message)
        self._message = None
        return message.value

    def __repr__(self) -> str:
        return f"ExchangeSlot({self._message!r})"


__all__ = [
    "ExchangeSlot",
    "Inbound",
    "Message",
    "Outbound",
]
