from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

Y = TypeVar("Y")
R = TypeVar("R")


class State(Generic[Y, R]):
    """Outcome of one resume: the body either yielded again or completed."""

    __slots__ = ()

    value: Any

    def is_yield(self) -> bool:
        return isinstance(self, Yield)

    def is_complete(self) -> bool:
        return isinstance(self, Complete)

    def as_yield(self) -> Y | None:
        """Return the yielded value, or ``None`` if the body completed."""
        if isinstance(self, Yield):
            return self.value
        return None

    def as_complete(self) -> R | None:
        """Return the final result, or ``None`` if the body only yielded."""
        if isinstance(self, Complete):
            return self.value
        return None


@dataclass(frozen=True)
class Yield(State[Y, Any]):
    value: Y


@dataclass(frozen=True)
class Complete(State[Any, R]):
    value: R


__all__ = [
    "Complete",
    "State",
    "Yield",
]
