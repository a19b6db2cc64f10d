"""resumable: value-passing coroutines driven synchronously by their caller.

A ``Coroutine`` wraps an ``async def`` body. The caller hands it a value with
``resume_with``; the body runs until it awaits ``handle.yield_(value)`` or
returns, and the caller receives ``Yield(value)`` or ``Complete(result)``.
No event loop is involved.
"""

from resumable.config import configure_logging
from resumable.coroutine import Coroutine, Generator, Handle, Lifecycle
from resumable.errors import (
    CoroutineError,
    ExchangeProtocolError,
    MissingValueError,
    OverwriteError,
    PostCompletionResumeError,
    ReentrantResumeError,
    UnsupportedAwaitError,
)
from resumable.state import Complete, State, Yield

__version__ = "0.1.0"

configure_logging()

__all__ = [
    "Complete",
    "Coroutine",
    "CoroutineError",
    "ExchangeProtocolError",
    "Generator",
    "Handle",
    "Lifecycle",
    "MissingValueError",
    "OverwriteError",
    "PostCompletionResumeError",
    "ReentrantResumeError",
    "State",
    "UnsupportedAwaitError",
    "Yield",
]
