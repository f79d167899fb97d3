"""Kernel layer - the push contract and the suspend/resume machinery."""

from lazyseq.kernel.coro import Coroutine, create
from lazyseq.kernel.errors import CoroutineError, SeqError, StaleGroupError
from lazyseq.kernel.pull import Pull, pull
from lazyseq.kernel.seq import Seq, Yield
from lazyseq.kernel.trace import Event, Trace

__all__ = [
    "Seq",
    "Yield",
    # Suspend/resume
    "Coroutine",
    "create",
    "Pull",
    "pull",
    # Errors
    "SeqError",
    "CoroutineError",
    "StaleGroupError",
    # Tracing
    "Event",
    "Trace",
]
