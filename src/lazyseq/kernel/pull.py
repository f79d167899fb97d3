"""Pull adapter - drive a push sequence one element at a time."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from lazyseq.config import SeqConfig
from lazyseq.kernel.coro import Coroutine
from lazyseq.kernel.trace import Trace

if TYPE_CHECKING:
    from lazyseq.kernel.seq import Seq

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Pull(Generic[T]):
    """On-demand, stoppable view of a push sequence.

    The sequence runs inside a Coroutine and is paused after every element,
    so ``next()`` produces exactly one element per call. ``stop()`` must be
    reached on every path once the adapter is no longer needed; using the
    adapter as a context manager guarantees that.

    Example:
        >>> with Pull(Seq.of(1, 2)) as p:
        ...     p.next()
        (1, True)
    """

    def __init__(
        self,
        seq: Seq[T],
        config: SeqConfig | None = None,
        trace: Trace | None = None,
        name: str | None = None,
    ) -> None:
        def body(more: bool, yield_back: Callable[[T], bool]) -> None:
            if more:
                seq.run(yield_back)
            return None

        self._coro: Coroutine[bool, T] | None = Coroutine(body, name=name, config=config)
        self.name = self._coro.name
        self._trace = trace

    @property
    def stopped(self) -> bool:
        """True once the sequence is exhausted or ``stop()`` was called."""
        return self._coro is None or self._coro.done

    def next(self) -> tuple[T | None, bool]:
        """Produce the next element.

        Returns:
            ``(value, True)`` while elements remain, ``(None, False)`` once the
            sequence is exhausted or the adapter was stopped.
        """
        coro = self._coro
        if coro is None:
            return None, False
        value, ok = coro.resume(True)
        if self._trace is not None:
            self._trace.record("pull.next", source=self.name, info={"ok": ok})
        if not ok:
            self._coro = None
            return None, False
        return value, True

    def stop(self) -> None:
        """Terminate the sequence early and release the coroutine.

        Deferred releases inside the wrapped sequence run before this returns.
        Safe to call any number of times.
        """
        coro = self._coro
        if coro is None:
            return
        self._coro = None
        if coro.started:
            coro.resume(False)
        else:
            coro.close()
        if self._trace is not None:
            self._trace.record("pull.stop", source=self.name)
        logger.debug("pull %s stopped", self.name)

    def __iter__(self) -> Pull[T]:
        return self

    def __next__(self) -> T:
        value, ok = self.next()
        if not ok:
            raise StopIteration
        return value  # type: ignore[return-value]

    def __enter__(self) -> Pull[T]:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.stop()


def pull(
    seq: Seq[T],
    config: SeqConfig | None = None,
    trace: Trace | None = None,
) -> tuple[Callable[[], tuple[T | None, bool]], Callable[[], None]]:
    """Convert a push sequence into a ``(next, stop)`` pair.

    Args:
        seq: The push sequence to drive
        config: Optional configuration
        trace: Optional trace recorder

    Returns:
        The bound ``next`` and ``stop`` of a new Pull
    """
    p = Pull(seq, config=config, trace=trace)
    return p.next, p.stop
