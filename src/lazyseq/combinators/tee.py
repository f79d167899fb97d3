"""Tee - replay one sequence to several independent consumers.

All branches read from one shared chain of fixed-capacity chunks. The
upstream is pulled exactly once per distinct element, by whichever branch
first needs it; slower branches replay it from the chain later. A chunk
stays alive only while some branch cursor still points into it (or into a
chunk before it), so memory use follows the gap between the fastest and the
slowest branch.

Not safe to drive branches of one Tee from several threads at once: only one
branch operation may be active at a time across the whole group.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, overload

from lazyseq.config import DEFAULT_CONFIG, SeqConfig
from lazyseq.kernel import Pull, Seq, Trace, Yield

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _Chunk(Generic[T]):
    """One link of the buffer chain. Never appended to once done."""

    capacity: int
    values: list[T] = field(default_factory=list)
    done: bool = False
    next: _Chunk[T] | None = None

    @property
    def size(self) -> int:
        return len(self.values)

    @property
    def full(self) -> bool:
        return len(self.values) >= self.capacity


@dataclass(eq=False)
class _Cursor(Generic[T]):
    """A branch's position in the chain; the only owner of chunks."""

    chunk: _Chunk[T] | None
    index: int = 0
    finished: bool = False


class Tee(Generic[T]):
    """Split one sequence into n independent branches.

    The source must not be used by anything else afterwards.

    Usage:
        tee = Tee(seq_range(0, 3), n=2)
        with tee:
            left, right = tee
            assert left.collect() == [0, 1, 2]
            assert right.collect() == [0, 1, 2]
    """

    def __init__(
        self,
        seq: Seq[T],
        n: int = 2,
        config: SeqConfig | None = None,
        trace: Trace | None = None,
    ) -> None:
        """
        Args:
            seq: Source sequence, owned by the Tee from now on
            n: Number of branches
            config: Optional configuration (chunk capacity)
            trace: Optional trace recorder

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        self._config = config or DEFAULT_CONFIG
        self._trace = trace
        self._pull: Pull[T] = Pull(seq, config=self._config, trace=trace)
        self.name = self._pull.name
        self._running = n
        self._fetched = 0
        self._released = False

        head: _Chunk[T] = _Chunk(self._config.chunk_capacity)
        self._branches = tuple(self._branch(_Cursor(head), i) for i in range(n))
        if n == 0:
            self._release()

    @property
    def fetched(self) -> int:
        """Number of elements physically pulled from the source."""
        return self._fetched

    @property
    def running(self) -> int:
        """Number of branches that have not finished yet."""
        return self._running

    @property
    def released(self) -> bool:
        """True once the source has been stopped."""
        return self._released

    def _next_from_chunk(self, cursor: _Cursor[T]) -> tuple[T | None, bool]:
        chunk = cursor.chunk
        assert chunk is not None
        i = cursor.index
        if i >= chunk.size and chunk.full and not chunk.done:
            if chunk.next is None:
                chunk.next = _Chunk(chunk.capacity)
            chunk = chunk.next
            i = 0
        if i >= chunk.size:
            if chunk.done:
                return None, False
            value, ok = self._pull.next()
            if not ok:
                chunk.done = True
                return None, False
            chunk.values.append(value)  # type: ignore[arg-type]
            self._fetched += 1
            if self._trace is not None:
                self._trace.record("tee.fetch", source=self.name, info={"count": self._fetched})
        cursor.chunk = chunk
        cursor.index = i + 1
        return chunk.values[i], True

    def _branch(self, cursor: _Cursor[T], number: int) -> Seq[T]:
        def run(yield_: Yield[T]) -> bool:
            if cursor.finished:
                return True
            try:
                while True:
                    value, ok = self._next_from_chunk(cursor)
                    if not ok:
                        return True
                    if not yield_(value):  # type: ignore[arg-type]
                        return False
            finally:
                self._finish(cursor, number)

        return Seq(run)

    def _finish(self, cursor: _Cursor[T], number: int) -> None:
        if cursor.finished:
            return
        cursor.finished = True
        cursor.chunk = None
        self._running -= 1
        if self._trace is not None:
            self._trace.record("tee.branch_done", source=self.name, info={"branch": number})
        if self._running == 0:
            self._release()

    def _release(self) -> None:
        if self._released:
            return
        self._released = True
        logger.debug("tee %s releasing source after %d fetches", self.name, self._fetched)
        if self._trace is not None:
            self._trace.record("tee.release", source=self.name, info={"fetched": self._fetched})
        self._pull.stop()

    def close(self) -> None:
        """Stop the source now, even if some branches have not finished.

        Unfinished branches still replay what is already buffered, then end.
        """
        self._release()

    def __len__(self) -> int:
        """Get number of branches."""
        return len(self._branches)

    @overload
    def __getitem__(self, item: int) -> Seq[T]: ...

    @overload
    def __getitem__(self, item: slice) -> tuple[Seq[T], ...]: ...

    def __getitem__(self, item: int | slice) -> Seq[T] | tuple[Seq[T], ...]:
        """Access branches via index or slice."""
        return self._branches[item]

    def __iter__(self) -> Iterator[Seq[T]]:
        """Iterate over branches."""
        yield from self._branches

    def __enter__(self) -> Tee[T]:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def tee(
    seq: Seq[T],
    n: int = 2,
    config: SeqConfig | None = None,
    trace: Trace | None = None,
) -> tuple[Seq[T], ...]:
    """tee(seq, n=2) --> tuple of n independent sequences.

    Once every returned sequence has finished (exhausted or stopped early),
    the source is stopped exactly once.
    """
    return tuple(Tee(seq, n=n, config=config, trace=trace))
