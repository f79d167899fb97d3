"""group_by - split a sequence into runs of consecutive equal keys."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from lazyseq.kernel import Pull, Seq, StaleGroupError, Yield

T = TypeVar("T")
K = TypeVar("K")


class _GroupCursor(Generic[T, K]):
    """The single pull position shared by group_by and its current group.

    ``value`` is the look-ahead element; ``delivered`` tells whether the
    current group has already handed it out.
    """

    def __init__(self, pull: Pull[T], key: Callable[[T], K]) -> None:
        self.pull = pull
        self.key_fn = key
        self.value: Any = None
        self.key: Any = None
        self.ok = False
        self.delivered = False
        self.group_done = False
        self.generation = 0

    def start(self) -> bool:
        value, self.ok = self.pull.next()
        if self.ok:
            self.value = value
            self.key = self.key_fn(value)
        return self.ok

    def step(self) -> bool:
        """Pull the next element; False when the current group has ended."""
        value, ok = self.pull.next()
        if not ok:
            self.ok = False
            self.group_done = True
            return False
        key = self.key_fn(value)
        self.value = value
        self.delivered = False
        if key != self.key:
            self.key = key
            self.group_done = True
            return False
        return True

    def drain(self) -> None:
        while not self.group_done:
            if self.delivered:
                self.step()
            else:
                self.delivered = True

    def group(self, generation: int) -> Seq[T]:
        def run(yield_: Yield[T]) -> bool:
            if generation != self.generation:
                raise StaleGroupError(generation, self.generation)
            while not self.group_done:
                if self.delivered and not self.step():
                    break
                self.delivered = True
                if not yield_(self.value):
                    return False
            return True

        return Seq(run)


def group_by(seq: Seq[T], key: Callable[[T], K] | None = None) -> Seq[tuple[K, Seq[T]]]:
    """Yield (key, group) for each run of consecutive elements with the same key.

    ``key`` computes the key of each element; identity when None.

    A group is only valid until group_by produces the next pair. Running it
    afterwards raises StaleGroupError. A group the caller did not finish is
    drained before the next pair is produced.

    Example:
        >>> [(k, "".join(g)) for k, g in group_by(Seq.of(*"AAB"))]
        [('A', 'AA'), ('B', 'B')]
    """
    key_fn: Callable[[T], Any] = key if key is not None else (lambda value: value)

    def run(yield_: Yield[tuple[K, Seq[T]]]) -> bool:
        with Pull(seq) as p:
            cursor: _GroupCursor[T, Any] = _GroupCursor(p, key_fn)
            if not cursor.start():
                return True
            try:
                while cursor.ok:
                    cursor.generation += 1
                    cursor.group_done = False
                    if not yield_((cursor.key, cursor.group(cursor.generation))):
                        return False
                    cursor.drain()
            finally:
                cursor.generation += 1
        return True

    return Seq(run)
