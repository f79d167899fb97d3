"""Stateless combinators: generators and transforms over Seq.

Every combinator returns a new Seq and holds only its parameters. Each one
forwards a False from its continuation as its own return value, which is
the only cancellation path.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from lazyseq.kernel import Pull, Seq, Yield

T = TypeVar("T")
R = TypeVar("R")


def seq_range(start: int, end: int) -> Seq[int]:
    """Yield every integer in [start, end)."""

    def run(yield_: Yield[int]) -> bool:
        for n in range(start, end):
            if not yield_(n):
                return False
        return True

    return Seq(run)


def count(start: int | float = 0) -> Seq[Any]:
    """Yield start, start+1, start+2, ... endlessly."""
    return count_by(start, 1)


def count_by(start: int | float, step: int | float) -> Seq[Any]:
    """Yield start, start+step, start+2*step, ... endlessly."""

    def run(yield_: Yield[Any]) -> bool:
        n = start
        while yield_(n):
            n += step
        return False

    return Seq(run)


def repeat(elem: T) -> Seq[T]:
    """Yield elem endlessly."""

    def run(yield_: Yield[T]) -> bool:
        while yield_(elem):
            pass
        return False

    return Seq(run)


def repeat_n(elem: T, n: int) -> Seq[T]:
    """Yield elem n times. A negative n yields nothing."""

    def run(yield_: Yield[T]) -> bool:
        for _ in range(n):
            if not yield_(elem):
                return False
        return True

    return Seq(run)


def from_iterable(iterable: Iterable[T]) -> Seq[T]:
    """Yield every element of a Python iterable."""
    return Seq.from_iterable(iterable)


def seq_enumerate(seq: Seq[T], start: int = 0) -> Seq[tuple[int, T]]:
    """Yield (start, p0), (start+1, p1), ..."""

    def run(yield_: Yield[tuple[int, T]]) -> bool:
        i = start

        def step(value: T) -> bool:
            nonlocal i
            if not yield_((i, value)):
                return False
            i += 1
            return True

        return seq.run(step)

    return Seq(run)


def seq_map(seq: Seq[T], fn: Callable[[T], R]) -> Seq[R]:
    """Yield fn(p0), fn(p1), ..."""
    return Seq(lambda yield_: seq.run(lambda value: yield_(fn(value))))


def seq_filter(seq: Seq[T], pred: Callable[[T], bool]) -> Seq[T]:
    """Yield elements of seq where pred(elem) is true."""
    return Seq(lambda yield_: seq.run(lambda value: not pred(value) or yield_(value)))


def filter_false(seq: Seq[T], pred: Callable[[T], bool]) -> Seq[T]:
    """Yield elements of seq where pred(elem) is false."""
    return Seq(lambda yield_: seq.run(lambda value: bool(pred(value)) or yield_(value)))


def accumulate(seq: Seq[T], fn: Callable[[T, T], T] = operator.add) -> Seq[T]:
    """Yield p0, fn(p0, p1), fn(fn(p0, p1), p2), ..."""

    def run(yield_: Yield[T]) -> bool:
        first = True
        acc: Any = None

        def step(value: T) -> bool:
            nonlocal first, acc
            if first:
                acc = value
                first = False
            else:
                acc = fn(acc, value)
            return yield_(acc)

        return seq.run(step)

    return Seq(run)


def chain(*seqs: Seq[T]) -> Seq[T]:
    """Yield every element of seqs[0], then of seqs[1], etc."""
    return chain_from_iter(Seq.from_iterable(seqs))


def chain_from_iter(seqs: Seq[Seq[T]]) -> Seq[T]:
    """Yield every element produced by each sequence of a sequence."""

    def run(yield_: Yield[T]) -> bool:
        return seqs.run(lambda inner: inner.run(yield_))

    return Seq(run)


def compress(data: Seq[T], selectors: Seq[Any]) -> Seq[T]:
    """Yield d[0] if s[0], d[1] if s[1], ...

    Stops as soon as either data or selectors is exhausted.
    """

    def run(yield_: Yield[T]) -> bool:
        stopped = False
        with Pull(selectors) as sel:

            def step(value: T) -> bool:
                nonlocal stopped
                selected, ok = sel.next()
                if not ok:
                    return False
                if selected and not yield_(value):
                    stopped = True
                    return False
                return True

            data.run(step)
        return not stopped

    return Seq(run)


def drop_while(seq: Seq[T], pred: Callable[[T], bool]) -> Seq[T]:
    """Yield seq[n], seq[n+1], ..., starting when pred first returns false."""

    def run(yield_: Yield[T]) -> bool:
        dropping = True

        def step(value: T) -> bool:
            nonlocal dropping
            if dropping:
                if pred(value):
                    return True
                dropping = False
            return yield_(value)

        return seq.run(step)

    return Seq(run)


def take_while(seq: Seq[T], pred: Callable[[T], bool]) -> Seq[T]:
    """Yield seq[0], seq[1], ..., until pred returns false."""

    def run(yield_: Yield[T]) -> bool:
        stopped = False

        def step(value: T) -> bool:
            nonlocal stopped
            if not pred(value):
                return False
            if not yield_(value):
                stopped = True
                return False
            return True

        seq.run(step)
        return not stopped

    return Seq(run)


def seq_slice(seq: Seq[T], start: int, end: int | None = None) -> Seq[T]:
    """Yield the elements at positions [start, end).

    No element past ``end - 1`` is produced, so this is safe on endless
    sequences.

    Raises:
        ValueError: If start is negative or end is before start
    """
    if start < 0:
        raise ValueError("start must be non-negative")
    if end is not None and end < start:
        raise ValueError("end must not be before start")

    def run(yield_: Yield[T]) -> bool:
        if end == start:
            return True
        stopped = False
        i = 0

        def step(value: T) -> bool:
            nonlocal i, stopped
            pos = i
            i += 1
            if pos < start:
                return True
            if not yield_(value):
                stopped = True
                return False
            return end is None or i < end

        seq.run(step)
        return not stopped

    return Seq(run)


def pairwise(seq: Seq[T]) -> Seq[tuple[T, T]]:
    """Yield (p0, p1), (p1, p2), (p2, p3), ..."""

    def run(yield_: Yield[tuple[T, T]]) -> bool:
        first = True
        last: Any = None

        def step(value: T) -> bool:
            nonlocal first, last
            if not first and not yield_((last, value)):
                return False
            first = False
            last = value
            return True

        return seq.run(step)

    return Seq(run)
