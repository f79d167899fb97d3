"""Seq - the push sequence contract every combinator is built on."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from lazyseq.config import SeqConfig
from lazyseq.kernel.pull import Pull
from lazyseq.kernel.trace import Trace

T = TypeVar("T")

# Continuation: receives one element, returns False to stop early
Yield = Callable[[T], bool]


# Extension registry - class-level storage for Seq combinators
_extensions_registry: dict[str, Callable[..., Any]] = {}


@dataclass(frozen=True)
class Seq(Generic[T]):
    """Push sequence - drives a continuation over each element in order.

    ``run(yield_)`` calls ``yield_`` once per element and stops the first
    time it returns a falsy value, returning False itself. It returns True
    when every element was delivered. Combinators must forward that False
    and never call their continuation again after receiving it.

    Combinators can be registered as methods via register_op().
    """

    _run: Callable[[Yield[T]], bool]

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register a combinator as a Seq method.

        Args:
            name: The method name (e.g., "tee")
            fn: Function taking the Seq as its first argument
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered combinator methods."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def run(self, yield_: Yield[T]) -> bool:
        """Drive ``yield_`` over the elements.

        Returns:
            True if the sequence ran to completion, False if ``yield_``
            stopped it early
        """
        return self._run(yield_)

    def __iter__(self) -> Iterator[T]:
        with Pull(self) as p:
            yield from p

    def pull(self, config: SeqConfig | None = None, trace: Trace | None = None) -> Pull[T]:
        """Open a pull adapter over this sequence."""
        return Pull(self, config=config, trace=trace)

    def collect(self) -> list[T]:
        """Run to completion and return every element."""
        out: list[T] = []

        def append(value: T) -> bool:
            out.append(value)
            return True

        self.run(append)
        return out

    def for_each(self, fn: Callable[[T], Any]) -> bool:
        """Call ``fn`` on every element, ignoring its return value."""

        def call(value: T) -> bool:
            fn(value)
            return True

        return self.run(call)

    @staticmethod
    def from_iterable(iterable: Iterable[T]) -> Seq[T]:
        """Create a Seq over a Python iterable.

        The Seq can be run again only if the iterable can be iterated again.
        """

        def run(yield_: Yield[T]) -> bool:
            for value in iterable:
                if not yield_(value):
                    return False
            return True

        return Seq(run)

    @staticmethod
    def of(*values: T) -> Seq[T]:
        """Create a Seq over the given values."""
        return Seq.from_iterable(values)

    @staticmethod
    def empty() -> Seq[Any]:
        """Create a Seq with no elements."""
        return Seq(lambda _yield: True)
