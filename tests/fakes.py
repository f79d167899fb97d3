from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lazyseq import Seq


@dataclass
class CountingSource:
    """Source that records how many elements it produced and how often it was released."""

    values: list[Any]
    produced: int = 0
    released: int = 0
    runs: int = 0

    @property
    def seq(self) -> Seq[Any]:
        def run(yield_) -> bool:
            self.runs += 1
            try:
                for value in self.values:
                    self.produced += 1
                    if not yield_(value):
                        return False
                return True
            finally:
                self.released += 1

        return Seq(run)


@dataclass
class EndlessSource:
    """Endless 0, 1, 2, ... source that tracks its release."""

    produced: int = 0
    released: int = 0

    @property
    def seq(self) -> Seq[int]:
        def run(yield_) -> bool:
            n = 0
            try:
                while True:
                    self.produced += 1
                    if not yield_(n):
                        return False
                    n += 1
            finally:
                self.released += 1

        return Seq(run)


@dataclass
class FailingSource:
    """Source that raises after producing ``fail_after`` elements."""

    fail_after: int
    error: Exception = field(default_factory=lambda: RuntimeError("source failed"))

    @property
    def seq(self) -> Seq[int]:
        def run(yield_) -> bool:
            for n in range(self.fail_after):
                if not yield_(n):
                    return False
            raise self.error

        return Seq(run)


def take(seq: Seq[Any], k: int) -> list[Any]:
    """Collect the first k elements by stopping early."""
    out: list[Any] = []

    def step(value: Any) -> bool:
        out.append(value)
        return len(out) < k

    if k > 0:
        seq.run(step)
    return out
