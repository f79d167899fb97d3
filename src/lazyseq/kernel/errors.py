"""Error types for sequence adapters."""

from __future__ import annotations


class SeqError(Exception):
    """Base class for errors raised by lazyseq itself.

    Failures raised by user callbacks are never wrapped; they propagate
    unchanged out of the call that triggered them.
    """


class CoroutineError(SeqError):
    """Error raised when a coroutine is resumed while it is already running."""

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)

    def __repr__(self) -> str:
        return f"CoroutineError({super().__repr__()}, name={self.name!r})"


class StaleGroupError(SeqError):
    """Error raised when a group is iterated after group_by moved past it.

    Preserves both generation numbers for debugging purposes.
    """

    def __init__(self, generation: int, current: int) -> None:
        self.generation = generation
        self.current = current
        super().__init__(
            f"group {generation} is stale: group_by has advanced to group {current}"
        )

    def __repr__(self) -> str:
        return (
            f"StaleGroupError(generation={self.generation!r}, current={self.current!r})"
        )
