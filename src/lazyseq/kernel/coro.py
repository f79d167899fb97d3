"""Coroutine - cooperative suspend/resume of a running computation.

A body runs on a dedicated worker thread, but never in parallel with its
resumer: control is handed back and forth through a condition-variable
rendezvous that carries exactly one value per transfer. The worker thread
only exists to keep the body's stack alive while it is suspended inside a
nested callback.
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Callable
from typing import Generic, Literal, TypeVar

from lazyseq.config import DEFAULT_CONFIG, SeqConfig
from lazyseq.kernel.errors import CoroutineError

I = TypeVar("I")
O = TypeVar("O")

logger = logging.getLogger(__name__)

# body(first_input, yield_back) -> final output
Body = Callable[[I, Callable[[O], I]], O]
Resume = Callable[[I], tuple[O | None, bool]]

_ids = itertools.count(1)


class Coroutine(Generic[I, O]):
    """One suspendable computation and the handle used to resume it.

    Attributes:
        name: Name of the worker thread that runs the body.
    """

    def __init__(
        self,
        body: Body[I, O],
        name: str | None = None,
        config: SeqConfig | None = None,
    ) -> None:
        config = config or DEFAULT_CONFIG
        self.name = name or f"{config.thread_name_prefix}-coro-{next(_ids)}"
        self._body = body
        self._cond = threading.Condition()
        self._turn: Literal["caller", "body"] = "caller"
        self._inbox: I | None = None
        self._outbox: O | None = None
        self._error: BaseException | None = None
        self._started = False
        self._done = False
        self._resuming = False
        self._thread: threading.Thread | None = None

    @property
    def started(self) -> bool:
        return self._started

    @property
    def done(self) -> bool:
        return self._done

    def resume(self, value: I) -> tuple[O | None, bool]:
        """Transfer control to the body until it yields or returns.

        The first call starts the body with ``value`` as its first input.
        Later calls make the pending ``yield_back`` return ``value``.

        Args:
            value: Input handed to the body

        Returns:
            ``(out, True)`` when the body yielded ``out``, ``(result, False)``
            when the body returned ``result``, and ``(None, False)`` on every
            call after that.

        Raises:
            CoroutineError: If the coroutine is already being resumed
            BaseException: Whatever the body raised, re-raised here
        """
        with self._cond:
            if self._done:
                return None, False
            if self._resuming:
                raise CoroutineError(f"coroutine {self.name} is already running", self.name)
            self._resuming = True
            self._inbox = value
            self._turn = "body"
            if not self._started:
                self._started = True
                self._thread = threading.Thread(target=self._main, name=self.name, daemon=True)
                self._thread.start()
            else:
                self._cond.notify_all()
            while self._turn == "body":
                self._cond.wait()
            self._resuming = False
            out, self._outbox = self._outbox, None
            error, self._error = self._error, None
            running = not self._done

        if error is not None:
            raise error
        return out, running

    def close(self) -> None:
        """Mark a coroutine that never started as done without running it.

        Raises:
            CoroutineError: If the body has started and not yet returned
        """
        with self._cond:
            if self._done:
                return
            if self._started:
                raise CoroutineError(
                    f"coroutine {self.name} has started; resume it to completion",
                    self.name,
                )
            self._done = True

    def _yield(self, value: O) -> I:
        """Suspend the body, handing ``value`` to the pending resume."""
        if threading.current_thread() is not self._thread:
            raise CoroutineError(
                f"yield_back of coroutine {self.name} called outside its body", self.name
            )
        with self._cond:
            self._outbox = value
            self._turn = "caller"
            self._cond.notify_all()
            while self._turn == "caller":
                self._cond.wait()
            return self._inbox  # type: ignore[return-value]

    def _main(self) -> None:
        with self._cond:
            first = self._inbox
        logger.debug("coroutine %s started", self.name)

        out: O | None = None
        error: BaseException | None = None
        try:
            out = self._body(first, self._yield)  # type: ignore[arg-type]
        except BaseException as exc:
            # Handed to the resumer, which re-raises it
            error = exc

        with self._cond:
            self._outbox = out
            self._error = error
            self._done = True
            self._turn = "caller"
            self._cond.notify_all()
        logger.debug("coroutine %s finished (error=%r)", self.name, error)


def create(
    body: Body[I, O],
    name: str | None = None,
    config: SeqConfig | None = None,
) -> Resume[I, O]:
    """Create a coroutine and return its resume function.

    Args:
        body: Computation taking its first input and a ``yield_back`` function
        name: Optional worker thread name
        config: Optional configuration

    Returns:
        The bound ``resume`` of a new Coroutine
    """
    return Coroutine(body, name=name, config=config).resume
