"""Tests for the push-to-pull adapter."""

import pytest

from lazyseq import Pull, Seq, Trace, pull, seq_range
from fakes import CountingSource, EndlessSource, FailingSource


def drain(next_) -> list:
    out = []
    while True:
        value, ok = next_()
        if not ok:
            return out
        out.append(value)


def test_pull_matches_push_order() -> None:
    source = seq_range(0, 50)
    next_, stop = pull(source)
    try:
        assert drain(next_) == source.collect()
    finally:
        stop()


def test_pull_produces_one_element_per_next() -> None:
    source = CountingSource(list("abcdef"))
    with Pull(source.seq) as p:
        assert p.next() == ("a", True)
        assert source.produced == 1
        assert p.next() == ("b", True)
        assert source.produced == 2
    assert source.released == 1


def test_exhausted_pull_reports_no_value() -> None:
    source = CountingSource([1])
    p = Pull(source.seq)
    assert p.next() == (1, True)
    assert p.next() == (None, False)
    assert p.next() == (None, False)
    assert p.stopped
    assert source.released == 1
    p.stop()
    assert source.released == 1


def test_stop_is_idempotent() -> None:
    source = EndlessSource()
    next_, stop = pull(source.seq)
    assert next_() == (0, True)
    assert next_() == (1, True)

    stop()
    stop()
    stop()

    assert source.released == 1
    assert source.produced == 2
    assert next_() == (None, False)
    assert next_() == (None, False)


def test_stop_before_first_next_never_runs_sequence() -> None:
    source = CountingSource([1, 2, 3])
    p = Pull(source.seq)
    p.stop()
    assert source.runs == 0
    assert p.next() == (None, False)


def test_error_propagates_out_of_next() -> None:
    p = Pull(FailingSource(fail_after=2).seq)
    assert p.next() == (0, True)
    assert p.next() == (1, True)
    with pytest.raises(RuntimeError, match="source failed"):
        p.next()
    assert p.next() == (None, False)
    p.stop()


def test_error_in_transform_propagates_out_of_next() -> None:
    def explode(value: int) -> int:
        if value == 3:
            raise ZeroDivisionError("bad value")
        return value

    with Pull(seq_range(0, 10).map(explode)) as p:
        assert [p.next()[0] for _ in range(3)] == [0, 1, 2]
        with pytest.raises(ZeroDivisionError):
            p.next()


def test_iterator_protocol() -> None:
    with Pull(Seq.of("x", "y")) as p:
        assert list(p) == ["x", "y"]


def test_context_manager_stops_on_error() -> None:
    source = EndlessSource()
    with pytest.raises(KeyError):
        with Pull(source.seq) as p:
            p.next()
            raise KeyError("caller failure")
    assert source.released == 1


def test_pull_over_pull_nested() -> None:
    inner = Seq(lambda yield_: all(yield_(v) for v in Pull(seq_range(0, 5))))
    with Pull(inner) as p:
        assert list(p) == [0, 1, 2, 3, 4]


def test_trace_records_next_and_stop() -> None:
    trace = Trace()
    with Pull(Seq.of(1, 2), trace=trace) as p:
        list(p)
    assert trace.count("pull.next") == 3
    assert trace.find_all(action="pull.next", ok=False)[0].source == p.name
    # Exhaustion already released the coroutine
    assert trace.count("pull.stop") == 0

    trace.clear()
    with Pull(Seq.of(1, 2), trace=trace) as p:
        p.next()
    assert trace.count("pull.stop") == 1
