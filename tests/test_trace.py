"""Tests for the adapter trace recorder."""

from lazyseq import Trace


def test_record_assigns_sequential_ids() -> None:
    trace = Trace()
    assert trace.record("pull.next", source="p1", info={"ok": True}) == 0
    assert trace.record("pull.stop", source="p1") == 1
    assert len(trace) == 2
    assert [e.action for e in trace.get_events()] == ["pull.next", "pull.stop"]


def test_find_all_matches_fields_and_info() -> None:
    trace = Trace()
    trace.record("tee.fetch", source="t", info={"count": 1})
    trace.record("tee.fetch", source="t", info={"count": 2})
    trace.record("tee.release", source="t", info={"fetched": 2})

    assert len(trace.find_all(action="tee.fetch")) == 2
    assert trace.find_all(count=2)[0].id == 1
    assert trace.count("tee.release") == 1


def test_disabled_trace_records_nothing() -> None:
    trace = Trace(enabled=False)
    assert trace.record("pull.next") is None
    assert len(trace) == 0


def test_clear_resets_ids() -> None:
    trace = Trace()
    trace.record("a")
    trace.clear()
    assert len(trace) == 0
    assert trace.record("b") == 0
