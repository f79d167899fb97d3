"""Tests for the Seq push contract."""

import pytest

from lazyseq import Seq, seq_range
from fakes import CountingSource, EndlessSource, take


def test_run_returns_true_on_completion() -> None:
    seen = []
    assert Seq.of(1, 2, 3).run(lambda v: seen.append(v) is None) is True
    assert seen == [1, 2, 3]


def test_run_returns_false_on_early_stop() -> None:
    source = CountingSource([1, 2, 3, 4])
    seen = []

    def step(value: int) -> bool:
        seen.append(value)
        return value < 2

    assert source.seq.run(step) is False
    assert seen == [1, 2]
    assert source.produced == 2
    assert source.released == 1


def test_run_is_reinvocable() -> None:
    seq = seq_range(0, 3)
    assert seq.collect() == [0, 1, 2]
    assert seq.collect() == [0, 1, 2]


def test_empty() -> None:
    assert Seq.empty().collect() == []
    assert Seq.empty().run(lambda v: False) is True


def test_for_each_ignores_return_value() -> None:
    seen = []
    assert Seq.of("a", "b").for_each(seen.append) is True
    assert seen == ["a", "b"]


def test_iteration_matches_run() -> None:
    seq = seq_range(0, 100)
    assert list(seq) == seq.collect()


def test_breaking_out_of_loop_releases_source() -> None:
    source = EndlessSource()
    it = iter(source.seq)
    for value in it:
        if value == 5:
            break
    it.close()
    assert source.released == 1
    assert source.produced == 6


def test_endless_source_stops_after_k() -> None:
    source = EndlessSource()
    assert take(source.seq, 3) == [0, 1, 2]
    assert source.produced == 3
    assert source.released == 1


def test_registered_op_is_available_as_method() -> None:
    assert Seq.of(1, 2, 3).map(lambda v: v * 10).collect() == [10, 20, 30]


def test_unknown_attribute_raises() -> None:
    with pytest.raises(AttributeError, match="no attribute 'nope'"):
        Seq.of(1).nope


def test_register_op_adds_method() -> None:
    def doubled(seq: Seq[int]) -> Seq[int]:
        return seq.map(lambda v: v * 2)

    Seq.register_op("doubled_for_test", doubled)
    assert Seq.of(1, 2).doubled_for_test().collect() == [2, 4]
