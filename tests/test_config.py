"""Tests for SeqConfig."""

import pytest
from pydantic import ValidationError

from lazyseq import DEFAULT_CONFIG, SeqConfig


def test_defaults() -> None:
    assert DEFAULT_CONFIG.chunk_capacity == 64
    assert DEFAULT_CONFIG.thread_name_prefix == "lazyseq"


def test_chunk_capacity_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        SeqConfig(chunk_capacity=0)


def test_thread_name_prefix_must_not_be_empty() -> None:
    with pytest.raises(ValidationError):
        SeqConfig(thread_name_prefix="")


def test_config_is_frozen() -> None:
    config = SeqConfig(chunk_capacity=8)
    with pytest.raises(ValidationError):
        config.chunk_capacity = 16  # type: ignore[misc]
