"""Configuration for sequence adapters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SeqConfig(BaseModel):
    """Tunables shared by Pull, Tee and the coroutine workers.

    Attributes:
        chunk_capacity: Number of elements held by one tee buffer chunk.
        thread_name_prefix: Prefix for coroutine worker thread names.
    """

    model_config = ConfigDict(frozen=True)

    chunk_capacity: int = Field(default=64, gt=0)
    thread_name_prefix: str = Field(default="lazyseq", min_length=1)


DEFAULT_CONFIG = SeqConfig()
