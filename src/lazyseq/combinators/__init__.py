"""Combinators - sequence generators, transforms, tee and group_by."""

# Import seq_ext to register Seq methods
from . import seq_ext  # noqa: F401
from .group import group_by
from .ops import (
    accumulate,
    chain,
    chain_from_iter,
    compress,
    count,
    count_by,
    drop_while,
    filter_false,
    from_iterable,
    pairwise,
    repeat,
    repeat_n,
    seq_enumerate,
    seq_filter,
    seq_map,
    seq_range,
    seq_slice,
    take_while,
)
from .tee import Tee, tee

__all__ = [
    "Tee",
    "tee",
    "group_by",
    "accumulate",
    "chain",
    "chain_from_iter",
    "compress",
    "count",
    "count_by",
    "drop_while",
    "filter_false",
    "from_iterable",
    "pairwise",
    "repeat",
    "repeat_n",
    "seq_enumerate",
    "seq_filter",
    "seq_map",
    "seq_range",
    "seq_slice",
    "take_while",
]
