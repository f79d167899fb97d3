from .combinators import (
    Tee,
    accumulate,
    chain,
    chain_from_iter,
    compress,
    count,
    count_by,
    drop_while,
    filter_false,
    from_iterable,
    group_by,
    pairwise,
    repeat,
    repeat_n,
    seq_enumerate,
    seq_filter,
    seq_map,
    seq_range,
    seq_slice,
    take_while,
    tee,
)
from .config import DEFAULT_CONFIG, SeqConfig
from .kernel import (
    Coroutine,
    CoroutineError,
    Event,
    Pull,
    Seq,
    SeqError,
    StaleGroupError,
    Trace,
    create,
    pull,
)

__all__ = [
    # Core
    "Seq",
    "Pull",
    "pull",
    "Coroutine",
    "create",
    # Fan-out and grouping
    "Tee",
    "tee",
    "group_by",
    # Combinators
    "seq_range",
    "count",
    "count_by",
    "repeat",
    "repeat_n",
    "from_iterable",
    "seq_enumerate",
    "seq_map",
    "seq_filter",
    "filter_false",
    "accumulate",
    "chain",
    "chain_from_iter",
    "compress",
    "drop_while",
    "take_while",
    "seq_slice",
    "pairwise",
    # Config
    "SeqConfig",
    "DEFAULT_CONFIG",
    # Errors
    "SeqError",
    "CoroutineError",
    "StaleGroupError",
    # Tracing
    "Trace",
    "Event",
]
