"""Seq extensions - expose the combinators as Seq methods."""

from lazyseq.combinators import ops
from lazyseq.combinators.group import group_by
from lazyseq.combinators.tee import tee
from lazyseq.kernel.seq import Seq

Seq.register_op("map", ops.seq_map)
Seq.register_op("filter", ops.seq_filter)
Seq.register_op("filter_false", ops.filter_false)
Seq.register_op("enumerate", ops.seq_enumerate)
Seq.register_op("accumulate", ops.accumulate)
Seq.register_op("chain", ops.chain)
Seq.register_op("compress", ops.compress)
Seq.register_op("drop_while", ops.drop_while)
Seq.register_op("take_while", ops.take_while)
Seq.register_op("slice", ops.seq_slice)
Seq.register_op("pairwise", ops.pairwise)
Seq.register_op("group_by", group_by)
Seq.register_op("tee", tee)
