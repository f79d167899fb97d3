from __future__ import annotations

from lazyseq import Pull, Seq, Tee, Trace, seq_range


def running_stats(branches: Tee[int]) -> tuple[int, float, int]:
    """Read three statistics from one pass over the source."""
    total_seq, count_seq, peak_seq = branches
    total = sum(total_seq)
    count = len(count_seq.collect())
    peak = max(peak_seq)
    return total, total / count, peak


def staggered(branches: Tee[int]) -> list[list[int]]:
    """Drain branch i by i+1 elements per turn."""
    pulls: list[Pull[int] | None] = [b.pull() for b in branches]
    out: list[list[int]] = [[] for _ in pulls]
    while any(p is not None for p in pulls):
        for i, p in enumerate(pulls):
            if p is None:
                continue
            for _ in range(i + 1):
                value, ok = p.next()
                if not ok:
                    p.stop()
                    pulls[i] = None
                    break
                out[i].append(value)
    return out


if __name__ == "__main__":
    trace = Trace()
    source: Seq[int] = seq_range(0, 1000).map(lambda v: (v * 37) % 101)
    print(running_stats(Tee(source, n=3, trace=trace)))
    print(f"upstream fetches: {trace.count('tee.fetch')}")

    lengths = [len(seq) for seq in staggered(Tee(seq_range(0, 1000), n=4))]
    print(f"staggered branch lengths: {lengths}")
