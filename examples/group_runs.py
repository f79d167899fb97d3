from __future__ import annotations

from lazyseq import Seq, compress, group_by


def run_length_encode(text: str) -> str:
    return "".join(
        f"{len(group.collect())}{key}" for key, group in group_by(Seq.from_iterable(text))
    )


def select(data: str, mask: list[bool]) -> str:
    return "".join(compress(Seq.from_iterable(data), Seq.from_iterable(mask)))


if __name__ == "__main__":
    print(run_length_encode("AAAABBBCCDAABBB"))
    print(select("ABCDEF", [True, False, True, False, True, True]))
