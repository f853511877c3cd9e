"Input distributions for experiments, each a ``(N, Random) -> list`` callable"
from collections.abc import Callable, Iterable
from random import Random

from .Config import *

Sampler = Callable[[int, Random], list]


def distinct_values(m: int) -> Sampler:
    "N values drawn uniformly from the m keys 1/m, 2/m, ..., 1"
    if m < 1:
        raise ValueError(f"m must be positive, got {m}")
    return lambda N, r: [(1 + r.randrange(m)) / m for _ in range(N)]


def permutation(N: int, r: Random) -> list[int]:
    arr = list(range(N))
    r.shuffle(arr)
    return arr


def ascending(N: int, _: Random) -> list[int]:
    return list(range(N))


def descending(N: int, _: Random) -> list[int]:
    return list(range(N - 1, -1, -1))


def all_equal(N: int, _: Random) -> list[int]:
    return [0] * N


def count_distinct(values: Iterable) -> int:
    return len(set(values))


SAMPLERS: dict[str, Sampler] = {
    "permutation": permutation,
    "distinct values": distinct_values(DISTINCT_M),
    "ascending": ascending,
    "descending": descending,
    "all equal": all_equal,
}
