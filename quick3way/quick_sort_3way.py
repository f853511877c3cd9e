from collections.abc import Callable, MutableSequence
from random import Random
from typing import Any, NamedTuple, Optional

from .TraceSink import SequenceView, TraceSink


class InvalidWindowError(Exception):
    def __init__(self, lo: int, hi: int, n: int) -> None:
        super().__init__(f"Invalid window [{lo}, {hi}] for a sequence of length {n}")
        self.lo = lo
        self.hi = hi
        self.n = n


class SortStats(NamedTuple):
    partitions: int = 0
    trivial: int = 0
    max_depth: int = 0
    swaps: int = 0


def _identity(x: Any) -> Any:
    return x


def _sort_window(
    seq: MutableSequence,
    lo: int,
    hi: int,
    sink: Optional[TraceSink],
    key: Optional[Callable[[Any], Any]],
    rng: Optional[Random],
) -> SortStats:
    if key is None:
        key = _identity
    view = None if sink is None else SequenceView(seq)
    partitions = trivial = max_depth = swaps = 0

    # pending windows, popped left window first so steps come out in recursion order
    windows: list[tuple[int, int, int]] = [(lo, hi, 1)]
    while windows:
        lo, hi, depth = windows.pop()
        if lo > hi:
            continue
        max_depth = max(max_depth, depth)
        if lo == hi:
            trivial += 1
            if sink is not None:
                sink.on_partition_step(view, lo, lo, lo, lo)
            continue

        if rng is not None:
            r = rng.randint(lo, hi)
            if r != lo:
                seq[lo], seq[r] = seq[r], seq[lo]
                swaps += 1
        if sink is not None:
            sink.on_partition_step(view, lo, lo, hi, hi)

        lt, gt, idx = lo, hi, lo
        pivot = key(seq[lo])
        while idx <= gt:
            cur = key(seq[idx])
            if pivot < cur:
                seq[idx], seq[gt] = seq[gt], seq[idx]
                gt -= 1
                swaps += 1
            elif cur < pivot:
                seq[lt], seq[idx] = seq[idx], seq[lt]
                lt += 1
                idx += 1
                swaps += 1
            else:
                idx += 1
        partitions += 1

        if sink is not None:
            sink.on_partition_step(view, lo, lt, gt, hi)
        windows.append((gt + 1, hi, depth + 1))
        windows.append((lo, lt - 1, depth + 1))

    return SortStats(partitions, trivial, max_depth, swaps)


def partition(
    seq: MutableSequence,
    lo: int,
    hi: int,
    sink: Optional[TraceSink] = None,
    key: Optional[Callable[[Any], Any]] = None,
    rng: Optional[Random] = None,
) -> SortStats:
    """Sort ``seq[lo:hi + 1]`` in place with three-way partitioning.

    The pivot of every window is its first element unless ``rng`` is given, in which case
    a random element of the window is moved to the front first. Elements are compared with
    ``<`` only; a comparison that is not a total order (NaN, inconsistent ``__lt__``) may
    leave the window unsorted.
    """
    if not 0 <= lo <= hi + 1 <= len(seq):
        raise InvalidWindowError(lo, hi, len(seq))
    return _sort_window(seq, lo, hi, sink, key, rng)


def sort(
    seq: MutableSequence,
    sink: Optional[TraceSink] = None,
    key: Optional[Callable[[Any], Any]] = None,
    rng: Optional[Random] = None,
) -> None:
    _sort_window(seq, 0, len(seq) - 1, sink, key, rng)
