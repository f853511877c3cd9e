from collections.abc import Callable, MutableSequence
from random import Random
from typing import Any, Optional

from ...quick_sort_3way import SortStats, partition
from ...TraceSink import TraceSink
from ..SortingAlgorithm import SortingAlgorithm


def quick_sort_3way_random_pivot(
    arr: MutableSequence,
    key: Optional[Callable[[Any], Any]] = None,
    sink: Optional[TraceSink] = None,
    rng: Optional[Random] = None,
) -> SortStats:
    return partition(arr, 0, len(arr) - 1, sink=sink, key=key, rng=Random() if rng is None else rng)


algorithm = SortingAlgorithm("3-way quick sort (random pivot)", quick_sort_3way_random_pivot)
