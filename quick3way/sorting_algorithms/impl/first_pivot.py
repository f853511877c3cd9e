from collections.abc import Callable, MutableSequence
from random import Random
from typing import Any, Optional

from ...quick_sort_3way import SortStats, partition
from ...TraceSink import TraceSink
from ..SortingAlgorithm import SortingAlgorithm


def quick_sort_3way(
    arr: MutableSequence,
    key: Optional[Callable[[Any], Any]] = None,
    sink: Optional[TraceSink] = None,
    rng: Optional[Random] = None,
) -> SortStats:
    # the pivot is always arr[lo], rng is unused
    return partition(arr, 0, len(arr) - 1, sink=sink, key=key)


algorithm = SortingAlgorithm("3-way quick sort", quick_sort_3way)
