from collections.abc import Callable, MutableSequence, Sequence
from random import Random
from typing import Any, NamedTuple, Optional

from ..quick_sort_3way import SortStats
from ..TraceSink import TraceSink


def is_nondecreasing(arr: Sequence) -> bool:
    return all(not arr[i + 1] < arr[i] for i in range(len(arr) - 1))


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence, Optional[Callable[[Any], Any]], Optional[TraceSink], Optional[Random]], SortStats]
    validator: Callable[[Sequence], bool] = is_nondecreasing
