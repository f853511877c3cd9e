import traceback
from collections import Counter
from decimal import Decimal
from itertools import product
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import NamedTuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .counting import CmpCounter
from .samplers import SAMPLERS
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

RESULT_DIR = Path("logs/statistics.csv")
COLUMNS = ("name", "sampler", "N", "samples", "best", "worst", "avg", "avg partitions", "max depth", "avg swaps", "cmp per n log n")


class InvalidSortResultError(Exception):
    def __init__(self, name: str, msg: str) -> None:
        super().__init__(f"Invalid result of `{name}`: " + msg)


class CaseStatistics(NamedTuple):
    samples: int
    best: int
    worst: int
    avg: float
    avg_partitions: float
    max_depth: int
    avg_swaps: float


def to_displayable_float(x: float) -> str:
    return f"{Decimal(x):.2e}" if abs(x) >= 1e9 else f"{x:.2f}"


def validate(sorting_algorithm: SortingAlgorithm, before: list, after: list) -> None:
    if not sorting_algorithm.validator(after):
        raise InvalidSortResultError(sorting_algorithm.name, "result is not in non-decreasing order")
    if Counter(before) != Counter(after):
        raise InvalidSortResultError(sorting_algorithm.name, "result is not a permutation of the input")


def get_case_statistics(sorting_algorithm: SortingAlgorithm, sampler_name: str, N: int, samples: int = SAMPLES_PER_CASE) -> CaseStatistics:
    sampler = SAMPLERS[sampler_name]
    counter = CmpCounter()
    r = Random(SAMPLE_SEED)
    pivot_rng = Random(SAMPLE_SEED)
    cmp_cnts, partitions, depths, swaps = [], [], [], []
    start_time = thread_time()
    for _ in range(samples):
        val_array = sampler(N, r)
        arr = list(val_array)
        counter.reset()
        stats = sorting_algorithm.func(arr, counter.key, None, pivot_rng)
        validate(sorting_algorithm, val_array, arr)
        cmp_cnts.append(counter.cnt)
        partitions.append(stats.partitions)
        depths.append(stats.max_depth)
        swaps.append(stats.swaps)
        if int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            break

    cmp_cnts = np.array(cmp_cnts, dtype=np.int64)
    return CaseStatistics(
        len(cmp_cnts),
        int(cmp_cnts.min()),
        int(cmp_cnts.max()),
        float(cmp_cnts.mean()),
        float(np.mean(partitions)),
        int(np.max(depths)),
        float(np.mean(swaps)),
    )


def _work(args: tuple[int, str, int]) -> str:
    sorting_algorithm_i, sampler_name, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_i]
    try:
        s = get_case_statistics(sorting_algorithm, sampler_name, N)
    except Exception:
        traceback.print_exc()
        raise
    ratio = s.avg / (N * np.log2(N)) if N > 1 else np.nan
    return ",".join(
        map(
            str,
            (
                sorting_algorithm.name,
                sampler_name,
                N,
                s.samples,
                s.best,
                s.worst,
                to_displayable_float(s.avg),
                to_displayable_float(s.avg_partitions),
                s.max_depth,
                to_displayable_float(s.avg_swaps),
                to_displayable_float(ratio),
            ),
        )
    )


def generate_statistics(Ns: list[int] = STATISTICS_NS) -> None:
    tasks = list(product(range(len(sorting_algorithms)), SAMPLERS, Ns))
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    print(f"init: {len(tasks)} cases -> {RESULT_DIR}")
    with Pool() as pool, open(RESULT_DIR, "w") as f:
        f.write(",".join(COLUMNS) + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    print(f"fin:  {len(tasks)} cases -> {RESULT_DIR}")


def sort_result() -> None:
    df = pd.read_csv(RESULT_DIR)
    df = df.sort_values(["name", "sampler", "N"])
    df.to_csv(RESULT_DIR, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(RESULT_DIR.parent / f"{name}.csv", index=False)


if __name__ == "__main__":
    generate_statistics()
    sort_result()
