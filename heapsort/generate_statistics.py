from decimal import Decimal
from itertools import product
from math import log2, nan
from pathlib import Path
from random import Random
from time import thread_time
from typing import Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, N: int) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` produced a wrong result with {N} elements")


# copy from functools.cmp_to_key
# since member "obj" is not present in the documentation, it is not guaranteed to be exist in the future
# fmt: off
def cmp_to_key(mycmp):
    """Convert a cmp= function into a key= function"""
    class K(object):
        __slots__ = ['obj']
        def __init__(self, obj):
            self.obj = obj
        def __lt__(self, other):
            return mycmp(self.obj, other.obj) < 0
        def __gt__(self, other):
            return mycmp(self.obj, other.obj) > 0
        def __eq__(self, other):
            return mycmp(self.obj, other.obj) == 0
        def __le__(self, other):
            return mycmp(self.obj, other.obj) <= 0
        def __ge__(self, other):
            return mycmp(self.obj, other.obj) >= 0
        __hash__ = None
    return K
# fmt: on


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_cmp_cnts(sorting_algorithm: SortingAlgorithm, N: int, r: Optional[Random] = None) -> np.ndarray:
    "Comparison counts of `sorting_algorithm` over every input of size N, or over random samples once N exceeds max_N"

    def cmp(x: int, y: int) -> int:
        nonlocal cmp_cnt
        cmp_cnt += 1
        return x - y

    key = cmp_to_key(cmp)

    do_sample = N > sorting_algorithm.max_N
    if do_sample:
        inputs = sorting_algorithm.sampler(N, r if r is not None else Random(SAMPLE_SEED))
        start_time = thread_time()
    else:
        inputs = sorting_algorithm.generator(N)
    cmp_cnts: list[int] = []
    for val_array in inputs:
        arr = [key(x) for x in val_array]
        cmp_cnt = 0
        sorting_algorithm.func(arr)
        if not sorting_algorithm.validator([x.obj for x in arr]):
            raise InvalidSortingAlgorithmError(sorting_algorithm.name, N)
        cmp_cnts.append(cmp_cnt)
        if do_sample and (len(cmp_cnts) >= SAMPLES_PER_N or int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS):
            break
    return np.array(cmp_cnts, dtype=np.int64)


def _work(sorting_algorithm: SortingAlgorithm, N: int) -> dict:
    data = get_cmp_cnts(sorting_algorithm, N, Random(SAMPLE_SEED))
    input_total = sorting_algorithm.input_total(N)
    output_total = sorting_algorithm.output_total(N)
    lower_bound = log2(input_total) - log2(output_total)
    avg = float(data.mean())
    return {
        "name": sorting_algorithm.name,
        "N": N,
        "input": to_displayable_int(input_total),
        "output": to_displayable_int(output_total),
        "lower bound": lower_bound,
        "best": int(data.min()),
        "worst": int(data.max()),
        "avg": avg,
        "ratio": nan if input_total <= output_total else avg / lower_bound,
    }


def generate_statistics(Ns: Optional[list[int]] = None, algorithms: Optional[list[SortingAlgorithm]] = None) -> pd.DataFrame:
    Ns = STATISTICS_NS if Ns is None else Ns
    algorithms = sorting_algorithms if algorithms is None else algorithms
    tasks = list(product(algorithms, Ns))
    rows = [_work(sorting_algorithm, N) for sorting_algorithm, N in tqdm(tasks, total=len(tasks))]
    return pd.DataFrame(rows, columns=["name", "N", "input", "output", "lower bound", "best", "worst", "avg", "ratio"])


def save_result(df: pd.DataFrame, result_dir: Path = RESULT_DIR) -> None:
    result_dir.parent.mkdir(parents=True, exist_ok=True)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_dir, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_dir.parent / f"{name}.csv", index=False)
    print(f"fin:  statistics written to `{result_dir}`")


if __name__ == "__main__":
    save_result(generate_statistics())
