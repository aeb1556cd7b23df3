"This module operates with Max-Heap"
from collections.abc import Callable, Sequence
from functools import cache
from math import comb
from typing import Any, Optional


def parent_of(i: int) -> int:
    return (i - 1) >> 1


def _sub_heap_sizes(N: int) -> tuple[int, int]:
    "Sizes of the left and right subtrees of a complete binary tree with N nodes"
    t = 1 << (N.bit_length() - 2)
    M = 1 + N - (t << 1)
    L = t - 1 + min(t, M)
    R = t - 1 + max(0, M - t)
    return L, R


@cache
def heaps_total(N: int) -> int:
    "Number of distinct heaps holding the values 0..N-1"
    if N <= 1:
        return 1
    L, R = _sub_heap_sizes(N)
    return comb(L + R, L) * heaps_total(L) * heaps_total(R)


def is_heap(arr: Sequence, key: Optional[Callable[[Any], Any]] = None) -> bool:
    if key is not None:
        arr = [key(x) for x in arr]
    for i in range(1, len(arr)):
        if arr[parent_of(i)] < arr[i]:
            return False
    return True


def is_sorted(arr: Sequence) -> bool:
    return all(arr[i - 1] <= arr[i] for i in range(1, len(arr)))
