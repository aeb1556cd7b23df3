from ...Heap import Heap
from ...heaps import heaps_total, is_heap
from ..SortingAlgorithm import SortingAlgorithm


def heapify_by_push(arr: list) -> None:
    arr[:] = Heap(arr).values


algorithm = SortingAlgorithm("heapify by push", heapify_by_push, 8, output_total=heaps_total, validator=is_heap)
