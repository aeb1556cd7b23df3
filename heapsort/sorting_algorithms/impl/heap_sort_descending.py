from ...Heap import Heap
from ..SortingAlgorithm import SortingAlgorithm


def heap_sort_descending(arr: list) -> None:
    heap = Heap(arr)
    arr.clear()
    while not heap.is_empty():
        arr.append(heap.pop())


algorithm = SortingAlgorithm(
    "heap sort descending",
    heap_sort_descending,
    8,
    validator=lambda arr: all(v == len(arr) - 1 - i for i, v in enumerate(arr)),
)
