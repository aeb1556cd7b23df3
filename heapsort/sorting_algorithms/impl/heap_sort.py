from ...Heap import Heap
from ..SortingAlgorithm import SortingAlgorithm


def heap_sort(arr: list) -> None:
    arr[:] = Heap(arr).sort()


algorithm = SortingAlgorithm("heap sort", heap_sort, 8)
