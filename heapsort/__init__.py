from .Heap import EmptyHeapError, Heap, HeapError, InvalidComparisonError
from .HeapNode import HeapNode
from .heaps import is_heap

__version__ = "0.1.0"
