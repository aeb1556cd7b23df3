"This module operates with Max-Heap"
from collections.abc import Callable, Iterable
from typing import Any, Generic, Optional, TypeVar

from .HeapNode import HeapNode

T = TypeVar("T")


class HeapError(Exception):
    pass


class EmptyHeapError(HeapError):
    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() on an empty heap")


class InvalidComparisonError(HeapError):
    def __init__(self, x: Any, y: Any) -> None:
        super().__init__(f"cannot order {x!r} against {y!r}")


class Heap(Generic[T]):
    """Array-backed binary max-heap.

    ``values[0]`` is always the largest value and the children of slot ``i``
    live at ``2i+1`` and ``2i+2``. Every public method leaves the heap property
    intact on return. ``key`` maps a value to the object that is compared.
    """

    def __init__(self, values: Iterable[T] = (), key: Optional[Callable[[T], Any]] = None) -> None:
        self.values: list[T] = []
        self.key = key
        for v in values:
            self.push(v)

    def node(self, index: int) -> HeapNode[T]:
        return HeapNode(self, index)

    def push(self, v: T) -> None:
        self.values.append(v)
        swapped: list[tuple[HeapNode[T], HeapNode[T]]] = []
        try:
            self._sift_up(self.node(len(self.values) - 1), swapped)
        except InvalidComparisonError:
            self._undo(swapped)
            self.values.pop()
            raise

    def pop(self) -> T:
        if self.is_empty():
            raise EmptyHeapError("pop")
        top_node = self.node(0)
        result = top_node.value
        bottom = self.values.pop()
        if not self.is_empty():
            top_node.value = bottom
            swapped: list[tuple[HeapNode[T], HeapNode[T]]] = []
            try:
                self._sift_down(top_node, swapped)
            except InvalidComparisonError:
                self._undo(swapped)
                top_node.value = result
                self.values.append(bottom)
                raise
        return result

    def top(self) -> T:
        if self.is_empty():
            raise EmptyHeapError("top")
        return self.values[0]

    def is_empty(self) -> bool:
        return not self.values

    def sort(self) -> list[T]:
        "Drain the heap, returning its values in ascending order."
        ret = []
        while not self.is_empty():
            ret.append(self.pop())
        ret.reverse()
        return ret

    def __len__(self) -> int:
        return len(self.values)

    def _greater(self, x: T, y: T) -> bool:
        kx, ky = (x, y) if self.key is None else (self.key(x), self.key(y))
        try:
            return kx > ky
        except TypeError as e:
            raise InvalidComparisonError(x, y) from e

    @staticmethod
    def swap_values(n1: HeapNode[T], n2: HeapNode[T]) -> None:
        n1.value, n2.value = n2.value, n1.value

    def _undo(self, swapped: list[tuple[HeapNode[T], HeapNode[T]]]) -> None:
        for n1, n2 in reversed(swapped):
            self.swap_values(n1, n2)

    def _sift_up(self, node: HeapNode[T], swapped: list[tuple[HeapNode[T], HeapNode[T]]]) -> None:
        if node.is_root():
            return
        parent = node.parent()
        if self._greater(node.value, parent.value):
            self.swap_values(node, parent)
            swapped.append((node, parent))
            self._sift_up(parent, swapped)

    def _sift_down(self, node: HeapNode[T], swapped: list[tuple[HeapNode[T], HeapNode[T]]]) -> None:
        # first maximum in (left, right, self) order wins, so a child beats an equal parent
        candidates = node.self_and_children()
        max_node = candidates[0]
        for candidate in candidates[1:]:
            if self._greater(candidate.value, max_node.value):
                max_node = candidate
        if max_node != node:
            self.swap_values(node, max_node)
            swapped.append((node, max_node))
            self._sift_down(max_node, swapped)
