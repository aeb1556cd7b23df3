from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .Heap import Heap

T = TypeVar("T")


class HeapNode(Generic[T]):
    """A view of one slot of a heap's backing array.

    Nodes are created on demand and never stored by the heap, so ``index`` is
    always the slot's true offset. Assigning ``value`` writes through to the
    heap, which is how sifting swaps values between slots.
    """

    def __init__(self, heap: "Heap[T]", index: int) -> None:
        self.heap = heap
        self.index = index

    @property
    def value(self) -> T:
        return self.heap.values[self.index]

    @value.setter
    def value(self, value: T) -> None:
        self.heap.values[self.index] = value

    def parent_index(self, i: int) -> Optional[int]:
        return (i - 1) // 2 if i > 0 else None

    def left_child_index(self, i: int) -> Optional[int]:
        j = 2 * i + 1
        return j if j < len(self.heap) else None

    def right_child_index(self, i: int) -> Optional[int]:
        j = 2 * i + 2
        return j if j < len(self.heap) else None

    def _node(self, i: Optional[int]) -> Optional["HeapNode[T]"]:
        return None if i is None else HeapNode(self.heap, i)

    def parent(self) -> Optional["HeapNode[T]"]:
        return self._node(self.parent_index(self.index))

    def left(self) -> Optional["HeapNode[T]"]:
        return self._node(self.left_child_index(self.index))

    def right(self) -> Optional["HeapNode[T]"]:
        return self._node(self.right_child_index(self.index))

    def is_root(self) -> bool:
        return self.index == 0

    def children(self) -> list["HeapNode[T]"]:
        return [child for child in (self.left(), self.right()) if child is not None]

    def self_and_children(self) -> list["HeapNode[T]"]:
        ret = self.children()
        ret.append(self)
        return ret

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeapNode):
            return NotImplemented
        return self.heap is other.heap and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.heap), self.index))

    def __repr__(self) -> str:
        return f"[{self.value!r}, {self.index}]"

    __slots__ = ["heap", "index"]
