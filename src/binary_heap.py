"""Array-backed binary min-heap with a pluggable three-way comparator.

The heap lives in a single owned list laid out as a complete binary tree:
the children of slot i are 2i + 1 and 2i + 2, its parent is (i - 1) // 2.
Reserved capacity is tracked separately from the element count, so the list
may hold trailing None slots that are not part of the heap.

Not thread safe. Callers sharing a heap between threads must lock around it.
"""

import logging
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')

Comparator = Callable[[Any, Any], int]

logger = logging.getLogger(__name__)


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the elements' own ordering operators."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    return natural_order(b, a)


def _check_capacity(value: Any) -> int:
    """Return ``value`` as a plain int, accepting any integer type such as
    NumPy integers. Raises ValueError for bools, non-integers and negatives."""
    if isinstance(value, bool):
        raise ValueError("capacity must be a non-negative integer")
    try:
        value = operator.index(value)
    except TypeError:
        raise ValueError("capacity must be a non-negative integer") from None
    if value < 0:
        raise ValueError("capacity must be a non-negative integer")
    return value


class BinaryHeap(Generic[T]):
    """Min-heap priority queue.

    Args:
        compare: Three-way comparator returning a negative number, zero or a
            positive number when the first argument orders before, equal to
            or after the second. Must be a consistent total order; anything
            else leaves the heap in an unspecified order. Defaults to
            ``natural_order``.
        capacity: Number of slots to reserve up front.

    Elements of equal priority come out in no particular order.
    """

    def __init__(self, compare: Optional[Comparator] = None, capacity: int = 0) -> None:
        capacity = _check_capacity(capacity)
        self._compare: Comparator = natural_order if compare is None else compare
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0
        self._capacity = capacity

    @staticmethod
    def from_array(items: Iterable[T], compare: Optional[Comparator] = None) -> 'BinaryHeap[T]':
        """Build a heap from any iterable in linear time.

        Note: Creates a shallow copy of the input.
        """
        heap: BinaryHeap[T] = BinaryHeap(compare)
        heap._data = list(items)
        heap._size = heap._capacity = len(heap._data)
        for i in range((heap._size - 2) // 2, -1, -1):
            heap._sift_down(i)
        logger.debug("heapified %d elements", heap._size)
        return heap

    @property
    def compare(self) -> Comparator:
        return self._compare

    def enqueue(self, item: T) -> None:
        if self._size == self._capacity:
            self._grow(1 if self._capacity == 0 else self._capacity * 2)
        self._data[self._size] = item
        self._size += 1
        self._sift_up(self._size - 1)

    def dequeue(self) -> T:
        if self._size == 0:
            raise IndexError("dequeue from empty heap")
        front = self._data[0]
        last = self._size - 1
        self._data[0] = self._data[last]
        self._data[last] = None
        self._size = last
        self._sift_down(0)
        return front

    def peek(self) -> T:
        if self._size == 0:
            raise IndexError("peek from empty heap")
        return self._data[0]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return self._capacity

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def contains(self, item: Any) -> bool:
        for i in range(self._size):
            if self._data[i] == item:
                return True
        return False

    def reserve(self, new_capacity: int) -> None:
        new_capacity = _check_capacity(new_capacity)
        if new_capacity <= self._capacity:
            return
        self._grow(new_capacity)
        logger.debug("reserved %d slots", new_capacity)

    def trim_excess(self) -> None:
        if self._capacity == self._size:
            return
        logger.debug("trimming %d unused slots", self._capacity - self._size)
        del self._data[self._size:]
        self._capacity = self._size

    def to_array(self) -> List[T]:
        """Snapshot of the elements in heap order, not sorted order."""
        return self._data[:self._size]

    def copy_to(self, array: Any, array_index: int = 0) -> None:
        self.copy_range_to(0, array, array_index, self._size)

    def copy_range_to(self, index: int, array: Any, array_index: int, count: int) -> None:
        """Copy ``count`` elements starting at heap slot ``index`` into
        ``array`` starting at ``array_index``.

        The destination may be any sized object supporting item assignment.
        Raises IndexError for negative offsets or a source range past the end
        of the heap, and ValueError when the destination is too short. Nothing
        is written unless the whole range fits.
        """
        if index < 0 or array_index < 0 or count < 0:
            raise IndexError("BinaryHeap.copy_range_to: negative index or count")
        if index + count > self._size:
            raise IndexError("BinaryHeap.copy_range_to: source range out of range")
        if array_index + count > len(array):
            raise ValueError("BinaryHeap.copy_range_to: destination array is too small")
        for offset in range(count):
            array[array_index + offset] = self._data[index + offset]

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(self._compare)
        clone._data = self._data.copy()
        clone._size = self._size
        clone._capacity = self._capacity
        return clone

    def _grow(self, new_capacity: int) -> None:
        self._data.extend([None] * (new_capacity - self._capacity))
        self._capacity = new_capacity

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(data[index], data[parent]) >= 0:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = self._size
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            # ties keep the left child
            if child + 1 < size and self._compare(data[child], data[child + 1]) > 0:
                child += 1
            if self._compare(data[index], data[child]) <= 0:
                break
            data[index], data[child] = data[child], data[index]
            index = child

    def _is_consistent(self) -> bool:
        """Check the heap property at every internal node. Test support only."""
        for i in range((self._size - 2) // 2, -1, -1):
            child = 2 * i + 1
            if child < self._size and self._compare(self._data[i], self._data[child]) > 0:
                return False
            if child + 1 < self._size and self._compare(self._data[i], self._data[child + 1]) > 0:
                return False
        return True

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryHeap):
            return NotImplemented
        return self._compare == other._compare and self.to_array() == other.to_array()

    __hash__ = None

    def __repr__(self) -> str:
        return f"BinaryHeap({self.to_array()})"

    def __str__(self) -> str:
        return ", ".join(str(self._data[i]) for i in range(self._size))

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.dequeue()
