"""Array-backed FIFO queue.

Elements live in storage[0:count] with the front at index 0. Dequeue shifts
every remaining element down one slot, so it costs O(n); enqueue is amortized
O(1) through capacity doubling. See circular_queue for the O(1) dequeue
variant with the same interface.
"""

from typing import TypeVar, List, Iterator, Optional

from queue_adt import QueueADT, EmptyQueueError

T = TypeVar('T')


class ArrayQueue(QueueADT[T]):
    def __init__(self, initial_capacity: int = 0) -> None:
        if (not isinstance(initial_capacity, int) or isinstance(initial_capacity, bool)
                or initial_capacity < 0):
            raise ValueError("initial_capacity must be a non-negative integer")
        self._data: List[Optional[T]] = [None] * initial_capacity
        self._count = 0

    def peek(self) -> T:
        if self._count == 0:
            raise EmptyQueueError("peek from empty queue")
        return self._data[0]

    def dequeue(self) -> T:
        if self._count == 0:
            raise EmptyQueueError("dequeue from empty queue")
        value = self._data[0]
        for i in range(1, self._count):
            self._data[i - 1] = self._data[i]
        self._count -= 1
        # drop the stale reference left behind by the shift
        self._data[self._count] = None
        return value

    def enqueue(self, value: T) -> None:
        if self._count == len(self._data):
            self._grow()
        self._data[self._count] = value
        self._count += 1

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def capacity(self) -> int:
        return len(self._data)

    def _grow(self) -> None:
        # doubling 0 would leave no room for the pending enqueue
        new_capacity = 1 if self._count == 0 else 2 * self._count
        new_data: List[Optional[T]] = [None] * new_capacity
        for i in range(self._count):
            new_data[i] = self._data[i]
        self._data = new_data

    def __iter__(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._data[i]

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r})"
