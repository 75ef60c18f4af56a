"""Circular queue implementation.

Same interface as ArrayQueue, but head and tail wrap around the backing
list so dequeue never shifts elements.
"""

from queue_adt import QueueADT, EmptyQueueError


class CircularQueue(QueueADT):
    def __init__(self, initial_capacity=4):
        if (not isinstance(initial_capacity, int) or isinstance(initial_capacity, bool)
                or initial_capacity < 0):
            raise ValueError("initial_capacity must be a non-negative integer")
        self._data = [None] * initial_capacity
        self._head = 0
        self._tail = 0
        self._size = 0
        self._capacity = initial_capacity

    def enqueue(self, value):
        if self._size == self._capacity:
            self._grow()
        self._data[self._tail] = value
        self._tail = (self._tail + 1) % self._capacity
        self._size += 1

    def dequeue(self):
        if self._size == 0:
            raise EmptyQueueError("dequeue from empty queue")
        value = self._data[self._head]
        self._data[self._head] = None
        self._head = (self._head + 1) % self._capacity
        self._size -= 1
        return value

    def peek(self):
        if self._size == 0:
            raise EmptyQueueError("peek from empty queue")
        return self._data[self._head]

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def capacity(self):
        return self._capacity

    def _grow(self):
        new_capacity = 1 if self._capacity == 0 else self._capacity * 2
        new_data = [None] * new_capacity
        for i in range(self._size):
            new_data[i] = self._data[(self._head + i) % self._capacity]
        self._data = new_data
        self._head = 0
        self._tail = self._size
        self._capacity = new_capacity

    def __iter__(self):
        for i in range(self._size):
            yield self._data[(self._head + i) % self._capacity]

    def __repr__(self):
        return f"CircularQueue({list(self)!r})"
