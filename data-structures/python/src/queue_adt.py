"""Abstract FIFO queue contract shared by the array-backed queues."""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar('T')


class EmptyQueueError(IndexError):
    """Raised by peek() or dequeue() on a queue with no elements."""


class QueueADT(ABC, Generic[T]):
    @abstractmethod
    def peek(self) -> T:
        """Return the front element without removing it."""
        pass

    @abstractmethod
    def dequeue(self) -> T:
        """Remove and return the front element."""
        pass

    @abstractmethod
    def enqueue(self, value: T) -> None:
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()
