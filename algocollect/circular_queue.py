"""FIFO queue held in a circular singly linked list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = field(default=None, repr=False)


class CircularQueue:
    """Queue whose last node links back to the first."""

    def __init__(self) -> None:
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self._rear is None:
            raise IndexError("dequeue from an empty queue")
        front = self._rear.next
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.value

    def traverse(self) -> list[Any]:
        """Return the values once round the ring, ending back at the front value."""
        values = list(self)
        if values:
            values.append(values[0])
        return values

    def __iter__(self) -> Iterator[Any]:
        if self._rear is None:
            return
        node = self._rear.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size