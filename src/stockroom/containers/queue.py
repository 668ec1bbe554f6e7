"""FIFO queue backed by a list with front and rear cursors."""

from stockroom.containers.base import Container, Discipline
from stockroom.exceptions import EmptyContainer


class Queue(Container):
    """First in, first out.

    Dequeue advances the front cursor instead of shifting the backing list.
    Once the queue drains, storage and cursors go back to their initial
    state so dequeued slots do not accumulate.
    """

    discipline = Discipline.QUEUE

    def __init__(self):
        self._reset()

    def _reset(self):
        self._items = []
        self._front = 0
        self._rear = -1
        self._size = 0

    def enqueue(self, item):
        self._items.append(item)
        self._rear += 1
        self._size += 1

    def dequeue(self):
        if self.is_empty():
            raise EmptyContainer("Queue is empty")
        item = self._items[self._front]
        self._items[self._front] = None
        self._front += 1
        self._size -= 1
        if self._size == 0:
            self._reset()
        return item

    def front(self):
        if self.is_empty():
            raise EmptyContainer("Queue is empty")
        return self._items[self._front]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def footprint(self) -> int:
        """Length of the backing storage, dequeued slots included."""
        return len(self._items)

    def items(self) -> list:
        """Front-to-rear copy."""
        return self._items[self._front : self._rear + 1]

    def clear(self):
        self._reset()

    # Container capability
    def insert(self, item):
        self.enqueue(item)

    def remove_for(self, item):
        # The oldest entry leaves regardless of which product is issued
        if self.is_empty():
            return None
        return self.dequeue()
