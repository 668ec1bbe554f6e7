"""LIFO stack backed by a list with an explicit top cursor."""

from stockroom.containers.base import Container, Discipline
from stockroom.exceptions import EmptyContainer


class Stack(Container):
    """Last in, first out.

    push, pop, peek, size and is_empty are all O(1); push is amortized.
    """

    discipline = Discipline.STACK

    def __init__(self):
        self._items = []
        self._top = -1

    def push(self, item):
        self._items.append(item)
        self._top += 1

    def pop(self):
        if self.is_empty():
            raise EmptyContainer("Stack is empty")
        item = self._items.pop()
        self._top -= 1
        return item

    def peek(self):
        if self.is_empty():
            raise EmptyContainer("Stack is empty")
        return self._items[self._top]

    def size(self) -> int:
        return self._top + 1

    def is_empty(self) -> bool:
        return self._top == -1

    def items(self) -> list:
        """Bottom-to-top copy."""
        return list(self._items)

    def clear(self):
        self._items.clear()
        self._top = -1

    # Container capability
    def insert(self, item):
        self.push(item)

    def remove_for(self, item):
        # The most recent entry leaves regardless of which product is issued
        if self.is_empty():
            return None
        return self.pop()
