"""Randomly indexable list with search and sort."""

from stockroom.containers.algorithms import linear_search, quicksort
from stockroom.containers.base import Container, Discipline
from stockroom.exceptions import IndexOutOfRange


def _same(value):
    return value


class DynamicList(Container):
    """Flexible discipline: append, indexed access, targeted removal.

    ``identity`` maps an element to the value used for equality by
    ``remove_value`` and ``linear_search``; products pass their identifier.
    """

    discipline = Discipline.LIST

    def __init__(self, identity=_same):
        self._items = []
        self._identity = identity

    def add(self, item):
        self._items.append(item)

    def _check_index(self, index):
        if not 0 <= index < len(self._items):
            raise IndexOutOfRange(f"Index out of range: {index} (size {len(self._items)})")

    def remove_at(self, index):
        self._check_index(index)
        return self._items.pop(index)

    def remove_value(self, item) -> bool:
        index = self.linear_search(item)
        if index == -1:
            return False
        del self._items[index]
        return True

    def get(self, index):
        self._check_index(index)
        return self._items[index]

    def linear_search(self, item) -> int:
        return linear_search(self._items, item, identity=self._identity)

    def sort(self, key=_same):
        quicksort(self._items, key=key)

    def size(self) -> int:
        return len(self._items)

    def items(self) -> list:
        return list(self._items)

    def clear(self):
        self._items.clear()

    def __iter__(self):
        return iter(list(self._items))

    # Container capability
    def insert(self, item):
        self.add(item)

    def remove_for(self, item):
        index = self.linear_search(item)
        if index == -1:
            return None
        return self._items.pop(index)
