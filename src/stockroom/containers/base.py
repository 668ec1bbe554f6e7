"""The container capability shared by every category structure."""

from abc import ABC, abstractmethod
from enum import Enum


class Discipline(Enum):
    """Access discipline permanently bound to a category."""

    STACK = "Stack"
    QUEUE = "Queue"
    LIST = "List"


class Container(ABC):
    """An ordered structure holding product references for one category.

    ``insert`` and ``remove_for`` are the receipt and issue halves of the
    discipline: stacks push and pop, queues enqueue and dequeue, lists add and
    remove the requested item.
    """

    discipline: Discipline

    @abstractmethod
    def insert(self, item):
        """Place ``item`` according to the discipline."""

    @abstractmethod
    def remove_for(self, item):
        """Remove the entry the discipline selects for an issue of ``item``.

        Returns the removed entry, or ``None`` if nothing was removed.
        """

    @abstractmethod
    def items(self) -> list:
        """Copy of the current contents in discipline order."""

    @abstractmethod
    def size(self) -> int: ...

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self):
        return self.size()

    def __repr__(self):
        return f"{type(self).__name__}(size={self.size()})"
