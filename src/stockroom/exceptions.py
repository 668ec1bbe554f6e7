"""Typed failures raised by the inventory engine and its containers.

Quantity and stock failures are Protean validation errors, so they carry a
``messages`` dict keyed by the offending field. Container failures are
``IndexError`` subclasses, matching what Python sequences raise.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class InvalidQuantity(ValidationError):
    """A receipt or issue amount is not positive, or the issue has no customer."""


class InsufficientStock(ValidationError):
    """An issue asks for more units than the product has in stock."""

    def __init__(self, messages, available=None, requested=None):
        super().__init__(messages)
        self.available = available
        self.requested = requested


class NotFound(ObjectNotFoundError):
    """Unknown product, category or vendor reference."""

    def __init__(self, messages):
        super().__init__(messages)
        self.messages = messages


class DataIntegrityError(Exception):
    """A category's discipline is missing or contradicts the standard mapping.

    Fatal to the operation in progress, never to the process.
    """

    def __init__(self, messages):
        super().__init__(messages)
        self.messages = messages


class EmptyContainer(IndexError):
    """pop/dequeue/peek/front on an empty stack or queue."""


class IndexOutOfRange(IndexError):
    """Dynamic list access outside ``[0, size)``."""
