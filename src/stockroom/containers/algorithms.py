"""Linear search and quicksort over a Python list.

Both take ``key`` callables: ``identity`` decides equality for search,
``key`` supplies the sort order. Neither copies the list.
"""


def _same(value):
    return value


def linear_search(items, target, identity=_same) -> int:
    """Index of the first element equal to ``target`` under ``identity``, or -1. O(n)."""
    wanted = identity(target)
    for index, item in enumerate(items):
        if identity(item) == wanted:
            return index
    return -1


def quicksort(items, key=_same):
    """Sort ``items`` in place.

    Last-element pivot with Lomuto partitioning. Average O(n log n), O(n^2)
    on already sorted input; not stable. Recursion depth follows partition
    sizes.
    """
    if len(items) > 1:
        _quicksort(items, 0, len(items) - 1, key)


def _quicksort(items, low, high, key):
    if low < high:
        pivot_index = _partition(items, low, high, key)
        _quicksort(items, low, pivot_index - 1, key)
        _quicksort(items, pivot_index + 1, high, key)


def _partition(items, low, high, key):
    pivot = key(items[high])
    i = low - 1
    for j in range(low, high):
        if key(items[j]) <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1
