"""Per-category container registry with one lock per category."""

import threading
from collections import Counter
from contextlib import contextmanager

from stockroom.containers.base import Container, Discipline
from stockroom.exceptions import DataIntegrityError
from stockroom.routing import new_container


class ContainerRegistry:
    """Owns every category container, keyed by category identifier.

    Containers are created lazily on first use and live as long as the
    registry. Callers look containers up by key inside ``locked(key)`` rather
    than holding on to them across threads.
    """

    def __init__(self):
        self._containers: dict[str, Container] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def lock_for(self, category_id) -> threading.Lock:
        key = str(category_id)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
            return lock

    @contextmanager
    def locked(self, category_id):
        with self.lock_for(category_id):
            yield

    def get(self, category_id) -> Container | None:
        return self._containers.get(str(category_id))

    def get_or_create(self, category_id, discipline: Discipline) -> Container:
        """Container for ``category_id``, creating an empty one on first use.

        Callers hold the category lock.
        """
        key = str(category_id)
        container = self._containers.get(key)
        if container is None:
            container = self._containers[key] = new_container(discipline)
        elif container.discipline is not discipline:
            raise DataIntegrityError(
                {
                    "discipline": [
                        f"Category {key} holds a {container.discipline.value} container "
                        f"but is routed to {discipline.value}"
                    ]
                }
            )
        return container

    def snapshot(self, category_id) -> list:
        with self.locked(category_id):
            container = self.get(category_id)
            return container.items() if container is not None else []

    def entries_by_discipline(self) -> dict[Discipline, int]:
        counts = Counter({discipline: 0 for discipline in Discipline})
        with self._guard:
            containers = list(self._containers.items())
        for category_id, container in containers:
            with self.locked(category_id):
                counts[container.discipline] += container.size()
        return dict(counts)

    def __len__(self):
        return len(self._containers)

    def keys(self) -> list[str]:
        with self._guard:
            return list(self._containers)

    def replace(self, category_id, container: Container) -> Container:
        """Install ``container`` for ``category_id``. Callers hold the category lock."""
        with self._guard:
            self._containers[str(category_id)] = container
        return container

    def drop(self, category_id) -> Container | None:
        """Remove the category's container. Callers hold the category lock."""
        with self._guard:
            return self._containers.pop(str(category_id), None)

    def discard(self, category_id, predicate) -> int:
        """Remove every entry matching ``predicate``, keeping the rest in order.

        Callers hold the category lock. Returns the number of entries removed.
        """
        container = self.get(category_id)
        if container is None:
            return 0

        kept = new_container(container.discipline)
        removed = 0
        for item in container.items():
            if predicate(item):
                removed += 1
            else:
                kept.insert(item)
        if removed:
            self.replace(category_id, kept)
        return removed
