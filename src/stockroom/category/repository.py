"""Repository for the Category aggregate."""

from stockroom.category.category import Category
from stockroom.containers.base import Discipline
from stockroom.domain import stockroom


def _by_name(category: Category) -> str:
    return category.name.lower()


@stockroom.repository(part_of=Category)
class CategoryRepository:
    def _all(self, **filters) -> list[Category]:
        query = self._dao.query.filter(**filters) if filters else self._dao.query
        return query.limit(None).all().items

    def find_by_name(self, name: str) -> Category | None:
        results = self._all(name=name)
        return results[0] if results else None

    def exists_by_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def find_by_discipline(self, discipline: Discipline) -> list[Category]:
        return sorted(self._all(discipline=discipline.value), key=_by_name)

    def all_categories(self) -> list[Category]:
        return sorted(self._all(), key=_by_name)
