"""Category aggregate: a product grouping bound to one container discipline."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from stockroom.containers.base import Discipline
from stockroom.domain import stockroom
from stockroom.routing import expected_discipline, parse_discipline


@stockroom.aggregate
class Category:
    """A product category.

    The discipline decides which container every product of the category is
    routed through. It is set once at creation. Rows written before the tag
    existed may lack it; the engine refuses such categories and only
    ``repair_discipline`` may fill the tag in.
    """

    name: String(required=True, max_length=100)
    description: Text()
    discipline: String(choices=Discipline, max_length=10)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, discipline, description=None):
        from stockroom.category.events import CategoryCreated

        parsed = parse_discipline(discipline)
        if parsed is None:
            raise ValidationError({"discipline": [f"Discipline must be one of Stack, Queue, List; got {discipline!r}"]})

        expected = expected_discipline(name)
        if expected is not None and expected != parsed:
            raise ValidationError({"discipline": [f"'{name}' must use the {expected.value} discipline"]})

        now = datetime.now()
        category = cls(
            name=name,
            description=description,
            discipline=parsed.value,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                discipline=parsed.value,
                created_at=now,
            )
        )
        return category

    def repair_discipline(self, discipline):
        """Replace an unusable discipline tag. Valid tags cannot be changed."""
        from stockroom.category.events import CategoryDisciplineRepaired

        parsed = parse_discipline(discipline)
        if parsed is None:
            raise ValidationError({"discipline": [f"Discipline must be one of Stack, Queue, List; got {discipline!r}"]})

        current = parse_discipline(self.discipline)
        expected = expected_discipline(self.name)
        if current is not None and (expected is None or current == expected):
            raise ValidationError({"discipline": [f"Category '{self.name}' already has a valid discipline"]})

        previous = self.discipline
        now = datetime.now()
        self.discipline = parsed.value
        self.updated_at = now

        self.raise_(
            CategoryDisciplineRepaired(
                category_id=self.id,
                name=self.name,
                previous_discipline=previous,
                discipline=parsed.value,
                repaired_at=now,
            )
        )
