"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, String

from stockroom.domain import stockroom


@stockroom.event(part_of="Category")
class CategoryCreated:
    """A category was created and bound to its container discipline."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    discipline: String(required=True)
    created_at: DateTime(required=True)


@stockroom.event(part_of="Category")
class CategoryDisciplineRepaired:
    """A missing or contradictory discipline tag was corrected by the repair utility."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    previous_discipline: String()
    discipline: String(required=True)
    repaired_at: DateTime(required=True)
