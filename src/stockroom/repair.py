"""Explicit discipline repair for categories the engine refuses.

The engine never guesses a discipline. This utility is the one place a tag
may be filled in or corrected, and only for categories carrying one of the
standard names, whose discipline is known. Runs as a dry run unless
``apply`` is set; every change is logged.
"""

from dataclasses import dataclass

import structlog
from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.routing import expected_discipline, parse_discipline

logger = structlog.get_logger(__name__)


@dataclass
class Repair:
    category_id: str
    name: str
    previous: str | None
    discipline: str | None
    applied: bool = False


def find_repairs() -> list[Repair]:
    """Categories whose tag is missing, unknown or contradicts the standard mapping.

    Non-standard categories with no usable tag are reported with
    ``discipline=None``: nobody can say what they should be.
    """
    repairs = []
    for category in current_domain.repository_for(Category).all_categories():
        current = parse_discipline(category.discipline)
        expected = expected_discipline(category.name)
        if current is not None and (expected is None or current == expected):
            continue
        repairs.append(
            Repair(
                category_id=str(category.id),
                name=category.name,
                previous=category.discipline,
                discipline=expected.value if expected else None,
            )
        )
    return repairs


def repair_category_disciplines(apply: bool = False) -> list[Repair]:
    repo = current_domain.repository_for(Category)
    repairs = find_repairs()
    for repair in repairs:
        if repair.discipline is None:
            logger.warning("Category needs a manual discipline", category_id=repair.category_id, name=repair.name)
            continue
        if not apply:
            logger.info(
                "Discipline repair pending",
                category_id=repair.category_id,
                name=repair.name,
                previous=repair.previous,
                discipline=repair.discipline,
            )
            continue

        category = repo.get(repair.category_id)
        category.repair_discipline(repair.discipline)
        repo.add(category)
        repair.applied = True
        logger.warning(
            "Discipline repaired",
            category_id=repair.category_id,
            name=repair.name,
            previous=repair.previous,
            discipline=repair.discipline,
        )
    return repairs
