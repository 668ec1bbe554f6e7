"""Category router: category -> discipline -> container capability.

The mapping is static. A category's persisted discipline tag is the source,
and categories carrying one of the standard names must agree with
``STANDARD_DISCIPLINES``. The router never fills in a missing tag; repairs
go through ``stockroom.repair``.
"""

from operator import attrgetter

from stockroom.containers.base import Container, Discipline
from stockroom.containers.dynamic_list import DynamicList
from stockroom.containers.queue import Queue
from stockroom.containers.stack import Stack
from stockroom.exceptions import DataIntegrityError

STANDARD_DISCIPLINES = {
    "Beverages": Discipline.STACK,
    "Bread/Bakery": Discipline.STACK,
    "Canned/Jarred Goods": Discipline.STACK,
    "Dairy": Discipline.STACK,
    "Dry/Baking Goods": Discipline.QUEUE,
    "Frozen Foods": Discipline.QUEUE,
    "Meat": Discipline.QUEUE,
    "Produce": Discipline.LIST,
    "Cleaners": Discipline.LIST,
    "Paper Goods": Discipline.LIST,
    "Personal Care": Discipline.LIST,
}

_CONTAINER_TYPES = {
    Discipline.STACK: Stack,
    Discipline.QUEUE: Queue,
    Discipline.LIST: DynamicList,
}


def parse_discipline(value) -> Discipline | None:
    """Coerce a stored tag (``"Stack"``, ``Discipline.STACK``) to the enum; None if unknown."""
    if isinstance(value, Discipline):
        return value
    if not value:
        return None
    try:
        return Discipline(value)
    except ValueError:
        return None


def expected_discipline(category_name) -> Discipline | None:
    return STANDARD_DISCIPLINES.get(category_name)


def resolve_discipline(category) -> Discipline:
    """Discipline for ``category``, or DataIntegrityError if the tag is unusable."""
    discipline = parse_discipline(category.discipline)
    if discipline is None:
        raise DataIntegrityError(
            {"discipline": [f"Category '{category.name}' ({category.id}) has no valid discipline: {category.discipline!r}"]}
        )

    expected = expected_discipline(category.name)
    if expected is not None and expected != discipline:
        raise DataIntegrityError(
            {
                "discipline": [
                    f"Category '{category.name}' is tagged {discipline.value} but must be {expected.value}"
                ]
            }
        )
    return discipline


def container_type_for(discipline: Discipline) -> type[Container]:
    return _CONTAINER_TYPES[discipline]


def new_container(discipline: Discipline) -> Container:
    """Empty container for ``discipline``; lists compare products by identifier."""
    if discipline is Discipline.LIST:
        return DynamicList(identity=attrgetter("id"))
    return container_type_for(discipline)()
