"""Reference data: the standard categories and sample vendors.

Seeding is idempotent. Existing rows are matched by name and left alone,
including their discipline; wrong tags are the repair utility's business.
"""

import structlog
from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.routing import STANDARD_DISCIPLINES
from stockroom.vendor.vendor import Vendor

logger = structlog.get_logger(__name__)

CATEGORY_DESCRIPTIONS = {
    "Beverages": "Drinks and beverages",
    "Bread/Bakery": "Bread and bakery items",
    "Canned/Jarred Goods": "Canned and jarred products",
    "Dairy": "Dairy products",
    "Dry/Baking Goods": "Dry and baking goods",
    "Frozen Foods": "Frozen food items",
    "Meat": "Meat products",
    "Produce": "Fruits and vegetables",
    "Cleaners": "Cleaning products",
    "Paper Goods": "Paper products",
    "Personal Care": "Personal care items",
}

SAMPLE_VENDORS = [
    {
        "name": "Fresh Foods Ltd",
        "contact_person": "John Mensah",
        "phone": "+233 24 123 4567",
        "email": "john@freshfoods.com",
        "address": "123 Market Street, Accra, Ghana",
    },
    {
        "name": "Daily Supplies Co",
        "contact_person": "Sarah Asante",
        "phone": "+233 20 987 6543",
        "email": "sarah@dailysupplies.com",
        "address": "456 Trade Avenue, Kumasi, Ghana",
    },
    {
        "name": "Quality Grocers",
        "contact_person": "Michael Osei",
        "phone": "+233 26 555 7890",
        "email": "michael@qualitygrocers.com",
        "address": "789 Commerce Road, Tema, Ghana",
    },
    {
        "name": "Prime Distributors",
        "contact_person": "Grace Adjei",
        "phone": "+233 24 111 2222",
        "email": "grace@primedist.com",
        "address": "321 Industrial Area, Takoradi, Ghana",
    },
    {
        "name": "Metro Wholesale",
        "contact_person": "David Kumi",
        "phone": "+233 20 333 4444",
        "email": "david@metrowholesale.com",
        "address": "654 Business District, Cape Coast, Ghana",
    },
]


def seed_categories() -> list[str]:
    """Create any missing standard category; return the names created."""
    repo = current_domain.repository_for(Category)
    created = []
    for name, discipline in STANDARD_DISCIPLINES.items():
        if repo.exists_by_name(name):
            continue
        description = f"{CATEGORY_DESCRIPTIONS[name]}, managed as a {discipline.value}"
        repo.add(Category.create(name=name, discipline=discipline.value, description=description))
        created.append(name)
    return created


def seed_vendors() -> list[str]:
    repo = current_domain.repository_for(Vendor)
    created = []
    for details in SAMPLE_VENDORS:
        if repo.exists_by_name(details["name"]):
            continue
        repo.add(Vendor.register(**details))
        created.append(details["name"])
    return created


def seed_reference_data() -> dict[str, list[str]]:
    categories = seed_categories()
    vendors = seed_vendors()
    logger.info("Reference data seeded", categories_created=len(categories), vendors_created=len(vendors))
    return {"categories": categories, "vendors": vendors}
