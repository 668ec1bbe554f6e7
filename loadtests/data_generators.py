"""Faker-based payloads for the Stockroom load test scenarios.

Generated values satisfy the API's request schemas: product codes are unique
per run, prices positive, quantities whole numbers.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CODE_PREFIXES = {
    "Stack": "STK",
    "Queue": "QUE",
    "List": "LST",
}


def product_code(discipline: str) -> str:
    """Unique code like 'LST-3f9a1c2e'."""
    return f"{CODE_PREFIXES.get(discipline, 'GEN')}-{uuid.uuid4().hex[:8]}"


def product_data(category_id: str, discipline: str, vendor_id: str | None = None, quantity: int | None = None) -> dict:
    return {
        "name": f"{fake.word().title()} {fake.word()}"[:100],
        "product_code": product_code(discipline),
        "category_id": category_id,
        "vendor_id": vendor_id,
        "price": round(random.uniform(0.5, 150.0), 2),
        "quantity": quantity if quantity is not None else random.randint(5, 50),
        "minimum_stock_level": random.randint(0, 15),
        "description": fake.sentence()[:200],
    }


def receipt_data() -> dict:
    return {"quantity": random.randint(1, 25)}


def issue_data(max_quantity: int) -> dict:
    return {
        "quantity": random.randint(1, max(1, min(max_quantity, 5))),
        "customer_name": fake.name()[:100],
    }


def search_term(name: str) -> str:
    """A short substring of ``name`` so list searches usually hit."""
    if len(name) <= 2:
        return name
    start = random.randint(0, len(name) - 2)
    return name[start : start + 2]
