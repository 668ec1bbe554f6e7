import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _stockroom_domain(request):
    """Initialize the stockroom domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from stockroom.domain import stockroom

    stockroom.init()
    return stockroom


@pytest.fixture(scope="session", autouse=True)
def setup_db(_stockroom_domain):
    from stockroom.utils.db import drop_db, setup_db

    setup_db(_stockroom_domain)

    yield

    drop_db(_stockroom_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_stockroom_domain):
    """Push domain context and start from a fresh engine; clean up after."""
    from stockroom.engine import reset_engine

    ctx = _stockroom_domain.domain_context()
    ctx.push()
    reset_engine()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def engine():
    from stockroom.engine import get_engine

    return get_engine()


@pytest.fixture()
def categories():
    """The standard categories, keyed by name."""
    from protean import current_domain
    from stockroom.category.category import Category
    from stockroom.seeding import seed_categories

    seed_categories()
    return {category.name: category for category in current_domain.repository_for(Category).all_categories()}


@pytest.fixture()
def make_product():
    """Build an unsaved product; the engine persists it on first receipt."""
    from stockroom.product.product import Product

    counter = {"n": 0}

    def _make(name, category, price=10.0, minimum_stock_level=10, vendor_id=None, product_code=None):
        counter["n"] += 1
        return Product.create(
            name=name,
            category_id=category.id,
            price=price,
            product_code=product_code or f"{name[:3].upper()}-{counter['n']:03d}",
            minimum_stock_level=minimum_stock_level,
            vendor_id=vendor_id,
        )

    return _make
