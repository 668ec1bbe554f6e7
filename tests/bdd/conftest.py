"""Shared BDD fixtures and step definitions for goods movements."""

import pytest
from pytest_bdd import given, parsers, then, when
from stockroom.engine import get_engine
from stockroom.exceptions import InsufficientStock
from stockroom.product.product import Product


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def products():
    """Products received during the scenario, keyed by name."""
    return {}


@pytest.fixture()
def error():
    """Container for a captured issue failure."""
    return {"exc": None}


def _receive(categories, products, name, category_name, quantity):
    category = categories[category_name]
    product = Product.create(
        name=name,
        category_id=category.id,
        price=1.0,
        product_code=f"{category_name[:3].upper()}-{name.upper()}",
    )
    products[name] = get_engine().add_goods(product, quantity)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the standard categories exist")
def standard_categories(categories):
    assert len(categories) == 11


@given(parsers.cfparse('"{name}" is received into "{category_name}" with quantity {quantity:d}'))
def given_received(categories, products, name, category_name, quantity):
    _receive(categories, products, name, category_name, quantity)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{name}" is received into "{category_name}" with quantity {quantity:d}'))
def when_received(categories, products, name, category_name, quantity):
    _receive(categories, products, name, category_name, quantity)


@when(parsers.cfparse('{quantity:d} unit of "{name}" is issued to "{customer}"'))
@when(parsers.cfparse('{quantity:d} units of "{name}" are issued to "{customer}"'))
def issue(products, quantity, name, customer):
    get_engine().issue_goods(products[name].id, quantity, customer)


@when(parsers.cfparse('{quantity:d} units of "{name}" are requested by "{customer}"'))
def request_issue(products, error, quantity, name, customer):
    try:
        get_engine().issue_goods(products[name].id, quantity, customer)
    except InsufficientStock as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" has {quantity:d} units in stock'))
def stock_is(products, name, quantity):
    assert get_engine().find_product(products[name].id).quantity_in_stock == quantity


@then(parsers.cfparse('the "{category_name}" container holds "{names}"'))
def container_holds(categories, category_name, names):
    contents = get_engine().registry.snapshot(categories[category_name].id)
    assert [product.name for product in contents] == [name.strip() for name in names.split(",")]


@then(parsers.cfparse('the "{category_name}" container is empty'))
def container_is_empty(categories, category_name):
    assert get_engine().registry.snapshot(categories[category_name].id) == []


@then("the issue is refused for insufficient stock")
def issue_refused(error):
    assert isinstance(error["exc"], InsufficientStock)
