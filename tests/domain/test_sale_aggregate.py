"""Tests for the Sale aggregate root."""

import pytest
from protean.exceptions import ValidationError
from stockroom.product.product import Product
from stockroom.sales.events import SaleRecorded
from stockroom.sales.sale import Sale, line_total


@pytest.fixture()
def product():
    product = Product.create(name="Cheddar", category_id="cat-dairy", price=4.35, product_code="DAI-CHD")
    product.receive(10)
    return product


class TestSaleRecord:
    def test_record_copies_product_details(self, product):
        sale = Sale.record(product, 3, "Ann")

        assert sale.product_id == product.id
        assert sale.product_code == "DAI-CHD"
        assert sale.category_id == "cat-dairy"
        assert sale.unit_price == 4.35
        assert sale.quantity_sold == 3
        assert sale.customer_name == "Ann"

    def test_total_is_rounded_to_cents(self, product):
        sale = Sale.record(product, 3, "Ann")
        assert sale.total_amount == 13.05

    def test_customer_name_is_trimmed(self, product):
        assert Sale.record(product, 1, "  Ann  ").customer_name == "Ann"

    def test_record_raises_event(self, product):
        sale = Sale.record(product, 2, "Ann")
        event = sale._events[0]
        assert isinstance(event, SaleRecorded)
        assert event.total_amount == sale.total_amount


class TestDerivedTotal:
    def test_adjust_quantity_recomputes_total(self, product):
        sale = Sale.record(product, 2, "Ann")
        sale.adjust_quantity(5)

        assert sale.quantity_sold == 5
        assert sale.total_amount == line_total(4.35, 5)

    def test_adjust_unit_price_recomputes_total(self, product):
        sale = Sale.record(product, 3, "Ann")
        sale.adjust_unit_price(2.5)

        assert sale.unit_price == 2.5
        assert sale.total_amount == line_total(2.5, 3) == 7.5

    def test_unit_price_cannot_be_set_without_the_total(self, product):
        sale = Sale.record(product, 3, "Ann")
        with pytest.raises(ValidationError):
            sale.unit_price = 2.5

    def test_total_cannot_be_set_independently(self, product):
        sale = Sale.record(product, 2, "Ann")
        with pytest.raises(ValidationError):
            sale.total_amount = 1.0

    def test_quantity_must_be_positive(self, product):
        with pytest.raises(ValidationError):
            Sale.record(product, 0, "Ann")
