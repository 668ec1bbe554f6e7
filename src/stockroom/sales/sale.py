"""Sale aggregate: one ledger entry per issue."""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from stockroom.domain import stockroom


def line_total(unit_price, quantity) -> float:
    return round(unit_price * quantity, 2)


@stockroom.aggregate
class Sale:
    """Record of goods issued to a customer.

    ``total_amount`` is derived from unit price and quantity. It is set only
    by ``record``, ``adjust_quantity`` and ``adjust_unit_price``, which keep
    the two in step.
    """

    product_id: Identifier(required=True)
    product_code: String(required=True, max_length=50)
    category_id: Identifier(required=True)
    quantity_sold: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.01)
    total_amount: Float(required=True)
    customer_name: String(required=True, max_length=100)
    sale_date: DateTime(default=datetime.now)
    notes: Text()

    @invariant.post
    def total_matches_price_and_quantity(self):
        if self.unit_price is None or self.quantity_sold is None:
            return
        if self.total_amount != line_total(self.unit_price, self.quantity_sold):
            raise ValidationError({"total_amount": ["Total must equal unit price times quantity"]})

    @classmethod
    def record(cls, product, quantity, customer_name, notes=None):
        from stockroom.sales.events import SaleRecorded

        now = datetime.now()
        sale = cls(
            product_id=product.id,
            product_code=product.product_code,
            category_id=product.category_id,
            quantity_sold=quantity,
            unit_price=product.price,
            total_amount=line_total(product.price, quantity),
            customer_name=customer_name.strip(),
            sale_date=now,
            notes=notes,
        )
        sale.raise_(
            SaleRecorded(
                sale_id=sale.id,
                product_id=sale.product_id,
                product_code=sale.product_code,
                category_id=sale.category_id,
                quantity_sold=sale.quantity_sold,
                unit_price=sale.unit_price,
                total_amount=sale.total_amount,
                customer_name=sale.customer_name,
                sale_date=now,
            )
        )
        return sale

    def adjust_quantity(self, quantity):
        with atomic_change(self):
            self.quantity_sold = quantity
            self.total_amount = line_total(self.unit_price, quantity)

    def adjust_unit_price(self, unit_price):
        with atomic_change(self):
            self.unit_price = unit_price
            self.total_amount = line_total(unit_price, self.quantity_sold)
