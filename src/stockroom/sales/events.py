"""Domain events for the Sale aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from stockroom.domain import stockroom


@stockroom.event(part_of="Sale")
class SaleRecorded:
    __version__ = 1

    sale_id: Identifier(required=True)
    product_id: Identifier(required=True)
    product_code: String(required=True)
    category_id: Identifier(required=True)
    quantity_sold: Integer(required=True)
    unit_price: Float(required=True)
    total_amount: Float(required=True)
    customer_name: String(required=True)
    sale_date: DateTime(required=True)
