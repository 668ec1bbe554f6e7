"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from stockroom.domain import stockroom


@stockroom.event(part_of="Product")
class ProductRegistered:
    """A new product was added to a category."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    product_code: String(required=True)
    category_id: Identifier(required=True)
    vendor_id: Identifier()
    price: Float(required=True)
    registered_at: DateTime(required=True)


@stockroom.event(part_of="Product")
class ProductDetailsUpdated:
    """Name, description, price or minimum stock level changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    minimum_stock_level: Integer(required=True)


@stockroom.event(part_of="Product")
class GoodsReceived:
    """Stock was received into the product's category."""

    __version__ = 1

    product_id: Identifier(required=True)
    category_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
    received_at: DateTime(required=True)


@stockroom.event(part_of="Product")
class GoodsIssued:
    """Stock was issued to a customer."""

    __version__ = 1

    product_id: Identifier(required=True)
    category_id: Identifier(required=True)
    quantity: Integer(required=True)
    previous_stock: Integer(required=True)
    new_stock: Integer(required=True)
    customer_name: String(required=True)
    issued_at: DateTime(required=True)


@stockroom.event(part_of="Product")
class LowStockDetected:
    """Stock fell to or below the product's minimum level."""

    __version__ = 1

    product_id: Identifier(required=True)
    product_code: String(required=True)
    quantity_in_stock: Integer(required=True)
    minimum_stock_level: Integer(required=True)
    detected_at: DateTime(required=True)
