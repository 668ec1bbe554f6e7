"""Product aggregate root."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from stockroom.domain import stockroom
from stockroom.exceptions import InsufficientStock, InvalidQuantity


@stockroom.aggregate
class Product:
    """A stocked product.

    Products compare by identifier. Stock changes only through ``receive``
    and ``issue``, both of which validate before touching any field.
    """

    name: String(required=True, max_length=100)
    category_id: Identifier(required=True)
    vendor_id: Identifier()
    price: Float(required=True, min_value=0.01)
    quantity_in_stock: Integer(default=0, min_value=0)
    minimum_stock_level: Integer(default=10, min_value=0)
    product_code: String(required=True, max_length=50, unique=True)
    description: Text()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.quantity_in_stock is not None and self.quantity_in_stock < 0:
            raise ValidationError({"quantity_in_stock": ["Stock cannot be negative"]})

    @classmethod
    def create(
        cls,
        name,
        category_id,
        price,
        product_code,
        vendor_id=None,
        minimum_stock_level=10,
        description=None,
    ):
        from stockroom.product.events import ProductRegistered

        now = datetime.now()
        product = cls(
            name=name,
            category_id=category_id,
            vendor_id=vendor_id,
            price=price,
            quantity_in_stock=0,
            minimum_stock_level=minimum_stock_level,
            product_code=product_code,
            description=description,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductRegistered(
                product_id=product.id,
                name=name,
                product_code=product_code,
                category_id=category_id,
                vendor_id=vendor_id,
                price=price,
                registered_at=now,
            )
        )
        return product

    @property
    def is_low_stock(self) -> bool:
        return self.quantity_in_stock <= self.minimum_stock_level

    def update_details(self, name=None, description=None, price=None, minimum_stock_level=None):
        from stockroom.product.events import ProductDetailsUpdated

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if minimum_stock_level is not None:
            self.minimum_stock_level = minimum_stock_level
        self.updated_at = datetime.now()

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                minimum_stock_level=self.minimum_stock_level,
            )
        )

    def receive(self, quantity):
        from stockroom.product.events import GoodsReceived

        if quantity is None or quantity <= 0:
            raise InvalidQuantity({"quantity": [f"Receipt quantity must be positive, got {quantity}"]})

        previous = self.quantity_in_stock or 0
        now = datetime.now()
        self.quantity_in_stock = previous + quantity
        self.updated_at = now

        self.raise_(
            GoodsReceived(
                product_id=self.id,
                category_id=self.category_id,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.quantity_in_stock,
                received_at=now,
            )
        )

    def issue(self, quantity, customer_name):
        from stockroom.product.events import GoodsIssued

        validate_issue_request(quantity, customer_name)

        previous = self.quantity_in_stock or 0
        if quantity > previous:
            raise InsufficientStock(
                {"quantity": [f"Insufficient stock: {previous} available, {quantity} requested"]},
                available=previous,
                requested=quantity,
            )

        now = datetime.now()
        self.quantity_in_stock = previous - quantity
        self.updated_at = now

        self.raise_(
            GoodsIssued(
                product_id=self.id,
                category_id=self.category_id,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.quantity_in_stock,
                customer_name=customer_name,
                issued_at=now,
            )
        )
        self._check_low_stock()

    def _check_low_stock(self):
        from stockroom.product.events import LowStockDetected

        if self.is_low_stock:
            self.raise_(
                LowStockDetected(
                    product_id=self.id,
                    product_code=self.product_code,
                    quantity_in_stock=self.quantity_in_stock,
                    minimum_stock_level=self.minimum_stock_level,
                    detected_at=datetime.now(),
                )
            )


def validate_issue_request(quantity, customer_name):
    """Reject a non-positive quantity or a blank customer before any lookup."""
    if quantity is None or quantity <= 0:
        raise InvalidQuantity({"quantity": [f"Issue quantity must be positive, got {quantity}"]})
    if not customer_name or not str(customer_name).strip():
        raise InvalidQuantity({"customer_name": ["Customer name is required"]})
