"""Product details management: command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text

from stockroom.domain import stockroom
from stockroom.engine import get_engine
from stockroom.product.product import Product


@stockroom.command(part_of="Product")
class UpdateProductDetails:
    product_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()
    price: Float(min_value=0.01)
    minimum_stock_level: Integer(min_value=0)


@stockroom.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProductDetails)
    def update_details(self, command):
        # Serialised with receipts and issues, which write the same record
        get_engine().update_details(
            command.product_id,
            name=command.name,
            description=command.description,
            price=command.price,
            minimum_stock_level=command.minimum_stock_level,
        )
