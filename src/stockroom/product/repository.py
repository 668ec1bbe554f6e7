"""Repository for the Product aggregate.

Substring queries filter in Python after a provider query so that memory and
SQL providers agree on case-insensitive matching. Every query lifts the
aggregate's default page size; callers always get the full result.
"""

from stockroom.domain import stockroom
from stockroom.product.product import Product


def matches(product: Product, term: str) -> bool:
    """Case-insensitive substring match over name and product code."""
    needle = (term or "").lower()
    return needle in (product.name or "").lower() or needle in (product.product_code or "").lower()


def in_price_range(product: Product, min_price=None, max_price=None) -> bool:
    if min_price is not None and product.price < min_price:
        return False
    return max_price is None or product.price <= max_price


def by_name(product: Product) -> str:
    return (product.name or "").lower()


@stockroom.repository(part_of=Product)
class ProductRepository:
    def _all(self, **filters) -> list[Product]:
        query = self._dao.query.filter(**filters) if filters else self._dao.query
        return query.limit(None).all().items

    def remove(self, product: Product) -> Product:
        return self._dao.delete(product)

    def all_products(self) -> list[Product]:
        return sorted(self._all(), key=by_name)

    def find_by_code(self, product_code: str) -> Product | None:
        results = self._all(product_code=product_code)
        return results[0] if results else None

    def find_by_category(self, category_id) -> list[Product]:
        return self._all(category_id=str(category_id))

    def find_by_category_ordered_by_name(self, category_id) -> list[Product]:
        return sorted(self.find_by_category(category_id), key=by_name)

    def search_in_category(self, term: str, category_id) -> list[Product]:
        return [product for product in self.find_by_category(category_id) if matches(product, term)]

    def search(self, term: str, min_price=None, max_price=None) -> list[Product]:
        """Products matching ``term`` priced within the optional bounds, by name."""
        return sorted(
            (
                product
                for product in self._all()
                if matches(product, term) and in_price_range(product, min_price, max_price)
            ),
            key=by_name,
        )

    def find_by_price_range(self, min_price=None, max_price=None) -> list[Product]:
        return sorted(
            (product for product in self._all() if in_price_range(product, min_price, max_price)),
            key=lambda product: (product.price, by_name(product)),
        )

    def find_low_stock(self) -> list[Product]:
        return sorted(
            (product for product in self._all() if product.is_low_stock),
            key=lambda product: (product.quantity_in_stock, by_name(product)),
        )

    def find_by_vendor(self, vendor_id) -> list[Product]:
        return sorted(self._all(vendor_id=str(vendor_id)), key=by_name)

    def find_in_stock(self, category_id=None) -> list[Product]:
        """Products with stock, oldest first."""
        products = self.find_by_category(category_id) if category_id is not None else self._all()
        return sorted(
            (product for product in products if product.quantity_in_stock > 0),
            key=lambda product: product.created_at,
        )
