"""Category-routed inventory engine.

Receipt and issue resolve product -> category -> discipline -> container and
apply the discipline's insert or removal. Persisted stock is authoritative:
containers track which products are logically present in a category and can
always be rebuilt from the repository with ``rebuild``.
"""

import threading
from collections import defaultdict

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from stockroom.category.category import Category
from stockroom.containers.base import Discipline
from stockroom.containers.registry import ContainerRegistry
from stockroom.exceptions import DataIntegrityError, InvalidQuantity, NotFound
from stockroom.product.product import Product, validate_issue_request
from stockroom.product.repository import by_name, matches
from stockroom.routing import new_container, resolve_discipline
from stockroom.sales.sale import Sale
from stockroom.utils.logging import operation_context
from stockroom.vendor.directory import VendorDirectory

logger = structlog.get_logger(__name__)


class InventoryEngine:
    def __init__(self):
        self.registry = ContainerRegistry()
        self.vendors = VendorDirectory()
        self._tally: dict[str, int] = defaultdict(int)
        self._tally_lock = threading.Lock()

    # Lookups

    def find_product(self, product_id) -> Product:
        try:
            return current_domain.repository_for(Product).get(str(product_id))
        except ObjectNotFoundError:
            raise NotFound({"product_id": [f"Product {product_id} not found"]}) from None

    def find_category(self, category_id) -> Category:
        if category_id is None:
            raise NotFound({"category_id": ["Category is required"]})
        try:
            return current_domain.repository_for(Category).get(str(category_id))
        except ObjectNotFoundError:
            raise NotFound({"category_id": [f"Category {category_id} not found"]}) from None

    def _routed(self, category_id) -> tuple[Category, Discipline]:
        category = self.find_category(category_id)
        return category, resolve_discipline(category)

    # Goods movements

    def add_goods(self, product: Product, quantity) -> Product:
        """Receive ``quantity`` units of ``product`` and record its presence.

        Every reference is validated before anything changes. The product is
        persisted, created if new, and then inserted into its category's
        container with the discipline's insert.
        """
        with operation_context(operation="receipt", product_id=product.id, category_id=product.category_id):
            return self._add_goods(product, quantity)

    def _add_goods(self, product, quantity):
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise InvalidQuantity({"quantity": [f"Receipt quantity must be positive, got {quantity}"]})

        category, discipline = self._routed(product.category_id)
        if product.vendor_id is not None:
            self.vendors.get(product.vendor_id)

        repo = current_domain.repository_for(Product)
        existing = repo.find_by_code(product.product_code)
        if existing is not None and existing.id != product.id:
            raise ValidationError({"product_code": [f"Product code '{product.product_code}' is already in use"]})

        with self.registry.locked(category.id):
            if existing is not None:
                # Re-read under the lock so a concurrent issue's decrement is kept
                product = self.find_product(product.id)
            container = self.registry.get_or_create(category.id, discipline)
            product.receive(quantity)
            repo.add(product)
            container.insert(product)
            container_size = container.size()

        logger.info(
            "Goods received",
            product_id=str(product.id),
            category_id=str(category.id),
            discipline=discipline.value,
            quantity=quantity,
            stock=product.quantity_in_stock,
            container_size=container_size,
        )
        return product

    def receive_goods(self, product_id, quantity) -> Product:
        return self.add_goods(self.find_product(product_id), quantity)

    def issue_goods(self, product_id, quantity, customer_name) -> Sale:
        """Issue ``quantity`` units to ``customer_name`` and record the sale.

        Stacks and queues give up whichever entry their discipline dictates;
        lists give up the issued product's own entry.
        """
        with operation_context(operation="issue", product_id=product_id):
            return self._issue_goods(product_id, quantity, customer_name)

    def _issue_goods(self, product_id, quantity, customer_name):
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidQuantity({"quantity": [f"Issue quantity must be a whole number, got {quantity!r}"]})
        validate_issue_request(quantity, customer_name)

        product = self.find_product(product_id)
        category, discipline = self._routed(product.category_id)

        product_repo = current_domain.repository_for(Product)
        with self.registry.locked(category.id):
            # Re-read under the lock so concurrent issues see each other's stock
            product = product_repo.get(str(product.id))
            product.issue(quantity, customer_name)

            container = self.registry.get_or_create(category.id, discipline)
            removed = container.remove_for(product)
            if removed is None:
                logger.warning(
                    "No container entry to remove on issue",
                    product_id=str(product.id),
                    category_id=str(category.id),
                    discipline=discipline.value,
                )
            elif removed.id != product.id:
                logger.info(
                    "Container entry removed for another product",
                    product_id=str(product.id),
                    removed_product_id=str(removed.id),
                    discipline=discipline.value,
                )

            product_repo.add(product)
            sale = Sale.record(product, quantity, customer_name)
            current_domain.repository_for(Sale).add(sale)
            container_size = container.size()

        with self._tally_lock:
            self._tally[product.product_code] += quantity

        logger.info(
            "Goods issued",
            product_id=str(product.id),
            category_id=str(category.id),
            discipline=discipline.value,
            quantity=quantity,
            stock=product.quantity_in_stock,
            container_size=container_size,
            sale_id=str(sale.id),
        )
        return sale

    def delete_product(self, product_id) -> Product:
        """Remove a product from the store and drop its container entries."""
        with operation_context(operation="delete", product_id=product_id):
            product = self.find_product(product_id)
            repo = current_domain.repository_for(Product)
            with self.registry.locked(product.category_id):
                product = self.find_product(product.id)
                repo.remove(product)
                removed = self.registry.discard(product.category_id, lambda entry: entry.id == product.id)

            logger.info(
                "Product deleted",
                product_id=str(product.id),
                category_id=str(product.category_id),
                entries_removed=removed,
            )
            return product

    def update_details(self, product_id, **details) -> Product:
        """Apply detail changes to a fresh read, serialised with stock movements."""
        product = self.find_product(product_id)
        repo = current_domain.repository_for(Product)
        with self.registry.locked(product.category_id):
            product = self.find_product(product.id)
            product.update_details(**details)
            repo.add(product)
        return product

    # Queries

    def search(self, term, category_id) -> list[Product]:
        category, discipline = self._routed(category_id)
        if discipline is not Discipline.LIST:
            return current_domain.repository_for(Product).search_in_category(term, category.id)

        results, seen = [], set()
        for product in self.registry.snapshot(category.id):
            if product.id not in seen and matches(product, term):
                seen.add(product.id)
                results.append(product)
        return results

    def sort_alphabetically(self, category_id) -> list[Product]:
        category, discipline = self._routed(category_id)
        if discipline is not Discipline.LIST:
            return current_domain.repository_for(Product).find_by_category_ordered_by_name(category.id)

        with self.registry.locked(category.id):
            container = self.registry.get_or_create(category.id, discipline)
            container.sort(key=by_name)
            return container.items()

    def low_stock(self) -> list[Product]:
        return current_domain.repository_for(Product).find_low_stock()

    def contents(self, category_id) -> tuple[Category, Discipline, list[Product]]:
        category, discipline = self._routed(category_id)
        return category, discipline, self.registry.snapshot(category.id)

    # Statistics

    def sales_tally(self) -> dict[str, int]:
        with self._tally_lock:
            return dict(self._tally)

    def statistics(self) -> dict:
        entries = self.registry.entries_by_discipline()
        return {
            "entries_by_discipline": {discipline.value: count for discipline, count in entries.items()},
            "containers": len(self.registry),
            "vendors": len(self.vendors),
            "products_sold": len(self.sales_tally()),
        }

    def sales_summary(self) -> dict:
        sales = current_domain.repository_for(Sale)
        return {
            "total_revenue": sales.total_revenue(),
            "total_items_sold": sales.total_items_sold(),
            "tally": self.sales_tally(),
        }

    # Recovery

    def rebuild(self) -> dict[str, int]:
        """Repopulate containers from persisted stock.

        One entry per product with stock, oldest product first. Each category
        is re-read and swapped in under its own lock, so receipts and issues
        running meanwhile are never lost. Categories with an unusable
        discipline are skipped and logged; categories without stock lose
        their container.
        """
        self.vendors.clear()
        repo = current_domain.repository_for(Product)

        keys = dict.fromkeys(str(product.category_id) for product in repo.find_in_stock())
        keys.update(dict.fromkeys(self.registry.keys()))

        rebuilt = {}
        for key in keys:
            with self.registry.locked(key):
                products = repo.find_in_stock(key)
                if not products:
                    self.registry.drop(key)
                    continue

                try:
                    _, discipline = self._routed(key)
                except (NotFound, DataIntegrityError) as exc:
                    logger.error("Skipping category during rebuild", category_id=key, error=exc.messages)
                    self.registry.drop(key)
                    continue

                container = new_container(discipline)
                for product in products:
                    container.insert(product)
                self.registry.replace(key, container)
                rebuilt[key] = container.size()

        logger.info("Containers rebuilt", containers=len(self.registry), entries=sum(rebuilt.values()))
        return rebuilt


_engine: InventoryEngine | None = None
_engine_lock = threading.Lock()


def get_engine() -> InventoryEngine:
    """Process-wide engine, created on first use."""
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = InventoryEngine()
        return _engine


def reset_engine() -> InventoryEngine:
    global _engine
    with _engine_lock:
        _engine = InventoryEngine()
        return _engine
