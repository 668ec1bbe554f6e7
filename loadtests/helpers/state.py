"""Per-user state for the Stockroom load test scenarios.

Each simulated user keeps its own product and stock counters; nothing is
shared between users.
"""

from dataclasses import dataclass, field


@dataclass
class GoodsState:
    """Products created by one simulated storekeeper and their known stock."""

    category_id: str | None = None
    discipline: str | None = None
    vendor_id: str | None = None
    stock: dict[str, int] = field(default_factory=dict)
    names: dict[str, str] = field(default_factory=dict)

    def in_stock(self) -> list[str]:
        return [product_id for product_id, quantity in self.stock.items() if quantity > 0]
