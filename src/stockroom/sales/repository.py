"""Repository for the Sale aggregate, with the reporting aggregates."""

from collections import defaultdict

from stockroom.domain import stockroom
from stockroom.sales.sale import Sale


def _latest_first(sales):
    return sorted(sales, key=lambda sale: sale.sale_date, reverse=True)


@stockroom.repository(part_of=Sale)
class SaleRepository:
    def _all(self, **filters) -> list[Sale]:
        query = self._dao.query.filter(**filters) if filters else self._dao.query
        return query.limit(None).all().items

    def all_sales(self) -> list[Sale]:
        return _latest_first(self._all())

    def recent(self, count: int = 20) -> list[Sale]:
        return self.all_sales()[:count]

    def find_by_product(self, product_id) -> list[Sale]:
        return _latest_first(self._all(product_id=str(product_id)))

    def find_by_customer(self, name: str) -> list[Sale]:
        needle = (name or "").strip().lower()
        return [sale for sale in self.all_sales() if needle in sale.customer_name.lower()]

    def find_by_date_range(self, start, end) -> list[Sale]:
        return sorted(
            (sale for sale in self._all() if start <= sale.sale_date <= end),
            key=lambda sale: sale.sale_date,
        )

    def totals_by_product(self) -> list[dict]:
        """Units and revenue per product code, best sellers first."""
        return self._totals(lambda sale: sale.product_code, "product_code")

    def top_products(self, count: int = 5) -> list[dict]:
        return self.totals_by_product()[:count]

    def totals_by_category(self) -> list[dict]:
        return self._totals(lambda sale: str(sale.category_id), "category_id")

    def daily_summary(self) -> list[dict]:
        """Number of sales and revenue per calendar day, most recent day first."""
        counts = defaultdict(int)
        revenue = defaultdict(float)
        for sale in self._all():
            day = sale.sale_date.date()
            counts[day] += 1
            revenue[day] += sale.total_amount

        return [
            {"day": day, "sales": counts[day], "revenue": round(revenue[day], 2)}
            for day in sorted(counts, reverse=True)
        ]

    def total_revenue(self) -> float:
        return round(sum(sale.total_amount for sale in self._all()), 2)

    def total_items_sold(self) -> int:
        return sum(sale.quantity_sold for sale in self._all())

    def _totals(self, key, label) -> list[dict]:
        units = defaultdict(int)
        revenue = defaultdict(float)
        for sale in self._all():
            units[key(sale)] += sale.quantity_sold
            revenue[key(sale)] += sale.total_amount

        totals = [
            {label: group, "quantity_sold": units[group], "revenue": round(revenue[group], 2)}
            for group in units
        ]
        return sorted(totals, key=lambda row: (-row["quantity_sold"], row[label]))
