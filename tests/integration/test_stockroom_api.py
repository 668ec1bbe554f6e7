"""Integration tests for Stockroom API endpoints via TestClient."""

from datetime import datetime, timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain
from stockroom.api import (
    category_router,
    product_router,
    register_inventory_exception_handlers,
    report_router,
    sales_router,
    vendor_router,
)
from stockroom.category.category import Category
from stockroom.product.product import Product


@pytest.fixture()
def client():
    app = FastAPI()
    for router in (category_router, vendor_router, product_router, sales_router, report_router):
        app.include_router(router)
    register_exception_handlers(app)
    register_inventory_exception_handlers(app)
    return TestClient(app)


def _create_product(client, category, **overrides):
    defaults = {
        "name": "Fresh Milk",
        "product_code": "DAI-MILK",
        "category_id": str(category.id),
        "price": 2.5,
        "quantity": 5,
        "minimum_stock_level": 2,
    }
    defaults.update(overrides)
    response = client.post("/products", json=defaults)
    assert response.status_code == 201, response.json()
    return response.json()["product_id"]


class TestCategoryEndpoints:
    def test_create_category(self, client):
        response = client.post("/categories", json={"name": "Snacks", "discipline": "List"})
        assert response.status_code == 201

        category = current_domain.repository_for(Category).get(response.json()["category_id"])
        assert category.discipline == "List"

    def test_create_category_with_bad_discipline(self, client):
        response = client.post("/categories", json={"name": "Snacks", "discipline": "Heap"})
        assert response.status_code == 400

    def test_list_categories(self, client, categories):
        response = client.get("/categories")
        assert response.status_code == 200
        assert len(response.json()) == 11

    def test_search_and_sort_list_category(self, client, categories):
        produce = categories["Produce"]
        for n, name in enumerate(["Banana", "Apple", "Cherry"]):
            _create_product(client, produce, name=name, product_code=f"PRD-{n}")

        sorted_response = client.get(f"/categories/{produce.id}/sorted")
        search_response = client.get(f"/categories/{produce.id}/search", params={"term": "an"})

        assert [p["name"] for p in sorted_response.json()] == ["Apple", "Banana", "Cherry"]
        assert [p["name"] for p in search_response.json()] == ["Banana"]

    def test_container_endpoint(self, client, categories):
        dairy = categories["Dairy"]
        milk_id = _create_product(client, dairy)

        response = client.get(f"/categories/{dairy.id}/container")

        assert response.json() == {
            "category_id": str(dairy.id),
            "discipline": "Stack",
            "size": 1,
            "product_ids": [milk_id],
        }

    def test_unknown_category(self, client):
        response = client.get("/categories/missing/sorted")
        assert response.status_code == 404
        assert "category_id" in response.json()["error"]

    def test_categories_by_data_structure(self, client, categories):
        response = client.get("/categories/data-structure/stack")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Beverages", "Bread/Bakery", "Canned/Jarred Goods", "Dairy"]

    def test_unknown_data_structure(self, client, categories):
        response = client.get("/categories/data-structure/heap")
        assert response.status_code == 404

    def test_broken_discipline(self, client):
        category = Category(name="Legacy")
        current_domain.repository_for(Category).add(category)

        response = client.get(f"/categories/{category.id}/search", params={"term": "x"})

        assert response.status_code == 500
        assert "discipline" in response.json()["error"]


class TestVendorEndpoints:
    def test_register_and_list_vendors(self, client):
        response = client.post("/vendors", json={"name": "Metro Wholesale", "contact_person": "David Kumi"})
        assert response.status_code == 201

        vendors = client.get("/vendors").json()
        assert [vendor["name"] for vendor in vendors] == ["Metro Wholesale"]

    def test_product_with_unknown_vendor(self, client, categories):
        response = client.post(
            "/products",
            json={
                "name": "Milk",
                "product_code": "DAI-1",
                "category_id": str(categories["Dairy"].id),
                "vendor_id": "missing",
                "price": 1.0,
                "quantity": 1,
            },
        )
        assert response.status_code == 404
        assert "vendor_id" in response.json()["error"]


    def test_vendor_products(self, client, categories):
        vendor_id = client.post("/vendors", json={"name": "Metro Wholesale"}).json()["vendor_id"]
        _create_product(client, categories["Dairy"], vendor_id=vendor_id)
        _create_product(client, categories["Meat"], name="Beef", product_code="MEA-BEEF")

        response = client.get(f"/vendors/{vendor_id}/products")

        assert response.status_code == 200
        assert [p["product_code"] for p in response.json()] == ["DAI-MILK"]

    def test_products_of_unknown_vendor(self, client):
        assert client.get("/vendors/missing/products").status_code == 404


class TestProductEndpoints:
    def test_create_and_get_product(self, client, categories):
        product_id = _create_product(client, categories["Dairy"])

        response = client.get(f"/products/{product_id}")

        assert response.status_code == 200
        assert response.json()["quantity_in_stock"] == 5
        assert response.json()["product_code"] == "DAI-MILK"

    def test_get_unknown_product(self, client):
        response = client.get("/products/missing")
        assert response.status_code == 404

    def test_create_with_zero_quantity(self, client, categories):
        response = client.post(
            "/products",
            json={
                "name": "Milk",
                "product_code": "DAI-0",
                "category_id": str(categories["Dairy"].id),
                "price": 1.0,
                "quantity": 0,
            },
        )
        assert response.status_code == 400
        assert "quantity" in response.json()["error"]

    def test_receive_goods(self, client, categories):
        product_id = _create_product(client, categories["Dairy"])

        response = client.put(f"/products/{product_id}/receive", json={"quantity": 3})

        assert response.status_code == 200
        assert response.json()["quantity_in_stock"] == 8

    def test_issue_goods(self, client, categories):
        product_id = _create_product(client, categories["Dairy"])

        response = client.post(f"/products/{product_id}/issue", json={"quantity": 2, "customer_name": "Ann"})

        assert response.status_code == 201
        assert response.json()["total_amount"] == 5.0
        assert current_domain.repository_for(Product).get(product_id).quantity_in_stock == 3

    def test_issue_more_than_stock(self, client, categories):
        product_id = _create_product(client, categories["Dairy"])

        response = client.post(f"/products/{product_id}/issue", json={"quantity": 6, "customer_name": "Ann"})

        assert response.status_code == 409
        assert "quantity" in response.json()["error"]

    def test_issue_without_customer(self, client, categories):
        product_id = _create_product(client, categories["Dairy"])

        response = client.post(f"/products/{product_id}/issue", json={"quantity": 1, "customer_name": " "})

        assert response.status_code == 400

    def test_issue_unknown_product(self, client):
        response = client.post("/products/missing/issue", json={"quantity": 1, "customer_name": "Ann"})
        assert response.status_code == 404

    def test_update_details(self, client, categories):
        product_id = _create_product(client, categories["Dairy"])

        response = client.put(f"/products/{product_id}/details", json={"name": "Whole Milk", "price": 2.75})

        assert response.status_code == 200
        assert client.get(f"/products/{product_id}").json()["name"] == "Whole Milk"

    def test_low_stock(self, client, categories):
        product_id = _create_product(client, categories["Dairy"], minimum_stock_level=5)
        _create_product(client, categories["Dairy"], name="Cheese", product_code="DAI-CHS", minimum_stock_level=1)

        response = client.get("/products/low-stock")

        assert response.status_code == 200
        assert [p["product_id"] for p in response.json()] == [product_id]


class TestReportEndpoints:
    def test_statistics(self, client, categories):
        _create_product(client, categories["Dairy"])
        _create_product(client, categories["Meat"], name="Beef", product_code="MEA-BEEF")

        stats = client.get("/reports/statistics").json()

        assert stats["entries_by_discipline"] == {"Stack": 1, "Queue": 1, "List": 0}
        assert stats["containers"] == 2
        assert stats["low_stock_products"] == 0

    def test_sales_summary_and_by_category(self, client, categories):
        product_id = _create_product(client, categories["Dairy"])
        client.post(f"/products/{product_id}/issue", json={"quantity": 2, "customer_name": "Ann"})

        summary = client.get("/reports/sales-summary").json()
        by_category = client.get("/reports/sales-by-category").json()

        assert summary == {"total_revenue": 5.0, "total_items_sold": 2, "tally": {"DAI-MILK": 2}}
        assert by_category == [{"category_id": str(categories["Dairy"].id), "quantity_sold": 2, "revenue": 5.0}]


class TestProductListingAndRemoval:
    def test_list_products(self, client, categories):
        _create_product(client, categories["Dairy"])
        _create_product(client, categories["Meat"], name="Beef", product_code="MEA-BEEF")

        response = client.get("/products")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Beef", "Fresh Milk"]

    def test_products_in_category(self, client, categories):
        dairy = categories["Dairy"]
        _create_product(client, dairy)
        _create_product(client, dairy, name="Butter", product_code="DAI-BTR")
        _create_product(client, categories["Meat"], name="Beef", product_code="MEA-BEEF")

        response = client.get(f"/products/category/{dairy.id}")

        assert [p["name"] for p in response.json()] == ["Butter", "Fresh Milk"]
        assert client.get("/products/category/missing").status_code == 404

    def test_search_products_with_price_filter(self, client, categories):
        _create_product(client, categories["Dairy"], price=2.5)
        _create_product(client, categories["Dry/Baking Goods"], name="Milk Powder", product_code="DRY-MLK", price=9.0)

        everything = client.get("/products/search", params={"term": "milk"}).json()
        cheap = client.get("/products/search", params={"term": "milk", "max_price": 5}).json()

        assert [p["name"] for p in everything] == ["Fresh Milk", "Milk Powder"]
        assert [p["name"] for p in cheap] == ["Fresh Milk"]

    def test_search_products_within_category(self, client, categories):
        produce = categories["Produce"]
        _create_product(client, produce, name="Apple", product_code="PRD-APL", price=1.0)
        _create_product(client, produce, name="Pineapple", product_code="PRD-PIN", price=6.0)
        _create_product(client, categories["Dairy"], name="Apple Yoghurt", product_code="DAI-APL", price=1.0)

        response = client.get(
            "/products/search", params={"term": "apple", "category_id": str(produce.id), "min_price": 2}
        )

        assert [p["name"] for p in response.json()] == ["Pineapple"]

    def test_products_in_price_range(self, client, categories):
        _create_product(client, categories["Dairy"], price=2.5)
        _create_product(client, categories["Meat"], name="Beef", product_code="MEA-BEEF", price=8.0)

        response = client.get("/products/price-range", params={"min_price": 5, "max_price": 10})

        assert [p["name"] for p in response.json()] == ["Beef"]

    def test_delete_product(self, client, categories):
        dairy = categories["Dairy"]
        product_id = _create_product(client, dairy)

        response = client.delete(f"/products/{product_id}")

        assert response.status_code == 200
        assert client.get(f"/products/{product_id}").status_code == 404
        assert client.get(f"/categories/{dairy.id}/container").json()["product_ids"] == []

    def test_delete_unknown_product(self, client):
        assert client.delete("/products/missing").status_code == 404


class TestSalesEndpoints:
    @pytest.fixture()
    def sold(self, client, categories):
        milk_id = _create_product(client, categories["Dairy"], quantity=10)
        beef_id = _create_product(client, categories["Meat"], name="Beef", product_code="MEA-BEEF", price=8.0)
        client.post(f"/products/{milk_id}/issue", json={"quantity": 3, "customer_name": "Ann Mensah"})
        client.post(f"/products/{beef_id}/issue", json={"quantity": 1, "customer_name": "Ben Owusu"})
        return {"milk": milk_id, "beef": beef_id}

    def test_list_sales(self, client, sold):
        response = client.get("/sales")

        assert response.status_code == 200
        assert sorted(sale["customer_name"] for sale in response.json()) == ["Ann Mensah", "Ben Owusu"]

    def test_get_sale(self, client, sold):
        sale_id = client.get("/sales").json()[0]["sale_id"]

        response = client.get(f"/sales/{sale_id}")

        assert response.status_code == 200
        assert response.json()["sale_id"] == sale_id

    def test_get_unknown_sale(self, client):
        response = client.get("/sales/missing")
        assert response.status_code == 404
        assert "sale_id" in response.json()["error"]

    def test_sales_by_customer_and_product(self, client, sold):
        by_customer = client.get("/sales/customer", params={"name": "mensah"}).json()
        by_product = client.get(f"/sales/product/{sold['beef']}").json()

        assert [sale["product_code"] for sale in by_customer] == ["DAI-MILK"]
        assert [sale["customer_name"] for sale in by_product] == ["Ben Owusu"]

    def test_sales_in_date_range(self, client, sold):
        now = datetime.now()
        inside = {"start": (now - timedelta(hours=1)).isoformat(), "end": (now + timedelta(hours=1)).isoformat()}
        later = {"start": (now + timedelta(hours=1)).isoformat(), "end": (now + timedelta(hours=2)).isoformat()}

        assert len(client.get("/sales/date-range", params=inside).json()) == 2
        assert client.get("/sales/date-range", params=later).json() == []

    def test_reversed_date_range(self, client):
        now = datetime.now()
        params = {"start": now.isoformat(), "end": (now - timedelta(days=1)).isoformat()}

        assert client.get("/sales/date-range", params=params).status_code == 400

    def test_top_products_and_daily_summary(self, client, sold):
        top = client.get("/sales/top-products", params={"count": 1}).json()
        daily = client.get("/sales/daily-summary").json()

        assert top == [{"product_code": "DAI-MILK", "quantity_sold": 3, "revenue": 7.5}]
        assert daily == [{"day": datetime.now().date().isoformat(), "sales": 2, "revenue": 15.5}]

    def test_recent_sales(self, client, sold):
        assert len(client.get("/sales/recent", params={"count": 1}).json()) == 1
