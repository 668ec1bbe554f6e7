"""Goods receipt and issue load scenarios.

One storekeeper per simulated user: pick a category, register products with
an initial receipt, then interleave receipts, issues, searches and sorts.
Stack, queue and list categories are all exercised.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import issue_data, product_data, receipt_data, search_term
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import GoodsState


class StorekeeperJourney(SequentialTaskSet):
    """Pick Category -> Register Products -> Receive -> Issue -> Search -> Sort."""

    def on_start(self):
        self.state = GoodsState()

    @task
    def pick_category(self):
        with self.client.get("/categories", catch_response=True, name="GET /categories") as resp:
            categories = [c for c in resp.json() if c.get("discipline")] if resp.status_code == 200 else []
            if not categories:
                resp.failure(f"No usable categories: {resp.status_code} {extract_error_detail(resp)}")
                self.interrupt()
                return
            category = random.choice(categories)
            self.state.category_id = category["category_id"]
            self.state.discipline = category["discipline"]

        with self.client.get("/vendors", catch_response=True, name="GET /vendors") as resp:
            vendors = resp.json() if resp.status_code == 200 else []
            self.state.vendor_id = random.choice(vendors)["vendor_id"] if vendors else None

    @task
    def register_products(self):
        for _ in range(3):
            payload = product_data(self.state.category_id, self.state.discipline, self.state.vendor_id)
            with self.client.post("/products", json=payload, catch_response=True, name="POST /products") as resp:
                if resp.status_code == 201:
                    product_id = resp.json()["product_id"]
                    self.state.stock[product_id] = payload["quantity"]
                    self.state.names[product_id] = payload["name"]
                else:
                    resp.failure(f"Register product failed: {resp.status_code} {extract_error_detail(resp)}")
        if not self.state.stock:
            self.interrupt()

    @task
    def receive_goods(self):
        product_id = random.choice(list(self.state.stock))
        payload = receipt_data()
        with self.client.put(
            f"/products/{product_id}/receive",
            json=payload,
            catch_response=True,
            name="PUT /products/{id}/receive",
        ) as resp:
            if resp.status_code == 200:
                self.state.stock[product_id] = resp.json()["quantity_in_stock"]
            else:
                resp.failure(f"Receive failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def issue_goods(self):
        for product_id in self.state.in_stock()[:2]:
            payload = issue_data(self.state.stock[product_id])
            with self.client.post(
                f"/products/{product_id}/issue",
                json=payload,
                catch_response=True,
                name="POST /products/{id}/issue",
            ) as resp:
                if resp.status_code == 201:
                    self.state.stock[product_id] -= payload["quantity"]
                elif resp.status_code == 409:
                    # Another user drained the product first; not a failure under load
                    resp.success()
                else:
                    resp.failure(f"Issue failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def search_category(self):
        name = random.choice(list(self.state.names.values()))
        with self.client.get(
            f"/categories/{self.state.category_id}/search",
            params={"term": search_term(name)},
            catch_response=True,
            name="GET /categories/{id}/search",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Search failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def sort_category(self):
        with self.client.get(
            f"/categories/{self.state.category_id}/sorted",
            catch_response=True,
            name="GET /categories/{id}/sorted",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Sort failed: {resp.status_code} {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class StorekeeperUser(HttpUser):
    """Runs storekeeper journeys back to back."""

    tasks = [StorekeeperJourney]
    wait_time = between(0.5, 2)


class ReportViewerUser(HttpUser):
    """Polls the report endpoints while storekeepers move goods."""

    wait_time = between(1, 3)
    weight = 1

    @task(3)
    def statistics(self):
        self.client.get("/reports/statistics", name="GET /reports/statistics")

    @task(2)
    def sales_summary(self):
        self.client.get("/reports/sales-summary", name="GET /reports/sales-summary")

    @task(1)
    def low_stock(self):
        self.client.get("/products/low-stock", name="GET /products/low-stock")

    @task(1)
    def top_products(self):
        self.client.get("/sales/top-products", name="GET /sales/top-products")

    @task(1)
    def daily_summary(self):
        self.client.get("/sales/daily-summary", name="GET /sales/daily-summary")
