"""Pydantic request/response schemas for the Stockroom API."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

# --- Category Schemas ---


class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Snacks",
                    "discipline": "List",
                    "description": "Crisps, nuts and biscuits",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    discipline: str = Field(..., max_length=10)
    description: str | None = None


class CategoryIdResponse(BaseModel):
    category_id: str


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    discipline: str | None = None
    description: str | None = None


class ContainerResponse(BaseModel):
    category_id: str
    discipline: str
    size: int
    product_ids: list[str]


# --- Vendor Schemas ---


class RegisterVendorRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Fresh Foods Ltd",
                    "contact_person": "John Mensah",
                    "phone": "+233 24 123 4567",
                    "email": "john@freshfoods.com",
                    "address": "123 Market Street, Accra, Ghana",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    contact_person: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    email: str | None = Field(None, max_length=100)
    address: str | None = None


class VendorIdResponse(BaseModel):
    vendor_id: str


class VendorResponse(BaseModel):
    vendor_id: str
    name: str
    contact_person: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None


# --- Product Schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Fresh Milk 1L",
                    "product_code": "DAI-MILK-1L",
                    "category_id": "cat-dairy-001",
                    "vendor_id": "ven-fresh-001",
                    "price": 12.5,
                    "quantity": 24,
                    "minimum_stock_level": 10,
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    product_code: str = Field(..., max_length=50)
    category_id: str
    vendor_id: str | None = None
    price: float = Field(..., gt=0)
    quantity: int
    minimum_stock_level: int = Field(10, ge=0)
    description: str | None = None


class UpdateProductDetailsRequest(BaseModel):
    name: str | None = Field(None, max_length=100)
    description: str | None = None
    price: float | None = Field(None, gt=0)
    minimum_stock_level: int | None = Field(None, ge=0)


class ReceiveGoodsRequest(BaseModel):
    quantity: int


class IssueGoodsRequest(BaseModel):
    quantity: int
    customer_name: str


class ProductIdResponse(BaseModel):
    product_id: str


class ProductResponse(BaseModel):
    product_id: str
    name: str
    product_code: str
    category_id: str
    vendor_id: str | None = None
    price: float
    quantity_in_stock: int
    minimum_stock_level: int
    description: str | None = None


class SaleResponse(BaseModel):
    sale_id: str
    product_id: str
    product_code: str
    quantity_sold: int
    unit_price: float
    total_amount: float
    customer_name: str
    sale_date: datetime


class StatusResponse(BaseModel):
    status: str = "ok"


# --- Report Schemas ---


class StatisticsResponse(BaseModel):
    entries_by_discipline: dict[str, int]
    containers: int
    vendors: int
    products_sold: int
    low_stock_products: int


class SalesSummaryResponse(BaseModel):
    total_revenue: float
    total_items_sold: int
    tally: dict[str, int]


class CategorySalesResponse(BaseModel):
    category_id: str
    quantity_sold: int
    revenue: float


class ProductSalesResponse(BaseModel):
    product_code: str
    quantity_sold: int
    revenue: float


class DailySalesResponse(BaseModel):
    day: date
    sales: int
    revenue: float
