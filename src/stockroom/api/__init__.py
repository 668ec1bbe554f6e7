"""Stockroom API package."""

from stockroom.api.errors import register_inventory_exception_handlers
from stockroom.api.routes import category_router, product_router, report_router, sales_router, vendor_router

__all__ = [
    "category_router",
    "product_router",
    "register_inventory_exception_handlers",
    "report_router",
    "sales_router",
    "vendor_router",
]
