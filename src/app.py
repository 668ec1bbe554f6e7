"""Stockroom FastAPI application.

Processes receipts, issues and reference-data commands synchronously over
HTTP. Every request runs inside the stockroom domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay ("production" switches to PostgreSQL).
# STOCKROOM_SEED_ON_STARTUP=0 skips reference data seeding at startup.
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from stockroom.domain import logger, stockroom
from stockroom.engine import get_engine
from stockroom.seeding import seed_reference_data

stockroom.init()


def _seed_on_startup() -> bool:
    return os.environ.get("STOCKROOM_SEED_ON_STARTUP", "1").lower() not in ("0", "false", "no")


@asynccontextmanager
async def lifespan(app: FastAPI):
    with stockroom.domain_context():
        if _seed_on_startup():
            seed_reference_data()
        rebuilt = get_engine().rebuild()
        logger.info("Stockroom ready", categories_with_stock=len(rebuilt))
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Stockroom API",
    description="Category-routed inventory: stacks, queues and lists per category",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the stockroom domain context for each request."""
    with stockroom.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from stockroom.api import (  # noqa: E402
    category_router,
    product_router,
    register_inventory_exception_handlers,
    report_router,
    sales_router,
    vendor_router,
)

app.include_router(category_router)
app.include_router(vendor_router)
app.include_router(product_router)
app.include_router(sales_router)
app.include_router(report_router)

register_exception_handlers(app)
register_inventory_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domain": {"name": stockroom.name},
            "containers": len(get_engine().registry),
        }
    )
