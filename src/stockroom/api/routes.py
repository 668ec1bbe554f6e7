"""FastAPI endpoints for the Stockroom inventory."""

from datetime import datetime

from fastapi import APIRouter
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from stockroom.api.schemas import (
    CategoryIdResponse,
    CategoryResponse,
    CategorySalesResponse,
    ContainerResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    DailySalesResponse,
    IssueGoodsRequest,
    ProductIdResponse,
    ProductResponse,
    ProductSalesResponse,
    ReceiveGoodsRequest,
    RegisterVendorRequest,
    SaleResponse,
    SalesSummaryResponse,
    StatisticsResponse,
    StatusResponse,
    UpdateProductDetailsRequest,
    VendorIdResponse,
    VendorResponse,
)
from stockroom.category.category import Category
from stockroom.category.management import CreateCategory
from stockroom.engine import get_engine
from stockroom.exceptions import NotFound
from stockroom.product.details import UpdateProductDetails
from stockroom.product.product import Product
from stockroom.product.repository import in_price_range
from stockroom.routing import parse_discipline
from stockroom.sales.sale import Sale
from stockroom.vendor.management import RegisterVendor
from stockroom.vendor.vendor import Vendor

category_router = APIRouter(prefix="/categories", tags=["categories"])
vendor_router = APIRouter(prefix="/vendors", tags=["vendors"])
product_router = APIRouter(prefix="/products", tags=["products"])
sales_router = APIRouter(prefix="/sales", tags=["sales"])
report_router = APIRouter(prefix="/reports", tags=["reports"])


def _category(category: Category) -> CategoryResponse:
    return CategoryResponse(
        category_id=str(category.id),
        name=category.name,
        discipline=category.discipline,
        description=category.description,
    )


def _product(product: Product) -> ProductResponse:
    return ProductResponse(
        product_id=str(product.id),
        name=product.name,
        product_code=product.product_code,
        category_id=str(product.category_id),
        vendor_id=str(product.vendor_id) if product.vendor_id else None,
        price=product.price,
        quantity_in_stock=product.quantity_in_stock,
        minimum_stock_level=product.minimum_stock_level,
        description=product.description,
    )


def _sale(sale: Sale) -> SaleResponse:
    return SaleResponse(
        sale_id=str(sale.id),
        product_id=str(sale.product_id),
        product_code=sale.product_code,
        quantity_sold=sale.quantity_sold,
        unit_price=sale.unit_price,
        total_amount=sale.total_amount,
        customer_name=sale.customer_name,
        sale_date=sale.sale_date,
    )


def _vendor(vendor: Vendor) -> VendorResponse:
    return VendorResponse(
        vendor_id=str(vendor.id),
        name=vendor.name,
        contact_person=vendor.contact_person,
        phone=vendor.phone,
        email=vendor.email,
        address=vendor.address,
    )


# --- Category endpoints ---


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(
        name=body.name,
        discipline=body.discipline,
        description=body.description,
    )
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    return [_category(category) for category in current_domain.repository_for(Category).all_categories()]


@category_router.get("/data-structure/{discipline}", response_model=list[CategoryResponse])
async def categories_by_discipline(discipline: str) -> list[CategoryResponse]:
    parsed = parse_discipline(discipline.capitalize())
    if parsed is None:
        raise NotFound({"discipline": [f"Unknown data structure '{discipline}'"]})
    return [_category(category) for category in current_domain.repository_for(Category).find_by_discipline(parsed)]


@category_router.get("/{category_id}/search", response_model=list[ProductResponse])
async def search_category(category_id: str, term: str = "") -> list[ProductResponse]:
    return [_product(product) for product in get_engine().search(term, category_id)]


@category_router.get("/{category_id}/sorted", response_model=list[ProductResponse])
async def sorted_category(category_id: str) -> list[ProductResponse]:
    return [_product(product) for product in get_engine().sort_alphabetically(category_id)]


@category_router.get("/{category_id}/container", response_model=ContainerResponse)
async def category_container(category_id: str) -> ContainerResponse:
    category, discipline, items = get_engine().contents(category_id)
    return ContainerResponse(
        category_id=str(category.id),
        discipline=discipline.value,
        size=len(items),
        product_ids=[str(product.id) for product in items],
    )


# --- Vendor endpoints ---


@vendor_router.post("", status_code=201, response_model=VendorIdResponse)
async def register_vendor(body: RegisterVendorRequest) -> VendorIdResponse:
    command = RegisterVendor(
        name=body.name,
        contact_person=body.contact_person,
        phone=body.phone,
        email=body.email,
        address=body.address,
    )
    result = current_domain.process(command, asynchronous=False)
    return VendorIdResponse(vendor_id=result)


@vendor_router.get("", response_model=list[VendorResponse])
async def list_vendors() -> list[VendorResponse]:
    return [_vendor(vendor) for vendor in current_domain.repository_for(Vendor).all_vendors()]


@vendor_router.get("/{vendor_id}/products", response_model=list[ProductResponse])
async def vendor_products(vendor_id: str) -> list[ProductResponse]:
    vendor = get_engine().vendors.get(vendor_id)
    return [_product(product) for product in current_domain.repository_for(Product).find_by_vendor(vendor.id)]


# --- Product endpoints ---


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(body: CreateProductRequest) -> ProductIdResponse:
    product = Product.create(
        name=body.name,
        category_id=body.category_id,
        vendor_id=body.vendor_id,
        price=body.price,
        product_code=body.product_code,
        minimum_stock_level=body.minimum_stock_level,
        description=body.description,
    )
    get_engine().add_goods(product, body.quantity)
    return ProductIdResponse(product_id=str(product.id))


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    return [_product(product) for product in current_domain.repository_for(Product).all_products()]


# Static paths are registered before /{product_id} so they are not taken for an identifier
@product_router.get("/low-stock", response_model=list[ProductResponse])
async def low_stock() -> list[ProductResponse]:
    return [_product(product) for product in get_engine().low_stock()]


@product_router.get("/search", response_model=list[ProductResponse])
async def search_products(
    term: str = "",
    category_id: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
) -> list[ProductResponse]:
    if category_id is None:
        products = current_domain.repository_for(Product).search(term, min_price, max_price)
    else:
        products = [
            product
            for product in get_engine().search(term, category_id)
            if in_price_range(product, min_price, max_price)
        ]
    return [_product(product) for product in products]


@product_router.get("/price-range", response_model=list[ProductResponse])
async def products_in_price_range(
    min_price: float | None = None, max_price: float | None = None
) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).find_by_price_range(min_price, max_price)
    return [_product(product) for product in products]


@product_router.get("/category/{category_id}", response_model=list[ProductResponse])
async def products_in_category(category_id: str) -> list[ProductResponse]:
    category = get_engine().find_category(category_id)
    products = current_domain.repository_for(Product).find_by_category_ordered_by_name(category.id)
    return [_product(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product(get_engine().find_product(product_id))


@product_router.put("/{product_id}/details", response_model=StatusResponse)
async def update_product_details(product_id: str, body: UpdateProductDetailsRequest) -> StatusResponse:
    command = UpdateProductDetails(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        minimum_stock_level=body.minimum_stock_level,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/receive", response_model=ProductResponse)
async def receive_goods(product_id: str, body: ReceiveGoodsRequest) -> ProductResponse:
    return _product(get_engine().receive_goods(product_id, body.quantity))


@product_router.post("/{product_id}/issue", status_code=201, response_model=SaleResponse)
async def issue_goods(product_id: str, body: IssueGoodsRequest) -> SaleResponse:
    return _sale(get_engine().issue_goods(product_id, body.quantity, body.customer_name))


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str) -> StatusResponse:
    get_engine().delete_product(product_id)
    return StatusResponse()


# --- Sales endpoints ---


@sales_router.get("", response_model=list[SaleResponse])
async def list_sales() -> list[SaleResponse]:
    return [_sale(sale) for sale in current_domain.repository_for(Sale).all_sales()]


@sales_router.get("/recent", response_model=list[SaleResponse])
async def recent_sales(count: int = 20) -> list[SaleResponse]:
    return [_sale(sale) for sale in current_domain.repository_for(Sale).recent(count)]


@sales_router.get("/date-range", response_model=list[SaleResponse])
async def sales_in_date_range(start: datetime, end: datetime) -> list[SaleResponse]:
    if start > end:
        raise ValidationError({"start": ["Start of the range must not be after its end"]})
    return [_sale(sale) for sale in current_domain.repository_for(Sale).find_by_date_range(start, end)]


@sales_router.get("/customer", response_model=list[SaleResponse])
async def sales_by_customer(name: str) -> list[SaleResponse]:
    return [_sale(sale) for sale in current_domain.repository_for(Sale).find_by_customer(name)]


@sales_router.get("/product/{product_id}", response_model=list[SaleResponse])
async def sales_by_product(product_id: str) -> list[SaleResponse]:
    return [_sale(sale) for sale in current_domain.repository_for(Sale).find_by_product(product_id)]


@sales_router.get("/top-products", response_model=list[ProductSalesResponse])
async def top_products(count: int = 5) -> list[ProductSalesResponse]:
    return [ProductSalesResponse(**row) for row in current_domain.repository_for(Sale).top_products(count)]


@sales_router.get("/daily-summary", response_model=list[DailySalesResponse])
async def daily_summary() -> list[DailySalesResponse]:
    return [DailySalesResponse(**row) for row in current_domain.repository_for(Sale).daily_summary()]


@sales_router.get("/{sale_id}", response_model=SaleResponse)
async def get_sale(sale_id: str) -> SaleResponse:
    try:
        sale = current_domain.repository_for(Sale).get(sale_id)
    except ObjectNotFoundError:
        raise NotFound({"sale_id": [f"Sale {sale_id} not found"]}) from None
    return _sale(sale)


# --- Report endpoints ---


@report_router.get("/statistics", response_model=StatisticsResponse)
async def statistics() -> StatisticsResponse:
    engine = get_engine()
    return StatisticsResponse(**engine.statistics(), low_stock_products=len(engine.low_stock()))


@report_router.get("/sales-summary", response_model=SalesSummaryResponse)
async def sales_summary() -> SalesSummaryResponse:
    return SalesSummaryResponse(**get_engine().sales_summary())


@report_router.get("/sales-by-category", response_model=list[CategorySalesResponse])
async def sales_by_category() -> list[CategorySalesResponse]:
    rows = current_domain.repository_for(Sale).totals_by_category()
    return [CategorySalesResponse(**row) for row in rows]
