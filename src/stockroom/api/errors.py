"""Map inventory failures to HTTP responses.

Handlers registered here take precedence over the generic Protean ones for
the subclasses they name. Every body has the shape ``{"error": messages}``.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stockroom.exceptions import DataIntegrityError, InsufficientStock, InvalidQuantity, NotFound

_STATUS_CODES = {
    InvalidQuantity: 400,
    NotFound: 404,
    InsufficientStock: 409,
    DataIntegrityError: 500,
}


def register_inventory_exception_handlers(app: FastAPI) -> None:
    for exc_class, status_code in _STATUS_CODES.items():
        app.add_exception_handler(exc_class, _handler(status_code))


def _handler(status_code):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(status_code=status_code, content={"error": exc.messages})

    return handle
