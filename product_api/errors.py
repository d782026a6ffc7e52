import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from product_api.schemas.product import FieldError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Product not found"


class InputErrors(Exception):
    """One or more request fields broke their validation rules."""

    def __init__(self, errors: list[FieldError]):
        super().__init__(f"{len(errors)} invalid field(s)")
        self.errors = errors


class ProductNotFound(Exception):
    def __init__(self, product_id: int):
        super().__init__(f"product {product_id} not found")
        self.product_id = product_id


async def input_errors_handler(request: Request, exc: InputErrors) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"errors": [e.model_dump() for e in exc.errors]},
    )


async def product_not_found_handler(request: Request, exc: ProductNotFound) -> JSONResponse:
    logger.debug("Lookup miss for product %s", exc.product_id)
    return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InputErrors, input_errors_handler)
    app.add_exception_handler(ProductNotFound, product_not_found_handler)
