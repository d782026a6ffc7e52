from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from product_api.core.db import get_db
from product_api.errors import ProductNotFound
from product_api.models.product import Product
from product_api.schemas.product import (
    ErrorResponse,
    MessageResponse,
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
    ValidationErrorResponse,
)
from product_api.services import product_store
from product_api.validation import PRODUCT_RULES, UPDATE_RULES, ValidatedInput, validator

router = APIRouter(prefix="/api/products", tags=["Products"])

BAD_REQUEST = {400: {"model": ValidationErrorResponse, "description": "Bad request - invalid ID or input"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}

DELETED_MESSAGE = "Product deleted"


def _json_body(schema) -> dict:
    # The body is read by the validator, so describe it for the docs by hand
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


def _find(db: Session, product_id: int) -> Product:
    product = product_store.get_product(db, product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product


@router.get(
    "",
    response_model=ProductListResponse,
    summary="Get a list of products",
    description="Return every product, newest first",
)
def get_products(db: Session = Depends(get_db)):
    return {"data": product_store.list_products(db)}


@router.get(
    "/{id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get a product by ID",
    description="Return a product based on its unique ID",
)
def get_product_by_id(
    inp: ValidatedInput = Depends(validator()),
    db: Session = Depends(get_db),
):
    return {"data": _find(db, inp.product_id)}


@router.post(
    "",
    status_code=201,
    response_model=ProductResponse,
    responses=BAD_REQUEST,
    summary="Create a new product",
    description="Return the new record stored in the database",
    openapi_extra=_json_body(ProductCreate),
)
def create_product(
    inp: ValidatedInput = Depends(validator(PRODUCT_RULES, ProductCreate, path_id=False)),
    db: Session = Depends(get_db),
):
    return {"data": product_store.create_product(db, inp.payload)}


@router.put(
    "/{id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Update a product with user input",
    description="Return the updated product",
    openapi_extra=_json_body(ProductUpdate),
)
def update_product(
    inp: ValidatedInput = Depends(validator(UPDATE_RULES, ProductUpdate)),
    db: Session = Depends(get_db),
):
    product = _find(db, inp.product_id)
    return {"data": product_store.update_product(db, product, inp.payload)}


@router.patch(
    "/{id}",
    response_model=ProductResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Toggle product availability",
    description="Flip the stored availability and return the product; the request body is ignored",
)
def update_availability(
    inp: ValidatedInput = Depends(validator()),
    db: Session = Depends(get_db),
):
    product = _find(db, inp.product_id)
    return {"data": product_store.toggle_availability(db, product)}


@router.delete(
    "/{id}",
    response_model=MessageResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a product by ID",
    description="Return a confirmation message",
)
def delete_product(
    inp: ValidatedInput = Depends(validator()),
    db: Session = Depends(get_db),
):
    product = _find(db, inp.product_id)
    product_store.delete_product(db, product)
    return {"data": DELETED_MESSAGE}
