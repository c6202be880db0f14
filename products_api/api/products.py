from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from products_api.api.dependencies import (
    ProductUpdateRequest,
    validated_product_create,
    validated_product_id,
    validated_product_update,
)
from products_api.database import get_db
from products_api.exceptions import PRODUCT_NOT_FOUND
from products_api.schemas.product import (
    ErrorResponse,
    MessageEnvelope,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductResponse,
    ProductUpdate,
    ValidationErrorResponse,
)
from products_api.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

PRODUCT_DELETED = "Producto Eliminado"

BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorResponse,
        "description": "Bad Request - invalid ID or invalid input data",
    },
}
NOT_FOUND = {
    status.HTTP_404_NOT_FOUND: {
        "model": ErrorResponse,
        "description": "Product Not found",
    },
}


def _request_body(schema) -> dict:
    """OpenAPI request body for routes that read the raw JSON payload."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PRODUCT_NOT_FOUND)


@router.get(
    "",
    response_model=ProductListEnvelope,
    summary="Get a list of products",
    description="Return a list of products ordered by ID."
)
def list_products(db: Session = Depends(get_db)):
    """Get every product."""
    service = ProductService(db)
    products = service.get_all()
    return ProductListEnvelope(data=[ProductResponse.model_validate(p) for p in products])


@router.get(
    "/{product_id}",
    response_model=ProductEnvelope,
    summary="Get a product by ID",
    description="Return a product based on its unique ID.",
    responses={**BAD_REQUEST, **NOT_FOUND}
)
def get_product(
    product_id: Optional[int] = Depends(validated_product_id),
    db: Session = Depends(get_db)
):
    service = ProductService(db)
    product = service.get_by_id(product_id)

    if not product:
        raise _not_found()

    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.post(
    "",
    response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
    description="Create a new record in the database. Availability starts as true.",
    responses=BAD_REQUEST,
    openapi_extra=_request_body(ProductCreate)
)
def create_product(
    product_data: ProductCreate = Depends(validated_product_create),
    db: Session = Depends(get_db)
):
    """
    Create a new product.

    - **name**: Product name (required, not blank)
    - **price**: Product price, must be a number greater than 0 (required)
    """
    service = ProductService(db)
    product = service.create(product_data)
    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.put(
    "/{product_id}",
    response_model=ProductEnvelope,
    summary="Update a product with user input",
    description="Overwrite name, price and availability. Returns the updated product.",
    responses={**BAD_REQUEST, **NOT_FOUND},
    openapi_extra=_request_body(ProductUpdate)
)
def update_product(
    update: ProductUpdateRequest = Depends(validated_product_update),
    db: Session = Depends(get_db)
):
    """
    Update a product.

    Every mutable field is required; this is not a partial update.
    """
    service = ProductService(db)
    product = service.update(update.product_id, update.product_data)

    if not product:
        raise _not_found()

    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.patch(
    "/{product_id}",
    response_model=ProductEnvelope,
    summary="Update product availability",
    description="Invert the availability of a product and return it.",
    responses={**BAD_REQUEST, **NOT_FOUND}
)
def update_availability(
    product_id: Optional[int] = Depends(validated_product_id),
    db: Session = Depends(get_db)
):
    """Each call flips the current value."""
    service = ProductService(db)
    product = service.toggle_availability(product_id)

    if not product:
        raise _not_found()

    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.delete(
    "/{product_id}",
    response_model=MessageEnvelope,
    summary="Delete a product",
    description="Delete a product by ID and return a confirmation message.",
    responses={**BAD_REQUEST, **NOT_FOUND}
)
def delete_product(
    product_id: Optional[int] = Depends(validated_product_id),
    db: Session = Depends(get_db)
):
    """Delete a product."""
    service = ProductService(db)
    deleted = service.delete(product_id)

    if not deleted:
        raise _not_found()

    return MessageEnvelope(data=PRODUCT_DELETED)
