from products_api.schemas.product import (
    ErrorResponse,
    FieldErrorResponse,
    MessageEnvelope,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductResponse,
    ProductUpdate,
    ValidationErrorResponse,
)

__all__ = [
    "ErrorResponse",
    "FieldErrorResponse",
    "MessageEnvelope",
    "ProductCreate",
    "ProductEnvelope",
    "ProductListEnvelope",
    "ProductResponse",
    "ProductUpdate",
    "ValidationErrorResponse",
]
