from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    """Base schema for Product with common attributes."""
    name: str = Field(..., min_length=1, max_length=255, description="Product name", examples=["Monitor curvo 49 pulgadas"])
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Product price (must be positive)", examples=[350.50])


class ProductCreate(ProductBase):
    """Schema for creating a new product. Availability defaults to true."""
    pass


class ProductUpdate(ProductBase):
    """Schema for a full update: every mutable field is overwritten."""
    availability: bool = Field(..., description="Product availability", examples=[True])


class ProductResponse(ProductBase):
    """Schema for product response including all fields."""
    id: int = Field(..., description="The product ID", examples=[1])
    availability: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    data: str = Field(..., examples=["Producto Eliminado"])


class FieldErrorResponse(BaseModel):
    """One failed validation rule."""
    field: str = Field(..., examples=["price"])
    msg: str = Field(..., examples=["Precio no valido"])
    location: str = Field(..., examples=["body"])


class ValidationErrorResponse(BaseModel):
    errors: list[FieldErrorResponse]


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Producto no encontrado"])
