from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime


class ProductBase(BaseModel):
    """
    Base schema for Product input.

    Numbers are strict: strings and booleans are rejected instead of
    coerced, and price must be finite. An integer is still a valid price.
    """
    name: str = Field(..., max_length=255, description="Product name")
    description: str = Field(..., description="Product description (may be empty)")
    price: float = Field(
        ...,
        ge=0,
        strict=True,
        allow_inf_nan=False,
        description="Product price (must be non-negative)",
    )
    stock: int = Field(
        ...,
        ge=0,
        strict=True,
        description="Available stock (must be a non-negative integer)",
    )


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    name: str = Field(
        ...,
        max_length=255,
        pattern=r"^\s*\S",
        description="Product name (must contain a non-whitespace character)",
    )


class ProductUpdate(BaseModel):
    """
    Schema for updating an existing product. All fields are optional.

    Omitted fields are left untouched; an explicit null is rejected.
    """
    name: str = Field(None, max_length=255, pattern=r"^\s*\S", description="Product name")
    description: str = Field(None, description="Product description")
    price: float = Field(None, ge=0, strict=True, allow_inf_nan=False, description="Product price")
    stock: int = Field(None, ge=0, strict=True, description="Available stock")


class ProductResponse(BaseModel):
    """Schema for product response including all fields."""
    id: int
    name: str
    description: str
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Schema for the product list response, newest first."""
    items: list[ProductResponse]
    count: int


class MessageResponse(BaseModel):
    """Schema for operations that only report a message."""
    message: str
