from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime
from decimal import Decimal

from app.constants.product_categories import PRODUCT_CATEGORIES


class ProductCreate(BaseModel):
    """Full product record. Used for both create and update: an update
    replaces every column, there is no partial patch."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    size: str = Field(..., min_length=1, max_length=50)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)

    image_url: Optional[str] = ""
    description: Optional[str] = ""

    featured: bool = False
    stock_quantity: int = Field(default=100, ge=0)
    active: bool = True

    @field_validator("category")
    @classmethod
    def known_category(cls, value: str) -> str:
        if value not in PRODUCT_CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(PRODUCT_CATEGORIES)}")
        return value


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    size: str
    price: float
    image_url: Optional[str]
    description: Optional[str]
    featured: bool
    stock_quantity: int
    active: bool
    created_at: datetime
    updated_at: datetime
