from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class Product(SQLModel, table=True):
    __tablename__ = "products"

    #main info
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    category: str = Field(max_length=100, index=True)
    size: str = Field(max_length=50)
    description: Optional[str] = Field(default="")

    #Image
    image_url: Optional[str] = Field(default="", max_length=500)

    #Shop Details
    price: Decimal = Field(max_digits=10, decimal_places=2)
    featured: bool = Field(default=False, index=True)
    stock_quantity: int = Field(default=100)
    active: bool = Field(default=True, index=True)

    #timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
