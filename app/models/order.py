from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from app.constants.order_status import OrderStatus
from app.models.order_item import OrderItem


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_number: str = Field(max_length=100, unique=True, index=True)

    # customer snapshot, linked to users only by email
    customer_name: str = Field(max_length=255)
    customer_email: str = Field(max_length=255, index=True)
    customer_phone: str = Field(max_length=50)
    customer_address: str
    customer_city: str = Field(max_length=100)
    customer_postal_code: str = Field(max_length=20)
    customer_province: str = Field(max_length=100)
    delivery_instructions: Optional[str] = Field(default="")

    subtotal: Decimal = Field(max_digits=10, decimal_places=2)
    shipping_fee: Decimal = Field(default=Decimal("50.00"), max_digits=10, decimal_places=2)
    total_amount: Decimal = Field(max_digits=10, decimal_places=2)

    status: str = Field(default=OrderStatus.pending.value, index=True)

    order_date: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    # relationships (important!)
    items: List["OrderItem"] = Relationship(
        back_populates="order",
        sa_relationship_kwargs={"cascade": "all", "passive_deletes": True},
    )
