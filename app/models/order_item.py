from sqlmodel import SQLModel, Field , Relationship
from typing import Optional , TYPE_CHECKING
from decimal import Decimal

if TYPE_CHECKING:
    from app.models.order import Order

class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", ondelete="CASCADE", index=True)

    # snapshot of the product at purchase time
    product_name: str = Field(max_length=255)
    product_category: str = Field(default="Uncategorized", max_length=100)
    product_size: str = Field(max_length=50)
    product_price: Decimal = Field(max_digits=10, decimal_places=2)
    quantity: int = Field(default=1)

    order: Optional["Order"] = Relationship(back_populates="items")
