from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import List, Optional
from datetime import datetime
from decimal import Decimal


class CustomerDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., alias="postalCode", min_length=1, max_length=20)
    province: str = Field(..., min_length=1, max_length=100)
    delivery_instructions: Optional[str] = Field(default=None, alias="deliveryInstructions")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class CartItem(BaseModel):
    # name/size/price are checked by the order service so a bad cart
    # gets a single "Each product must have..." answer
    name: Optional[str] = None
    category: Optional[str] = None
    size: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    quantity: int = 1


class OrderCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer: CustomerDetails
    items: List[CartItem] = []
    subtotal: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    total: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    order_number: Optional[str] = Field(default=None, alias="orderNumber", max_length=100)


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    product_name: str
    product_category: str
    product_size: str
    product_price: float
    quantity: int


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    customer_city: str
    customer_postal_code: str
    customer_province: str
    delivery_instructions: Optional[str]
    subtotal: float
    shipping_fee: float
    total_amount: float
    status: str
    order_date: datetime
    updated_at: datetime


class OrderSummaryResponse(OrderResponse):
    item_count: int


class OrderCreatedResponse(BaseModel):
    message: str
    orderId: int
    orderNumber: str
    confirmationMessage: str
    whatsappUrl: str
    order: OrderResponse


class OrderDetailResponse(BaseModel):
    order: OrderResponse
    items: List[OrderItemResponse]


class WhatsAppLinkResponse(BaseModel):
    whatsappUrl: str
    orderNumber: str


class StatusUpdate(BaseModel):
    # validated against OrderStatus by the service so unknown values
    # raise InvalidStatus
    status: str
