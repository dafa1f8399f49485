from typing import List
from fastapi import APIRouter, Depends, status
from app.dependencies.repositories import get_order_repository
from app.repositories.base import OrderRepository
from app.schemas.orders_schemas import (
    OrderCreate,
    OrderCreatedResponse,
    OrderDetailResponse,
    OrderItemResponse,
    OrderResponse,
    OrderSummaryResponse,
    WhatsAppLinkResponse,
)
from app.services import order_service

router = APIRouter()


def to_summary(order, item_count) -> OrderSummaryResponse:
    return OrderSummaryResponse.model_validate({**order.model_dump(), "item_count": item_count})


# Place order → confirmation goes out over WhatsApp

@router.post("/orders", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED)
def place_order(payload: OrderCreate, orders: OrderRepository = Depends(get_order_repository)):
    placed = order_service.create_order(
        orders,
        customer=payload.customer,
        items=payload.items,
        subtotal=payload.subtotal,
        order_number=payload.order_number,
        total=payload.total,
    )

    return OrderCreatedResponse(
        message="Order created successfully",
        orderId=placed.order.id,
        orderNumber=placed.order.order_number,
        confirmationMessage=placed.confirmation_message,
        whatsappUrl=placed.whatsapp_url,
        order=OrderResponse.model_validate(placed.order),
    )


# declared before /orders/{email}
@router.get("/orders/whatsapp/{order_number}", response_model=WhatsAppLinkResponse)
def whatsapp_link(order_number: str, orders: OrderRepository = Depends(get_order_repository)):
    return order_service.get_order_confirmation_link(orders, order_number)


# Order history for a customer, newest first

@router.get("/orders/{email}", response_model=List[OrderSummaryResponse])
def customer_orders(email: str, orders: OrderRepository = Depends(get_order_repository)):
    return [to_summary(o, count) for o, count in order_service.list_customer_orders(orders, email)]


@router.get("/order/{order_number}", response_model=OrderDetailResponse)
def order_detail(order_number: str, orders: OrderRepository = Depends(get_order_repository)):
    order, items = order_service.get_order_detail(orders, order_number)

    return OrderDetailResponse(
        order=OrderResponse.model_validate(order),
        items=[OrderItemResponse.model_validate(i) for i in items],
    )
