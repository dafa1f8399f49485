import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Tuple

from app.config import settings
from app.constants.order_status import ALLOWED_TRANSITIONS, OrderStatus, VALID_STATUSES
from app.constants.product_categories import DEFAULT_ITEM_CATEGORY
from app.exceptions import (
    InvalidOrder,
    InvalidStatus,
    InvalidStatusTransition,
    OrderNotFound,
)
from app.models.order import Order
from app.models.order_item import OrderItem
from app.repositories.base import OrderRepository
from app.schemas.orders_schemas import CartItem, CustomerDetails
from app.services.order_message import build_whatsapp_url, render_order_message

logger = logging.getLogger(__name__)

ORDER_NUMBER_PREFIX = "PEAQ"
CENTS = Decimal("0.01")
# largest value a Numeric(10,2) column holds
MAX_AMOUNT = Decimal("99999999.99")


@dataclass
class PlacedOrder:
    order: Order
    items: List[OrderItem]
    confirmation_message: str
    whatsapp_url: str


def generate_order_number() -> str:
    """PEAQ-<epoch millis>-<random hex>, e.g. PEAQ-1762590894043-3FA2C1."""
    millis = int(time.time() * 1000)
    return f"{ORDER_NUMBER_PREFIX}-{millis}-{uuid.uuid4().hex[:6].upper()}"


def validate_items(items: List[CartItem]):
    if not items:
        raise InvalidOrder("Invalid order items")

    for item in items:
        if not item.name or not item.size or item.price is None:
            raise InvalidOrder("Each product must have name, size, and price")
        if item.price < 0:
            raise InvalidOrder(f"Price for {item.name} cannot be negative")
        if item.quantity < 1:
            raise InvalidOrder(f"Quantity for {item.name} must be at least 1")


def _money(value) -> Decimal:
    try:
        amount = Decimal(str(value)).quantize(CENTS)
    except InvalidOperation:
        raise InvalidOrder(f"Amount {value} is out of range")
    if abs(amount) > MAX_AMOUNT:
        raise InvalidOrder(f"Amount {value} is out of range")
    return amount


def create_order(
    orders: OrderRepository,
    customer: CustomerDetails,
    items: List[CartItem],
    subtotal: Decimal,
    shipping_fee: Optional[Decimal] = None,
    order_number: Optional[str] = None,
    total: Optional[Decimal] = None,
) -> PlacedOrder:
    validate_items(items)

    subtotal = _money(subtotal)
    if subtotal < 0:
        raise InvalidOrder("Subtotal cannot be negative")

    if settings.verify_subtotal:
        expected = sum((_money(i.price) * i.quantity for i in items), Decimal("0.00"))
        if expected != subtotal:
            raise InvalidOrder(
                f"Subtotal {subtotal} does not match items total {expected}"
            )

    shipping_fee = _money(settings.shipping_fee if shipping_fee is None else shipping_fee)
    total_amount = _money(subtotal + shipping_fee)

    if total is not None and _money(total) != total_amount:
        logger.warning(
            f"Client total {total} differs from subtotal + shipping {total_amount}; storing {total_amount}"
        )

    order = Order(
        order_number=order_number or generate_order_number(),
        customer_name=customer.full_name,
        customer_email=customer.email,
        customer_phone=customer.phone,
        customer_address=customer.address,
        customer_city=customer.city,
        customer_postal_code=customer.postal_code,
        customer_province=customer.province,
        delivery_instructions=customer.delivery_instructions or "",
        subtotal=subtotal,
        shipping_fee=shipping_fee,
        total_amount=total_amount,
        status=OrderStatus.pending.value,
    )

    order_items = [
        OrderItem(
            product_name=item.name,
            product_category=item.category or DEFAULT_ITEM_CATEGORY,
            product_size=item.size,
            product_price=_money(item.price),
            quantity=item.quantity,
        )
        for item in items
    ]

    order = orders.add_with_items(order, order_items)
    logger.info(f"Order created: {order.order_number} ({len(order_items)} items, total {total_amount})")

    stored_items = orders.list_items(order.id)
    message = render_order_message(order, stored_items)

    return PlacedOrder(
        order=order,
        items=stored_items,
        confirmation_message=message,
        whatsapp_url=build_whatsapp_url(message),
    )


def get_order_detail(orders: OrderRepository, order_number: str) -> Tuple[Order, List[OrderItem]]:
    order = orders.get_by_number(order_number)
    if not order:
        raise OrderNotFound()
    return order, orders.list_items(order.id)


def get_order_confirmation_link(orders: OrderRepository, order_number: str) -> dict:
    """Rebuild the confirmation link from the stored order, not the
    original request."""
    order, items = get_order_detail(orders, order_number)
    message = render_order_message(order, items)
    return {
        "whatsappUrl": build_whatsapp_url(message),
        "orderNumber": order.order_number,
    }


def list_customer_orders(orders: OrderRepository, email: str):
    return orders.list_with_item_counts(email=email)


def list_all_orders(orders: OrderRepository):
    return orders.list_with_item_counts()


def set_status(orders: OrderRepository, order_id: int, new_status: str) -> Tuple[Order, str]:
    if new_status not in VALID_STATUSES:
        raise InvalidStatus()

    order = orders.get(order_id)
    if not order:
        raise OrderNotFound()

    old_status = order.status

    if settings.enforce_status_transitions and new_status != old_status:
        if new_status not in ALLOWED_TRANSITIONS.get(old_status, []):
            raise InvalidStatusTransition(old_status, new_status)

    order.status = new_status
    order.updated_at = datetime.utcnow()
    order = orders.save(order)

    logger.info(f"Order {order.order_number} status {old_status} → {new_status}")
    return order, old_status
