"""WhatsApp order confirmation.

The shop takes no online payment: every order is confirmed by the
customer opening a wa.me link that carries this message.
"""
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional
from urllib.parse import quote

from app.config import settings
from app.models.order import Order
from app.models.order_item import OrderItem

SHOP_NAME = "PeaQ Body Care"
PAYMENT_METHOD = "Cash on Delivery"
CURRENCY = "R"
DATE_LINE_PREFIX = "Order Date: "

# characters encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_amount(value) -> str:
    return f"{CURRENCY}{Decimal(str(value)):.2f}"


def render_order_message(
    order: Order,
    items: Iterable[OrderItem],
    now: Optional[datetime] = None,
) -> str:
    """Plain-text confirmation for a stored order.

    Only the ``Order Date`` line depends on when this is called; the rest
    is a pure function of the order and its items.
    """
    now = now or datetime.now()

    lines = [
        f"🛍️ *NEW ORDER - {SHOP_NAME}*",
        "",
        f"*Order Number:* {order.order_number}",
        f"*Customer:* {order.customer_name}",
        f"*Phone:* {order.customer_phone}",
        f"*Email:* {order.customer_email}",
        "",
        "*Delivery Address:*",
        order.customer_address,
        f"{order.customer_city}, {order.customer_postal_code}",
        order.customer_province,
        "",
        "*Order Items:*",
    ]

    for index, item in enumerate(items, start=1):
        line = f"{index}. {item.product_name} - {item.product_size} - {format_amount(item.product_price)}"
        if item.quantity and item.quantity > 1:
            line += f" x{item.quantity}"
        lines.append(line)

    lines += [
        "",
        "*Order Summary:*",
        f"Subtotal: {format_amount(order.subtotal)}",
        f"Shipping: {format_amount(order.shipping_fee)}",
        f"*Total: {format_amount(order.total_amount)}*",
        "",
    ]

    if order.delivery_instructions:
        lines += [
            "*Delivery Instructions:*",
            order.delivery_instructions,
            "",
        ]

    lines += [
        f"{DATE_LINE_PREFIX}{now.strftime('%Y/%m/%d, %H:%M:%S')}",
        f"Payment Method: {PAYMENT_METHOD}",
    ]

    return "\n".join(lines)


def encode_message(message: str) -> str:
    return quote(message, safe=_URI_COMPONENT_SAFE)


def build_whatsapp_url(message: str) -> str:
    base = settings.whatsapp_base_url.rstrip("/")
    return f"{base}/{settings.whatsapp_number}?text={encode_message(message)}"
