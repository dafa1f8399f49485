import re
from decimal import Decimal

import pytest

from app.config import settings
from app.constants.order_status import VALID_STATUSES
from app.exceptions import (
    InvalidOrder,
    InvalidStatus,
    InvalidStatusTransition,
    OrderNotFound,
    OrderPersistenceError,
)
from app.models.order_item import OrderItem
from app.schemas.orders_schemas import CartItem, CustomerDetails
from app.services import order_service

from conftest import customer_payload, sample_cart


def customer(**overrides):
    return CustomerDetails(**customer_payload(**overrides))


def cart():
    return [CartItem(**item) for item in sample_cart()]


def place(order_repo, **kwargs):
    kwargs.setdefault("customer", customer())
    kwargs.setdefault("items", cart())
    kwargs.setdefault("subtotal", Decimal("169.98"))
    return order_service.create_order(order_repo, **kwargs)


def without_date(message):
    return [line for line in message.splitlines() if not line.startswith("Order Date:")]


def test_create_order_persists_header_and_every_item(order_repo):
    placed = place(order_repo)

    assert len(order_repo.orders) == 1
    assert len(order_repo.items) == 2
    assert placed.order.status == "pending"
    assert [i.product_name for i in placed.items] == ["Velvet Torrida", "Royal For Him"]
    assert all(i.order_id == placed.order.id for i in placed.items)


def test_total_is_subtotal_plus_fixed_shipping(order_repo):
    placed = place(order_repo)

    assert placed.order.shipping_fee == Decimal("50.00")
    assert placed.order.total_amount == Decimal("219.98")
    assert placed.order.total_amount == placed.order.subtotal + placed.order.shipping_fee


def test_client_total_is_not_trusted(order_repo):
    placed = place(order_repo, total=Decimal("1.00"))

    assert placed.order.total_amount == Decimal("219.98")


def test_subtotal_is_trusted_by_default(order_repo):
    placed = place(order_repo, subtotal=Decimal("10.00"))

    assert placed.order.total_amount == Decimal("60.00")


def test_subtotal_verification_when_enabled(order_repo, monkeypatch):
    monkeypatch.setattr(settings, "verify_subtotal", True)

    with pytest.raises(InvalidOrder):
        place(order_repo, subtotal=Decimal("10.00"))

    assert place(order_repo).order.subtotal == Decimal("169.98")


def test_scenario_message(order_repo):
    placed = place(order_repo)

    assert "1. Velvet Torrida - 50ml - R119.99" in placed.confirmation_message
    assert "2. Royal For Him - 30ml - R49.99" in placed.confirmation_message
    assert "R219.98" in placed.confirmation_message
    assert placed.whatsapp_url.startswith("https://wa.me/27796989762?text=")


def test_generated_order_number(order_repo):
    placed = place(order_repo)

    assert re.fullmatch(r"PEAQ-\d{13}-[0-9A-F]{6}", placed.order.order_number)


def test_caller_order_number_is_kept(order_repo):
    placed = place(order_repo, order_number="PEAQ-1762590894043")

    assert placed.order.order_number == "PEAQ-1762590894043"


def test_duplicate_order_number_fails(order_repo):
    place(order_repo, order_number="PEAQ-1")

    with pytest.raises(OrderPersistenceError):
        place(order_repo, order_number="PEAQ-1")

    assert len(order_repo.orders) == 1
    assert len(order_repo.items) == 2


def test_empty_cart_is_rejected(order_repo):
    with pytest.raises(InvalidOrder):
        place(order_repo, items=[])

    assert order_repo.orders == {}


@pytest.mark.parametrize("missing", ["name", "size", "price"])
def test_item_missing_required_field_is_rejected(order_repo, missing):
    items = cart()
    setattr(items[1], missing, None)

    with pytest.raises(InvalidOrder) as exc:
        place(order_repo, items=items)

    assert exc.value.message == "Each product must have name, size, and price"
    assert order_repo.orders == {}


def test_zero_quantity_is_rejected(order_repo):
    items = cart()
    items[0].quantity = 0

    with pytest.raises(InvalidOrder):
        place(order_repo, items=items)


def test_failed_item_insert_leaves_nothing(order_repo):
    from app.models.order import Order

    order = Order(
        order_number="PEAQ-BROKEN",
        customer_name="A B",
        customer_email="a@example.com",
        customer_phone="1",
        customer_address="x",
        customer_city="y",
        customer_postal_code="1",
        customer_province="z",
        subtotal=Decimal("1.00"),
        shipping_fee=Decimal("50.00"),
        total_amount=Decimal("51.00"),
    )
    items = [
        OrderItem(product_name="Ok", product_size="30ml", product_price=Decimal("1.00")),
        OrderItem(product_name=None, product_size="30ml", product_price=Decimal("1.00")),
    ]

    with pytest.raises(OrderPersistenceError):
        order_repo.add_with_items(order, items)

    assert order_repo.orders == {}
    assert order_repo.items == {}


def test_reconstructed_message_matches_creation(order_repo):
    from urllib.parse import unquote

    placed = place(order_repo)
    link = order_service.get_order_confirmation_link(order_repo, placed.order.order_number)
    rebuilt = unquote(link["whatsappUrl"].split("?text=", 1)[1])

    assert link["orderNumber"] == placed.order.order_number
    assert without_date(rebuilt) == without_date(placed.confirmation_message)


def test_confirmation_link_for_unknown_order(order_repo):
    with pytest.raises(OrderNotFound):
        order_service.get_order_confirmation_link(order_repo, "PEAQ-404")


def test_customer_history_newest_first(order_repo):
    first = place(order_repo)
    second = place(order_repo)
    place(order_repo, customer=customer(email="someone@example.com"))

    history = order_service.list_customer_orders(order_repo, "thandi@example.com")

    assert [o.id for o, _ in history] == [second.order.id, first.order.id]
    assert [count for _, count in history] == [2, 2]


@pytest.mark.parametrize("current", VALID_STATUSES)
@pytest.mark.parametrize("new", VALID_STATUSES)
def test_any_status_accepted_from_any_state(order_repo, current, new):
    placed = place(order_repo)
    placed.order.status = current

    order, old = order_service.set_status(order_repo, placed.order.id, new)

    assert old == current
    assert order.status == new


@pytest.mark.parametrize("current", VALID_STATUSES)
@pytest.mark.parametrize("bad", ["paid", "PENDING", "", "refunded"])
def test_unknown_status_rejected_regardless_of_state(order_repo, current, bad):
    placed = place(order_repo)
    placed.order.status = current

    with pytest.raises(InvalidStatus):
        order_service.set_status(order_repo, placed.order.id, bad)

    assert placed.order.status == current


def test_status_for_unknown_order(order_repo):
    with pytest.raises(OrderNotFound):
        order_service.set_status(order_repo, 999, "confirmed")


def test_strict_transitions_when_enabled(order_repo, monkeypatch):
    monkeypatch.setattr(settings, "enforce_status_transitions", True)
    placed = place(order_repo)

    for status in ["confirmed", "shipped", "delivered"]:
        order_service.set_status(order_repo, placed.order.id, status)

    with pytest.raises(InvalidStatusTransition):
        order_service.set_status(order_repo, placed.order.id, "shipped")

    other = place(order_repo)
    order_service.set_status(order_repo, other.order.id, "cancelled")
    with pytest.raises(InvalidStatusTransition):
        order_service.set_status(order_repo, other.order.id, "pending")


def test_amounts_beyond_storage_range_are_rejected(order_repo):
    with pytest.raises(InvalidOrder):
        place(order_repo, subtotal=Decimal("1e30"))

    with pytest.raises(InvalidOrder):
        place(order_repo, subtotal=Decimal("99999999.99"))

    assert order_repo.orders == {}
