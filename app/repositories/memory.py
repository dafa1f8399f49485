"""In-memory repositories, used by the service tests and handy for
running the API without a database."""
import itertools
from typing import Dict, List, Optional

from app.exceptions import DuplicateAccount, OrderPersistenceError
from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.product import Product
from app.models.user import User
from app.repositories.base import OrderRepository, ProductRepository, UserRepository

# columns the SQL schema declares NOT NULL on order_items
_REQUIRED_ITEM_FIELDS = ("product_name", "product_size", "product_price")


class InMemoryProductRepository(ProductRepository):
    def __init__(self):
        self.rows: Dict[int, Product] = {}
        self._ids = itertools.count(1)

    def list(self, category=None, search=None, include_inactive=False):
        products = list(self.rows.values())

        if not include_inactive:
            products = [p for p in products if p.active]

        if category:
            products = [p for p in products if p.category == category]

        if search:
            needle = search.lower()
            products = [
                p for p in products
                if needle in (p.name or "").lower()
                or needle in (p.description or "").lower()
                or needle in (p.category or "").lower()
            ]

        if include_inactive:
            products.sort(key=lambda p: p.id, reverse=True)
            products.sort(key=lambda p: p.created_at, reverse=True)
            products.sort(key=lambda p: p.active, reverse=True)
        else:
            products.sort(key=lambda p: (p.category, p.name))

        return products

    def get(self, product_id):
        return self.rows.get(product_id)

    def add(self, product):
        product.id = next(self._ids)
        self.rows[product.id] = product
        return product

    def save(self, product):
        self.rows[product.id] = product
        return product

    def delete(self, product):
        self.rows.pop(product.id, None)


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.rows: Dict[int, User] = {}
        self._ids = itertools.count(1)

    def get(self, user_id):
        return self.rows.get(user_id)

    def get_by_email(self, email):
        return next((u for u in self.rows.values() if u.email == email), None)

    def add(self, user):
        if self.get_by_email(user.email):
            raise DuplicateAccount()
        user.id = next(self._ids)
        self.rows[user.id] = user
        return user


class InMemoryOrderRepository(OrderRepository):
    def __init__(self):
        self.orders: Dict[int, Order] = {}
        self.items: Dict[int, OrderItem] = {}
        self._order_ids = itertools.count(1)
        self._item_ids = itertools.count(1)

    def add_with_items(self, order: Order, items: List[OrderItem]) -> Order:
        if self.get_by_number(order.order_number):
            raise OrderPersistenceError(
                f"Error creating order: duplicate order number {order.order_number}"
            )

        # stage everything first, publish only when every row is valid
        order_id = next(self._order_ids)
        staged = []
        for item in items:
            missing = [f for f in _REQUIRED_ITEM_FIELDS if getattr(item, f) is None]
            if missing:
                raise OrderPersistenceError(
                    f"Error creating order: order_items.{missing[0]} cannot be null"
                )
            item.order_id = order_id
            staged.append(item)

        order.id = order_id
        self.orders[order.id] = order
        for item in staged:
            item.id = next(self._item_ids)
            self.items[item.id] = item
        return order

    def get(self, order_id):
        return self.orders.get(order_id)

    def get_by_number(self, order_number):
        return next(
            (o for o in self.orders.values() if o.order_number == order_number), None
        )

    def list_items(self, order_id):
        return sorted(
            (i for i in self.items.values() if i.order_id == order_id),
            key=lambda i: i.id,
        )

    def list_with_item_counts(self, email=None):
        orders = [
            o for o in self.orders.values()
            if email is None or o.customer_email == email
        ]
        orders.sort(key=lambda o: (o.order_date, o.id), reverse=True)
        return [(o, len(self.list_items(o.id))) for o in orders]

    def save(self, order):
        self.orders[order.id] = order
        return order
