import logging
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from app.exceptions import DuplicateAccount, OrderPersistenceError
from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.product import Product
from app.models.user import User
from app.repositories.base import OrderRepository, ProductRepository, UserRepository

logger = logging.getLogger(__name__)


class SqlProductRepository(ProductRepository):
    def __init__(self, session: Session):
        self.session = session

    def list(self, category=None, search=None, include_inactive=False):
        query = select(Product)

        if not include_inactive:
            query = query.where(Product.active == True)  # noqa: E712

        if category:
            query = query.where(Product.category == category)

        if search:
            # the term is matched literally, not as a LIKE pattern
            term = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            like = f"%{term}%"
            query = query.where(
                Product.name.ilike(like, escape="\\") |
                Product.description.ilike(like, escape="\\") |
                Product.category.ilike(like, escape="\\")
            )

        if include_inactive:
            query = query.order_by(
                Product.active.desc(), Product.created_at.desc(), Product.id.desc()
            )
        else:
            query = query.order_by(Product.category, Product.name)

        return self.session.exec(query).all()

    def get(self, product_id):
        return self.session.get(Product, product_id)

    def add(self, product):
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product

    def save(self, product):
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product

    def delete(self, product):
        self.session.delete(product)
        self.session.commit()


class SqlUserRepository(UserRepository):
    def __init__(self, session: Session):
        self.session = session

    def get(self, user_id):
        return self.session.get(User, user_id)

    def get_by_email(self, email):
        return self.session.exec(select(User).where(User.email == email)).first()

    def add(self, user):
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            # lost a race with a concurrent registration for the same email
            self.session.rollback()
            raise DuplicateAccount() from e
        self.session.refresh(user)
        return user


class SqlOrderRepository(OrderRepository):
    def __init__(self, session: Session):
        self.session = session

    def add_with_items(self, order: Order, items: List[OrderItem]) -> Order:
        try:
            self.session.add(order)
            self.session.flush()

            for item in items:
                item.order_id = order.id
                self.session.add(item)
                self.session.flush()

            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Order transaction rolled back for {order.order_number}: {e}")
            raise OrderPersistenceError(f"Error creating order: {e}") from e

        self.session.refresh(order)
        return order

    def get(self, order_id):
        return self.session.get(Order, order_id)

    def get_by_number(self, order_number):
        return self.session.exec(
            select(Order).where(Order.order_number == order_number)
        ).first()

    def list_items(self, order_id):
        return self.session.exec(
            select(OrderItem)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
        ).all()

    def list_with_item_counts(self, email=None) -> List[Tuple[Order, int]]:
        item_count = (
            select(func.count(OrderItem.id))
            .where(OrderItem.order_id == Order.id)
            .correlate(Order)
            .scalar_subquery()
        )

        query = select(Order, item_count.label("item_count"))

        if email:
            query = query.where(Order.customer_email == email)

        query = query.order_by(Order.order_date.desc(), Order.id.desc())

        return [(order, count) for order, count in self.session.exec(query).all()]

    def save(self, order):
        self.session.add(order)
        self.session.commit()
        self.session.refresh(order)
        return order
