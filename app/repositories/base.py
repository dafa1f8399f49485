"""Storage interfaces used by the services.

Routers receive concrete repositories through FastAPI dependencies
(``app.dependencies.repositories``); tests swap in the in-memory ones.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.models.order import Order
from app.models.order_item import OrderItem
from app.models.product import Product
from app.models.user import User


class ProductRepository(ABC):

    @abstractmethod
    def list(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        include_inactive: bool = False,
    ) -> List[Product]:
        """Public listings (active only) order by category then name;
        admin listings order by active first, newest first."""

    @abstractmethod
    def get(self, product_id: int) -> Optional[Product]:
        ...

    @abstractmethod
    def add(self, product: Product) -> Product:
        ...

    @abstractmethod
    def save(self, product: Product) -> Product:
        ...

    @abstractmethod
    def delete(self, product: Product) -> None:
        ...


class UserRepository(ABC):

    @abstractmethod
    def get(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    def add(self, user: User) -> User:
        """Raises DuplicateAccount when the email is already taken."""


class OrderRepository(ABC):

    @abstractmethod
    def add_with_items(self, order: Order, items: List[OrderItem]) -> Order:
        """Persist the header and every item as one unit.

        Either everything is stored or nothing is; failures raise
        OrderPersistenceError.
        """

    @abstractmethod
    def get(self, order_id: int) -> Optional[Order]:
        ...

    @abstractmethod
    def get_by_number(self, order_number: str) -> Optional[Order]:
        ...

    @abstractmethod
    def list_items(self, order_id: int) -> List[OrderItem]:
        ...

    @abstractmethod
    def list_with_item_counts(self, email: Optional[str] = None) -> List[Tuple[Order, int]]:
        """Orders newest first, optionally restricted to one customer email."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        ...
