from fastapi import Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.sql import SqlOrderRepository, SqlProductRepository, SqlUserRepository


def get_product_repository(session: Session = Depends(get_session)):
    return SqlProductRepository(session)


def get_user_repository(session: Session = Depends(get_session)):
    return SqlUserRepository(session)


def get_order_repository(session: Session = Depends(get_session)):
    return SqlOrderRepository(session)
