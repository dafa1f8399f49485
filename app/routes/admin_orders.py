# -------- ADMIN ORDERS --------
from typing import List
from fastapi import APIRouter, Depends
from app.dependencies.admin import require_admin
from app.dependencies.repositories import get_order_repository
from app.models.user import User
from app.repositories.base import OrderRepository
from app.routes.orders import to_summary
from app.schemas.orders_schemas import OrderSummaryResponse, StatusUpdate
from app.services import order_service


router = APIRouter()


@router.get("", response_model=List[OrderSummaryResponse])
def list_orders(
    orders: OrderRepository = Depends(get_order_repository),
    _: User = Depends(require_admin)
):
    return [to_summary(o, count) for o, count in order_service.list_all_orders(orders)]


@router.put("/{order_id}/status")
def update_order_status(
    order_id: int,
    payload: StatusUpdate,
    orders: OrderRepository = Depends(get_order_repository),
    _: User = Depends(require_admin)
):
    order, old_status = order_service.set_status(orders, order_id, payload.status)

    return {
        "message": "Order status updated successfully",
        "order_id": order.id,
        "old_status": old_status,
        "new_status": order.status,
    }
