from typing import List
from fastapi import APIRouter, Depends, status
from app.dependencies.admin import require_admin
from app.dependencies.repositories import get_product_repository
from app.models.user import User
from app.repositories.base import ProductRepository
from app.schemas.product_schemas import ProductCreate, ProductResponse
from app.services import catalog_service

router = APIRouter()


@router.get("", response_model=List[ProductResponse])
def list_all_products(
    products: ProductRepository = Depends(get_product_repository),
    _: User = Depends(require_admin)
):
    return catalog_service.list_products(products, include_inactive=True)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product_admin(
    product_id: int,
    products: ProductRepository = Depends(get_product_repository),
    _: User = Depends(require_admin)
):
    return catalog_service.get_product(products, product_id)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    products: ProductRepository = Depends(get_product_repository),
    _: User = Depends(require_admin)
):
    return catalog_service.create_product(products, payload)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    payload: ProductCreate,
    products: ProductRepository = Depends(get_product_repository),
    _: User = Depends(require_admin)
):
    return catalog_service.update_product(products, product_id, payload)


@router.patch("/{product_id}/deactivate", response_model=ProductResponse)
def deactivate_product(
    product_id: int,
    products: ProductRepository = Depends(get_product_repository),
    _: User = Depends(require_admin)
):
    return catalog_service.deactivate_product(products, product_id)


@router.patch("/{product_id}/restore", response_model=ProductResponse)
def restore_product(
    product_id: int,
    products: ProductRepository = Depends(get_product_repository),
    _: User = Depends(require_admin)
):
    return catalog_service.restore_product(products, product_id)


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    products: ProductRepository = Depends(get_product_repository),
    _: User = Depends(require_admin)
):
    catalog_service.delete_product(products, product_id)
    return {"message": "Product deleted successfully"}
