from typing import List
from fastapi import APIRouter, Depends
from app.dependencies.repositories import get_product_repository
from app.repositories.base import ProductRepository
from app.schemas.product_schemas import ProductResponse
from app.services import catalog_service

router = APIRouter()


# ---------- LIST ACTIVE PRODUCTS ----------
@router.get("", response_model=List[ProductResponse], summary="Active products by category then name")
def list_products(products: ProductRepository = Depends(get_product_repository)):
    return catalog_service.list_products(products)


# ---------- SEARCH PRODUCTS ----------
# declared before /{category} so "search" is not read as a category
@router.get("/search/{query}", response_model=List[ProductResponse], summary="Search name, description or category")
def search_products(query: str, products: ProductRepository = Depends(get_product_repository)):
    return catalog_service.list_products(products, search=query)


# ---------- PRODUCTS BY CATEGORY ----------
@router.get("/{category}", response_model=List[ProductResponse])
def products_by_category(category: str, products: ProductRepository = Depends(get_product_repository)):
    return catalog_service.list_products(products, category=category)
