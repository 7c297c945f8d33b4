"""
Product endpoints.

CRUD routes for the product catalogue.  The list endpoint supports
filtering by category and by an inclusive price range, e.g.
``GET /api/products?category=electronics&minPrice=100&maxPrice=200``.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from ...services.product_service import ProductService
from ..deps import get_product_service
from ..responses import entity_response, list_response


router = APIRouter()


@router.get("")
async def list_products(
    category: Optional[str] = Query(None, description="Case-insensitive category match"),
    min_price: Optional[str] = Query(None, alias="minPrice", description="Inclusive lower price bound"),
    max_price: Optional[str] = Query(None, alias="maxPrice", description="Inclusive upper price bound"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="name, price, stock, category or createdAt"),
    order: Optional[str] = Query(None, description="asc (default) or desc"),
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Return products matching all supplied filters.

    Non-numeric ``minPrice``/``maxPrice`` values are rejected with 400.
    """
    products = service.list(
        {
            "category": category,
            "minPrice": min_price,
            "maxPrice": max_price,
            "sortBy": sort_by,
            "order": order,
        }
    )
    return list_response(products)


@router.get("/{product_id}")
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)) -> Dict[str, Any]:
    return entity_response(service.get(product_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    body: Any = Body(None),
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Create a product; name, description, price, category and stock are required."""
    return entity_response(service.create(body), "Product created successfully")


@router.put("/{product_id}")
async def replace_product(
    product_id: str,
    body: Any = Body(None),
    service: ProductService = Depends(get_product_service),
) -> Dict[str, Any]:
    """Replace all fields of a product."""
    return entity_response(service.replace(product_id, body), "Product updated successfully")


@router.delete("/{product_id}")
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)) -> Dict[str, Any]:
    return entity_response(service.delete(product_id), "Product deleted successfully")
