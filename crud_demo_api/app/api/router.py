"""
Top‑level API router.

Aggregates the resource routers under a single router that
``create_app`` mounts at ``/api``.  When a new resource kind is added,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import health, products, tasks, users


router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
