"""
FastAPI dependencies giving handlers access to per‑app state.
"""

from fastapi import Depends, Request

from ..core.config import Settings
from ..services.product_service import ProductService
from ..services.registry import Services
from ..services.task_service import TaskService
from ..services.user_service import UserService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_user_service(services: Services = Depends(get_services)) -> UserService:
    return services.users


def get_product_service(services: Services = Depends(get_services)) -> ProductService:
    return services.products


def get_task_service(services: Services = Depends(get_services)) -> TaskService:
    return services.tasks
