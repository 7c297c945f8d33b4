"""
Construction of the per‑application service set.

``build_services`` creates one store per resource kind, wraps each in
its service and optionally loads the demo records.  The resulting
``Services`` object is stored on ``app.state`` by ``create_app``.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..core.seed import load_demo_data
from ..core.store import utcnow
from .product_service import PRODUCT_POLICY, ProductService
from .task_service import TASK_POLICY, TaskService
from .user_service import USER_POLICY, UserService


@dataclass
class Services:
    users: UserService
    products: ProductService
    tasks: TaskService


def build_services(seed: bool = False, clock: Callable[[], datetime] = utcnow) -> Services:
    """Create fresh, empty (or demo‑seeded) services sharing one clock."""
    services = Services(
        users=UserService(USER_POLICY.create_store(clock)),
        products=ProductService(PRODUCT_POLICY.create_store(clock)),
        tasks=TaskService(TASK_POLICY.create_store(clock)),
    )
    if seed:
        load_demo_data(services)
    return services
