"""
Demo records loaded into a fresh application.

The records are inserted straight into the stores (bypassing request
validation, since they are known to be valid) in the order below, so
they receive identifiers 1, 2, 3… within each kind.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List

if TYPE_CHECKING:
    from ..services.registry import Services


logger = logging.getLogger(__name__)


DEMO_USERS: List[Dict[str, Any]] = [
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Smith", "email": "jane@example.com"},
]

DEMO_PRODUCTS: List[Dict[str, Any]] = [
    {
        "name": "Laptop",
        "description": "High-performance laptop",
        "price": 999.99,
        "category": "Electronics",
        "stock": 15,
    },
    {
        "name": "Coffee Maker",
        "description": "Programmable coffee maker",
        "price": 79.99,
        "category": "Appliances",
        "stock": 30,
    },
    {
        "name": "Running Shoes",
        "description": "Comfortable running shoes",
        "price": 129.99,
        "category": "Sports",
        "stock": 25,
    },
]

DEMO_TASKS: List[Dict[str, Any]] = [
    {
        "title": "Complete project documentation",
        "description": "Write comprehensive documentation for the API project",
        "status": "pending",
        "priority": "high",
        "due_date": "2024-12-31",
    },
    {
        "title": "Review code changes",
        "description": "Review and merge pull request #42",
        "status": "in-progress",
        "priority": "medium",
        "due_date": "2024-12-20",
    },
    {
        "title": "Update dependencies",
        "description": "Update packages to latest versions",
        "status": "completed",
        "priority": "low",
        "due_date": "2024-12-15",
    },
]


def load_demo_data(services: "Services") -> None:
    """Insert the demo users, products and tasks into ``services``' stores."""
    services.users.store.seed(DEMO_USERS)
    services.products.store.seed(DEMO_PRODUCTS)
    services.tasks.store.seed(DEMO_TASKS)
    logger.info(
        "Loaded demo data: %d users, %d products, %d tasks",
        len(DEMO_USERS),
        len(DEMO_PRODUCTS),
        len(DEMO_TASKS),
    )
