"""
Business logic for products.

Products have no cross‑entity constraints; the policy only wires the
product validator and the list query (category and price range
filters, sortable fields).
"""

from typing import Optional

from ..core.store import ResourceStore
from ..schemas.product import ProductRead
from .query import query_products
from .resource_service import ResourcePolicy, ResourceService
from .validation import validate_product


PRODUCT_POLICY = ResourcePolicy(
    kind="Product",
    model=ProductRead,
    validate=validate_product,
    query=query_products,
)


class ProductService(ResourceService):
    """CRUD operations for products."""

    def __init__(self, store: Optional[ResourceStore] = None) -> None:
        super().__init__(PRODUCT_POLICY, store)
