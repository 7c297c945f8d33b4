"""
Filtering and sorting over snapshots of a resource collection.

The functions here never touch a store: they receive a list of
entities (normally ``ResourceStore.list()``) and return a new list.
Filters are independent predicates combined with AND.  Sorting is
restricted to a per‑kind allow‑list of fields; an unknown ``sortBy``
leaves the order as it was.  Python's sort is stable in both
directions, so entities with equal keys keep their relative order.
"""

import math
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, TypeVar

from ..core.errors import ValidationError
from ..schemas.product import ProductRead
from ..schemas.task import PRIORITY_RANK, TASK_PRIORITIES, TASK_STATUSES, TaskRead
from ..schemas.user import UserRead


T = TypeVar("T")
SortKey = Callable[[Any], Any]
QueryParams = Mapping[str, Optional[str]]

_DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _due_date_key(task: TaskRead) -> Tuple[int, Tuple[int, ...]]:
    # Tasks without a due date come first in ascending order.  Dates are
    # compared as (year, month, day) so that values such as 2024-02-30,
    # which pass the format check, still order chronologically.
    if not task.due_date:
        return (0, ())
    return (1, tuple(int(part) for part in task.due_date.split("-")))


USER_SORT_KEYS: Dict[str, SortKey] = {
    "name": lambda user: user.name,
    "email": lambda user: user.email,
    "createdAt": lambda user: user.created_at,
}

PRODUCT_SORT_KEYS: Dict[str, SortKey] = {
    "name": lambda product: product.name,
    "price": lambda product: product.price,
    "stock": lambda product: product.stock,
    "category": lambda product: product.category,
    "createdAt": lambda product: product.created_at,
}

TASK_SORT_KEYS: Dict[str, SortKey] = {
    "title": lambda task: task.title,
    "priority": lambda task: PRIORITY_RANK[task.priority],
    "dueDate": _due_date_key,
    "createdAt": lambda task: task.created_at,
}


def parse_price_bound(raw: Optional[str], name: str) -> Optional[float]:
    """Parse a ``minPrice``/``maxPrice`` query value.

    Empty values disable the bound.  Only plain decimal notation
    (``100``, ``-2.5``, ``1e3``) is accepted; anything else, including
    non-finite values and Python-only spellings such as ``1_0``, is
    rejected instead of silently filtering out every product.
    """
    if raw is None or not raw.strip():
        return None
    text = raw.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise ValidationError(f"{name} must be a number")
    value = float(text)
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a number")
    return value


def filter_products(
    products: Sequence[ProductRead],
    category: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
) -> List[ProductRead]:
    """Filter products by category (case‑insensitive) and inclusive price range."""
    minimum = parse_price_bound(min_price, "minPrice")
    maximum = parse_price_bound(max_price, "maxPrice")
    result = list(products)
    if category:
        wanted = category.lower()
        result = [product for product in result if product.category.lower() == wanted]
    if minimum is not None:
        result = [product for product in result if product.price >= minimum]
    if maximum is not None:
        result = [product for product in result if product.price <= maximum]
    return result


def filter_tasks(
    tasks: Sequence[TaskRead],
    status: Optional[str] = None,
    priority: Optional[str] = None,
) -> List[TaskRead]:
    """Filter tasks by status and priority.

    Values outside the allowed sets are ignored rather than rejected, so
    ``?status=unknown`` returns the unfiltered list.
    """
    result = list(tasks)
    if status and status.lower() in TASK_STATUSES:
        result = [task for task in result if task.status == status.lower()]
    if priority and priority.lower() in TASK_PRIORITIES:
        result = [task for task in result if task.priority == priority.lower()]
    return result


def sort_items(
    items: Sequence[T],
    sort_by: Optional[str],
    order: Optional[str],
    keys: Mapping[str, SortKey],
) -> List[T]:
    """Sort by an allow‑listed field; ``order=desc`` reverses, default ascending."""
    result = list(items)
    key = keys.get(sort_by) if sort_by else None
    if key is None:
        return result
    result.sort(key=key, reverse=(order or "").lower() == "desc")
    return result


# ----------------------------------------------------------------------
# Per‑kind list queries, driven by request query parameters
# ----------------------------------------------------------------------
def query_users(users: Sequence[UserRead], params: QueryParams) -> List[UserRead]:
    return sort_items(users, params.get("sortBy"), params.get("order"), USER_SORT_KEYS)


def query_products(products: Sequence[ProductRead], params: QueryParams) -> List[ProductRead]:
    filtered = filter_products(
        products,
        category=params.get("category"),
        min_price=params.get("minPrice"),
        max_price=params.get("maxPrice"),
    )
    return sort_items(filtered, params.get("sortBy"), params.get("order"), PRODUCT_SORT_KEYS)


def query_tasks(tasks: Sequence[TaskRead], params: QueryParams) -> List[TaskRead]:
    filtered = filter_tasks(tasks, status=params.get("status"), priority=params.get("priority"))
    return sort_items(filtered, params.get("sortBy"), params.get("order"), TASK_SORT_KEYS)
