"""
Request body validation for users, products and tasks.

Each ``validate_*`` function takes the raw JSON body of a request and a
``ValidationMode`` and returns a dictionary of normalized, snake_case
fields ready to hand to the store.  The first rule that fails raises
``ValidationError`` with a single descriptive message; later rules are
not evaluated.

Modes:

* ``CREATE`` – all mandatory fields must be present; optional fields
  receive their defaults.
* ``REPLACE`` – all mandatory fields must be present; the returned
  dictionary overwrites the stored entity's fields wholesale.
* ``PARTIAL`` – at least one recognized field must be present; only the
  present fields are validated and returned.

Fields the validator does not recognize are ignored.
"""

import math
import re
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from ..core.errors import ValidationError
from ..schemas.task import DEFAULT_PRIORITY, DEFAULT_STATUS, TASK_PRIORITIES, TASK_STATUSES


EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# ASCII digits only, matched against the whole value with ``fullmatch``
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

USER_FIELDS = ("name", "email")
PRODUCT_FIELDS = ("name", "description", "price", "category", "stock")
TASK_FIELDS = ("title", "description", "status", "priority", "dueDate")


class ValidationMode(str, Enum):
    CREATE = "create"
    REPLACE = "replace"
    PARTIAL = "partial"


# ----------------------------------------------------------------------
# Shared rules
# ----------------------------------------------------------------------
def _ensure_object(body: Any) -> Dict[str, Any]:
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _is_blank(value: Any) -> bool:
    """True for missing values and strings that are empty after trimming."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but ``true`` is not a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # integers beyond the float range
        return False


def _present(body: Dict[str, Any], names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(name for name in names if name in body)


def _require_present(body: Dict[str, Any], names: Iterable[str]) -> None:
    if not _present(body, names):
        raise ValidationError("At least one field is required for update")


def _text(value: Any, label: str) -> str:
    """Return ``value`` trimmed, rejecting non‑strings and blank strings."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} must be a non-empty string")
    return value.strip()


def _choice(value: Any, allowed: Tuple[str, ...]) -> Optional[str]:
    """Case‑insensitive membership test; returns the lower‑cased value or None."""
    if isinstance(value, str) and value.lower() in allowed:
        return value.lower()
    return None


def _due_date(value: Any) -> Optional[str]:
    """Normalize a due date: empty means no date, otherwise strict YYYY-MM-DD."""
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not DATE_RE.fullmatch(value):
        raise ValidationError("Invalid date format. Use YYYY-MM-DD")
    return value


def _description(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("Description must be a string")
    return value.strip()


# ----------------------------------------------------------------------
# Users
# ----------------------------------------------------------------------
def validate_user(body: Any, mode: ValidationMode) -> Dict[str, Any]:
    """Validate a user body; ``email`` uniqueness is checked by the service."""
    body = _ensure_object(body)
    if mode is ValidationMode.PARTIAL:
        if not _present(body, USER_FIELDS):
            raise ValidationError("At least one field (name or email) is required for update")
    elif _is_blank(body.get("name")) or _is_blank(body.get("email")):
        raise ValidationError("Name and email are required")

    fields: Dict[str, Any] = {}
    if "name" in body:
        fields["name"] = _text(body["name"], "Name")
    if "email" in body:
        email = body["email"]
        if not isinstance(email, str) or not EMAIL_RE.match(email.strip()):
            raise ValidationError("Invalid email format")
        fields["email"] = email.strip()
    return fields


# ----------------------------------------------------------------------
# Products
# ----------------------------------------------------------------------
def validate_product(body: Any, mode: ValidationMode) -> Dict[str, Any]:
    body = _ensure_object(body)
    if mode is ValidationMode.PARTIAL:
        _require_present(body, PRODUCT_FIELDS)
    elif (
        _is_blank(body.get("name"))
        or _is_blank(body.get("description"))
        or body.get("price") is None
        or _is_blank(body.get("category"))
        or body.get("stock") is None
    ):
        raise ValidationError("Name, description, price, category, and stock are required")

    fields: Dict[str, Any] = {}
    for name in ("name", "description", "category"):
        if name in body:
            fields[name] = _text(body[name], name.capitalize())
    if "price" in body:
        price = body["price"]
        if not _is_number(price) or price < 0:
            raise ValidationError("Price must be a non-negative number")
        fields["price"] = price
    if "stock" in body:
        stock = body["stock"]
        if not _is_number(stock) or stock < 0 or not float(stock).is_integer():
            raise ValidationError("Stock must be a non-negative integer")
        fields["stock"] = int(stock)
    return fields


# ----------------------------------------------------------------------
# Tasks
# ----------------------------------------------------------------------
_STATUS_LIST = ", ".join(TASK_STATUSES)
_PRIORITY_LIST = ", ".join(TASK_PRIORITIES)


def validate_task(body: Any, mode: ValidationMode) -> Dict[str, Any]:
    body = _ensure_object(body)
    if mode is ValidationMode.CREATE:
        return _validate_task_create(body)
    if mode is ValidationMode.REPLACE:
        return _validate_task_replace(body)
    return _validate_task_partial(body)


def _validate_task_create(body: Dict[str, Any]) -> Dict[str, Any]:
    title = body.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required")

    status = body.get("status")
    if status:
        status = _choice(status, TASK_STATUSES)
        if status is None:
            raise ValidationError(f"Invalid status. Must be one of: {_STATUS_LIST}")

    priority = body.get("priority")
    if priority:
        priority = _choice(priority, TASK_PRIORITIES)
        if priority is None:
            raise ValidationError(f"Invalid priority. Must be one of: {_PRIORITY_LIST}")

    due_date = _due_date(body.get("dueDate"))

    return {
        "title": title.strip(),
        "description": _description(body.get("description")),
        "status": status or DEFAULT_STATUS,
        "priority": priority or DEFAULT_PRIORITY,
        "due_date": due_date,
    }


def _validate_task_replace(body: Dict[str, Any]) -> Dict[str, Any]:
    title = body.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Title is required for update")

    status = _choice(body.get("status"), TASK_STATUSES)
    if status is None:
        raise ValidationError(f"Status is required and must be one of: {_STATUS_LIST}")

    priority = _choice(body.get("priority"), TASK_PRIORITIES)
    if priority is None:
        raise ValidationError(f"Priority is required and must be one of: {_PRIORITY_LIST}")

    due_date = _due_date(body.get("dueDate"))

    return {
        "title": title.strip(),
        "description": _description(body.get("description")),
        "status": status,
        "priority": priority,
        "due_date": due_date,
    }


def _validate_task_partial(body: Dict[str, Any]) -> Dict[str, Any]:
    _require_present(body, TASK_FIELDS)

    fields: Dict[str, Any] = {}
    if "title" in body:
        title = body["title"]
        if not isinstance(title, str) or not title.strip():
            raise ValidationError("Title cannot be empty")
        fields["title"] = title.strip()
    if "description" in body:
        fields["description"] = _description(body["description"])
    if "status" in body:
        status = _choice(body["status"], TASK_STATUSES)
        if status is None:
            raise ValidationError(f"Invalid status. Must be one of: {_STATUS_LIST}")
        fields["status"] = status
    if "priority" in body:
        priority = _choice(body["priority"], TASK_PRIORITIES)
        if priority is None:
            raise ValidationError(f"Invalid priority. Must be one of: {_PRIORITY_LIST}")
        fields["priority"] = priority
    if "dueDate" in body:
        fields["due_date"] = _due_date(body["dueDate"])
    return fields
