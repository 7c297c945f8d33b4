"""CRUD Demo API client.

This module defines a small client wrapper around the REST API served by
``crud_demo_api``.  It uses the ``requests`` library internally to make
HTTP calls and unwraps the API's response envelope
(``{"success": ..., "data": ...}``) so callers receive plain
dictionaries.

The client exposes high‑level methods per resource kind:

* users – :meth:`list_users`, :meth:`get_user`, :meth:`create_user`,
  :meth:`replace_user`, :meth:`delete_user`;
* products – the same operations, with category and price filters on
  :meth:`list_products`;
* tasks – the same operations plus :meth:`patch_task`, with status,
  priority and sorting options on :meth:`list_tasks`.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or an empty list for list
methods) and ``error`` is a dictionary with keys ``status_code`` and
``message``, the latter taken from the API's error envelope.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class CrudDemoAPI:
    """Client for interacting with the CRUD Demo API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the ``/api`` prefix,
                e.g. ``http://localhost:3000/api``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.  Any object with a
                compatible ``request`` method (such as FastAPI's
                ``TestClient``) may be passed.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and return ``(payload, error)``.

        ``payload`` is the full decoded JSON envelope.  Query parameters
        whose value is ``None`` are dropped.
        """
        url = f"{self.base_url}{path}"
        query = {key: value for key, value in (params or {}).items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=query or None,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        try:
            payload = response.json() if response.content else None
        except ValueError:
            payload = None

        if response.status_code >= 400:
            message = ""
            if isinstance(payload, dict):
                error = payload.get("error")
                if isinstance(error, dict):
                    message = error.get("message") or ""
            if not message:
                message = response.text or f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        return payload, None

    def _list(self, resource: str, params: Dict[str, Any]) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        payload, error = self._request("GET", f"/{resource}", params=params)
        if error:
            return [], error
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            return payload["data"], None
        return [], None

    def _item(
        self, method: str, resource: str, item_id: Any = None, payload: Any = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        path = f"/{resource}" if item_id is None else f"/{resource}/{item_id}"
        body, error = self._request(method, path, json_body=payload)
        if error:
            return None, error
        if isinstance(body, dict):
            return body.get("data"), None
        return None, None

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------
    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the health document served at the API root."""
        return self._request("GET", "/")

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(
        self, *, sort_by: Optional[str] = None, order: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("users", {"sortBy": sort_by, "order": order})

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("GET", "users", user_id)

    def create_user(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user; ``payload`` needs ``name`` and ``email``."""
        return self._item("POST", "users", payload=payload)

    def replace_user(self, user_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("PUT", "users", user_id, payload)

    def delete_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("DELETE", "users", user_id)

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(
        self,
        *,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve products, optionally filtered by category and price range."""
        return self._list(
            "products",
            {
                "category": category,
                "minPrice": min_price,
                "maxPrice": max_price,
                "sortBy": sort_by,
                "order": order,
            },
        )

    def get_product(self, product_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("GET", "products", product_id)

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("POST", "products", payload=payload)

    def replace_product(
        self, product_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("PUT", "products", product_id, payload)

    def delete_product(self, product_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("DELETE", "products", product_id)

    # ------------------------------------------------------------------
    # Task operations
    # ------------------------------------------------------------------
    def list_tasks(
        self,
        *,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve tasks with optional filters and sorting.

        Args:
            status: ``pending``, ``in-progress`` or ``completed``.
            priority: ``low``, ``medium`` or ``high``.
            sort_by: ``title``, ``priority``, ``dueDate`` or ``createdAt``.
            order: ``asc`` (default) or ``desc``.
        """
        return self._list(
            "tasks",
            {"status": status, "priority": priority, "sortBy": sort_by, "order": order},
        )

    def get_task(self, task_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("GET", "tasks", task_id)

    def create_task(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("POST", "tasks", payload=payload)

    def replace_task(self, task_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("PUT", "tasks", task_id, payload)

    def patch_task(self, task_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update only the fields present in ``payload``."""
        return self._item("PATCH", "tasks", task_id, payload)

    def delete_task(self, task_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._item("DELETE", "tasks", task_id)
