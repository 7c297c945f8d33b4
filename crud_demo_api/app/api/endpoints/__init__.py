"""
Endpoint modules.

Each module defines an APIRouter for one resource kind (users,
products, tasks) plus the health check.  The routers are aggregated in
``api/router.py`` and mounted under ``/api`` by ``create_app``.
"""
