"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  ``core`` holds configuration, logging, errors and the
in‑memory store; ``schemas`` the entity models; ``services`` the
validation, query and CRUD logic per resource kind; ``api`` the
FastAPI routers and error handlers.
"""

from .main import app  # noqa: F401
