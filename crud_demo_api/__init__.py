"""
Top‑level package for the CRUD Demo API.

This file makes ``crud_demo_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``crud_demo_api.app.main``.  The package provides no public exports;
all functionality lives in submodules under ``app``.
"""

__all__ = []
