"""
Service layer abstraction.

Each service encapsulates the business logic of one resource kind on
top of a ``ResourceStore``.  Services are created per application
instance (see ``registry.build_services``) and reached by the API
handlers through FastAPI dependencies, so every app, and every test,
gets its own isolated state.
"""
