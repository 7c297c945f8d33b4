"""
HTTP layer of the application.

``router`` aggregates the per‑resource routers from ``endpoints``;
``deps`` exposes the services to handlers through FastAPI
dependencies; ``responses`` builds the uniform JSON envelope and
``error_handlers`` renders every error into that same envelope.
"""
