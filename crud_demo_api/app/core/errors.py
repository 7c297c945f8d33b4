"""
Error hierarchy for the API.

Every error carries a human‑readable message, an HTTP status code and
a short machine code.  Errors are raised where a problem is detected
(validator, store, services) and travel unchanged to the exception
handlers registered in ``api.error_handlers``, which render them into
the response envelope.
"""


class ApiError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Request input failed validation (bad body, id or query value)."""

    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(ApiError):
    """A resource with the requested identifier does not exist."""

    status_code = 404
    code = "RESOURCE_NOT_FOUND"

    def __init__(self, kind: str, resource_id: int) -> None:
        super().__init__(f"{kind} with ID {resource_id} not found")
        self.kind = kind
        self.resource_id = resource_id


class ConflictError(ApiError):
    """The request collides with existing state (e.g. duplicate email)."""

    status_code = 409
    code = "CONFLICT"
