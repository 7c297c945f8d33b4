"""
Pydantic models for user data.

Request bodies are validated by ``services.validation`` rather than by
pydantic so that every rule produces the single, human‑readable error
message clients of the demo API expect.  ``UserRead`` describes the
stored entity returned by every user endpoint.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }
