"""
Pydantic models for product data.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class ProductRead(BaseModel):
    """Schema for reading a product from the API."""

    id: int
    name: str = Field(..., examples=["Laptop"])
    description: str = Field(..., examples=["High-performance laptop"])
    price: float = Field(..., ge=0, examples=[999.99])
    category: str = Field(..., examples=["Electronics"])
    stock: int = Field(..., ge=0, examples=[15])
    created_at: datetime = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }
