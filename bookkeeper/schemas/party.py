"""
Pydantic schemas for customers and vendors.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class PartyCreate(BaseModel):
    """Request to add a customer or vendor."""
    name: str = Field(min_length=1, max_length=100)
    address: str | None = Field(default=None, max_length=255)


class PartyResponse(BaseModel):
    id: int
    name: str
    address: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
