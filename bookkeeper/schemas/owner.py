"""
Pydantic schemas for owners.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class OwnerCreate(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    # None falls back to the SEED_DEFAULT_ACCOUNTS setting
    with_default_accounts: bool | None = None


class OwnerResponse(BaseModel):
    id: int
    username: str
    created_at: datetime

    model_config = {"from_attributes": True}
