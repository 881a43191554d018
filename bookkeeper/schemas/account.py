"""
Pydantic schemas for the chart of accounts.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from bookkeeper.models.enums import AccountType


class AccountCreate(BaseModel):
    """Request to add an account to the chart of accounts."""
    code: str = Field(min_length=1, max_length=20)
    name: str = Field(min_length=1, max_length=100)
    account_type: AccountType


class AccountResponse(BaseModel):
    id: int
    code: str
    name: str
    account_type: AccountType
    created_at: datetime

    model_config = {"from_attributes": True}
