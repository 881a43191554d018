"""
Owner-scoped lookups used while posting a document.

A miss returns None. A user mistyping an account code is an
ordinary event in this flow, not an error.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookkeeper.models.account import Account
from bookkeeper.models.enums import PartyKind
from bookkeeper.models.party import Customer, Vendor

PARTY_MODELS = {
    PartyKind.CUSTOMER: Customer,
    PartyKind.VENDOR: Vendor,
}


class AccountResolver:

    def __init__(self, db: Session):
        self.db = db

    def resolve_account(self, owner_id: int, code: str) -> int | None:
        """Return the id of the owner's account with this code."""
        return self.db.execute(
            select(Account.id).where(
                Account.owner_id == owner_id,
                Account.code == code,
            )
        ).scalar_one_or_none()

    def resolve_party(
        self, owner_id: int, kind: PartyKind, name: str
    ) -> int | None:
        """Return the id of the owner's customer or vendor with this name."""
        model = PARTY_MODELS[kind]
        return self.db.execute(
            select(model.id).where(
                model.owner_id == owner_id,
                model.name == name,
            )
        ).scalar_one_or_none()
