"""
Owner service — creating and looking up owners.

Authentication is handled outside this application; an owner
here is only an identity that scopes every other record.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookkeeper.config import get_settings
from bookkeeper.errors import DuplicateError
from bookkeeper.models.owner import Owner
from bookkeeper.schemas.owner import OwnerCreate
from bookkeeper.services.account_service import AccountService


class OwnerService:

    def __init__(self, db: Session):
        self.db = db
        self.account_service = AccountService(db)

    def create_owner(self, request: OwnerCreate) -> Owner:
        """
        Create an owner and, unless told otherwise, seed the
        default chart of accounts for them.
        """
        existing = self.db.execute(
            select(Owner).where(Owner.username == request.username)
        ).scalar_one_or_none()

        if existing:
            raise DuplicateError(
                f"Owner '{request.username}' already exists"
            )

        owner = Owner(username=request.username)
        self.db.add(owner)
        self.db.flush()

        seed = request.with_default_accounts
        if seed is None:
            seed = get_settings().SEED_DEFAULT_ACCOUNTS
        if seed:
            self.account_service.create_default_accounts(owner.id)

        return owner

    def get_owner(self, owner_id: int) -> Owner:
        owner = self.db.get(Owner, owner_id)
        if not owner:
            raise ValueError(f"Owner {owner_id} not found")
        return owner
