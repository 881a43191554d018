"""
Party service — the owner's customers and vendors.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookkeeper.errors import DuplicateError
from bookkeeper.models.enums import PartyKind
from bookkeeper.models.party import Customer, Vendor
from bookkeeper.schemas.party import PartyCreate
from bookkeeper.services.resolver import PARTY_MODELS
from bookkeeper.services.validators import is_alphanumeric_text


class PartyService:

    def __init__(self, db: Session):
        self.db = db

    def create_party(
        self, owner_id: int, kind: PartyKind, request: PartyCreate
    ) -> Customer | Vendor:
        """
        Add a customer or vendor.

        Raises ValueError for an unusable name and DuplicateError
        if the owner already has a party of this kind by that name.
        """
        if not is_alphanumeric_text(request.name):
            raise ValueError(
                f"{kind.value.title()} name '{request.name}' "
                f"contains unsupported characters"
            )

        model = PARTY_MODELS[kind]
        existing = self.db.execute(
            select(model).where(
                model.owner_id == owner_id,
                model.name == request.name,
            )
        ).scalar_one_or_none()

        if existing:
            raise DuplicateError(
                f"{kind.value.title()} '{request.name}' already exists"
            )

        party = model(
            owner_id=owner_id,
            name=request.name,
            address=request.address,
        )
        self.db.add(party)
        self.db.flush()
        return party

    def list_parties(
        self, owner_id: int, kind: PartyKind
    ) -> list[Customer | Vendor]:
        """Return the owner's customers or vendors ordered by name."""
        model = PARTY_MODELS[kind]
        parties = self.db.execute(
            select(model)
            .where(model.owner_id == owner_id)
            .order_by(model.name)
        ).scalars().all()
        return list(parties)
