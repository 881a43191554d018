"""
Customer and vendor API endpoints.

Both kinds share one service; the routes only differ in the
PartyKind they pass.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeper.api.deps import get_current_owner_id
from bookkeeper.errors import DuplicateError
from bookkeeper.models.base import get_db
from bookkeeper.models.enums import PartyKind
from bookkeeper.schemas.party import PartyCreate, PartyResponse
from bookkeeper.services.party_service import PartyService

router = APIRouter(tags=["Parties"])


def _create(db: Session, owner_id: int, kind: PartyKind, request: PartyCreate):
    service = PartyService(db)
    try:
        party = service.create_party(owner_id, kind, request)
        db.commit()
        return party
    except DuplicateError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/customers", response_model=PartyResponse, status_code=201)
def create_customer(
    request: PartyCreate,
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """Add a customer."""
    return _create(db, owner_id, PartyKind.CUSTOMER, request)


@router.get("/customers", response_model=list[PartyResponse])
def list_customers(
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    return PartyService(db).list_parties(owner_id, PartyKind.CUSTOMER)


@router.post("/vendors", response_model=PartyResponse, status_code=201)
def create_vendor(
    request: PartyCreate,
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """Add a vendor."""
    return _create(db, owner_id, PartyKind.VENDOR, request)


@router.get("/vendors", response_model=list[PartyResponse])
def list_vendors(
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    return PartyService(db).list_parties(owner_id, PartyKind.VENDOR)
