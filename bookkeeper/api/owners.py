"""
Owner API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeper.errors import DuplicateError
from bookkeeper.models.base import get_db
from bookkeeper.schemas.owner import OwnerCreate, OwnerResponse
from bookkeeper.services.owner_service import OwnerService

router = APIRouter(prefix="/owners", tags=["Owners"])


@router.post("", response_model=OwnerResponse, status_code=201)
def create_owner(
    request: OwnerCreate,
    db: Session = Depends(get_db),
):
    """Create an owner, by default with the standard chart of accounts."""
    service = OwnerService(db)
    try:
        owner = service.create_owner(request)
        db.commit()
        return owner
    except DuplicateError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
