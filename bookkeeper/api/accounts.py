"""
Chart of accounts API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from bookkeeper.api.deps import get_current_owner_id
from bookkeeper.errors import DuplicateError
from bookkeeper.models.base import get_db
from bookkeeper.schemas.account import AccountCreate, AccountResponse
from bookkeeper.services.account_service import AccountService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """Add an account. Codes are numeric and unique per owner."""
    service = AccountService(db)
    try:
        account = service.create_account(owner_id, request)
        db.commit()
        return account
    except DuplicateError as e:
        db.rollback()
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.post(
    "/defaults",
    response_model=list[AccountResponse],
    status_code=201,
)
def create_default_accounts(
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """Seed the default chart of accounts, returning the accounts added."""
    service = AccountService(db)
    accounts = service.create_default_accounts(owner_id)
    db.commit()
    return accounts


@router.get("", response_model=list[AccountResponse])
def list_accounts(
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """List the owner's accounts by code."""
    return AccountService(db).list_accounts(owner_id)
