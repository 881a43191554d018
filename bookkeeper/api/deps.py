"""
Request dependencies shared by the routers.
"""

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from bookkeeper.models.base import get_db
from bookkeeper.services.owner_service import OwnerService


def get_current_owner_id(
    x_owner_id: int | None = Header(default=None),
    db: Session = Depends(get_db),
) -> int:
    """
    Identify the owner making the request.

    Login and sessions are handled in front of this service, which
    forwards the authenticated owner's id in the X-Owner-Id header.
    A missing or unknown id is treated as unauthenticated.
    """
    if x_owner_id is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    try:
        return OwnerService(db).get_owner(x_owner_id).id
    except ValueError:
        raise HTTPException(status_code=401, detail="Not authenticated")
