"""
Document API endpoints.

The posting service returns a tagged result rather than raising,
so this layer only chooses the HTTP status for each outcome.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from bookkeeper.api.deps import get_current_owner_id
from bookkeeper.errors import RejectionKind
from bookkeeper.models.base import get_db
from bookkeeper.schemas.document import (
    DocumentSummary,
    Failed,
    LedgerLineResponse,
    Posted,
    Rejected,
    SubmitDocumentRequest,
)
from bookkeeper.services.document_service import DocumentService

router = APIRouter(prefix="/documents", tags=["Documents"])


def _status_code(result) -> int:
    if isinstance(result, Posted):
        return 201
    if isinstance(result, Rejected):
        if result.kind == RejectionKind.DOCUMENT_ALREADY_EXISTS:
            return 409
        return 400
    return 503


@router.post(
    "",
    status_code=201,
    responses={
        201: {"model": Posted},
        400: {"model": Rejected},
        409: {"model": Rejected},
        503: {"model": Failed},
    },
)
def submit_document(
    request: SubmitDocumentRequest,
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """
    Add a document with its general ledger rows.

    The document and all of its rows are stored together, or
    nothing is stored and the response says why.
    """
    result = DocumentService(db).submit_document(owner_id, request)
    return JSONResponse(
        status_code=_status_code(result),
        content=result.model_dump(mode="json"),
    )


@router.get("", response_model=list[DocumentSummary])
def list_documents(
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """List the owner's documents with their customer or vendor."""
    return DocumentService(db).list_documents(owner_id)


@router.get(
    "/{document_name}/lines",
    response_model=list[LedgerLineResponse],
)
def get_document_lines(
    document_name: str,
    owner_id: int = Depends(get_current_owner_id),
    db: Session = Depends(get_db),
):
    """Get the general ledger lines of one document."""
    service = DocumentService(db)
    try:
        return service.get_ledger_lines(owner_id, document_name)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
