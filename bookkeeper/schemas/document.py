"""
Pydantic schemas for document submission and retrieval.

Row fields arrive as the raw strings the user typed. They are
deliberately not constrained here: blank or malformed values
are reported by the posting core as specific rejection kinds,
not as request validation errors.
"""

from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from bookkeeper.errors import RejectionKind, REJECTION_MESSAGES
from bookkeeper.models.enums import DocumentType, EntryType


# --- Request Schemas ---

class RawRow(BaseModel):
    """One general ledger row as entered in the document form."""
    code: str
    date: str
    credebit: EntryType
    amount: str
    description: str


class SubmitDocumentRequest(BaseModel):
    """
    A new document with its ledger rows.

    type is a plain string so that an unknown type is reported
    as InvalidDocumentType rather than a schema error.
    """
    document_name: str = Field(max_length=64)
    type: str
    party_name: str | None = Field(default=None, max_length=100)
    rows: list[RawRow]


# --- Result Schemas ---

class Posted(BaseModel):
    status: Literal["posted"] = "posted"
    document_id: int


class Rejected(BaseModel):
    status: Literal["rejected"] = "rejected"
    kind: RejectionKind
    message: str
    detail: str | None = None
    row: int | None = None

    @classmethod
    def of(
        cls,
        kind: RejectionKind,
        detail: str | None = None,
        row: int | None = None,
    ) -> "Rejected":
        return cls(
            kind=kind,
            message=REJECTION_MESSAGES[kind],
            detail=detail,
            row=row,
        )


class Failed(BaseModel):
    status: Literal["failed"] = "failed"
    kind: RejectionKind = RejectionKind.DATABASE_MALFUNCTION
    message: str = REJECTION_MESSAGES[RejectionKind.DATABASE_MALFUNCTION]
    detail: str | None = None


SubmitDocumentResult = Annotated[
    Union[Posted, Rejected, Failed],
    Field(discriminator="status"),
]


# --- Read Schemas ---

class DocumentSummary(BaseModel):
    """A document as shown in the document list."""
    document_name: str
    document_type: DocumentType
    customer_name: str | None = None
    vendor_name: str | None = None
    is_posted: bool


class LedgerLineResponse(BaseModel):
    """A stored ledger line, rendered with the account code."""
    code: str
    date: str
    debit: Decimal | None = None
    credit: Decimal | None = None
    description: str
