"""
Document service — adds bookkeeping documents to the general ledger.

submit_document runs a submission through these steps, stopping
at the first that fails:

1. The document name is usable and not already taken by the owner
2. The document type is known and names the right kind of party
3. Every ledger row is well formed and refers to a real account
4. Debits equal credits on every date in the document
5. The document and all its lines are stored atomically

Rejections and storage failures come back as Rejected or Failed
results. Nothing raised inside the steps escapes this service.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookkeeper.errors import (
    DatabaseMalfunctionError,
    DocumentRejected,
    DuplicateDocumentError,
    RejectionKind,
)
from bookkeeper.models.document import Document
from bookkeeper.models.enums import DocumentType, PartyKind
from bookkeeper.models.general_ledger_line import GeneralLedgerLine
from bookkeeper.schemas.document import (
    DocumentSummary,
    Failed,
    LedgerLineResponse,
    Posted,
    Rejected,
    SubmitDocumentRequest,
    SubmitDocumentResult,
)
from bookkeeper.services.balance_checker import find_imbalances
from bookkeeper.services.document_repository import DocumentRepository
from bookkeeper.services.resolver import AccountResolver
from bookkeeper.services.row_preparer import LedgerRowPreparer, PreparedLine
from bookkeeper.services.validators import is_alphanumeric_text, is_blank

logger = logging.getLogger(__name__)


class DocumentService:

    def __init__(self, db: Session):
        self.db = db
        self.resolver = AccountResolver(db)
        self.row_preparer = LedgerRowPreparer(self.resolver)
        self.repository = DocumentRepository(db)

    def submit_document(
        self, owner_id: int, request: SubmitDocumentRequest
    ) -> SubmitDocumentResult:
        """Validate and store a document with its ledger lines."""
        log_extra = {
            "owner_id": owner_id,
            "document_name": request.document_name,
            "document_type": request.type,
        }
        try:
            document_id = self._submit(owner_id, request)
        except DocumentRejected as e:
            logger.info(
                "document rejected: %s", e.kind.value,
                extra={**log_extra, "row": e.row, "detail": e.detail},
            )
            return Rejected.of(e.kind, e.detail, e.row)
        except DuplicateDocumentError as e:
            logger.info(
                "document rejected: lost race on document name",
                extra=log_extra,
            )
            return Rejected.of(RejectionKind.DOCUMENT_ALREADY_EXISTS, str(e))
        except DatabaseMalfunctionError as e:
            logger.error("document not stored: %s", e, extra=log_extra)
            return Failed(detail=str(e))
        except SQLAlchemyError as e:
            # A lookup failed before anything was written
            self.db.rollback()
            logger.exception("document lookup failed", extra=log_extra)
            return Failed(detail=str(e))

        logger.info(
            "document posted",
            extra={**log_extra, "document_id": document_id},
        )
        return Posted(document_id=document_id)

    def _submit(self, owner_id: int, request: SubmitDocumentRequest) -> int:
        name = request.document_name
        if is_blank(name) or not is_alphanumeric_text(name):
            raise DocumentRejected(
                RejectionKind.INVALID_DOCUMENT_NAME,
                f"'{name}' is not a valid document name",
            )

        self._check_name_available(owner_id, name)

        document_type, customer_id, vendor_id = self._resolve_party(
            owner_id, request.type, request.party_name
        )

        if not request.rows:
            raise DocumentRejected(
                RejectionKind.EMPTY_DOCUMENT,
                "no general ledger rows given",
            )

        # Rows are checked in order; the first bad row stops the submission
        lines = [
            self.row_preparer.prepare(owner_id, row, index)
            for index, row in enumerate(request.rows)
        ]

        self._check_daily_balance(lines)

        return self.repository.post_document(
            owner_id=owner_id,
            name=name,
            document_type=document_type,
            lines=lines,
            customer_id=customer_id,
            vendor_id=vendor_id,
        )

    def _check_name_available(self, owner_id: int, name: str) -> None:
        if self.repository.document_exists(owner_id, name):
            raise DocumentRejected(
                RejectionKind.DOCUMENT_ALREADY_EXISTS,
                f"document '{name}' already exists",
            )

    def _resolve_party(
        self, owner_id: int, type_value: str, party_name: str | None
    ) -> tuple[DocumentType, int | None, int | None]:
        """
        Check that the document type and party agree.

        Returns the document type with the customer id or vendor
        id it should carry. A blank party name counts as absent.
        Journal entries that name a party are rejected.
        """
        try:
            document_type = DocumentType(type_value)
        except ValueError:
            raise DocumentRejected(
                RejectionKind.INVALID_DOCUMENT_TYPE,
                f"unknown document type '{type_value}'",
            ) from None

        if party_name is not None and is_blank(party_name):
            party_name = None

        kind = document_type.party_kind
        if kind is None:
            if party_name is not None:
                raise DocumentRejected(
                    RejectionKind.PARTY_FIELD_MISMATCH,
                    "a journal entry does not name a customer or vendor",
                )
            return document_type, None, None

        if party_name is None:
            raise DocumentRejected(
                RejectionKind.PARTY_FIELD_MISMATCH,
                f"a {document_type.value} document requires a {kind.value}",
            )

        party_id = self.resolver.resolve_party(owner_id, kind, party_name)
        if party_id is None:
            raise DocumentRejected(
                RejectionKind.PARTY_NONEXISTENT,
                f"no {kind.value} named '{party_name}'",
            )

        if kind == PartyKind.CUSTOMER:
            return document_type, party_id, None
        return document_type, None, party_id

    def _check_daily_balance(self, lines: list[PreparedLine]) -> None:
        imbalances = find_imbalances(lines)
        if imbalances:
            first = imbalances[0]
            raise DocumentRejected(
                RejectionKind.DAILY_IMBALANCE,
                f"{first.line_date.isoformat()}: debits {first.debits} "
                f"do not equal credits {first.credits}",
            )

    def list_documents(self, owner_id: int) -> list[DocumentSummary]:
        """Return the owner's documents in the order they were added."""
        documents = self.db.execute(
            select(Document)
            .where(Document.owner_id == owner_id)
            .order_by(Document.id)
        ).scalars().all()
        return [
            DocumentSummary(
                document_name=d.name,
                document_type=d.document_type,
                customer_name=d.customer.name if d.customer else None,
                vendor_name=d.vendor.name if d.vendor else None,
                is_posted=d.is_posted,
            )
            for d in documents
        ]

    def get_ledger_lines(
        self, owner_id: int, document_name: str
    ) -> list[LedgerLineResponse]:
        """
        Return the ledger lines of one of the owner's documents.

        Raises ValueError if the owner has no document by that name.
        """
        document = self.db.execute(
            select(Document).where(
                Document.owner_id == owner_id,
                Document.name == document_name,
            )
        ).scalar_one_or_none()

        if not document:
            raise ValueError(f"Document '{document_name}' not found")

        lines = self.db.execute(
            select(GeneralLedgerLine)
            .where(
                GeneralLedgerLine.owner_id == owner_id,
                GeneralLedgerLine.document_id == document.id,
            )
            .order_by(GeneralLedgerLine.id)
        ).scalars().all()

        return [
            LedgerLineResponse(
                code=line.account.code,
                date=line.line_date.isoformat(),
                debit=line.debit,
                credit=line.credit,
                description=line.description,
            )
            for line in lines
        ]
