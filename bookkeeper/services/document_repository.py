"""
Persistence boundary for documents and their ledger lines.

This is the only code that writes documents or ledger lines,
and it owns the transaction around them. A post either commits
the document together with every one of its lines, or leaves
the database as it found it.
"""

import logging
from typing import Sequence

from sqlalchemy import select, delete, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from bookkeeper.errors import DatabaseMalfunctionError, DuplicateDocumentError
from bookkeeper.models.document import Document
from bookkeeper.models.enums import DocumentType
from bookkeeper.models.general_ledger_line import GeneralLedgerLine
from bookkeeper.services.row_preparer import PreparedLine

logger = logging.getLogger(__name__)


class DocumentRepository:

    def __init__(self, db: Session):
        self.db = db

    def document_exists(self, owner_id: int, name: str) -> bool:
        found = self.db.execute(
            select(Document.id).where(
                Document.owner_id == owner_id,
                Document.name == name,
            )
        ).scalar_one_or_none()
        return found is not None

    def count_lines(self, owner_id: int, document_id: int) -> int:
        return self.db.execute(
            select(func.count()).select_from(GeneralLedgerLine).where(
                GeneralLedgerLine.owner_id == owner_id,
                GeneralLedgerLine.document_id == document_id,
            )
        ).scalar_one()

    def post_document(
        self,
        owner_id: int,
        name: str,
        document_type: DocumentType,
        lines: Sequence[PreparedLine],
        customer_id: int | None = None,
        vendor_id: int | None = None,
    ) -> int:
        """
        Insert a document and its lines, then commit.

        After inserting, the stored line count is read back and
        compared with len(lines). On a mismatch the new lines and
        document are deleted and DatabaseMalfunctionError is raised.

        Raises DuplicateDocumentError if another document with
        the same name was committed for this owner first.
        """
        try:
            document = Document(
                owner_id=owner_id,
                name=name,
                document_type=document_type,
                customer_id=customer_id,
                vendor_id=vendor_id,
            )
            self.db.add(document)
            self._flush_document(owner_id, name)
            document_id = document.id

            for line in lines:
                self.db.add(GeneralLedgerLine(
                    owner_id=owner_id,
                    document_id=document_id,
                    account_id=line.account_id,
                    line_date=line.line_date,
                    debit=line.debit,
                    credit=line.credit,
                    description=line.description,
                ))
            self.db.flush()

            inserted = self.count_lines(owner_id, document_id)
            if inserted != len(lines):
                self._discard(owner_id, document_id)
                raise DatabaseMalfunctionError(
                    f"document '{name}': expected {len(lines)} ledger "
                    f"lines, found {inserted}"
                )

            self.db.commit()
        except (DuplicateDocumentError, DatabaseMalfunctionError):
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(
                "document insert failed",
                extra={"owner_id": owner_id, "document_name": name},
            )
            raise DatabaseMalfunctionError(str(e)) from e

        return document_id

    def _flush_document(self, owner_id: int, name: str) -> None:
        """Flush the pending document, classifying a constraint failure."""
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if self.document_exists(owner_id, name):
                raise DuplicateDocumentError(
                    f"document '{name}' already exists"
                ) from e
            raise DatabaseMalfunctionError(str(e)) from e

    def _discard(self, owner_id: int, document_id: int) -> None:
        """Compensating delete of a partially written document."""
        logger.warning(
            "discarding partially written document",
            extra={"owner_id": owner_id, "document_id": document_id},
        )
        self.db.execute(
            delete(GeneralLedgerLine).where(
                GeneralLedgerLine.owner_id == owner_id,
                GeneralLedgerLine.document_id == document_id,
            )
        )
        self.db.execute(
            delete(Document).where(
                Document.owner_id == owner_id,
                Document.id == document_id,
            )
        )
        self.db.flush()
