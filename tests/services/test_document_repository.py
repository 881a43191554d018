"""
Tests for the document persistence boundary.
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select

from bookkeeper.errors import DatabaseMalfunctionError, DuplicateDocumentError
from bookkeeper.models import Document, GeneralLedgerLine
from bookkeeper.models.enums import DocumentType
from bookkeeper.services.document_repository import DocumentRepository
from bookkeeper.services.resolver import AccountResolver
from bookkeeper.services.row_preparer import PreparedLine


@pytest.fixture
def lines(db_session, owner):
    resolver = AccountResolver(db_session)
    cash = resolver.resolve_account(owner.id, "1000")
    loan = resolver.resolve_account(owner.id, "2400")
    return [
        PreparedLine(cash, date(2018, 1, 1), Decimal("1000.00"), None, "Loan"),
        PreparedLine(loan, date(2018, 1, 1), None, Decimal("1000.00"), "Loan"),
    ]


class TestPostDocument:

    def test_stores_document_and_lines(self, db_session, owner, lines):
        repository = DocumentRepository(db_session)

        document_id = repository.post_document(
            owner.id, "JE1", DocumentType.JE, lines
        )

        document = db_session.get(Document, document_id)
        assert document.owner_id == owner.id
        assert document.is_posted is False
        assert repository.count_lines(owner.id, document_id) == 2
        assert repository.document_exists(owner.id, "JE1")

    def test_lines_carry_owner_and_document(self, db_session, owner, lines):
        document_id = DocumentRepository(db_session).post_document(
            owner.id, "JE1", DocumentType.JE, lines
        )

        stored = db_session.execute(select(GeneralLedgerLine)).scalars().all()
        assert {line.owner_id for line in stored} == {owner.id}
        assert {line.document_id for line in stored} == {document_id}

    def test_commits(self, db_session, owner, lines):
        DocumentRepository(db_session).post_document(
            owner.id, "JE1", DocumentType.JE, lines
        )
        db_session.rollback()

        assert DocumentRepository(db_session).document_exists(owner.id, "JE1")

    def test_duplicate_name(self, db_session, owner, lines):
        repository = DocumentRepository(db_session)
        document_id = repository.post_document(
            owner.id, "JE1", DocumentType.JE, lines
        )

        with pytest.raises(DuplicateDocumentError):
            repository.post_document(owner.id, "JE1", DocumentType.JE, lines)

        assert repository.count_lines(owner.id, document_id) == 2

    def test_verification_mismatch_deletes_everything(
        self, db_session, owner, lines, monkeypatch
    ):
        repository = DocumentRepository(db_session)
        monkeypatch.setattr(
            DocumentRepository, "count_lines",
            lambda self, owner_id, document_id: 3,
        )

        with pytest.raises(DatabaseMalfunctionError, match="expected 2"):
            repository.post_document(owner.id, "JE1", DocumentType.JE, lines)

        assert db_session.execute(select(Document)).first() is None
        assert db_session.execute(select(GeneralLedgerLine)).first() is None


class TestDocumentExists:

    def test_scoped_to_owner(self, db_session, owner, other_owner, lines):
        repository = DocumentRepository(db_session)
        repository.post_document(owner.id, "JE1", DocumentType.JE, lines)

        assert repository.document_exists(owner.id, "JE1")
        assert not repository.document_exists(other_owner.id, "JE1")
