"""
Document model.

A document is a named bookkeeping transaction (journal entry,
invoice, disbursement or receipt) that owns its general ledger
lines. A document and its lines are created together or not
at all; see DocumentRepository.
"""

from datetime import datetime

from sqlalchemy import (
    String, Boolean, DateTime, ForeignKey,
    UniqueConstraint, CheckConstraint, Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeper.models.base import Base
from bookkeeper.models.enums import DocumentType


class Document(Base):
    __tablename__ = "documents"
    __table_args__ = (
        # Serializes concurrent submissions of the same name
        UniqueConstraint("owner_id", "name", name="uq_documents_owner_name"),
        CheckConstraint(
            "customer_id IS NULL OR vendor_id IS NULL",
            name="ck_documents_single_party",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    document_type: Mapped[DocumentType] = mapped_column(
        SAEnum(
            DocumentType,
            name="document_type_enum",
            create_constraint=True,
        ),
        nullable=False,
    )
    customer_id: Mapped[int | None] = mapped_column(
        ForeignKey("customers.id"), nullable=True
    )
    vendor_id: Mapped[int | None] = mapped_column(
        ForeignKey("vendors.id"), nullable=True
    )
    is_posted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    customer: Mapped["Customer | None"] = relationship()
    vendor: Mapped["Vendor | None"] = relationship()
    lines: Mapped[list["GeneralLedgerLine"]] = relationship(
        back_populates="document",
        order_by="GeneralLedgerLine.id",
    )

    def __repr__(self) -> str:
        return f"<Document {self.name} ({self.document_type.value})>"
