"""
General ledger line model.

Each line is one debit or one credit against a single account
on a single date. Exactly one of debit and credit is set; the
database enforces this with a CHECK constraint.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    String, Date, Numeric, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeper.models.base import Base


class GeneralLedgerLine(Base):
    """
    A single posting belonging to a document.

    Per date, the debits of a document equal its credits. That
    invariant is enforced by the posting service before insert,
    not by the table.
    """

    __tablename__ = "general_ledger"
    __table_args__ = (
        CheckConstraint(
            "(debit IS NULL AND credit IS NOT NULL) "
            "OR (debit IS NOT NULL AND credit IS NULL)",
            name="ck_general_ledger_debit_xor_credit",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id"), nullable=False, index=True
    )
    document_id: Mapped[int] = mapped_column(
        ForeignKey("documents.id"), nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    line_date: Mapped[date] = mapped_column(Date, nullable=False)
    debit: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True
    )
    credit: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), nullable=True
    )
    description: Mapped[str] = mapped_column(String(64), nullable=False)

    document: Mapped["Document"] = relationship(back_populates="lines")
    account: Mapped["Account"] = relationship()

    def __repr__(self) -> str:
        side = f"DR {self.debit}" if self.debit is not None else f"CR {self.credit}"
        return f"<GeneralLedgerLine {self.line_date} {side}>"
