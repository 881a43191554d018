"""
Conversion of raw ledger rows into typed ledger lines.

Checks run in a fixed order and the first failure wins:

1. code, date, amount and description are not blank
2. code is numeric
3. code names one of the owner's accounts
4. date is a real YYYY-MM-DD date
5. amount is well formed and fits NUMERIC(10,2)
6. description is plain text of at most 64 characters
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bookkeeper.errors import DocumentRejected, RejectionKind
from bookkeeper.models.enums import EntryType
from bookkeeper.schemas.document import RawRow
from bookkeeper.services.resolver import AccountResolver
from bookkeeper.services.validators import (
    is_alphanumeric_text,
    is_blank,
    is_numeric_code,
    is_well_formed_amount,
    is_well_formed_date,
)

CENTS = Decimal("0.01")

# Limits of the general_ledger columns: NUMERIC(10,2) and VARCHAR(64)
MAX_AMOUNT = Decimal("99999999.99")
MAX_DESCRIPTION_LENGTH = 64

# Order in which blank fields are reported
REQUIRED_FIELDS = ("code", "date", "amount", "description")


@dataclass(frozen=True)
class PreparedLine:
    """A validated ledger line, ready to insert."""
    account_id: int
    line_date: date
    debit: Decimal | None
    credit: Decimal | None
    description: str


class LedgerRowPreparer:

    def __init__(self, resolver: AccountResolver):
        self.resolver = resolver

    def prepare(self, owner_id: int, row: RawRow, index: int) -> PreparedLine:
        """
        Validate one row and return its prepared line.

        Raises DocumentRejected carrying the row index on the
        first failed check.
        """
        for field in REQUIRED_FIELDS:
            if is_blank(getattr(row, field)):
                raise DocumentRejected(
                    RejectionKind.BLANK_FIELD,
                    f"{field} is blank",
                    row=index,
                )

        if not is_numeric_code(row.code):
            raise DocumentRejected(
                RejectionKind.NON_NUMERIC_CODE,
                f"account code '{row.code}' is not numeric",
                row=index,
            )

        account_id = self.resolver.resolve_account(owner_id, row.code)
        if account_id is None:
            raise DocumentRejected(
                RejectionKind.UNKNOWN_ACCOUNT,
                f"no account with code '{row.code}'",
                row=index,
            )

        if not is_well_formed_date(row.date):
            raise DocumentRejected(
                RejectionKind.INVALID_DATE,
                f"'{row.date}' is not a valid YYYY-MM-DD date",
                row=index,
            )

        if not is_well_formed_amount(row.amount):
            raise DocumentRejected(
                RejectionKind.INVALID_AMOUNT,
                f"'{row.amount}' is not a valid amount",
                row=index,
            )

        amount = Decimal(row.amount)
        if amount > MAX_AMOUNT:
            raise DocumentRejected(
                RejectionKind.INVALID_AMOUNT,
                f"'{row.amount}' exceeds the largest amount {MAX_AMOUNT}",
                row=index,
            )

        if not is_alphanumeric_text(row.description):
            raise DocumentRejected(
                RejectionKind.INVALID_DESCRIPTION,
                f"description '{row.description}' contains "
                f"unsupported characters",
                row=index,
            )

        if len(row.description) > MAX_DESCRIPTION_LENGTH:
            raise DocumentRejected(
                RejectionKind.INVALID_DESCRIPTION,
                f"description is longer than "
                f"{MAX_DESCRIPTION_LENGTH} characters",
                row=index,
            )

        amount = amount.quantize(CENTS)
        is_debit = row.credebit == EntryType.DEBIT
        return PreparedLine(
            account_id=account_id,
            line_date=date.fromisoformat(row.date),
            debit=amount if is_debit else None,
            credit=None if is_debit else amount,
            description=row.description,
        )
