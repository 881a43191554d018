"""
Error kinds and internal exceptions.

Every outcome of a document submission other than success is
described by a RejectionKind. Inside the posting core these are
carried by exceptions; DocumentService converts them to tagged
results before they leave the core, so callers never see a raise
for an expected rejection.
"""

import enum


class RejectionKind(str, enum.Enum):
    # Input shape
    INVALID_DOCUMENT_NAME = "InvalidDocumentName"
    EMPTY_DOCUMENT = "EmptyDocument"
    BLANK_FIELD = "BlankField"
    NON_NUMERIC_CODE = "NonNumericCode"
    INVALID_DATE = "InvalidDate"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_DESCRIPTION = "InvalidDescription"
    INVALID_DOCUMENT_TYPE = "InvalidDocumentType"

    # Semantic consistency
    DOCUMENT_ALREADY_EXISTS = "DocumentAlreadyExists"
    PARTY_FIELD_MISMATCH = "PartyFieldMismatch"
    PARTY_NONEXISTENT = "PartyNonexistent"
    UNKNOWN_ACCOUNT = "UnknownAccount"
    DAILY_IMBALANCE = "DailyImbalance"

    # Infrastructure
    DATABASE_MALFUNCTION = "DatabaseMalfunction"


# One user-facing message per kind
REJECTION_MESSAGES: dict[RejectionKind, str] = {
    RejectionKind.INVALID_DOCUMENT_NAME:
        "The document name may only contain letters, digits, spaces "
        "and the characters - _ , : ;",
    RejectionKind.EMPTY_DOCUMENT:
        "A document needs at least one general ledger row.",
    RejectionKind.BLANK_FIELD:
        "Every row needs an account code, date, amount and description.",
    RejectionKind.NON_NUMERIC_CODE:
        "Account codes must be numeric.",
    RejectionKind.INVALID_DATE:
        "Dates must be real calendar dates written as YYYY-MM-DD.",
    RejectionKind.INVALID_AMOUNT:
        "Amounts must be unsigned numbers with at most two decimal places "
        "and no larger than 99999999.99.",
    RejectionKind.INVALID_DESCRIPTION:
        "Descriptions are at most 64 characters of letters, digits, "
        "spaces and the characters - _ , : ;",
    RejectionKind.INVALID_DOCUMENT_TYPE:
        "The document type must be one of JE, API, APD, ARI or ARR.",
    RejectionKind.DOCUMENT_ALREADY_EXISTS:
        "A document with that name already exists.",
    RejectionKind.PARTY_FIELD_MISMATCH:
        "Invoices and receipts need a customer, payables need a vendor, "
        "and journal entries must not name either.",
    RejectionKind.PARTY_NONEXISTENT:
        "The named customer or vendor does not exist.",
    RejectionKind.UNKNOWN_ACCOUNT:
        "No account exists with that code.",
    RejectionKind.DAILY_IMBALANCE:
        "Debits must equal credits for every date in the document.",
    RejectionKind.DATABASE_MALFUNCTION:
        "The document could not be saved. Nothing was recorded; "
        "please try again.",
}


class DocumentRejected(Exception):
    """
    A submission was refused for a business or input reason.

    row is the zero-based index of the offending ledger row,
    when the rejection concerns a single row.
    """

    def __init__(
        self,
        kind: RejectionKind,
        detail: str | None = None,
        row: int | None = None,
    ):
        self.kind = kind
        self.detail = detail
        self.row = row
        super().__init__(detail or kind.value)


class DuplicateDocumentError(Exception):
    """The (owner, document name) pair was taken at insert time."""


class DatabaseMalfunctionError(Exception):
    """Storage failed or returned an inconsistent result."""


class DuplicateError(ValueError):
    """A simple create collided with an existing record."""
