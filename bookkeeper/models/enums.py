"""
Shared enumerations for database models.

Mapping Python enums to database enums ensures that only
valid values can be stored.
"""

import enum


class AccountType(str, enum.Enum):
    """The five fundamental accounting categories."""
    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class EntryType(str, enum.Enum):
    """Direction of a ledger line, as entered by the user."""
    DEBIT = "debit"
    CREDIT = "credit"


class PartyKind(str, enum.Enum):
    """The two kinds of counterparty a document can name."""
    CUSTOMER = "customer"
    VENDOR = "vendor"


class DocumentType(str, enum.Enum):
    """
    Bookkeeping document types.

    JE  - journal entry
    API - accounts payable invoice
    APD - accounts payable disbursement
    ARI - accounts receivable invoice
    ARR - accounts receivable receipt
    """
    JE = "JE"
    API = "API"
    APD = "APD"
    ARI = "ARI"
    ARR = "ARR"

    @property
    def party_kind(self) -> PartyKind | None:
        """The counterparty kind this document type requires, if any."""
        return DOCUMENT_PARTY_KINDS[self]


DOCUMENT_PARTY_KINDS: dict[DocumentType, PartyKind | None] = {
    DocumentType.JE: None,
    DocumentType.API: PartyKind.VENDOR,
    DocumentType.APD: PartyKind.VENDOR,
    DocumentType.ARI: PartyKind.CUSTOMER,
    DocumentType.ARR: PartyKind.CUSTOMER,
}
