"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bookkeeper.models.base import Base
from bookkeeper.models.enums import (
    AccountType,
    DocumentType,
    EntryType,
    PartyKind,
)
from bookkeeper.models.owner import Owner
from bookkeeper.models.account import Account
from bookkeeper.models.party import Customer, Vendor
from bookkeeper.models.document import Document
from bookkeeper.models.general_ledger_line import GeneralLedgerLine

__all__ = [
    "Base",
    "AccountType",
    "DocumentType",
    "EntryType",
    "PartyKind",
    "Owner",
    "Account",
    "Customer",
    "Vendor",
    "Document",
    "GeneralLedgerLine",
]
