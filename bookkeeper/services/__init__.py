"""Business logic services."""

from bookkeeper.services.account_service import AccountService
from bookkeeper.services.document_service import DocumentService
from bookkeeper.services.owner_service import OwnerService
from bookkeeper.services.party_service import PartyService

__all__ = ["AccountService", "DocumentService", "OwnerService", "PartyService"]
