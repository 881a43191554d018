"""
Account service — the owner's chart of accounts.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookkeeper.errors import DuplicateError
from bookkeeper.models.account import Account
from bookkeeper.models.enums import AccountType
from bookkeeper.schemas.account import AccountCreate
from bookkeeper.services.validators import is_alphanumeric_text, is_numeric_code

logger = logging.getLogger(__name__)


# Seeded for new owners so that simple documents can be entered at once
DEFAULT_ACCOUNTS: list[tuple[str, str, AccountType]] = [
    ("1000", "Cash", AccountType.ASSET),
    ("1200", "Accounts Receivable", AccountType.ASSET),
    ("1500", "Equipment", AccountType.ASSET),
    ("2000", "Accounts Payable", AccountType.LIABILITY),
    ("2400", "Loans Payable", AccountType.LIABILITY),
    ("3000", "Owner Capital", AccountType.EQUITY),
    ("3100", "Owner Drawings", AccountType.EQUITY),
    ("4000", "Sales Revenue", AccountType.REVENUE),
    ("4100", "Service Revenue", AccountType.REVENUE),
    ("5000", "Cost of Goods Sold", AccountType.EXPENSE),
    ("6000", "Rent Expense", AccountType.EXPENSE),
    ("6100", "Utilities Expense", AccountType.EXPENSE),
]


class AccountService:

    def __init__(self, db: Session):
        self.db = db

    def create_account(self, owner_id: int, request: AccountCreate) -> Account:
        """
        Add an account to the owner's chart of accounts.

        Raises ValueError for a malformed code or name and
        DuplicateError if the code is already in use.
        """
        if not is_numeric_code(request.code):
            raise ValueError(f"Account code '{request.code}' is not numeric")
        if not is_alphanumeric_text(request.name):
            raise ValueError(
                f"Account name '{request.name}' contains unsupported characters"
            )

        existing = self.db.execute(
            select(Account).where(
                Account.owner_id == owner_id,
                Account.code == request.code,
            )
        ).scalar_one_or_none()

        if existing:
            raise DuplicateError(
                f"Account with code '{request.code}' already exists"
            )

        account = Account(
            owner_id=owner_id,
            code=request.code,
            name=request.name,
            account_type=request.account_type,
        )
        self.db.add(account)
        self.db.flush()
        return account

    def create_default_accounts(self, owner_id: int) -> list[Account]:
        """
        Seed the default chart of accounts.

        Codes the owner already uses are skipped, so seeding
        twice adds nothing the second time.
        """
        taken = set(self.db.execute(
            select(Account.code).where(Account.owner_id == owner_id)
        ).scalars())

        added = []
        for code, name, account_type in DEFAULT_ACCOUNTS:
            if code in taken:
                continue
            account = Account(
                owner_id=owner_id,
                code=code,
                name=name,
                account_type=account_type,
            )
            self.db.add(account)
            added.append(account)

        self.db.flush()
        logger.info(
            "seeded default accounts",
            extra={"owner_id": owner_id, "count": len(added)},
        )
        return added

    def list_accounts(self, owner_id: int) -> list[Account]:
        """Return the owner's accounts ordered by code."""
        accounts = self.db.execute(
            select(Account)
            .where(Account.owner_id == owner_id)
            .order_by(Account.code)
        ).scalars().all()
        return list(accounts)
