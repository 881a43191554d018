"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

account_type_enum = sa.Enum(
    "ASSET", "LIABILITY", "EQUITY", "REVENUE", "EXPENSE",
    name="account_type_enum",
)
document_type_enum = sa.Enum(
    "JE", "API", "APD", "ARI", "ARR",
    name="document_type_enum",
    create_constraint=True,
)


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(64), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=False),
        sa.Column("code", sa.String(20), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("account_type", account_type_enum, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("owner_id", "code", name="uq_accounts_owner_code"),
    )
    op.create_index("ix_accounts_owner_id", "accounts", ["owner_id"])

    for table in ("customers", "vendors"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=False),
            sa.Column("name", sa.String(100), nullable=False),
            sa.Column("address", sa.String(255), nullable=True),
            sa.Column("created_at", sa.DateTime(), nullable=False),
            sa.UniqueConstraint("owner_id", "name", name=f"uq_{table}_owner_name"),
        )
        op.create_index(f"ix_{table}_owner_id", table, ["owner_id"])

    op.create_table(
        "documents",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("document_type", document_type_enum, nullable=False),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=True),
        sa.Column("vendor_id", sa.Integer(), sa.ForeignKey("vendors.id"), nullable=True),
        sa.Column("is_posted", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("owner_id", "name", name="uq_documents_owner_name"),
        sa.CheckConstraint(
            "customer_id IS NULL OR vendor_id IS NULL",
            name="ck_documents_single_party",
        ),
    )
    op.create_index("ix_documents_owner_id", "documents", ["owner_id"])

    op.create_table(
        "general_ledger",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=False),
        sa.Column("document_id", sa.Integer(), sa.ForeignKey("documents.id"), nullable=False),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("line_date", sa.Date(), nullable=False),
        sa.Column("debit", sa.Numeric(10, 2), nullable=True),
        sa.Column("credit", sa.Numeric(10, 2), nullable=True),
        sa.Column("description", sa.String(64), nullable=False),
        sa.CheckConstraint(
            "(debit IS NULL AND credit IS NOT NULL) "
            "OR (debit IS NOT NULL AND credit IS NULL)",
            name="ck_general_ledger_debit_xor_credit",
        ),
    )
    op.create_index("ix_general_ledger_owner_id", "general_ledger", ["owner_id"])
    op.create_index("ix_general_ledger_document_id", "general_ledger", ["document_id"])
    op.create_index("ix_general_ledger_account_id", "general_ledger", ["account_id"])


def downgrade() -> None:
    op.drop_table("general_ledger")
    op.drop_table("documents")
    op.drop_table("vendors")
    op.drop_table("customers")
    op.drop_table("accounts")
    op.drop_table("owners")
    account_type_enum.drop(op.get_bind(), checkfirst=True)
    document_type_enum.drop(op.get_bind(), checkfirst=True)
