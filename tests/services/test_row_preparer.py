"""
Tests for ledger row preparation and its check order.
"""

from datetime import date
from decimal import Decimal

import pytest

from bookkeeper.errors import DocumentRejected, RejectionKind
from bookkeeper.schemas.document import RawRow
from bookkeeper.services.resolver import AccountResolver
from bookkeeper.services.row_preparer import LedgerRowPreparer


def raw_row(**overrides):
    values = {
        "code": "1000",
        "date": "2018-01-01",
        "credebit": "debit",
        "amount": "1000.00",
        "description": "Loan",
    }
    values.update(overrides)
    return RawRow(**values)


@pytest.fixture
def preparer(db_session):
    return LedgerRowPreparer(AccountResolver(db_session))


def rejection(preparer, owner, index=0, **overrides) -> DocumentRejected:
    with pytest.raises(DocumentRejected) as exc_info:
        preparer.prepare(owner.id, raw_row(**overrides), index)
    return exc_info.value


class TestPrepareValidRow:

    def test_debit_row(self, preparer, owner):
        line = preparer.prepare(owner.id, raw_row(), 0)

        assert line.line_date == date(2018, 1, 1)
        assert line.debit == Decimal("1000.00")
        assert line.credit is None
        assert line.description == "Loan"

    def test_credit_row(self, preparer, owner):
        line = preparer.prepare(
            owner.id, raw_row(code="2400", credebit="credit", amount="250"), 0
        )

        assert line.debit is None
        assert line.credit == Decimal("250.00")

    def test_largest_amount(self, preparer, owner):
        line = preparer.prepare(owner.id, raw_row(amount="99999999.99"), 0)
        assert line.debit == Decimal("99999999.99")

    def test_leading_zeros_do_not_count_against_size(self, preparer, owner):
        line = preparer.prepare(owner.id, raw_row(amount="0000000001.5"), 0)
        assert line.debit == Decimal("1.50")

    def test_longest_description(self, preparer, owner):
        line = preparer.prepare(owner.id, raw_row(description="a" * 64), 0)
        assert line.description == "a" * 64

    def test_resolves_account_id(self, db_session, preparer, owner):
        expected = AccountResolver(db_session).resolve_account(owner.id, "2400")
        line = preparer.prepare(owner.id, raw_row(code="2400"), 0)
        assert line.account_id == expected


class TestRowRejections:

    @pytest.mark.parametrize("field", ["code", "date", "amount", "description"])
    def test_blank_field(self, preparer, owner, field):
        error = rejection(preparer, owner, **{field: "  "})
        assert error.kind == RejectionKind.BLANK_FIELD
        assert field in error.detail

    def test_non_numeric_code(self, preparer, owner):
        error = rejection(preparer, owner, code="CASH")
        assert error.kind == RejectionKind.NON_NUMERIC_CODE

    def test_unknown_account(self, preparer, owner):
        error = rejection(preparer, owner, code="9999")
        assert error.kind == RejectionKind.UNKNOWN_ACCOUNT

    def test_invalid_date(self, preparer, owner):
        error = rejection(preparer, owner, date="2019-02-30")
        assert error.kind == RejectionKind.INVALID_DATE

    def test_invalid_amount(self, preparer, owner):
        error = rejection(preparer, owner, amount="12.345")
        assert error.kind == RejectionKind.INVALID_AMOUNT

    def test_invalid_description(self, preparer, owner):
        error = rejection(preparer, owner, description="Loan!")
        assert error.kind == RejectionKind.INVALID_DESCRIPTION

    @pytest.mark.parametrize("amount", [
        "100000000",
        "12345678901234567.89",
        "1" * 28 + ".00",
    ])
    def test_amount_too_large_for_ledger(self, preparer, owner, amount):
        error = rejection(preparer, owner, amount=amount)
        assert error.kind == RejectionKind.INVALID_AMOUNT

    def test_description_too_long(self, preparer, owner):
        error = rejection(preparer, owner, description="a" * 65)
        assert error.kind == RejectionKind.INVALID_DESCRIPTION

    def test_error_carries_row_index(self, preparer, owner):
        error = rejection(preparer, owner, index=3, code="9999")
        assert error.row == 3


class TestCheckOrder:

    def test_blank_date_beats_non_numeric_code(self, preparer, owner):
        error = rejection(preparer, owner, code="abc", date="")
        assert error.kind == RejectionKind.BLANK_FIELD
        assert "date" in error.detail

    def test_blank_fields_reported_in_field_order(self, preparer, owner):
        error = rejection(preparer, owner, amount="", description="")
        assert "amount" in error.detail

    def test_non_numeric_beats_unknown_account(self, preparer, owner):
        # "12a" cannot resolve either; the format error is reported
        error = rejection(preparer, owner, code="12a")
        assert error.kind == RejectionKind.NON_NUMERIC_CODE

    def test_unknown_account_beats_bad_date(self, preparer, owner):
        error = rejection(preparer, owner, code="9999", date="2019-02-30")
        assert error.kind == RejectionKind.UNKNOWN_ACCOUNT

    def test_bad_date_beats_bad_amount(self, preparer, owner):
        error = rejection(preparer, owner, date="2019-02-30", amount="5.")
        assert error.kind == RejectionKind.INVALID_DATE

    def test_bad_amount_beats_bad_description(self, preparer, owner):
        error = rejection(preparer, owner, amount="5.", description="Loan!")
        assert error.kind == RejectionKind.INVALID_AMOUNT
