"""
Tests for the field validators.
"""

import pytest

from bookkeeper.services.validators import (
    is_alphanumeric_text,
    is_blank,
    is_numeric_code,
    is_well_formed_amount,
    is_well_formed_date,
)


class TestAlphanumericText:

    @pytest.mark.parametrize("value", [
        "Loan",
        "Invoice 42",
        "Rent - March: 2018; unit_4, east",
    ])
    def test_accepts_plain_text(self, value):
        assert is_alphanumeric_text(value)

    @pytest.mark.parametrize("value", [
        "",
        "Loan!",
        "Joe's",
        "café",
        "tab\there",
        "50%",
    ])
    def test_rejects_other_characters(self, value):
        assert not is_alphanumeric_text(value)


class TestWellFormedDate:

    @pytest.mark.parametrize("value", [
        "2018-01-01",
        "2018-12-31",
        "2020-02-29",
        "2000-02-29",
        "2018-04-30",
    ])
    def test_accepts_calendar_dates(self, value):
        assert is_well_formed_date(value)

    @pytest.mark.parametrize("value", [
        "2019-02-29",
        "2019-02-30",
        "1900-02-29",
        "2018-04-31",
        "2018-13-01",
        "2018-00-10",
        "2018-01-00",
        "0000-01-01",
    ])
    def test_rejects_days_outside_the_month(self, value):
        assert not is_well_formed_date(value)

    @pytest.mark.parametrize("value", [
        "",
        "2018-1-1",
        "18-01-01",
        "2018/01/01",
        " 2018-01-01",
        "2018-01-01T00:00",
        "20180101",
    ])
    def test_rejects_other_formats(self, value):
        assert not is_well_formed_date(value)


class TestWellFormedAmount:

    @pytest.mark.parametrize("value", [
        "1000.00",
        "5",
        "5.5",
        "0.05",
        "0",
    ])
    def test_accepts_up_to_two_decimals(self, value):
        assert is_well_formed_amount(value)

    def test_rejects_bare_trailing_point(self):
        assert not is_well_formed_amount("5.")

    @pytest.mark.parametrize("value", [
        "",
        ".50",
        "-5.00",
        "+5",
        "5.001",
        "1,000.00",
        " 5",
        "1e3",
    ])
    def test_rejects_malformed_amounts(self, value):
        assert not is_well_formed_amount(value)


class TestBlankAndCode:

    @pytest.mark.parametrize("value", ["", " ", "\t\n  "])
    def test_blank(self, value):
        assert is_blank(value)

    def test_text_with_spaces_is_not_blank(self):
        assert not is_blank(" a ")

    @pytest.mark.parametrize("value", ["1000", "01"])
    def test_numeric_code(self, value):
        assert is_numeric_code(value)

    @pytest.mark.parametrize("value", ["", "10a", "-1", "1 000", "١٢"])
    def test_non_numeric_code(self, value):
        assert not is_numeric_code(value)
