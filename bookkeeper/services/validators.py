"""
Field validators for user-entered text.

Pure predicates with no database access. Each accepts the raw
string exactly as typed.
"""

import re
from datetime import date

# Letters, digits, spaces and - _ , : ;
_TEXT_PATTERN = re.compile(r"[A-Za-z0-9 \-_,:;]+")
_CODE_PATTERN = re.compile(r"[0-9]+")
_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
# A bare trailing point ("5.") is not an amount
_AMOUNT_PATTERN = re.compile(r"[0-9]+(\.[0-9]{1,2})?")


def is_blank(value: str) -> bool:
    """True if the value is empty once all whitespace is removed."""
    return "".join(value.split()) == ""


def is_alphanumeric_text(value: str) -> bool:
    """Names, descriptions and document names."""
    return _TEXT_PATTERN.fullmatch(value) is not None


def is_numeric_code(value: str) -> bool:
    return _CODE_PATTERN.fullmatch(value) is not None


def is_well_formed_date(value: str) -> bool:
    """
    Check a YYYY-MM-DD date against the calendar.

    The day must exist in the given month, so 2019-02-29 is
    rejected and 2020-02-29 is accepted (Gregorian leap years).
    Out-of-range values are never clamped.
    """
    match = _DATE_PATTERN.fullmatch(value)
    if match is None:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_well_formed_amount(value: str) -> bool:
    """Unsigned amount with zero to two decimal places."""
    return _AMOUNT_PATTERN.fullmatch(value) is not None
