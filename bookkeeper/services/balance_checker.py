"""
Per-date balance check for a document's ledger lines.

Totals are computed with Decimal so that, for example, ten
credits of 0.10 exactly match a debit of 1.00.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from bookkeeper.services.row_preparer import PreparedLine


@dataclass(frozen=True)
class DailyTotals:
    line_date: date
    debits: Decimal
    credits: Decimal

    @property
    def balanced(self) -> bool:
        return self.debits == self.credits


def daily_totals(lines: Iterable[PreparedLine]) -> list[DailyTotals]:
    """Sum debits and credits per line date, ordered by date."""
    debits: dict[date, Decimal] = defaultdict(Decimal)
    credits: dict[date, Decimal] = defaultdict(Decimal)

    for line in lines:
        day = line.line_date
        debits[day] += line.debit if line.debit is not None else Decimal("0")
        credits[day] += line.credit if line.credit is not None else Decimal("0")

    return [
        DailyTotals(line_date=d, debits=debits[d], credits=credits[d])
        for d in sorted(debits)
    ]


def find_imbalances(lines: Iterable[PreparedLine]) -> list[DailyTotals]:
    """Return the totals of every date whose debits differ from its credits."""
    return [totals for totals in daily_totals(lines) if not totals.balanced]
