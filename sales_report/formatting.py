from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from sales_report.models import SellerReport

_TWO_DP = Decimal("0.01")


def round_amount(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(_TWO_DP, rounding=ROUND_HALF_UP)


def round_report(report: SellerReport) -> SellerReport:
    """Copy of ``report`` with money fields rounded to 2 dp for display."""
    return report.model_copy(update={
        "revenue": round_amount(report.revenue),
        "profit": round_amount(report.profit),
        "bonus": round_amount(report.bonus),
    })


def round_reports(reports: Iterable[SellerReport]) -> list[SellerReport]:
    return [round_report(r) for r in reports]
