"""Default revenue, profit and bonus strategies.

The engine never hardcodes a formula: it calls whatever pair of callables
the caller hands over in :class:`ReportOptions`. The functions below are
the stock implementations.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping, Union

from sales_report.config import ReportSettings
from sales_report.errors import InvalidOptionsError
from sales_report.models import Product, PurchaseLine, SellerStats
from sales_report.validators import subtotal_factor, validate_purchase_line

RevenueStrategy = Callable[[PurchaseLine], Decimal]
BonusStrategy = Callable[[int, int, SellerStats], Decimal]


@dataclass(frozen=True)
class ReportOptions:
    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy


def calculate_simple_revenue(line: PurchaseLine) -> Decimal:
    """Revenue of one line: sale price net of discount times quantity."""
    validate_purchase_line(line)
    return line.sale_price * subtotal_factor(line.discount) * line.quantity


def calculate_simple_profit(
    line: PurchaseLine,
    product: Product,
    calculate_revenue: RevenueStrategy = calculate_simple_revenue,
) -> Decimal:
    revenue = to_amount(calculate_revenue(line), "calculate_revenue")
    cost = product.purchase_price * line.quantity
    return revenue - cost


def to_amount(value: Any, strategy: str) -> Decimal:
    """Coerce a strategy result to ``Decimal``, rejecting anything non-numeric."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise InvalidOptionsError(f"{strategy} returned {value!r}, expected a number")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidOptionsError(f"{strategy} returned {value!r}, expected a number") from exc
    if not amount.is_finite():
        raise InvalidOptionsError(f"{strategy} returned {value!r}, expected a finite number")
    return amount


def make_bonus_strategy(settings: ReportSettings) -> BonusStrategy:
    """Build the rank-tiered bonus strategy with the rates from ``settings``.

    Tiers are checked in order and the first match wins: first place,
    second or third place, last place, everybody else. With three sellers
    or fewer the last seller is also on the podium and gets the podium rate.
    """

    def calculate_bonus(rank: int, total: int, seller: SellerStats) -> Decimal:
        profit = seller.profit
        if rank == 0:
            return profit * settings.first_place_rate
        elif rank in (1, 2):
            return profit * settings.podium_rate
        elif rank == total - 1:
            return profit * settings.last_place_rate
        else:
            return profit * settings.default_rate

    return calculate_bonus


calculate_bonus_by_profit: BonusStrategy = make_bonus_strategy(ReportSettings())

DEFAULT_OPTIONS = ReportOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)


def resolve_options(options: Union[ReportOptions, Mapping[str, Any], None]) -> ReportOptions:
    """Normalize ``options`` and make sure both strategies are callable."""
    if isinstance(options, ReportOptions):
        revenue, bonus = options.calculate_revenue, options.calculate_bonus
    elif isinstance(options, Mapping):
        revenue = options.get("calculate_revenue")
        bonus = options.get("calculate_bonus")
    else:
        raise InvalidOptionsError(f"Options must be ReportOptions or a mapping, got {type(options).__name__}")

    if not callable(revenue) or not callable(bonus):
        raise InvalidOptionsError("calculate_revenue and calculate_bonus must both be callables")

    return ReportOptions(calculate_revenue=revenue, calculate_bonus=bonus)
