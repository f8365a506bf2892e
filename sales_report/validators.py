from decimal import Decimal

from sales_report import log
from sales_report.errors import (
    InvalidDiscountError,
    InvalidQuantityError,
    InvalidSalePriceError,
)
from sales_report.models import PurchaseLine

_HUNDRED = Decimal("100")


def is_valid_percent(value) -> bool:
    return 0 <= value <= 100


def is_non_negative(value) -> bool:
    return value >= 0


def subtotal_factor(discount: Decimal) -> Decimal:
    """Share of the sale price left after ``discount`` percent, in [0, 1]."""
    if not is_valid_percent(discount):
        log.error("Discount validation failed: %s", discount)
        raise InvalidDiscountError(
            f"Invalid discount: {discount}. Must be a number between 0 and 100"
        )
    return 1 - Decimal(discount) / _HUNDRED


def validate_purchase_line(line: PurchaseLine) -> None:
    """Reject a purchase line with an out-of-range discount, price or quantity.

    Checks run in that order, so a line that is wrong in several ways
    reports the discount first.
    """
    if not is_valid_percent(line.discount):
        log.error("Discount validation failed for sku %s: %s", line.sku, line.discount)
        raise InvalidDiscountError(
            f"Invalid discount: {line.discount}. Must be a number between 0 and 100"
        )

    if not is_non_negative(line.sale_price):
        log.error("Sale price validation failed for sku %s: %s", line.sku, line.sale_price)
        raise InvalidSalePriceError(
            f"Invalid sale_price: {line.sale_price}. Must be >= 0"
        )

    if not is_non_negative(line.quantity):
        log.error("Quantity validation failed for sku %s: %s", line.sku, line.quantity)
        raise InvalidQuantityError(
            f"Invalid quantity: {line.quantity}. Must be >= 0"
        )
