class SalesReportError(ValueError):
    """Base class for every error that aborts a report run."""


# ── input / options ──────────────────────────────────────────────────────────

class InvalidInputError(SalesReportError):
    """Raised when the top-level sales data is missing or malformed."""


class DuplicateSellerError(InvalidInputError):
    pass


class DuplicateProductError(InvalidInputError):
    pass


class InvalidOptionsError(SalesReportError):
    """Raised when a revenue or bonus strategy is missing or not callable."""


# ── purchase lines ───────────────────────────────────────────────────────────

class InvalidPurchaseError(SalesReportError):
    """Raised when a purchase line fails validation."""


class InvalidDiscountError(InvalidPurchaseError):
    pass


class InvalidSalePriceError(InvalidPurchaseError):
    pass


class InvalidQuantityError(InvalidPurchaseError):
    pass


# ── references ───────────────────────────────────────────────────────────────

class MissingReferenceError(SalesReportError):
    """Raised when a purchase references an unknown seller or product."""


class UnknownSellerError(MissingReferenceError):
    pass


class UnknownProductError(MissingReferenceError):
    pass
