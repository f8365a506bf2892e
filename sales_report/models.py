from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Input models ─────────────────────────────────────────────────────────────

class SellerInput(BaseModel):
    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    sku: str
    purchase_price: Decimal
    name: Optional[str] = None
    category: Optional[str] = None
    retail_price: Optional[Decimal] = None


class PurchaseLine(BaseModel):
    # ranges are checked by validators.validate_purchase_line, not here
    sku: str
    quantity: int
    sale_price: Decimal
    discount: Decimal


class PurchaseRecord(BaseModel):
    seller_id: str
    total_amount: Decimal
    items: list[PurchaseLine]
    receipt_id: Optional[str] = None
    date: Optional[str] = None
    customer_id: Optional[str] = None


class SalesData(BaseModel):
    sellers: list[SellerInput]
    products: list[Product] = Field(default_factory=list)
    purchase_records: list[PurchaseRecord] = Field(default_factory=list)


# ── Working aggregate ────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int


class SellerStats(BaseModel):
    id: str
    name: str
    sales_count: int = 0
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    # sku -> quantity, insertion order = first time the sku was sold
    products_sold: dict[str, int] = Field(default_factory=dict)
    bonus: Decimal = Decimal("0")
    top_products: list[TopProduct] = Field(default_factory=list)


# ── Response models ──────────────────────────────────────────────────────────

class SellerReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal
