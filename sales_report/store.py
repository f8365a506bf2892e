from decimal import Decimal
from typing import Iterable

from sales_report import log
from sales_report.errors import (
    DuplicateProductError,
    DuplicateSellerError,
    UnknownProductError,
    UnknownSellerError,
)
from sales_report.models import Product, SellerInput, SellerStats, TopProduct


def build_product_index(products: Iterable[Product]) -> dict[str, Product]:
    index: dict[str, Product] = {}
    for product in products:
        if product.sku in index:
            raise DuplicateProductError(f"Duplicate product sku '{product.sku}'")
        index[product.sku] = product
    log.debug("Indexed %d products", len(index))
    return index


def get_product(index: dict[str, Product], sku: str) -> Product:
    product = index.get(sku)
    if product is None:
        raise UnknownProductError(f"Product '{sku}' not found")
    return product


class StatsStore:
    """Per-run arena of seller aggregates.

    Stats live in a list kept in input order; the id index maps a seller id
    to its slot. Every mutation goes through one of the update calls below.
    """

    def __init__(self) -> None:
        self._stats: list[SellerStats] = []
        self._index: dict[str, int] = {}

    @classmethod
    def from_sellers(cls, sellers: Iterable[SellerInput]) -> "StatsStore":
        store = cls()
        for seller in sellers:
            store.add_seller(seller)
        log.debug("Indexed %d sellers", len(store))
        return store

    def __len__(self) -> int:
        return len(self._stats)

    # ── writes ────────────────────────────────────────────────────────────────

    def add_seller(self, seller: SellerInput) -> None:
        if seller.id in self._index:
            raise DuplicateSellerError(f"Duplicate seller id '{seller.id}'")
        self._index[seller.id] = len(self._stats)
        self._stats.append(SellerStats(id=seller.id, name=seller.full_name))

    def record_sale(self, seller_id: str, total_amount: Decimal) -> None:
        stats = self.get_seller(seller_id)
        stats.sales_count += 1
        stats.revenue += total_amount

    def record_line(self, seller_id: str, sku: str, quantity: int, profit: Decimal) -> None:
        stats = self.get_seller(seller_id)
        stats.profit += profit
        stats.products_sold[sku] = stats.products_sold.get(sku, 0) + quantity

    def finalize(self, seller_id: str, *, bonus: Decimal, top_products: list[TopProduct]) -> None:
        stats = self.get_seller(seller_id)
        stats.bonus = bonus
        stats.top_products = top_products

    # ── reads ─────────────────────────────────────────────────────────────────

    def get_seller(self, seller_id: str) -> SellerStats:
        slot = self._index.get(seller_id)
        if slot is None:
            raise UnknownSellerError(f"Seller '{seller_id}' not found")
        return self._stats[slot]

    def ranked_by_profit(self) -> list[SellerStats]:
        # sorted() is stable: equal profits keep input order
        return sorted(self._stats, key=lambda s: s.profit, reverse=True)
