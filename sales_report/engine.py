from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from sales_report import log
from sales_report.config import ReportSettings
from sales_report.errors import InvalidInputError
from sales_report.models import SalesData, SellerReport, SellerStats, TopProduct
from sales_report.store import StatsStore, build_product_index, get_product
from sales_report.strategies import ReportOptions, calculate_simple_profit, resolve_options, to_amount


def _parse_data(data: Union[SalesData, Mapping[str, Any], None]) -> SalesData:
    if isinstance(data, SalesData):
        parsed = data
    else:
        if not isinstance(data, Mapping):
            raise InvalidInputError("Sales data is missing or is not a mapping")
        sellers = data.get("sellers")
        if not isinstance(sellers, (list, tuple)) or not sellers:
            raise InvalidInputError("Sales data must contain a non-empty list of sellers")
        try:
            parsed = SalesData.model_validate(data)
        except ValidationError as exc:
            raise InvalidInputError(f"Malformed sales data: {exc}") from exc

    if not parsed.sellers:
        raise InvalidInputError("Sales data must contain a non-empty list of sellers")
    return parsed


def top_products(stats: SellerStats, limit: int = 10) -> list[TopProduct]:
    """Best-selling skus by quantity, ties kept in the order first sold."""
    ranked = sorted(stats.products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def build_report(stats: SellerStats) -> SellerReport:
    return SellerReport(
        seller_id=stats.id,
        name=stats.name,
        revenue=stats.revenue,
        profit=stats.profit,
        sales_count=stats.sales_count,
        top_products=list(stats.top_products),
        bonus=stats.bonus,
    )


def analyze_sales_data(
    data: Union[SalesData, Mapping[str, Any], None],
    options: Union[ReportOptions, Mapping[str, Any], None],
    *,
    settings: Optional[ReportSettings] = None,
) -> list[SellerReport]:
    """Build the per-seller performance report, best profit first."""
    sales = _parse_data(data)
    opts = resolve_options(options)
    settings = settings or ReportSettings()

    log.info(
        "Analyzing %d sellers, %d products, %d purchase records",
        len(sales.sellers), len(sales.products), len(sales.purchase_records),
    )

    # ── 1. Indexes ───────────────────────────────────────────────────────────
    store = StatsStore.from_sellers(sales.sellers)
    product_index = build_product_index(sales.products)

    # ── 2. Aggregate revenue, profit and quantities per seller ───────────────
    for record in sales.purchase_records:
        store.record_sale(record.seller_id, record.total_amount)

        for line in record.items:
            product = get_product(product_index, line.sku)
            profit = calculate_simple_profit(line, product, opts.calculate_revenue)
            store.record_line(record.seller_id, line.sku, line.quantity, profit)

    # ── 3. Rank by profit, assign bonuses and top products ───────────────────
    ranked = store.ranked_by_profit()
    total = len(ranked)
    for rank, stats in enumerate(ranked):
        store.finalize(
            stats.id,
            bonus=to_amount(opts.calculate_bonus(rank, total, stats), "calculate_bonus"),
            top_products=top_products(stats, settings.top_products_limit),
        )

    # ── 4. Project ───────────────────────────────────────────────────────────
    reports = [build_report(stats) for stats in ranked]
    log.info("Report ready for %d sellers", len(reports))
    return reports
