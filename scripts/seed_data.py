"""
Deterministic sample-data generator.

Produces, in the raw input shape accepted by ``analyze_sales_data``:
  - 6 sellers
  - 15 products  (purchase price 40-70 % of retail)
  - 200 purchase records, 1-4 lines each
    - discounts drawn from 0 / 5 / 10 / 25 %
    - total_amount = sum of the discounted line amounts
"""

import random
from decimal import Decimal

SEED = 42

_FIRST_NAMES = ["Alexey", "Maria", "Ivan", "Olga", "Sergey", "Anna"]
_LAST_NAMES  = ["Petrov", "Ivanova", "Smirnov", "Kuznetsova", "Popov", "Volkova"]
_CATEGORIES  = ["Home", "Garden", "Kitchen", "Tools", "Toys"]
_DISCOUNTS   = [0, 0, 0, 5, 10, 25]


def build_dataset(seed: int = SEED, *, n_records: int = 200) -> dict:
    rng = random.Random(seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    sellers = [
        {
            "id": f"seller_{i + 1}",
            "first_name": first,
            "last_name": last,
            "start_date": "2024-01-15",
            "position": "Sales Representative",
        }
        for i, (first, last) in enumerate(zip(_FIRST_NAMES, _LAST_NAMES))
    ]

    # ── products ─────────────────────────────────────────────────────────────
    products = []
    for i in range(15):
        retail = Decimal(rng.randint(500, 5000)) / 100
        cost_share = Decimal(rng.randint(40, 70)) / 100
        products.append({
            "sku": f"SKU_{i + 1:03d}",
            "name": f"Product {i + 1}",
            "category": rng.choice(_CATEGORIES),
            "retail_price": str(retail),
            "purchase_price": str((retail * cost_share).quantize(Decimal("0.01"))),
        })

    # ── purchase records ─────────────────────────────────────────────────────
    records = []
    for n in range(n_records):
        seller = rng.choice(sellers)
        items = []
        total = Decimal("0")
        for product in rng.sample(products, rng.randint(1, 4)):
            quantity = rng.randint(1, 5)
            discount = rng.choice(_DISCOUNTS)
            sale_price = Decimal(product["retail_price"])
            total += sale_price * (1 - Decimal(discount) / 100) * quantity
            items.append({
                "sku": product["sku"],
                "quantity": quantity,
                "sale_price": str(sale_price),
                "discount": discount,
            })
        records.append({
            "receipt_id": f"receipt_{n + 1:04d}",
            "date": f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}",
            "seller_id": seller["id"],
            "customer_id": f"customer_{rng.randint(1, 80):03d}",
            "total_amount": str(total.quantize(Decimal("0.01"))),
            "items": items,
        })

    return {"sellers": sellers, "products": products, "purchase_records": records}
