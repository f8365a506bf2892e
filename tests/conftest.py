"""Shared pytest fixtures for the sales report tests."""

import pytest

from scripts.seed_data import build_dataset
from sales_report.strategies import DEFAULT_OPTIONS


def seller(id, first="Ann", last="Lee"):
    return {"id": id, "first_name": first, "last_name": last}


def product(sku, purchase_price):
    return {"sku": sku, "purchase_price": purchase_price}


def line(sku, quantity, sale_price, discount=0):
    return {"sku": sku, "quantity": quantity, "sale_price": sale_price, "discount": discount}


def record(seller_id, total_amount, *items):
    return {"seller_id": seller_id, "total_amount": total_amount, "items": list(items)}


@pytest.fixture
def options():
    return DEFAULT_OPTIONS


@pytest.fixture
def single_seller_data():
    """One seller, one product bought at 10, one line of 2 x 20 with no discount."""
    return {
        "sellers": [seller("S-1")],
        "products": [product("SKU-1", 10)],
        "purchase_records": [record("S-1", 40, line("SKU-1", 2, 20, 0))],
    }


@pytest.fixture(scope="session")
def sample_data():
    return build_dataset()
