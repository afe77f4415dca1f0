"""Catalog Aggregates — derived values for the products page.

Invariants:
    - Pure functions over a product sequence, no IO
    - distinct_categories keeps first-seen order
    - total_value is rounded to cents (float sums drift otherwise)
"""

from typing import Iterable, Sequence

from vibe_ssr.core.domain_types import StockLevel
from vibe_ssr.core.fixtures import Product

_LOW_STOCK_THRESHOLD = 20


def distinct_categories(products: Iterable[Product]) -> list[str]:
    return list(dict.fromkeys(p.category for p in products))


def in_stock(products: Iterable[Product]) -> list[Product]:
    return [p for p in products if p.stock > 0]


def total_stock(products: Iterable[Product]) -> int:
    return sum(p.stock for p in products)


def total_value(products: Iterable[Product]) -> float:
    """Sum of unit prices (one of each product), rounded to 2 decimals."""
    return round(sum(p.price for p in products), 2)


def stock_level(product: Product) -> StockLevel:
    if product.stock > _LOW_STOCK_THRESHOLD:
        return StockLevel.HIGH
    if product.stock > 0:
        return StockLevel.LOW
    return StockLevel.OUT


def summarize_catalog(products: Sequence[Product]) -> dict:
    """All products-page aggregates in one flat dict."""
    return {
        "total_products": len(products),
        "in_stock": len(in_stock(products)),
        "categories": len(distinct_categories(products)),
        "total_value": total_value(products),
        "total_stock": total_stock(products),
    }
