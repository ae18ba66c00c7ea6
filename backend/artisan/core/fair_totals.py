"""Fair Totals: pure aggregation over a fair's sale records.

Invariants:
    - Inputs are already-loaded sale snapshots (no IO, no DB)
    - An empty ledger yields total 0, never an error
    - Per-category totals cover every ItemCategory, zero-filled

Design Decisions:
    - Operates on any object with .price/.category: works for ORM rows and test doubles
    - Rounded to cents only at the edge; sums stay exact floats otherwise
"""

from collections.abc import Iterable
from typing import Protocol

from artisan.core.domain_types import ItemCategory


class PricedSale(Protocol):
    price: float
    category: str


def sum_sale_prices(sales: Iterable[PricedSale]) -> float:
    """Sum of price over the given sales. 0 for none."""
    return sum((s.price for s in sales), 0.0)


def summarize_fair_sales(sales: Iterable[PricedSale]) -> dict:
    """Sale count, total and per-category totals for one fair. Pure, no IO."""
    sales = list(sales)
    by_category = {c.value: {"count": 0, "total": 0.0} for c in ItemCategory}
    for s in sales:
        bucket = by_category.setdefault(s.category, {"count": 0, "total": 0.0})
        bucket["count"] += 1
        bucket["total"] += s.price

    return {
        "sale_count": len(sales),
        "total": round(sum_sale_prices(sales), 2),
        "by_category": {
            k: {"count": v["count"], "total": round(v["total"], 2)}
            for k, v in by_category.items()
        },
    }
