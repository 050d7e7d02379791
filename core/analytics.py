"""Report aggregations over sales, stock and parties.

Every function here is a single pass over records already in memory and
returns new values; nothing is cached or mutated. Averages over an empty
collection return None ("no data") instead of raising.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from core.constants import (
    FURNITURE_LOW_STOCK_THRESHOLD_DEFAULT,
    STOCK_IN,
    STOCK_LOW,
    STOCK_OUT,
    TOP_RATED_SUPPLIER_MIN,
)
from core.models import Customer, Sale, Supplier


def _average(total: float, count: int) -> Optional[float]:
    if count == 0:
        return None
    return total / count


# ============================================================================
# Sales rollups
# ============================================================================

def group_sales_by_date(sales: Iterable[Sale]) -> Dict[str, dict]:
    """Roll sales up per calendar day, in order of first appearance.

    Only days that have at least one sale get an entry.
    """
    by_date: Dict[str, dict] = {}
    for sale in sales:
        day = sale.date[:10]
        if day not in by_date:
            by_date[day] = {"date": day, "sales": 0, "revenue": 0.0}
        by_date[day]["sales"] += 1
        by_date[day]["revenue"] += sale.total
    return by_date


def group_sales_by_product(sales: Iterable[Sale]) -> Dict[str, dict]:
    """Roll line items up per product name across all sales.

    Keyed by name rather than id, so two products sharing a name merge.
    """
    by_product: Dict[str, dict] = {}
    for sale in sales:
        for line in sale.lines:
            if line.product_name not in by_product:
                by_product[line.product_name] = {
                    "name": line.product_name,
                    "quantity": 0,
                    "revenue": 0.0,
                }
            by_product[line.product_name]["quantity"] += line.quantity
            by_product[line.product_name]["revenue"] += line.total
    return by_product


def top_products(sales: Iterable[Sale], limit: int) -> List[dict]:
    """Return the `limit` best products by revenue, highest first.

    sorted() is stable, so equal revenues keep first-seen order.
    """
    rollups = list(group_sales_by_product(sales).values())
    rollups = sorted(rollups, key=lambda r: r["revenue"], reverse=True)
    return rollups[: max(limit, 0)]


def group_sales_by_attendant(sales: Iterable[Sale]) -> Dict[str, dict]:
    by_attendant: Dict[str, dict] = {}
    for sale in sales:
        name = sale.attendant_name
        if name not in by_attendant:
            by_attendant[name] = {"name": name, "sales": 0, "revenue": 0.0}
        by_attendant[name]["sales"] += 1
        by_attendant[name]["revenue"] += sale.total
    for rollup in by_attendant.values():
        rollup["average"] = _average(rollup["revenue"], rollup["sales"])
    return by_attendant


def sales_summary(sales: Iterable[Sale], on: Optional[str] = None) -> dict:
    """Count, revenue and average sale, optionally for one ISO date only."""
    count = 0
    revenue = 0.0
    for sale in sales:
        if on is not None and sale.date[:10] != on:
            continue
        count += 1
        revenue += sale.total
    return {"sales": count, "revenue": revenue, "average": _average(revenue, count)}


def sales_in_period(
    sales: Iterable[Sale], start: Optional[str] = None, end: Optional[str] = None
) -> List[Sale]:
    """Sales dated within [start, end]; either bound may be omitted."""
    return [
        s
        for s in sales
        if (start is None or s.date[:10] >= start) and (end is None or s.date[:10] <= end)
    ]


def revenue_share(revenue: float, total: float) -> Optional[float]:
    """Percentage of `total` that `revenue` represents."""
    if not total:
        return None
    return revenue / total * 100


# ============================================================================
# Stock valuation
# ============================================================================

def stock_status(
    quantity: int, threshold: int = FURNITURE_LOW_STOCK_THRESHOLD_DEFAULT
) -> str:
    """Classify a stock level. The threshold itself still counts as low."""
    if quantity == 0:
        return STOCK_OUT
    if quantity <= threshold:
        return STOCK_LOW
    return STOCK_IN


def stock_value(records: Iterable) -> float:
    """Sum of unit price x quantity. Works for furniture and wood records."""
    return sum(r.unit_price * r.stock_quantity for r in records)


def summarize_stock(records: Iterable, threshold: int) -> dict:
    summary = {
        "products": 0,
        "items": 0,
        "value": 0.0,
        "low_stock": 0,
        "out_of_stock": 0,
    }
    for record in records:
        summary["products"] += 1
        summary["items"] += record.stock_quantity
        summary["value"] += record.unit_price * record.stock_quantity
        status = stock_status(record.stock_quantity, threshold)
        if status == STOCK_LOW:
            summary["low_stock"] += 1
        elif status == STOCK_OUT:
            summary["out_of_stock"] += 1
    return summary


def filter_by_availability(records: Iterable, availability: str, threshold: int) -> list:
    """Keep records matching one of: all, available, low, out."""
    if availability == "all":
        return list(records)
    if availability == "available":
        return [r for r in records if r.stock_quantity > 0]
    if availability == "low":
        return [r for r in records if stock_status(r.stock_quantity, threshold) == STOCK_LOW]
    if availability == "out":
        return [r for r in records if r.stock_quantity == 0]
    raise ValueError(f"Unknown availability filter: {availability}")


# ============================================================================
# Party metrics
# ============================================================================

def customer_metrics(customers: Iterable[Customer]) -> dict:
    count = 0
    revenue = 0.0
    for customer in customers:
        count += 1
        revenue += customer.total_purchases
    return {
        "customers": count,
        "revenue": revenue,
        "average_purchase": _average(revenue, count),
    }


def supplier_metrics(suppliers: Iterable[Supplier]) -> dict:
    count = 0
    rating_sum = 0.0
    top_rated = 0
    categories: Dict[str, None] = {}
    for supplier in suppliers:
        count += 1
        rating_sum += supplier.rating
        if supplier.rating >= TOP_RATED_SUPPLIER_MIN:
            top_rated += 1
        for category in supplier.products:
            categories.setdefault(category, None)
    return {
        "suppliers": count,
        "average_rating": _average(rating_sum, count),
        "top_rated": top_rated,
        "categories": list(categories),
    }
