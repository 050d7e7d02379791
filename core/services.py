"""Table builders, search filters and form actions used by the Streamlit pages.

Form actions validate their input and return the notification to show.
They never write to the store.
"""
from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple
from zoneinfo import ZoneInfo

import pandas as pd

from core.analytics import filter_by_availability, stock_status
from core.models import Customer, Product, Sale, Supplier, WoodProduct
from core.validation import require_fields

# Kampala timezone
KAMPALA_TZ = ZoneInfo("Africa/Kampala")

EXPORT_FORMATS = ("pdf", "excel")

logger = logging.getLogger(__name__)


def today_iso() -> str:
    return datetime.now(KAMPALA_TZ).date().isoformat()


def _matches(query: str, *values: Optional[str]) -> bool:
    """Case-insensitive substring match against any of the values."""
    needle = query.casefold()
    return any(v and needle in v.casefold() for v in values)


# ============================================================================
# Tables
# ============================================================================

def products_frame(products: Iterable[Product], threshold: int) -> pd.DataFrame:
    """Return showroom products as a pandas DataFrame with value and status."""
    rows = [
        {
            "name": p.name,
            "category": p.category,
            "quality": p.quality,
            "price": p.price,
            "stock": p.stock_quantity,
            "value": p.price * p.stock_quantity,
            "status": stock_status(p.stock_quantity, threshold),
            "supplier": p.supplier or "",
            "description": p.description or "",
        }
        for p in products
    ]
    columns = ["name", "category", "quality", "price", "stock", "value",
               "status", "supplier", "description"]
    return pd.DataFrame(rows, columns=columns)


def wood_frame(wood_products: Iterable[WoodProduct], threshold: int) -> pd.DataFrame:
    rows = [
        {
            "name": w.name,
            "category": w.category,
            "supplier": w.supplier,
            "cost_price": w.cost_price,
            "selling_price": w.selling_price,
            "stock": w.stock_quantity,
            "unit": w.unit,
            "value": w.selling_price * w.stock_quantity,
            "status": stock_status(w.stock_quantity, threshold),
            "date_received": w.date_received,
        }
        for w in wood_products
    ]
    columns = ["name", "category", "supplier", "cost_price", "selling_price",
               "stock", "unit", "value", "status", "date_received"]
    return pd.DataFrame(rows, columns=columns)


def sales_frame(sales: Iterable[Sale]) -> pd.DataFrame:
    rows = [
        {
            "date": s.date,
            "customer": s.customer_name,
            "items": len(s.lines),
            "total": s.total,
            "payment": s.payment_method,
            "attendant": s.attendant_name,
            "status": s.status,
        }
        for s in sales
    ]
    columns = ["date", "customer", "items", "total", "payment", "attendant", "status"]
    return pd.DataFrame(rows, columns=columns)


def customers_frame(customers: Iterable[Customer]) -> pd.DataFrame:
    rows = [
        {
            "name": c.name,
            "phone": c.phone,
            "email": c.email or "",
            "address": c.address,
            "total_purchases": c.total_purchases,
            "last_purchase": c.last_purchase or "",
        }
        for c in customers
    ]
    columns = ["name", "phone", "email", "address", "total_purchases", "last_purchase"]
    return pd.DataFrame(rows, columns=columns)


def suppliers_frame(suppliers: Iterable[Supplier]) -> pd.DataFrame:
    rows = [
        {
            "name": s.name,
            "contact": s.contact,
            "email": s.email or "",
            "address": s.address,
            "products": ", ".join(s.products),
            "rating": s.rating,
        }
        for s in suppliers
    ]
    columns = ["name", "contact", "email", "address", "products", "rating"]
    return pd.DataFrame(rows, columns=columns)


def rollups_frame(rollups: Mapping[str, dict], columns: Sequence[str]) -> pd.DataFrame:
    """Turn an ordered rollup mapping into a DataFrame, keeping its order."""
    return pd.DataFrame(list(rollups.values()), columns=list(columns))


# ============================================================================
# Search filters
# ============================================================================

def search_products(
    products: Iterable[Product],
    query: str = "",
    category: str = "all",
    price_range: Optional[Tuple[float, float]] = None,
) -> List[Product]:
    result = []
    for p in products:
        if query and not _matches(query, p.name, p.description):
            continue
        if category != "all" and p.category != category:
            continue
        if price_range and not price_range[0] <= p.price <= price_range[1]:
            continue
        result.append(p)
    return result


def search_wood(
    wood_products: Iterable[WoodProduct],
    threshold: int,
    query: str = "",
    category: str = "all",
    supplier: str = "all",
    availability: str = "all",
) -> List[WoodProduct]:
    result = [
        w
        for w in wood_products
        if (not query or _matches(query, w.name, w.supplier))
        and (category == "all" or w.category == category)
        and (supplier == "all" or w.supplier == supplier)
    ]
    return filter_by_availability(result, availability, threshold)


def search_customers(customers: Iterable[Customer], query: str = "") -> List[Customer]:
    if not query:
        return list(customers)
    # Phone numbers are matched as typed
    return [
        c
        for c in customers
        if _matches(query, c.name, c.email) or query in c.phone
    ]


def search_suppliers(suppliers: Iterable[Supplier], query: str = "") -> List[Supplier]:
    if not query:
        return list(suppliers)
    return [s for s in suppliers if _matches(query, s.name, *s.products)]


def supplier_names(records: Iterable) -> List[str]:
    """Distinct supplier names referenced by products, sorted case-insensitively."""
    names = {r.supplier for r in records if r.supplier}
    return sorted(names, key=str.casefold)


# ============================================================================
# Form actions
# ============================================================================

def add_customer(data: Mapping[str, str]) -> Tuple[Customer, str]:
    """Validate a new customer form. Name and phone are required."""
    try:
        require_fields(data, ("name", "phone"),
                       "Please provide at least name and phone number")
    except ValueError:
        logger.warning("Rejected new customer: missing name or phone")
        raise
    customer = Customer(
        id=f"C-{uuid.uuid4().hex[:8]}",
        name=data["name"].strip(),
        phone=data["phone"].strip(),
        email=(data.get("email") or "").strip() or None,
        address=(data.get("address") or "").strip(),
    )
    logger.info("Customer form accepted: %s", customer.name)
    return customer, f"{customer.name} has been added successfully"


def add_supplier(data: Mapping[str, str]) -> Tuple[Supplier, str]:
    """Validate a new supplier form. Name and contact are required.

    `products` is a comma-separated list of supplied categories.
    """
    try:
        require_fields(data, ("name", "contact"),
                       "Please provide at least name and contact number")
    except ValueError:
        logger.warning("Rejected new supplier: missing name or contact")
        raise
    products = tuple(
        p.strip() for p in (data.get("products") or "").split(",") if p.strip()
    )
    supplier = Supplier(
        id=f"SP-{uuid.uuid4().hex[:8]}",
        name=data["name"].strip(),
        contact=data["contact"].strip(),
        email=(data.get("email") or "").strip() or None,
        address=(data.get("address") or "").strip(),
        products=products,
    )
    logger.info("Supplier form accepted: %s", supplier.name)
    return supplier, f"{supplier.name} has been added successfully"


def delete_customer(customer: Customer) -> str:
    logger.info("Customer delete requested: %s", customer.id)
    return f"{customer.name} has been removed from the system"


def delete_supplier(supplier: Supplier) -> str:
    logger.info("Supplier delete requested: %s", supplier.id)
    return f"{supplier.name} has been removed from the system"


def update_wood_stock(product: WoodProduct, quantity: int) -> str:
    """Validate a warehouse stock update and return the confirmation."""
    if int(quantity) <= 0:
        logger.warning("Rejected stock update for %s: quantity %s", product.id, quantity)
        raise ValueError(f"Quantity for {product.name} must be greater than zero")
    logger.info("Stock update for %s: %d %s", product.id, int(quantity), product.unit)
    return f"{product.name} stock updated to {int(quantity)} {product.unit}"


def export_report(fmt: str) -> str:
    """Report export is not generated; only the confirmation is returned."""
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt}")
    logger.info("Report export requested as %s", fmt)
    return f"Exporting report as {fmt.upper()}..."
