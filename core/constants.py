"""Project-wide constants and configuration helpers."""
import logging
from typing import Any, List

import streamlit as st

logger = logging.getLogger(__name__)

STORE_NAME = "Mayondo Wood & Furniture"
CURRENCY_DEFAULT = "UGX"

FURNITURE_CATEGORIES: List[str] = [
    "bed",
    "sofa",
    "table",
    "cupboard",
    "chair",
    "wardrobe",
]

WOOD_CATEGORIES: List[str] = [
    "timber",
    "poles",
    "hardwood",
    "softwood",
]

PAYMENT_METHODS: List[str] = ["cash", "cheque", "overdraft"]

SALE_COMPLETED = "completed"
SALE_PENDING = "pending"

ROLE_MANAGER = "manager"
ROLE_ATTENDANT = "attendant"
ROLES: List[str] = [ROLE_MANAGER, ROLE_ATTENDANT]

STOCK_OUT = "out of stock"
STOCK_LOW = "low stock"
STOCK_IN = "in stock"

# Furniture sells in single units, wood in bulk, hence the two thresholds
FURNITURE_LOW_STOCK_THRESHOLD_DEFAULT: int = 5
WOOD_LOW_STOCK_THRESHOLD_DEFAULT: int = 10

DELIVERY_SURCHARGE_RATE: float = 0.05
TOP_PRODUCTS_LIMIT: int = 5
TOP_RATED_SUPPLIER_MIN: float = 4.0

# Sidebar menu labels (keep in sync across app and sidebar)
MENU_DASHBOARD = "\U0001F4CA Dashboard"
MENU_SHOWROOM = "\U0001F6CB\ufe0f Showroom"
MENU_WAREHOUSE = "\U0001FAB5 Warehouse"
MENU_SALES = "\U0001F6D2 Sales"
MENU_CUSTOMERS = "\U0001F465 Customers"
MENU_SUPPLIERS = "\U0001F69A Suppliers"
MENU_REPORTS = "\U0001F4C8 Reports"


def get_setting(name: str, default: Any) -> Any:
    """Read an override from the `[settings]` table in secrets.toml.

    Falls back to `default` when there is no secrets file or no such key.
    """
    try:
        if "settings" in st.secrets and name in st.secrets["settings"]:
            value = st.secrets["settings"][name]
            return type(default)(value)
    except Exception:
        logger.debug("No override for setting %s, using default", name)
    return default


def furniture_low_stock_threshold() -> int:
    return get_setting(
        "furniture_low_stock_threshold", FURNITURE_LOW_STOCK_THRESHOLD_DEFAULT
    )


def wood_low_stock_threshold() -> int:
    return get_setting("wood_low_stock_threshold", WOOD_LOW_STOCK_THRESHOLD_DEFAULT)


def currency() -> str:
    return get_setting("currency", CURRENCY_DEFAULT)
