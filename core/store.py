"""Build the in-memory store the dashboard reads from.

The store is filled once from the fixtures below and is never written
back; form submissions only produce notifications.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from core.models import (
    Customer,
    Measurements,
    Product,
    Sale,
    SaleLine,
    Supplier,
    User,
    WoodProduct,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Store:
    products: Tuple[Product, ...]
    wood_products: Tuple[WoodProduct, ...]
    sales: Tuple[Sale, ...]
    customers: Tuple[Customer, ...]
    suppliers: Tuple[Supplier, ...]
    users: Tuple[User, ...]

    def products_by_id(self) -> Dict[str, Product]:
        return {p.id: p for p in self.products}

    def price_list(self) -> Dict[str, float]:
        return {p.id: p.price for p in self.products}


# sha256 of "manager123" and "attendant123"
_MANAGER_HASH = "866485796cfa8d7c0cf7111640205b83076433547577511d81f8030ae99ecea5"
_ATTENDANT_HASH = "ce6e1792f6b1062ad3f2b53acd5987a302fc07b4aff20363b4d4bafe67ab4ac7"

PRODUCTS = (
    Product(
        id="1",
        name="Royal Oak King Bed",
        category="bed",
        price=850000,
        cost_price=600000,
        stock_quantity=5,
        quality="premium",
        supplier="Kampala Timber Works",
        description="Solid oak king-size bed with carved headboard",
        color="Natural Oak",
        measurements=Measurements("193cm", "120cm", "213cm"),
        featured=True,
    ),
    Product(
        id="2",
        name="Modern L-Shape Sofa",
        category="sofa",
        price=1200000,
        cost_price=850000,
        stock_quantity=3,
        quality="premium",
        supplier="Jinja Furniture Makers",
        description="Seven-seater L-shape sofa in grey fabric",
        color="Grey",
        measurements=Measurements("300cm", "85cm", "200cm"),
        featured=True,
    ),
    Product(
        id="3",
        name="Mahogany Dining Table",
        category="table",
        price=650000,
        cost_price=450000,
        stock_quantity=8,
        quality="premium",
        supplier="Kampala Timber Works",
        description="Six-seater mahogany dining table",
        color="Dark Mahogany",
        measurements=Measurements("180cm", "76cm", "90cm"),
    ),
    Product(
        id="4",
        name="Executive Office Chair",
        category="chair",
        price=85000,
        cost_price=55000,
        stock_quantity=12,
        quality="standard",
        supplier="Jinja Furniture Makers",
        description="Padded swivel chair with armrests",
        color="Black",
        measurements=Measurements("65cm", "120cm", "65cm"),
    ),
    Product(
        id="5",
        name="Pine Kitchen Cupboard",
        category="cupboard",
        price=320000,
        cost_price=210000,
        stock_quantity=0,
        quality="standard",
        supplier="Mbarara Woodcraft",
        description="Four-door pine cupboard with shelves",
        color="Light Pine",
        measurements=Measurements("120cm", "180cm", "45cm"),
    ),
    Product(
        id="6",
        name="Three-Door Wardrobe",
        category="wardrobe",
        price=540000,
        cost_price=380000,
        stock_quantity=2,
        quality="economy",
        supplier="Mbarara Woodcraft",
        description="Three-door wardrobe with mirror",
        color="White",
        measurements=Measurements("150cm", "200cm", "60cm"),
    ),
)

WOOD_PRODUCTS = (
    WoodProduct(
        id="W1",
        name="Mvule Timber 2x4",
        category="timber",
        supplier="Kampala Timber Works",
        cost_price=12000,
        selling_price=16000,
        stock_quantity=240,
        unit="pieces",
        date_received="2024-01-10",
    ),
    WoodProduct(
        id="W2",
        name="Eucalyptus Poles 6m",
        category="poles",
        supplier="Masaka Pole Suppliers",
        cost_price=25000,
        selling_price=32000,
        stock_quantity=8,
        unit="poles",
        date_received="2024-01-12",
    ),
    WoodProduct(
        id="W3",
        name="Mahogany Planks",
        category="hardwood",
        supplier="Kampala Timber Works",
        cost_price=45000,
        selling_price=60000,
        stock_quantity=35,
        unit="planks",
        date_received="2024-01-08",
    ),
    WoodProduct(
        id="W4",
        name="Pine Boards 1x12",
        category="softwood",
        supplier="Mbarara Woodcraft",
        cost_price=9000,
        selling_price=13000,
        stock_quantity=0,
        unit="boards",
        date_received="2023-12-20",
    ),
)

SALES = (
    Sale(
        id="S1",
        customer_id="C1",
        customer_name="John Mukasa",
        lines=(SaleLine("4", "Executive Office Chair", 1, 85000, 85000),),
        subtotal=85000,
        surcharge=4250,
        total=89250,
        payment_method="cash",
        date="2024-01-15",
        attendant_id="U2",
        attendant_name="Mary Wanjiru",
    ),
    Sale(
        id="S2",
        customer_id="C2",
        customer_name="Sarah Nakato",
        lines=(
            SaleLine("4", "Executive Office Chair", 1, 85000, 85000),
            SaleLine("W3", "Mahogany Planks", 1, 77000, 77000),
        ),
        subtotal=162000,
        surcharge=8100,
        total=170100,
        payment_method="cheque",
        date="2024-01-16",
        attendant_id="U3",
        attendant_name="Peter Ochieng",
    ),
)

CUSTOMERS = (
    Customer(
        id="C1",
        name="John Mukasa",
        phone="+256 772 123 456",
        email="john.mukasa@example.com",
        address="Plot 12, Kampala Road",
        total_purchases=2450000,
        last_purchase="2024-01-15",
    ),
    Customer(
        id="C2",
        name="Sarah Nakato",
        phone="+256 701 987 654",
        address="Ntinda, Kampala",
        total_purchases=1850000,
        last_purchase="2024-01-16",
    ),
    Customer(
        id="C3",
        name="David Okello",
        phone="+256 753 555 210",
        email="d.okello@example.com",
        address="Gulu Town",
        total_purchases=650000,
    ),
)

SUPPLIERS = (
    Supplier(
        id="SP1",
        name="Kampala Timber Works",
        contact="+256 414 220 330",
        email="sales@kampalatimber.example.com",
        address="Industrial Area, Kampala",
        products=("timber", "hardwood", "bed", "table"),
        rating=4.5,
    ),
    Supplier(
        id="SP2",
        name="Jinja Furniture Makers",
        contact="+256 434 120 440",
        address="Main Street, Jinja",
        products=("sofa", "chair"),
        rating=4.0,
    ),
    Supplier(
        id="SP3",
        name="Mbarara Woodcraft",
        contact="+256 485 660 110",
        address="High Street, Mbarara",
        products=("cupboard", "wardrobe", "softwood"),
        rating=3.5,
    ),
    Supplier(
        id="SP4",
        name="Masaka Pole Suppliers",
        contact="+256 481 330 770",
        address="Masaka",
        products=("poles", "timber"),
        rating=4.2,
    ),
)

USERS = (
    User(
        username="manager",
        name="Grace Namutebi",
        role="manager",
        password_hash=_MANAGER_HASH,
        email="manager@mayondo.example.com",
    ),
    User(
        username="mary",
        name="Mary Wanjiru",
        role="attendant",
        password_hash=_ATTENDANT_HASH,
    ),
    User(
        username="peter",
        name="Peter Ochieng",
        role="attendant",
        password_hash=_ATTENDANT_HASH,
    ),
)


def init_store() -> Store:
    """Create the store from the bundled fixtures."""
    store = Store(
        products=PRODUCTS,
        wood_products=WOOD_PRODUCTS,
        sales=SALES,
        customers=CUSTOMERS,
        suppliers=SUPPLIERS,
        users=USERS,
    )
    logger.info(
        "Loaded %d products, %d wood items, %d sales",
        len(store.products),
        len(store.wood_products),
        len(store.sales),
    )
    return store
