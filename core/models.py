"""Value records for the showroom, warehouse, sales and parties."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.constants import SALE_COMPLETED


@dataclass(frozen=True)
class Measurements:
    width: str
    height: str
    depth: str


@dataclass(frozen=True)
class Product:
    """A furniture item shown in the showroom."""

    id: str
    name: str
    category: str
    price: float
    stock_quantity: int
    quality: str
    supplier: Optional[str] = None
    description: Optional[str] = None
    cost_price: Optional[float] = None
    color: str = ""
    measurements: Optional[Measurements] = None
    featured: bool = False

    def __post_init__(self):
        if self.stock_quantity < 0:
            raise ValueError(f"Stock cannot be negative: {self.name}")

    @property
    def unit_price(self) -> float:
        return self.price


@dataclass(frozen=True)
class WoodProduct:
    """Bulk wood stock held in the warehouse."""

    id: str
    name: str
    category: str
    supplier: str
    cost_price: float
    selling_price: float
    stock_quantity: int
    unit: str
    date_received: str
    description: Optional[str] = None

    def __post_init__(self):
        if self.cost_price < 0 or self.selling_price < 0:
            raise ValueError(f"Prices cannot be negative: {self.name}")
        if self.stock_quantity < 0:
            raise ValueError(f"Stock cannot be negative: {self.name}")

    @property
    def unit_price(self) -> float:
        return self.selling_price


@dataclass(frozen=True)
class SaleLine:
    product_id: str
    product_name: str
    quantity: int
    unit_price: float
    total: float


@dataclass(frozen=True)
class Sale:
    id: str
    customer_id: str
    customer_name: str
    lines: Tuple[SaleLine, ...]
    subtotal: float
    surcharge: float
    total: float
    payment_method: str
    date: str
    attendant_id: str
    attendant_name: str
    status: str = SALE_COMPLETED


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    phone: str
    address: str = ""
    email: Optional[str] = None
    total_purchases: float = 0.0
    last_purchase: Optional[str] = None


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str
    contact: str
    address: str = ""
    email: Optional[str] = None
    products: Tuple[str, ...] = field(default_factory=tuple)
    rating: float = 0.0


@dataclass(frozen=True)
class User:
    username: str
    name: str
    role: str
    password_hash: str
    email: str = ""
