"""Sale in progress: cart lines, delivery surcharge and checkout."""
from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Dict, Mapping, Optional

from core.constants import DELIVERY_SURCHARGE_RATE, SALE_COMPLETED
from core.models import Customer, Product, Sale, SaleLine
from core.validation import EmptyCartError, require_fields

logger = logging.getLogger(__name__)

STATE_EMPTY = "empty"
STATE_BUILDING = "building"
STATE_SUBMITTED = "submitted"


def calculate_totals(
    items: Mapping[str, int], prices: Mapping[str, float], delivery: bool
) -> dict:
    """Subtotal, delivery surcharge and total for a cart.

    A product id missing from `prices` counts as price 0.
    """
    subtotal = sum(prices.get(pid, 0) * qty for pid, qty in items.items())
    surcharge = subtotal * DELIVERY_SURCHARGE_RATE if delivery else 0
    return {"subtotal": subtotal, "surcharge": surcharge, "total": subtotal + surcharge}


class SaleDraft:
    """Cart and customer details for the sale being built at the counter.

    Lines are keyed by product id in insertion order; a line never holds a
    zero quantity.
    """

    def __init__(self):
        self.items: Dict[str, int] = {}
        self.state = STATE_EMPTY
        self.delivery = False
        self.payment_method = "cash"
        self._reset_customer()

    def _reset_customer(self):
        self.customer_id: Optional[str] = None
        self._selected = None
        self.customer_name = ""
        self.customer_phone = ""
        self.customer_address = ""

    def _refresh_state(self):
        if self.items:
            self.state = STATE_BUILDING
        elif self.state == STATE_BUILDING:
            self.state = STATE_EMPTY

    def add_item(self, product_id: str, quantity: int = 1) -> None:
        if product_id in self.items:
            self.update_quantity(product_id, self.items[product_id] + quantity)
            return
        if quantity > 0:
            self.items[product_id] = quantity
        self._refresh_state()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.items.pop(product_id, None)
        elif product_id in self.items:
            self.items[product_id] = quantity
        self._refresh_state()

    def remove_item(self, product_id: str) -> None:
        self.update_quantity(product_id, 0)

    def select_customer(self, customer: Optional[Customer]) -> None:
        """Fill the customer fields from an existing customer, or clear them."""
        if customer is None:
            self._reset_customer()
            return
        self.customer_id = customer.id
        self.customer_name = customer.name
        self.customer_phone = customer.phone
        self.customer_address = customer.address or ""
        self._selected = (customer.name, customer.phone)

    def set_customer_details(self, name: str, phone: str, address: str = "") -> None:
        """Take the typed customer fields.

        Editing the name or phone of a selected customer turns the sale into
        one for a new customer.
        """
        if self.customer_id and (name, phone) != self._selected:
            self.customer_id = None
        self.customer_name = name
        self.customer_phone = phone
        self.customer_address = address

    def totals(self, prices: Mapping[str, float]) -> dict:
        return calculate_totals(self.items, prices, self.delivery)

    def submit(
        self,
        products: Mapping[str, Product],
        attendant_id: str,
        attendant_name: str,
        sale_date: Optional[str] = None,
    ) -> Sale:
        """Validate and turn the draft into a completed Sale.

        Raises MissingInformationError (or EmptyCartError) and leaves the
        draft untouched when the customer name/phone is missing or the cart
        is empty. On success the cart and customer fields are cleared.
        """
        try:
            require_fields(
                {"name": self.customer_name, "phone": self.customer_phone},
                ("name", "phone"),
                "Please fill in customer details",
            )
            if not self.items:
                raise EmptyCartError()
        except ValueError as e:
            logger.warning("Rejected sale by %s: %s", attendant_name, e)
            raise

        lines = []
        for pid, qty in self.items.items():
            product = products.get(pid)
            unit_price = product.price if product else 0
            name = product.name if product else pid
            lines.append(
                SaleLine(
                    product_id=pid,
                    product_name=name,
                    quantity=qty,
                    unit_price=unit_price,
                    total=unit_price * qty,
                )
            )
        subtotal = sum(line.total for line in lines)
        surcharge = subtotal * DELIVERY_SURCHARGE_RATE if self.delivery else 0
        sale = Sale(
            id=f"S-{uuid.uuid4().hex[:8]}",
            customer_id=self.customer_id or "new",
            customer_name=self.customer_name.strip(),
            lines=tuple(lines),
            subtotal=subtotal,
            surcharge=surcharge,
            total=subtotal + surcharge,
            payment_method=self.payment_method,
            date=sale_date or date.today().isoformat(),
            attendant_id=attendant_id,
            attendant_name=attendant_name,
            status=SALE_COMPLETED,
        )
        logger.info(
            "Sale %s completed by %s: %d line(s), total %.2f",
            sale.id,
            attendant_name,
            len(lines),
            sale.total,
        )

        self.items = {}
        self.delivery = False
        self._reset_customer()
        self.state = STATE_SUBMITTED
        return sale
