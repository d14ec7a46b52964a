# app/domains/cashier/cart.py

import logging
import time
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional
from app.config.setting import settings
from app.shared.money import to_cents, to_decimal


@dataclass
class CartLine:
    product_id: str
    product_code: str
    product_name: str
    product_price: Decimal
    quantity: int
    display_price: Decimal
    display_name: str

    @property
    def subtotal(self) -> Decimal:
        return self.display_price * self.quantity


class Cart:
    """
    Line items being rung up at the register.

    Lines are keyed by product id. Display price and name are per-sale
    overrides; the catalog entry is never touched.
    """

    def __init__(self, cart_id: Optional[str] = None):
        self.id = cart_id or uuid.uuid4().hex
        self.lines: List[CartLine] = []

    def __len__(self):
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def find_line(self, line_id: str) -> Optional[CartLine]:
        for line in self.lines:
            if line.product_id == line_id:
                return line
        return None

    def _require_line(self, line_id: str) -> CartLine:
        line = self.find_line(line_id)
        if line is None:
            raise LookupError(f"Product {line_id} is not in the cart")
        return line

    def add_line(self, product: dict) -> CartLine:
        line = self.find_line(product["id"])
        if line is not None:
            line.quantity += 1
            return line

        price = to_cents(to_decimal(product["price"]) or Decimal(0))
        line = CartLine(
            product_id=product["id"],
            product_code=product["code"],
            product_name=product["name"],
            product_price=price,
            quantity=1,
            display_price=price,
            display_name=product["name"],
        )
        self.lines.append(line)
        return line

    def set_quantity(self, line_id: str, delta: int) -> Optional[CartLine]:
        """Shift a line's quantity by ``delta``; returns None once the line is gone."""
        line = self._require_line(line_id)
        line.quantity = max(0, line.quantity + delta)
        if line.quantity == 0:
            self.lines.remove(line)
            return None
        return line

    def remove_line(self, line_id: str):
        self.lines.remove(self._require_line(line_id))

    @staticmethod
    def _clean_price(price) -> Decimal:
        value = to_decimal(price)
        # Dibulatkan ke sen supaya subtotal dan total tetap cocok
        if value is not None:
            value = to_cents(value)
        if value is None or value <= 0:
            raise ValueError("Price must be greater than 0")
        return value

    @staticmethod
    def _clean_name(name: str) -> str:
        trimmed = (name or "").strip()
        if not trimmed:
            raise ValueError("Product name must not be empty")
        return trimmed

    def set_display_price(self, line_id: str, price) -> CartLine:
        line = self._require_line(line_id)
        line.display_price = self._clean_price(price)
        return line

    def set_display_name(self, line_id: str, name: str) -> CartLine:
        line = self._require_line(line_id)
        line.display_name = self._clean_name(name)
        return line

    def update_line(self, line_id: str, name: Optional[str] = None, price=None, delta: Optional[int] = None):
        """Apply several edits to one line; nothing changes unless all of them are valid."""
        line = self._require_line(line_id)
        new_name = self._clean_name(name) if name is not None else None
        new_price = self._clean_price(price) if price is not None else None

        if new_name is not None:
            line.display_name = new_name
        if new_price is not None:
            line.display_price = new_price
        if delta is not None:
            return self.set_quantity(line_id, delta)
        return line

    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), Decimal(0))

    def compute_change(self, payment_amount) -> Decimal:
        """Validate a payment against the current total and return the change due."""
        if self.is_empty:
            raise ValueError("Cart is empty")
        payment = to_decimal(payment_amount)
        total = self.total()
        # Nol atau kosong dianggap tidak valid, sama seperti kurang bayar
        if not payment or payment < total:
            raise ValueError("Invalid payment amount")
        return payment - total

    def clear(self):
        self.lines = []


class CartRegistry:
    """
    Open carts held in process memory, one per register session.

    A cart nobody has touched for ``idle_seconds`` is dropped the next time
    the registry is used.
    """

    def __init__(self, idle_seconds: Optional[float] = None):
        self.idle_seconds = idle_seconds if idle_seconds is not None else settings.cart_idle_minutes * 60
        self._carts: Dict[str, Cart] = {}
        self._touched: Dict[str, float] = {}

    def __len__(self):
        return len(self._carts)

    def _evict_idle(self):
        deadline = time.time() - self.idle_seconds
        for cart_id in [cid for cid, touched in self._touched.items() if touched < deadline]:
            del self._carts[cart_id]
            del self._touched[cart_id]
            logging.info(f"Dropped idle cart {cart_id}")

    def create(self) -> Cart:
        self._evict_idle()
        cart = Cart()
        self._carts[cart.id] = cart
        self._touched[cart.id] = time.time()
        return cart

    def get(self, cart_id: str) -> Cart:
        self._evict_idle()
        cart = self._carts.get(cart_id)
        if cart is None:
            raise LookupError(f"Cart {cart_id} not found")
        self._touched[cart_id] = time.time()
        return cart

    def discard(self, cart_id: str):
        if self._carts.pop(cart_id, None) is None:
            raise LookupError(f"Cart {cart_id} not found")
        self._touched.pop(cart_id, None)
