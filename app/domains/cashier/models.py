# app/domains/cashier/models.py

from pydantic import BaseModel
from typing import List, Optional


class AddLineRequest(BaseModel):
    product_id: str


class UpdateLineRequest(BaseModel):
    delta: Optional[int] = None
    display_price: Optional[float] = None
    display_name: Optional[str] = None


class CheckoutRequest(BaseModel):
    payment_amount: Optional[float] = None


class CartLineView(BaseModel):
    product_id: str
    product_code: str
    display_name: str
    display_price: float
    quantity: int
    subtotal: float


class CartView(BaseModel):
    id: str
    lines: List[CartLineView]
    item_count: int
    total: float
