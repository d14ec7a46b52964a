# app/domains/reports/models.py

from pydantic import BaseModel, Field
from typing import List, Optional


class ItemEdit(BaseModel):
    item_id: str
    quantity: Optional[int] = Field(None, gt=0)
    price: Optional[float] = Field(None, ge=0)
    product_name: Optional[str] = None


class TransactionItemsUpdate(BaseModel):
    items: List[ItemEdit]
