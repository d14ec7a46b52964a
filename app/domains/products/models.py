# app/domains/products/models.py

from pydantic import BaseModel, Field
from typing import Optional


class ProductIn(BaseModel):
    code: Optional[str] = Field(None, description="Leave blank to auto-generate (P001, P002, ...)")
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)


class Product(BaseModel):
    id: str
    code: str
    name: str
    price: float
