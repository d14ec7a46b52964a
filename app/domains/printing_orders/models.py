# app/domains/printing_orders/models.py

from pydantic import BaseModel


class PrintingOrderIn(BaseModel):
    customer_name: str
    phone_number: str
    order_name: str
    is_paid: bool = False
