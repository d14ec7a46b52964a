# app/domains/withdrawals/models.py

import datetime
from pydantic import BaseModel
from typing import Optional


class WithdrawalIn(BaseModel):
    withdrawal_name: str
    amount: Optional[float] = None
    withdrawal_date: Optional[datetime.date] = None
