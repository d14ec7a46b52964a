# app/domains/withdrawals/balance.py

from decimal import Decimal
from typing import Iterable
from app.shared.money import to_decimal, total_of


class BalanceCalculator:
    """
    Cash available to the owner: everything rung up minus everything taken out.

    The check in ``validate_withdrawal`` only sees the ledgers as they were
    when they were read. Two registers can both pass it against the same
    balance.
    """

    def __init__(self, revenue_amounts: Iterable = (), withdrawal_amounts: Iterable = ()):
        self._revenue = total_of(revenue_amounts)
        self._withdrawals = total_of(withdrawal_amounts)

    def total_revenue(self) -> Decimal:
        return self._revenue

    def total_withdrawals(self) -> Decimal:
        return self._withdrawals

    def available_balance(self) -> Decimal:
        return self._revenue - self._withdrawals

    def validate_withdrawal(self, amount) -> Decimal:
        value = to_decimal(amount)
        if value is None or value <= 0:
            raise ValueError("Please enter a valid withdrawal amount")
        if value > self.available_balance():
            raise ValueError("Withdrawal amount cannot exceed available balance")
        return value

    def summary(self) -> dict:
        return {
            "total_revenue": float(self.total_revenue()),
            "total_withdrawals": float(self.total_withdrawals()),
            "available_balance": float(self.available_balance()),
        }
