from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional

CENT = Decimal("0.01")


def to_decimal(value) -> Optional[Decimal]:
    """
    Parse a money value coming from a form field or the store.

    Floats go through ``str`` so 0.1 stays 0.1. Returns None for blanks and
    anything that is not a finite number.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            result = Decimal(text)
        except InvalidOperation:
            return None
    if not result.is_finite():
        return None
    return result


def total_of(values: Iterable) -> Decimal:
    return sum((to_decimal(v) or Decimal(0) for v in values), Decimal(0))


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_store(value: Decimal) -> float:
    return float(to_cents(value))


def format_rupiah(value) -> str:
    """Format an amount with Indonesian grouping, e.g. 1500 -> '1.500', 2.5 -> '2,5'."""
    amount = (to_decimal(value) or Decimal(0)).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    whole, _, fraction = f"{abs(amount):.2f}".partition(".")
    grouped = f"{int(whole):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    if fraction:
        return f"{sign}{grouped},{fraction}"
    return f"{sign}{grouped}"
