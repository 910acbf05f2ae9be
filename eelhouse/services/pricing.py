"""Order total calculation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from eelhouse.core.config import settings

CENT = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    """Round a money amount to cents, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    tax: Decimal
    delivery_fee: Decimal
    total: Decimal


def calculate_order_totals(
    lines: Iterable[tuple[Decimal, int]],
    *,
    tax_rate: Decimal | None = None,
    delivery_fee: Decimal | None = None,
) -> OrderTotals:
    """Calculate subtotal, tax, delivery fee and total for (unit_price, quantity) lines.

    Tax is rounded to cents before it is added, so the total always equals the
    sum of the three stored amounts.
    """
    rate = settings.tax_rate if tax_rate is None else tax_rate
    fee = settings.delivery_fee if delivery_fee is None else delivery_fee

    subtotal = quantize_money(sum((Decimal(price) * quantity for price, quantity in lines), Decimal("0")))
    tax = quantize_money(subtotal * rate)
    fee = quantize_money(Decimal(fee))
    return OrderTotals(subtotal=subtotal, tax=tax, delivery_fee=fee, total=subtotal + tax + fee)
