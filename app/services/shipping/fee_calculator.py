"""
Fee Calculator
==============

Perhitungan ongkir murni, tanpa akses database:

    total_fee = base_cost + cost_per_kg * weight + additional_fee

Semua aritmatika memakai Decimal supaya nilai uang tidak kena floating-point drift.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

ZERO = Decimal('0')

def to_decimal(value: Any) -> Decimal:
    """Convert angka ke Decimal; float lewat str() supaya 0.1 tetap 0.1"""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError('Boolean is not a valid amount')
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValueError(f"Invalid amount: {value!r}") from e

def calculate_total_fee(base_cost: Any, cost_per_kg: Any, weight: Any,
                        additional_fee: Any = ZERO) -> Decimal:
    return (
        to_decimal(base_cost)
        + to_decimal(cost_per_kg) * to_decimal(weight)
        + to_decimal(additional_fee)
    )

def calculate_fee(method, weight: Any, zone: Optional[Any] = None) -> Decimal:
    """
    Hitung ongkir dari record metode dan zona.

    Zona yang tidak ada (None) menyumbang biaya tambahan nol.
    """
    additional_fee = zone.additional_fee if zone is not None else ZERO
    return calculate_total_fee(method.base_cost, method.cost_per_kg, weight, additional_fee)
