from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP


def _group_indian(digits: str) -> str:
    """12345678 -> 1,23,45,678 (последние три цифры, дальше по две)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: float) -> str:
    """Рупии без копеек: 120000 -> ₹1,20,000."""
    # to_integral_value не ограничен точностью контекста, в отличие от quantize
    q = Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP)
    sign = "-" if q < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(int(q))))}"


def format_percentage(value: float, decimals: int = 2) -> str:
    return f"{value:.{decimals}f}%"
