"""Currency rounding and Indian numbering helpers"""

import math

from fynp_gateway.utils.numbers import is_finite

RUPEE = "₹"
LAKH = 100_000
CRORE = 10_000_000


def round_currency(value: float) -> int:
    """Round half-up to a whole currency unit; non-finite values become 0"""
    if not is_finite(value):
        return 0
    return int(math.floor(value + 0.5))


def group_indian(amount: int) -> str:
    """
    Group digits per the Indian numbering system.

    The last three digits form one group, every group above it has two:
    585180 -> "5,85,180", 12345678 -> "1,23,45,678"
    """
    sign = "-" if amount < 0 else ""
    digits = str(abs(amount))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def format_inr(value: float) -> str:
    """Format as rupees with Indian grouping, e.g. ₹5,85,180"""
    return RUPEE + group_indian(round_currency(value))


def format_compact(value: float) -> str:
    """
    Short display form: ₹1.20Cr, ₹5.00L, ₹29K

    The unit is picked from the rounded figure, so a value that would
    display as ₹100K or ₹100.00L moves up to ₹1.00L or ₹1.00Cr.
    """
    amount = round_currency(value)
    # Thousands are also hundredths of a lakh
    thousands = round_currency(amount / 1000)

    if thousands >= 10_000:
        crore_hundredths = round_currency(amount / (CRORE / 100))
        return f"{RUPEE}{crore_hundredths // 100}.{crore_hundredths % 100:02d}Cr"
    if thousands >= 100:
        return f"{RUPEE}{thousands // 100}.{thousands % 100:02d}L"
    if amount >= 1000:
        return f"{RUPEE}{thousands}K"
    return f"{RUPEE}{amount}"
