"""
Display formatting helpers used by the product cards.

Prices are shown in Indian rupees with en-IN digit grouping
(last three digits, then groups of two): 123456 -> ₹1,23,456.
"""

from decimal import ROUND_HALF_EVEN, Decimal
from typing import Union

CURRENCY_SYMBOL = "₹"

# toLocaleString('en-IN') keeps at most three fraction digits
MAX_FRACTION_DIGITS = 3


def group_en_in(digits: str) -> str:
    """Insert en-IN thousands separators into a string of digits."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(price: Union[int, float, Decimal]) -> str:
    """
    Format a price for display.

    Examples:
        >>> format_inr(59999)
        '₹59,999'
        >>> format_inr(125000)
        '₹1,25,000'
        >>> format_inr(499.5)
        '₹499.5'
    """
    value = Decimal(str(price)).quantize(
        Decimal(1).scaleb(-MAX_FRACTION_DIGITS), rounding=ROUND_HALF_EVEN
    )
    sign = "-" if value < 0 else ""
    integer_part, _, fraction = f"{abs(value):f}".partition(".")
    fraction = fraction.rstrip("0")

    text = group_en_in(integer_part)
    if fraction:
        text = f"{text}.{fraction}"
    return f"{sign}{CURRENCY_SYMBOL}{text}"
