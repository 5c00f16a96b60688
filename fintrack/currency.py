"""Money conversion and rupee formatting helpers."""

from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

CURRENCY_SYMBOL = "₹"


def to_cents(amount: Decimal | int | str) -> int:
    """Convert a decimal amount to integer cents, rounding half-up."""
    value = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    return int(value * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal."""
    return (Decimal(cents) / 100).quantize(CENT)


def _group_indian(digits: str) -> str:
    # Last three digits, then groups of two: 12,34,567
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


def format_currency(amount: Decimal | int | str) -> str:
    """
    Format an amount as whole rupees with Indian digit grouping.

    >>> format_currency(Decimal("123456.40"))
    '₹1,23,456'
    """
    value = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(str(abs(value)))}"


def format_currency_compact(amount: Decimal | int | str) -> str:
    """Short form used on dashboard tiles: crore (Cr), lakh (L) and thousand (K)."""
    value = Decimal(str(amount))
    if value < 0:
        return "-" + format_currency_compact(-value)
    if value >= 10_000_000:
        return f"{CURRENCY_SYMBOL}{value / 10_000_000:.1f}Cr"
    elif value >= 100_000:
        return f"{CURRENCY_SYMBOL}{value / 100_000:.1f}L"
    elif value >= 1000:
        return f"{CURRENCY_SYMBOL}{value / 1000:.1f}K"
    return f"{CURRENCY_SYMBOL}{value:.0f}"
