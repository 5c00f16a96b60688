from decimal import Decimal

from fintrack.currency import (
    format_currency,
    format_currency_compact,
    from_cents,
    to_cents,
)


def test_cents_conversion():
    assert to_cents(Decimal("12.34")) == 1234
    assert to_cents("0.005") == 1
    assert to_cents(7) == 700
    assert from_cents(1234) == Decimal("12.34")
    assert str(from_cents(5)) == "0.05"


def test_format_currency_indian_grouping():
    assert format_currency(Decimal("0")) == "₹0"
    assert format_currency(Decimal("999")) == "₹999"
    assert format_currency(Decimal("1000")) == "₹1,000"
    assert format_currency(Decimal("123456.40")) == "₹1,23,456"
    assert format_currency(Decimal("12345678")) == "₹1,23,45,678"
    assert format_currency(Decimal("-2500.60")) == "-₹2,501"


def test_format_currency_compact():
    assert format_currency_compact(Decimal("950")) == "₹950"
    assert format_currency_compact(Decimal("2500")) == "₹2.5K"
    assert format_currency_compact(Decimal("150000")) == "₹1.5L"
    assert format_currency_compact(Decimal("23000000")) == "₹2.3Cr"


def test_format_currency_compact_negative():
    assert format_currency_compact(Decimal("-2500")) == "-₹2.5K"
    assert format_currency_compact(Decimal("-40")) == "-₹40"
