import pytest

from fincalc.services.formatting import format_currency, format_percentage


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (1000, "₹1,000"),
        (120000, "₹1,20,000"),
        (12345678, "₹1,23,45,678"),
        (1499.5, "₹1,500"),
        (-25000, "-₹25,000"),
    ],
)
def test_format_currency(amount, expected) -> None:
    assert format_currency(amount) == expected


def test_format_percentage() -> None:
    assert format_percentage(12) == "12.00%"
    assert format_percentage(7.256, decimals=1) == "7.3%"


def test_format_currency_beyond_decimal_precision() -> None:
    assert format_currency(10**30) == "₹10," + "00," * 13 + "000"
    assert format_currency(1e40).startswith("₹10,00,00")
