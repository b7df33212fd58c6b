from decimal import Decimal

import pytest

from suite_money.domain.monetary.formatter import Formatter

# Constants
USD_FORMATTER = Formatter(fraction=2, decimal=".", thousand=",", grapheme="$", template="$1")
EUR_DE_FORMATTER = Formatter(fraction=2, decimal=",", thousand=".", grapheme="€", template="1 $")
YEN_FORMATTER = Formatter(fraction=0, decimal=".", thousand=",", grapheme="¥", template="$1")


@pytest.mark.parametrize(
    "formatter, amount, expected",
    [
        (USD_FORMATTER, 1, "$0.01"),
        (USD_FORMATTER, 100, "$1.00"),
        (USD_FORMATTER, 123456, "$1,234.56"),
        (USD_FORMATTER, 100000000, "$1,000,000.00"),
        (USD_FORMATTER, -1, "-$0.01"),
        (USD_FORMATTER, 0, "$0.00"),
        (EUR_DE_FORMATTER, 123456, "1.234,56 €"),
        (YEN_FORMATTER, 1234567, "¥1,234,567"),
        (YEN_FORMATTER, 0, "¥0"),
    ],
)
def test_format(formatter, amount, expected):
    assert formatter.format(amount) == expected


def test_format_without_thousand_separator():
    formatter = Formatter(fraction=3, decimal=".", thousand="", grapheme="X", template="1 $")
    assert formatter.format(12345678) == "12345.678 X"


@pytest.mark.parametrize(
    "formatter, amount, expected",
    [
        (USD_FORMATTER, 1, Decimal("0.01")),
        (USD_FORMATTER, 150, Decimal("1.50")),
        (USD_FORMATTER, -250, Decimal("-2.50")),
        (YEN_FORMATTER, 1234, Decimal("1234")),
    ],
)
def test_to_major_units(formatter, amount, expected):
    result = formatter.to_major_units(amount)

    assert isinstance(result, Decimal)
    assert result == expected
