from pathlib import Path

import pandas as pd
import pytest

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.money import Money
from suite_money.utils.currency_table import currencies_from_dataframe, load_currencies_csv, register_currencies_from_dataframe

# CSV file used in this test module
CSV_FILE_NAME = "demo_currencies.csv"
CSV_PATH = Path(__file__).with_name(CSV_FILE_NAME)

TEST_CODES = ("TSTA", "TSTB", "TSTC")


@pytest.fixture(autouse=True)
def clean_registry():
    yield
    for code in TEST_CODES:
        Currency.unregister(code)


def test_currencies_from_dataframe_with_all_columns():
    df = pd.DataFrame(
        {
            "code": ["tsta", "TSTB"],
            "fraction": [2, 0],
            "grapheme": ["A$", "B"],
            "template": ["$1", "1 $"],
            "decimal": [".", "."],
            "thousand": [",", ""],
        }
    )

    currencies = currencies_from_dataframe(df)

    assert currencies == [Currency("TSTA", 2, "A$", "$1", ".", ","), Currency("TSTB", 0, "B", "1 $", ".", "")]
    # Building does not register
    assert not Currency.is_registered("TSTA")


def test_optional_columns_fall_back_to_defaults():
    df = pd.DataFrame({"code": ["TSTC"], "fraction": ["3"], "grapheme": [float("nan")]})

    (currency,) = currencies_from_dataframe(df)

    assert currency == Currency("TSTC", 3, "", "1 $", ".", ",")


def test_missing_required_columns_raises():
    with pytest.raises(ValueError, match="fraction"):
        currencies_from_dataframe(pd.DataFrame({"code": ["TSTA"]}))


def test_not_a_dataframe_raises():
    with pytest.raises(ValueError):
        currencies_from_dataframe([{"code": "TSTA", "fraction": 2}])


def test_invalid_fraction_raises():
    with pytest.raises(ValueError):
        currencies_from_dataframe(pd.DataFrame({"code": ["TSTA"], "fraction": ["two"]}))


def test_register_from_dataframe_rejects_conflicts_without_overwrite():
    df = pd.DataFrame({"code": ["TSTA", "USD"], "fraction": [2, 2]})

    with pytest.raises(ValueError):
        register_currencies_from_dataframe(df)

    # Nothing was registered because of the conflicting USD row
    assert not Currency.is_registered("TSTA")


def test_load_currencies_csv_registers_currencies():
    currencies = load_currencies_csv(CSV_PATH)

    assert [c.code for c in currencies] == ["TSTA", "TSTB"]
    assert Money(123456, "TSTA").display() == "A$1,234.56"
    assert Money(1234567, "TSTB").display() == "1234567 B"

    # Loading again needs overwrite
    with pytest.raises(ValueError):
        load_currencies_csv(CSV_PATH)
    assert len(load_currencies_csv(CSV_PATH, overwrite=True)) == 2
