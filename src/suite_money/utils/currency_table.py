from __future__ import annotations

# Load currency descriptors from tabular data (pandas DataFrame or CSV file) and register them.

import logging
from pathlib import Path

import pandas as pd

from suite_money.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("code", "fraction")

# Defaults for optional columns (used when column is absent or the cell is empty)
OPTIONAL_COLUMN_DEFAULTS = {
    "grapheme": "",
    "template": "1 $",
    "decimal": ".",
    "thousand": ",",
}


def _cell_str(row: pd.Series, column: str) -> str:
    value = row.get(column, None)
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return OPTIONAL_COLUMN_DEFAULTS[column]
    value = str(value)
    # Empty thousand separator is meaningful (no grouping); other empty cells fall back
    if value == "" and column != "thousand":
        return OPTIONAL_COLUMN_DEFAULTS[column]
    return value


def currencies_from_dataframe(df: pd.DataFrame) -> list[Currency]:
    """Build `Currency` objects from $df, one per row.

    Input DataFrame has to meet these requirements:
    - Columns: code, fraction. Optional: grapheme, template, decimal, thousand.
    - $fraction must be an integer (or a string holding one) between 0 and 18.

    Args:
        df: Source data with one row per currency.

    Returns:
        list[Currency]: Currencies in row order.

    Raises:
        ValueError: If $df is not a DataFrame, misses required columns, or holds invalid values.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}. Please provide your data as a pandas DataFrame.")

    # Check: required columns present
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        missing_cols = ", ".join(sorted(missing))
        raise ValueError(f"The provided DataFrame is missing required columns: {missing_cols}. Please ensure your DataFrame contains these columns: code, fraction. Columns grapheme, template, decimal, thousand are optional.")

    currencies: list[Currency] = []
    for index, row in df.iterrows():
        try:
            fraction = int(row["fraction"])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot read currency in row {index} because $fraction ({row['fraction']!r}) is not an integer") from e

        currency = Currency(
            code=str(row["code"]),
            fraction=fraction,
            grapheme=_cell_str(row, "grapheme"),
            template=_cell_str(row, "template"),
            decimal=_cell_str(row, "decimal"),
            thousand=_cell_str(row, "thousand"),
        )
        currencies.append(currency)

    return currencies


def register_currencies_from_dataframe(df: pd.DataFrame, overwrite: bool = False) -> list[Currency]:
    """Build currencies from $df and register each of them.

    All rows are validated before anything is registered, so a bad row leaves the registry
    untouched.

    Raises:
        ValueError: If $df is invalid or a code is already registered and $overwrite is False.
    """
    currencies = currencies_from_dataframe(df)

    # Check: no conflicts with already registered currencies
    if not overwrite:
        conflicts = [c.code for c in currencies if Currency.is_registered(c.code)]
        if conflicts:
            raise ValueError(f"Cannot register currencies because codes {conflicts} already exist in registry. Use overwrite=True to replace them.")

    for currency in currencies:
        Currency.register(currency, overwrite=overwrite)

    logger.debug(f"Registered {len(currencies)} currencies from DataFrame")
    return currencies


def load_currencies_csv(path: str | Path, overwrite: bool = False) -> list[Currency]:
    """Read currency table from CSV file at $path and register it.

    Cells are read as strings without NA conversion, so an empty $thousand cell means
    "no grouping separator".
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    logger.debug(f"Loaded {len(df)} currency rows from '{path}'")
    return register_currencies_from_dataframe(df, overwrite=overwrite)
