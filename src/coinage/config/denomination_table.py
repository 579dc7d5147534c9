from __future__ import annotations

# Build a Currency from a denomination table: one row per token kind.
# Columns: kind, value (display units), optional name and name_plural.

import logging
from pathlib import Path

import pandas as pd

from coinage.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("kind", "value")
OPTIONAL_COLUMNS = ("name", "name_plural")


def add_denominations_from_dataframe(currency: Currency, df: pd.DataFrame) -> int:
    """Register every row of $df as a denomination of $currency.

    Rows are registered in table order, so rows of equal value keep that order.

    Args:
    - $currency (Currency): Currency that receives the denominations.
    - $df (pd.DataFrame): Columns 'kind' and 'value' are required. 'name' and 'name_plural'
      are optional; an empty or missing 'name_plural' falls back to 'name'. Empty names make
      a denomination unnamed (valued, but hidden from formatted output).

    Returns:
        int: Number of registered denominations.

    Raises:
        ValueError: If $df is not a DataFrame, misses required columns or holds an empty kind.
        InvalidDenominationError: If a row has a negative value.
    """
    # Check: $df must be a pandas DataFrame
    if not isinstance(df, pd.DataFrame):
        raise ValueError(f"Expected a pandas DataFrame, but received {type(df).__name__}.")

    # Check: required columns present
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"The provided DataFrame is missing required columns: {', '.join(missing)}. Optional columns are: {', '.join(OPTIONAL_COLUMNS)}.")

    table = df.copy()
    for col in OPTIONAL_COLUMNS:
        if col not in table.columns:
            table[col] = ""
    table[list(OPTIONAL_COLUMNS)] = table[list(OPTIONAL_COLUMNS)].fillna("").astype(str)

    added = 0
    for row in table.itertuples(index=False):
        kind = row.kind
        # Raise: every denomination needs a token kind to match against
        if pd.isna(kind) or str(kind).strip() == "":
            raise ValueError(f"Cannot call `add_denominations_from_dataframe` because row #{added + 1} has an empty $kind")

        # Raise: the value has to be a number of display units
        try:
            value = float(row.value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Cannot call `add_denominations_from_dataframe` because $value ('{row.value}') of kind '{kind}' is not a number") from e
        if pd.isna(value):
            raise ValueError(f"Cannot call `add_denominations_from_dataframe` because $value of kind '{kind}' is missing")

        if isinstance(kind, str):
            kind = kind.strip()
        name = row.name.strip()
        name_plural = row.name_plural.strip() or name
        currency.add_denomination(kind, value, name, name_plural)
        added += 1

    return added


def currency_from_dataframe(df: pd.DataFrame, name: str, name_plural: str, digits: int) -> Currency:
    """Create a Currency and register all denominations of $df (see `add_denominations_from_dataframe`)."""
    currency = Currency(name, name_plural, digits)
    added = add_denominations_from_dataframe(currency, df)
    logger.info(f"Built Currency '{currency.name}' with {added} denomination(s) from DataFrame")
    return currency


def currency_from_csv(path: str | Path, name: str, name_plural: str, digits: int) -> Currency:
    """Create a Currency from a CSV denomination table.

    Token kinds are read as strings, so a kind like "001" keeps its leading zeros.
    """
    df = pd.read_csv(path, dtype={"kind": str, "name": str, "name_plural": str}, keep_default_na=False)
    currency = Currency(name, name_plural, digits)
    added = add_denominations_from_dataframe(currency, df)
    logger.info(f"Built Currency '{currency.name}' with {added} denomination(s) from CSV file '{path}'")
    return currency
