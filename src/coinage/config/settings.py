from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from coinage.config.denomination_table import currency_from_csv
from coinage.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)

ENV_NAME = "COINAGE_CURRENCY_NAME"
ENV_NAME_PLURAL = "COINAGE_CURRENCY_NAME_PLURAL"
ENV_DIGITS = "COINAGE_CURRENCY_DIGITS"
ENV_DENOMINATIONS_CSV = "COINAGE_DENOMINATIONS_CSV"
ENV_FORMAT_PATTERN = "COINAGE_FORMAT_PATTERN"

DEFAULT_NAME = "coin"
DEFAULT_DIGITS = 0
DEFAULT_FORMAT_PATTERN = "%.2f"


@dataclass(frozen=True)
class CurrencySettings:
    """Currency configuration, usually read from environment variables or a `.env` file.

    Attributes:
        name: Currency name.
        name_plural: Plural currency name.
        digits: Fractional digits of the currency.
        denominations_csv: Optional path of a denomination table (see `currency_from_csv`).
        format_pattern: Pattern for the lowest denomination in `Currency.format`.
    """

    name: str = DEFAULT_NAME
    name_plural: str = DEFAULT_NAME + "s"
    digits: int = DEFAULT_DIGITS
    denominations_csv: Path | None = None
    format_pattern: str = DEFAULT_FORMAT_PATTERN

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> CurrencySettings:
        """Read settings from the environment, after loading $env_file (or `.env`) if it exists.

        Variables already set in the environment win over values from the file.

        Raises:
            ValueError: If COINAGE_CURRENCY_DIGITS is not an integer.
        """
        load_dotenv(dotenv_path=env_file)

        name = os.environ.get(ENV_NAME, DEFAULT_NAME)
        name_plural = os.environ.get(ENV_NAME_PLURAL) or f"{name}s"

        raw_digits = os.environ.get(ENV_DIGITS, str(DEFAULT_DIGITS))
        try:
            digits = int(raw_digits)
        except ValueError as e:
            raise ValueError(f"Cannot call `CurrencySettings.from_env` because ${ENV_DIGITS} ('{raw_digits}') is not an integer") from e

        csv_path = os.environ.get(ENV_DENOMINATIONS_CSV)
        format_pattern = os.environ.get(ENV_FORMAT_PATTERN, DEFAULT_FORMAT_PATTERN)

        settings = cls(
            name=name,
            name_plural=name_plural,
            digits=digits,
            denominations_csv=Path(csv_path) if csv_path else None,
            format_pattern=format_pattern,
        )
        logger.debug(f"Loaded {settings}")
        return settings

    def build_currency(self) -> Currency:
        """Create the configured Currency, with denominations from $denominations_csv when set."""
        if self.denominations_csv is None:
            return Currency(self.name, self.name_plural, self.digits)
        return currency_from_csv(self.denominations_csv, self.name, self.name_plural, self.digits)
