from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from decimal import Decimal, ROUND_FLOOR
from typing import Dict

from coinage.domain.item_stack import ItemStack, is_empty_kind
from coinage.domain.monetary.denomination import Denomination
from coinage.domain.monetary.errors import InvalidCurrencyError
from coinage.utils.collections.readonly_list import ReadOnlyList
from coinage.utils.numeric_tools import FloatLike, as_decimal, round_half_up

logger = logging.getLogger(__name__)


class Currency:
    """A currency whose value is carried by physical tokens (coins, bars, gems...).

    Internally every amount is an integer number of "cents", the smallest unit of the
    currency. Cents are converted into a display value (and back) only when talking to
    users, where 1 display unit = $unit cents.

    Denominations are registered once during setup and kept sorted by descending value.
    After setup the currency is read-only and safe to query from many threads.

    Attributes:
        name (str): Name of the currency.
        name_plural (str): Plural of the currency name.
        digits (int): Fractional digits supported; with 2 digits the smallest display value is 0.01.
        unit (int): Cents per display unit, always exactly 10 ** $digits.
    """

    # Class-level registry of named currencies
    _registry: Dict[str, "Currency"] = {}

    def __init__(self, name: str, name_plural: str, digits: int) -> None:
        """Initialize a Currency without any denominations.

        Args:
            name: Name of the currency.
            name_plural: Plural of the currency name.
            digits: Number of fractional decimal digits (>= 0).

        Raises:
            InvalidCurrencyError: If $digits is negative.
        """
        # Raise: a negative number of fractional digits has no meaning
        if digits < 0:
            raise InvalidCurrencyError(f"Cannot call `Currency.__init__` because $digits ({digits}) < 0", digits=digits)

        self._name = name
        self._name_plural = name_plural
        self._digits = int(digits)

        # Integer multiplication only, so $unit is exact for any $digits
        unit = 1
        for _ in range(self._digits):
            unit *= 10
        self._unit = unit

        self._denominations: list[Denomination] = []

    # region Properties

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def name_plural(self) -> str:
        """Get the plural currency name."""
        return self._name_plural

    @property
    def digits(self) -> int:
        """Get the number of fractional digits."""
        return self._digits

    @property
    def unit(self) -> int:
        """Get the number of cents per display unit."""
        return self._unit

    # endregion

    # region Denominations

    def add_denomination(self, kind: Hashable, display_value: FloatLike, name: str = "", name_plural: str = "") -> Denomination:
        """Register a token kind worth $display_value (in display units) per token.

        Not thread-safe: all registrations have to happen before concurrent querying starts.

        Args:
            kind: Descriptor of the token type.
            display_value: Value of one token in display units; rounded to whole cents.
            name: Singular display name, or empty to hide the denomination from `format`.
            name_plural: Plural display name.

        Returns:
            Denomination: The registered denomination.

        Raises:
            InvalidDenominationError: If the resulting cent value is negative.
        """
        denomination = Denomination(kind, self.cent_value(display_value), name, name_plural)

        # Registration is rare, a stable re-sort keeps equal values in insertion order
        self._denominations.append(denomination)
        self._denominations.sort()

        logger.debug(f"Currency '{self._name}' added denomination {denomination}; {len(self._denominations)} denomination(s) registered")
        return denomination

    def denominations(self) -> ReadOnlyList[Denomination]:
        """Get a snapshot of the denominations, in order of descending value.

        Returns:
            ReadOnlyList[Denomination]: Snapshot that does not change with later registrations.
        """
        return ReadOnlyList(self._denominations)

    def denomination_of(self, kind: Hashable) -> Denomination | None:
        """Find the denomination of $kind.

        The most valuable match wins when the same kind was registered more than once.

        Returns:
            Denomination | None: The matching denomination, or None if $kind is not part of this currency.
        """
        for denomination in self._denominations:
            if denomination.is_denomination_of(kind):
                return denomination
        return None

    # endregion

    # region Valuation

    def value(self, kind: Hashable, quantity: int) -> int:
        """Get the value in cents of $quantity tokens of $kind.

        Unknown token kinds are worthless in this currency, so they yield 0 instead of an error.

        Args:
            kind: Token type descriptor; None or `NO_ITEM` stand for an absent item.
            quantity: Number of tokens.

        Returns:
            int: Total value in cents.
        """
        if quantity == 0 or is_empty_kind(kind):
            return 0

        denomination = self.denomination_of(kind)
        if denomination is None:
            return 0
        return denomination.value * quantity

    def stack_value(self, stack: ItemStack | None) -> int:
        """Get the value in cents of an item stack; None and empty stacks are worth 0."""
        if stack is None:
            return 0
        return self.value(stack.kind, stack.amount)

    def total_value(self, stacks: Iterable[ItemStack | None]) -> int:
        """Get the summed value in cents of all $stacks (e.g. the content of an inventory)."""
        return sum(self.stack_value(stack) for stack in stacks)

    # endregion

    # region Conversion

    def display_value(self, cents: int) -> float:
        """Convert an amount in cents to display units."""
        return cents / self._unit

    def cent_value(self, display_value: FloatLike) -> int:
        """Convert an amount in display units to cents, rounding to the nearest cent (ties away from zero).

        Raises:
            ValueError: If $display_value is infinite or NaN.
        """
        return round_half_up(as_decimal(display_value) * self._unit)

    # endregion

    # region Formatting

    def format(self, format_pattern: str, value: FloatLike) -> str:
        """Format $value (display units) as a list of denomination counts.

        Greedy decomposition from the most valuable denomination down, e.g.
        "3 gold, 5 silver, 12.00 copper". All denominations but the last one print a whole
        count. The last denomination prints the rest of the amount through $format_pattern,
        which may therefore show a fraction. The arithmetic runs in `Decimal`, so amounts
        like 0.3 split into exactly 3 tokens of 0.1.

        Rules, for each denomination in descending order:
        - Unnamed denominations and denominations worth 0 are skipped.
        - A denomination is printed when the remaining amount is strictly greater than its
          value. The last denomination is also printed when nothing was printed yet, so the
          output is never empty as long as the last denomination has a name and a value.
        - The singular name is used when the printed amount is exactly 1, i.e. when the
          text equals what the pattern prints for 1 (with "%.0f", 1.4 prints "1 penny").

        Args:
            format_pattern: printf-style pattern for the last denomination amount, e.g. "%.2f".
                Applied with the `%` operator; any other text in it is printed as is.
            value: Amount in display units.

        Returns:
            str: Segments joined with ", ", or "" if no denomination was printed.

        Raises:
            ValueError: If $value is infinite or NaN.
        """
        remaining = as_decimal(value)

        # Raise: infinity and NaN cannot be split into tokens
        if not remaining.is_finite():
            raise ValueError(f"Cannot call `Currency.format` because $value ({value}) is not finite")

        segments: list[str] = []
        last_index = len(self._denominations) - 1
        unit = Decimal(self._unit)

        for index, denomination in enumerate(self._denominations):
            if not denomination.has_name():
                continue

            denomination_display_value = Decimal(denomination.value) / unit
            if denomination_display_value == 0:
                logger.debug(f"Currency '{self._name}' skipped zero-value denomination '{denomination.name}' in `format`")
                continue

            is_last = index == last_index
            if not ((is_last and not segments) or remaining > denomination_display_value):
                continue

            quotient = remaining / denomination_display_value
            count = quotient.to_integral_value(rounding=ROUND_FLOOR)
            remaining -= count * denomination_display_value

            if is_last:
                amount_text = format_pattern % float(quotient)
                is_single = amount_text == format_pattern % 1.0
            else:
                amount_text = str(int(count))
                is_single = count == 1

            label = denomination.name if is_single else denomination.name_plural
            segments.append(f"{amount_text} {label}")

        return ", ".join(segments)

    # endregion

    # region Registry

    @classmethod
    def register(cls, currency: Currency, overwrite: bool = False) -> None:
        """Register a currency under its name.

        Args:
            currency (Currency): The currency to register.
            overwrite (bool): Whether to replace an already registered currency of the same name.

        Raises:
            ValueError: If the name is taken and $overwrite is False.
            TypeError: If $currency is not a Currency instance.
        """
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.name in cls._registry and not overwrite:
            raise ValueError(f"Currency with name '{currency.name}' already exists in registry. Use overwrite=True to replace it.")

        cls._registry[currency.name] = currency
        logger.debug(f"Registered Currency '{currency.name}'")

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove the currency named $name from the registry, if present."""
        cls._registry.pop(name, None)

    @classmethod
    def from_name(cls, name: str) -> Currency:
        """Get a registered currency by name.

        Raises:
            ValueError: If no currency of that name is registered.
        """
        if name not in cls._registry:
            raise ValueError(f"Currency with name '{name}' not found in registry. Available currencies: {list(cls._registry.keys())}")
        return cls._registry[name]

    # endregion

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._name}', '{self._name_plural}', {self._digits}, denominations={len(self._denominations)})"
