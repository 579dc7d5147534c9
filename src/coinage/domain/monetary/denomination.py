from __future__ import annotations

from collections.abc import Hashable

from coinage.domain.monetary.errors import InvalidDenominationError


class Denomination:
    """One kind of token of a currency together with its value in cents.

    Denominations are immutable. They order by descending $value, so sorting a list of
    denominations puts the most valuable one first (ties keep insertion order, as
    Python's sort is stable).

    Attributes:
        kind (Hashable): Descriptor of the token type this denomination stands for.
        value (int): Value of one token in cents.
        name (str): Singular display name. Empty string means "unnamed".
        name_plural (str): Plural display name.
    """

    __slots__ = ("_kind", "_value", "_name", "_name_plural")

    def __init__(self, kind: Hashable, value: int, name: str = "", name_plural: str = "") -> None:
        """Initialize a new Denomination.

        Args:
            kind: Descriptor of the token type (compared by equality).
            value: Value of one token in cents; must be >= 0.
            name: Singular display name; empty for denominations hidden from formatted output.
            name_plural: Plural display name.

        Raises:
            InvalidDenominationError: If $value is negative.
        """
        # Raise: a token cannot be worth less than nothing
        if value < 0:
            raise InvalidDenominationError(f"Cannot call `Denomination.__init__` because $value ({value}) < 0", value=value)

        self._kind = kind
        self._value = int(value)
        self._name = name or ""
        self._name_plural = name_plural or ""

    @property
    def kind(self) -> Hashable:
        """Get the token type descriptor."""
        return self._kind

    @property
    def value(self) -> int:
        """Get the value of one token in cents."""
        return self._value

    @property
    def name(self) -> str:
        """Get the singular display name (empty for unnamed denominations)."""
        return self._name

    @property
    def name_plural(self) -> str:
        """Get the plural display name."""
        return self._name_plural

    def has_name(self) -> bool:
        """Check whether this denomination appears in formatted output."""
        return self._name != ""

    def is_denomination_of(self, kind: Hashable) -> bool:
        """Check whether $kind is the token type of this denomination."""
        return self._kind == kind

    def __lt__(self, other) -> bool:
        """Order before $other when worth more (descending order by value)."""
        if not isinstance(other, Denomination):
            return NotImplemented
        return self._value > other._value

    def __gt__(self, other) -> bool:
        if not isinstance(other, Denomination):
            return NotImplemented
        return self._value < other._value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Denomination):
            return False
        return (self._kind, self._value, self._name, self._name_plural) == (other._kind, other._value, other._name, other._name_plural)

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __str__(self) -> str:
        label = self._name if self.has_name() else "<unnamed>"
        return f"{label} ({self._kind}) = {self._value}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._kind!r}, {self._value}, {self._name!r}, {self._name_plural!r})"
