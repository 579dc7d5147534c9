from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Floats are converted via string, so 0.1 becomes Decimal("0.1") and not its binary expansion.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def round_half_up(value: DecimalLike) -> int:
    """Round to the nearest integer, ties going away from zero.

    Every conversion from display value to cents goes through this function, so
    registration-time and query-time conversions can never disagree.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Nearest integer; 2.5 -> 3, -2.5 -> -3, 0.49999999999999994 -> 0.

    Raises:
        ValueError: If $value is infinite or NaN.
    """
    decimal_value = as_decimal(value)

    # Raise: infinity and NaN have no nearest integer
    if not decimal_value.is_finite():
        raise ValueError(f"Cannot call `round_half_up` because $value ({value}) is not finite")

    return int(decimal_value.to_integral_value(rounding=ROUND_HALF_UP))
