from decimal import Decimal

import pytest

from coinage.utils.numeric_tools import as_decimal, round_half_up


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, 0),
        (2.4, 2),
        (2.5, 3),
        (3.5, 4),
        (-2.5, -3),
        (0.49999999999999994, 0),
        (2.675, 3),
        (-2.6, -3),
        ("1.5", 2),
        (Decimal("7.49"), 7),
    ],
)
def test_round_half_up(value, expected):
    result = round_half_up(value)

    assert result == expected
    assert isinstance(result, int)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), Decimal("Infinity")])
def test_round_half_up_rejects_non_finite(value):
    with pytest.raises(ValueError, match="is not finite"):
        round_half_up(value)


def test_as_decimal_uses_shortest_float_repr():
    assert as_decimal(0.1) == Decimal("0.1")
    assert as_decimal(Decimal("2.50")) == Decimal("2.50")
    assert as_decimal(3) == Decimal("3")
