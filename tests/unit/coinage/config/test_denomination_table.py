import pandas as pd
import pytest

from coinage.config.denomination_table import add_denominations_from_dataframe, currency_from_csv, currency_from_dataframe
from coinage.domain.monetary.currency import Currency
from coinage.domain.monetary.errors import InvalidDenominationError


def test_currency_from_dataframe():
    df = pd.DataFrame(
        {
            "kind": ["copper_coin", "gold_coin", "silver_coin"],
            "value": [0.01, 1, 0.1],
            "name": ["copper", "gold", "silver"],
        }
    )

    testee = currency_from_dataframe(df, "gold", "gold", 2)

    assert [d.value for d in testee.denominations()] == [100, 10, 1]
    assert [d.name_plural for d in testee.denominations()] == ["gold", "silver", "copper"]
    assert testee.value("silver_coin", 7) == 70
    assert testee.format("%.2f", 3.45) == "3 gold, 4 silver, 5.00 copper"


def test_missing_name_makes_denomination_unnamed():
    df = pd.DataFrame({"kind": ["bar", "crown_coin"], "value": [100, 10], "name": [None, "crown"], "name_plural": [None, "crowns"]})

    testee = currency_from_dataframe(df, "crown", "crowns", 0)

    assert not testee.denominations()[0].has_name()
    assert testee.value("bar", 1) == 100
    assert testee.format("%.0f", 120) == "12 crowns"


def test_missing_required_columns():
    df = pd.DataFrame({"kind": ["gold_coin"], "name": ["gold"]})

    with pytest.raises(ValueError, match="missing required columns: value"):
        currency_from_dataframe(df, "gold", "gold", 2)


def test_rejects_non_dataframe():
    with pytest.raises(ValueError, match="Expected a pandas DataFrame"):
        add_denominations_from_dataframe(Currency("gold", "gold", 2), [("gold_coin", 1)])


def test_rejects_empty_kind():
    df = pd.DataFrame({"kind": ["gold_coin", ""], "value": [1, 2]})

    with pytest.raises(ValueError, match="empty \\$kind"):
        currency_from_dataframe(df, "gold", "gold", 0)


def test_negative_value_in_table():
    df = pd.DataFrame({"kind": ["debt"], "value": [-1]})

    with pytest.raises(InvalidDenominationError):
        currency_from_dataframe(df, "gold", "gold", 0)


def test_currency_from_csv(tmp_path):
    csv_path = tmp_path / "denominations.csv"
    csv_path.write_text("kind,value,name,name_plural\n001,10,crown,crowns\n002,1,penny,pennies\nbar,100,,\n")

    testee = currency_from_csv(csv_path, "crown", "crowns", 0)

    assert [d.kind for d in testee.denominations()] == ["bar", "001", "002"]
    assert testee.value("001", 2) == 20
    assert testee.format("%.0f", 12) == "1 crown, 2 pennies"


def test_csv_with_non_numeric_value(tmp_path):
    csv_path = tmp_path / "denominations.csv"
    csv_path.write_text("kind,value,name\ncrown_coin,abc,crown\n")

    with pytest.raises(ValueError, match="is not a number"):
        currency_from_csv(csv_path, "crown", "crowns", 0)
