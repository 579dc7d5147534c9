__version__ = "0.0.1"

from coinage.domain.item_stack import ItemStack, NO_ITEM
from coinage.domain.monetary.currency import Currency
from coinage.domain.monetary.denomination import Denomination
from coinage.domain.monetary.errors import InvalidCurrencyError, InvalidDenominationError

__all__ = [
    "Currency",
    "Denomination",
    "ItemStack",
    "NO_ITEM",
    "InvalidCurrencyError",
    "InvalidDenominationError",
]
