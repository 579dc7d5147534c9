from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any


class _NoItem:
    """Type of the `NO_ITEM` sentinel: an empty slot, holding no token at all."""

    _instance: _NoItem | None = None

    def __new__(cls) -> _NoItem:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_ITEM"

    def __bool__(self) -> bool:
        return False


NO_ITEM = _NoItem()


def is_empty_kind(kind: Any) -> bool:
    """Check whether $kind denotes an absent item (None or `NO_ITEM`)."""
    return kind is None or kind is NO_ITEM


@dataclass(frozen=True, slots=True)
class ItemStack:
    """A quantity of tokens of one kind, as handed over by an inventory.

    Attributes:
        kind: Opaque, equality-comparable descriptor of the token type. Quantity never
            takes part in kind matching.
        amount: Number of tokens in the stack.
    """

    kind: Hashable
    amount: int = 1

    def __post_init__(self) -> None:
        # Raise: negative stacks do not exist in any inventory
        if self.amount < 0:
            raise ValueError(f"Cannot call `ItemStack.__init__` because $amount ({self.amount}) < 0")

    @classmethod
    def empty(cls) -> ItemStack:
        """Create a stack representing an empty slot."""
        return cls(NO_ITEM, 0)

    @property
    def is_empty(self) -> bool:
        return is_empty_kind(self.kind) or self.amount == 0

    def __str__(self) -> str:
        return f"{self.amount}x {self.kind}"
