from __future__ import annotations

from typing import TypeVar, Generic
from collections.abc import Iterable, Sequence, Iterator

T = TypeVar("T")


class ReadOnlyList(Generic[T], Sequence[T]):
    """Immutable snapshot of a sequence of items.

    The items are copied once on construction, so later changes of the source
    collection are not visible here and nothing here can change the source.

    Examples:
        >>> snapshot = ReadOnlyList([gold, silver])
        >>> snapshot[0]          # gold
        >>> editable = snapshot.to_list()
        >>> editable.clear()     # snapshot is untouched
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T]):
        self._items: tuple[T, ...] = tuple(items)

    def __getitem__(self, index: int | slice) -> T | list[T]:
        """Get item by index, or a new list for a slice."""
        if isinstance(index, slice):
            return list(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, ReadOnlyList):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._items)!r})"

    def to_list(self) -> list[T]:
        """Create a copy of the items as a regular (mutable) list.

        Returns:
            List[T]: A new list, independent of this snapshot.
        """
        return list(self._items)
