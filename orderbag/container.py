"""A growable bag of comparable items with several iteration orders."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from orderbag.orders import (
    AscendingOrder,
    DescendingOrder,
    MiddleOutOrder,
    Order,
    ReverseOrder,
    SideCrossOrder,
)

T = TypeVar("T")


class Container(Generic[T]):
    """Holds items in insertion order; duplicates are allowed."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def add(self, item: T) -> None:
        """Append an item."""
        self._items.append(item)

    def remove(self, item: T) -> None:
        """Remove every occurrence of item; raise ValueError if there is none."""
        kept = [existing for existing in self._items if existing != item]
        if len(kept) == len(self._items):
            raise ValueError(f"object does not exist: {item!r}")
        self._items[:] = kept

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return "{" + ", ".join(str(item) for item in self._items) + "}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def copy(self) -> Container[T]:
        """Return an independent container with the same items."""
        return type(self)(self._items)

    def order(self) -> Order[T]:
        return Order(self)

    def ascending_order(self) -> AscendingOrder[T]:
        return AscendingOrder(self)

    def descending_order(self) -> DescendingOrder[T]:
        return DescendingOrder(self)

    def reverse_order(self) -> ReverseOrder[T]:
        return ReverseOrder(self)

    def side_cross_order(self) -> SideCrossOrder[T]:
        return SideCrossOrder(self)

    def middle_out_order(self) -> MiddleOutOrder[T]:
        return MiddleOutOrder(self)