"""Iterators that walk a collection in several different orders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from copy import copy as _shallow_copy
from itertools import count, islice
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _require(container: Any) -> Any:
    if container is None:
        raise ValueError("container cannot be None")
    return container


class Order(Generic[T]):
    """Yields elements in insertion order, following the live container."""

    def __init__(self, container: Iterable[T]) -> None:
        self._container = _require(container)
        self._iterator: Iterator[T] = iter(container)
        self._position = 0

    def __iter__(self) -> Order[T]:
        return self

    def __next__(self) -> T:
        item = next(self._iterator)
        self._position += 1
        return item

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._container is other._container
            and self._position == other._position
        )

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Order[T]:
        """Return an independent iterator at the same position."""
        clone = type(self)(self._container)
        deque(islice(clone._iterator, self._position), maxlen=0)
        clone._position = self._position
        return clone


class _ArrangedOrder(Generic[T]):
    """Iterator over a snapshot of a container, rearranged once up front."""

    def __init__(self, container: Iterable[T]) -> None:
        items = list(_require(container))
        self._sequence: tuple[T, ...] = tuple(self._arrange(items))
        self._position = 0

    @staticmethod
    def _arrange(items: list[T]) -> Iterable[T]:
        return items

    def _advance(self) -> T:
        if self._position >= len(self._sequence):
            raise StopIteration
        item = self._sequence[self._position]
        self._position += 1
        return item

    def _same_as(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._sequence == other._sequence
            and self._position == other._position
        )


class AscendingOrder(_ArrangedOrder[T]):
    """Yields elements from smallest to largest."""

    def __init__(self, container: Iterable[T]) -> None:
        super().__init__(container)

    @staticmethod
    def _arrange(items: list[T]) -> Iterable[T]:
        return sorted(items)

    def __iter__(self) -> AscendingOrder[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def __eq__(self, other: object) -> bool:
        return self._same_as(other)

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> AscendingOrder[T]:
        """Return an independent iterator at the same position."""
        return _shallow_copy(self)


class DescendingOrder(_ArrangedOrder[T]):
    """Yields elements from largest to smallest."""

    def __init__(self, container: Iterable[T]) -> None:
        super().__init__(container)

    @staticmethod
    def _arrange(items: list[T]) -> Iterable[T]:
        return sorted(items)[::-1]

    def __iter__(self) -> DescendingOrder[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def __eq__(self, other: object) -> bool:
        return self._same_as(other)

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> DescendingOrder[T]:
        """Return an independent iterator at the same position."""
        return _shallow_copy(self)


class ReverseOrder(_ArrangedOrder[T]):
    """Yields elements in reverse insertion order."""

    def __init__(self, container: Iterable[T]) -> None:
        super().__init__(container)

    @staticmethod
    def _arrange(items: list[T]) -> Iterable[T]:
        return items[::-1]

    def __iter__(self) -> ReverseOrder[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def __eq__(self, other: object) -> bool:
        return self._same_as(other)

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> ReverseOrder[T]:
        """Return an independent iterator at the same position."""
        return _shallow_copy(self)


def _side_cross(ordered: Sequence[T]) -> Iterator[T]:
    left, right = 0, len(ordered) - 1
    while left <= right:
        yield ordered[left]
        left += 1
        if left <= right:
            yield ordered[right]
            right -= 1


class SideCrossOrder(_ArrangedOrder[T]):
    """Alternates between the smallest and largest remaining elements."""

    def __init__(self, container: Iterable[T]) -> None:
        super().__init__(container)

    @staticmethod
    def _arrange(items: list[T]) -> Iterable[T]:
        return _side_cross(sorted(items))

    def __iter__(self) -> SideCrossOrder[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def __eq__(self, other: object) -> bool:
        return self._same_as(other)

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> SideCrossOrder[T]:
        """Return an independent iterator at the same position."""
        return _shallow_copy(self)


def _middle_out_indices(size: int) -> Iterator[int]:
    if size == 0:
        return
    middle = size // 2
    yield middle
    for step in count(1):
        for index in (middle - step, middle + step):
            if not 0 <= index < size:
                return
            yield index


class MiddleOutOrder(_ArrangedOrder[T]):
    """Starts at the middle element, then alternates left and right outwards."""

    def __init__(self, container: Iterable[T]) -> None:
        super().__init__(container)

    @staticmethod
    def _arrange(items: list[T]) -> Iterable[T]:
        return [items[index] for index in _middle_out_indices(len(items))]

    def __iter__(self) -> MiddleOutOrder[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def __eq__(self, other: object) -> bool:
        return self._same_as(other)

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> MiddleOutOrder[T]:
        """Return an independent iterator at the same position."""
        return _shallow_copy(self)