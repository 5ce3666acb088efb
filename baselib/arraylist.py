"""Growable list with an explicit capacity that grows in small steps."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["ARRAYLIST_MIN_EXPAND_SIZE", "ArrayList"]

# Smallest number of slots added when a full list has to grow.
ARRAYLIST_MIN_EXPAND_SIZE = 4


class ArrayList:
    """A sequence that tracks its capacity (``size``) apart from its length.

    When an element is added to a full list, the capacity grows by one eighth
    of its current value, and by at least :data:`ARRAYLIST_MIN_EXPAND_SIZE`.
    """

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._items: list[Any] = []
        self._size = size

    @property
    def size(self) -> int:
        """Number of slots currently reserved."""
        return self._size

    def copy(self) -> ArrayList:
        """Return an independent list with the same elements and capacity."""
        duplicate = ArrayList(self._size)
        duplicate._items = list(self._items)
        return duplicate

    def reserve(self, num_elems: int) -> None:
        """Add ``num_elems`` slots to the capacity."""
        if num_elems < 0:
            raise ValueError(f"cannot reserve a negative number of slots: {num_elems}")
        self._size += num_elems

    def realloc(self, new_size: int) -> None:
        """Set the capacity to ``new_size``, dropping elements that no longer fit."""
        if new_size < 0:
            raise ValueError(f"size must not be negative, got {new_size}")
        del self._items[new_size:]
        self._size = new_size

    def _expand_if_needed(self) -> None:
        if len(self._items) >= self._size:
            self.reserve(max(self._size >> 3, ARRAYLIST_MIN_EXPAND_SIZE))

    def append(self, element: Any) -> None:
        """Add ``element`` at the end, growing the capacity when full."""
        self._expand_if_needed()
        self._items.append(element)

    def extend(self, elements: Iterable[Any]) -> None:
        """Append every element of ``elements`` in order."""
        for element in list(elements):
            self.append(element)

    def pop(self) -> Any:
        """Remove and return the last element; an empty list gives ``None``."""
        if not self._items:
            return None
        return self._items.pop()

    def _check_insert_index(self, index: int) -> None:
        if index < 0 or index > len(self._items):
            raise IndexError(f"insert index {index} out of range 0..{len(self._items)}")

    def insert(self, index: int, element: Any) -> None:
        """Insert ``element`` before position ``index`` (0 to ``len(self)``)."""
        self._check_insert_index(index)
        self._expand_if_needed()
        self._items.insert(index, element)

    def insert_range(self, index: int, elements: Iterable[Any]) -> None:
        """Insert all of ``elements`` before position ``index``, keeping their order."""
        self._check_insert_index(index)
        for offset, element in enumerate(list(elements)):
            self._expand_if_needed()
            self._items.insert(index + offset, element)

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``; out of range gives ``None``."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items.pop(index)

    def remove_range(self, index: int, num_elems: int) -> list[Any]:
        """Remove up to ``num_elems`` elements starting at ``index`` and return them."""
        if index < 0 or index >= len(self._items) or num_elems <= 0:
            return []
        removed = self._items[index:index + num_elems]
        del self._items[index:index + num_elems]
        return removed

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def trim(self) -> None:
        """Shrink the capacity to the number of elements."""
        self.realloc(len(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayList):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r}, size={self._size})"