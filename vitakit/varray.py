"""A growable array with optional element lifecycle hooks and sorted access."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import Any

Comparator = Callable[[Any, Any], int]


class VArray:
    """List-like container that can be kept sorted by a three-way comparator.

    ``sort_compar(a, b)`` orders two elements; ``search_compar(key, element)``
    compares a search key against an element and falls back to
    ``sort_compar``. ``init_func()`` creates a fresh element when none is
    supplied and ``destroy_func(element)`` is called for each element on
    :meth:`destroy`.
    """

    def __init__(
        self,
        sort_compar: Comparator | None = None,
        search_compar: Comparator | None = None,
        init_func: Callable[[], Any] | None = None,
        destroy_func: Callable[[Any], None] | None = None,
    ) -> None:
        self.sort_compar = sort_compar
        self.search_compar = search_compar
        self.init_func = init_func
        self.destroy_func = destroy_func
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"VArray({self._items!r})"

    def _new_element(self) -> Any:
        if self.init_func is None:
            return None
        element = self.init_func()
        if element is None:
            raise ValueError("element initialiser failed")
        return element

    def _sort_comparator(self) -> Comparator:
        if self.sort_compar is None:
            raise ValueError("no sort comparator set")
        return self.sort_compar

    def _search_comparator(self) -> Comparator:
        compar = self.search_compar or self.sort_compar
        if compar is None:
            raise ValueError("no search or sort comparator set")
        return compar

    def _insert_index(self, key: Any, compar: Comparator) -> int:
        low, high = 0, len(self._items)
        while low < high:
            middle = (low + high) // 2
            result = compar(key, self._items[middle])
            if result == 0:
                return middle
            if result > 0:
                low = middle + 1
            else:
                high = middle
        return low

    def push(self, element: Any = None) -> Any:
        """Append ``element`` (or a freshly initialised one) and return it."""
        if element is None:
            element = self._new_element()
        self._items.append(element)
        return element

    def insert(self, index: int, element: Any = None) -> Any:
        """Insert at ``index`` (0 to ``len``) and return the inserted element."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert index {index} out of range")
        if element is None:
            element = self._new_element()
        self._items.insert(index, element)
        return element

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty VArray")
        return self._items.pop()

    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"remove index {index} out of range")
        return self._items.pop(index)

    def index_of(self, element: Any) -> int:
        """Position of this very element object in the array."""
        for position, item in enumerate(self._items):
            if item is element:
                return position
        raise ValueError("element is not in the array")

    def sort(self) -> None:
        """Sort in place with the sort comparator."""
        self._items.sort(key=functools.cmp_to_key(self._sort_comparator()))

    def sorted_search(self, key: Any) -> Any:
        """Binary-search a sorted array; return the matching element or None."""
        compar = self._search_comparator()
        index = self._insert_index(key, compar)
        if index < len(self._items) and compar(key, self._items[index]) == 0:
            return self._items[index]
        return None

    def sorted_insert(self, element: Any, allow_dup: bool = True) -> Any:
        """Insert keeping sort order; return the element, or None if a
        duplicate was refused."""
        index = self._insert_index(element, self._sort_comparator())
        if (
            not allow_dup
            and index < len(self._items)
            and self._search_comparator()(element, self._items[index]) == 0
        ):
            return None
        return self.insert(index, element)

    def sorted_search_or_insert(self, key: Any) -> tuple[Any, bool]:
        """Find the element matching ``key`` or insert a new one in its place.

        Returns the element and whether it already existed.
        """
        compar = self._search_comparator()
        index = self._insert_index(key, compar)
        if index < len(self._items) and compar(key, self._items[index]) == 0:
            return self._items[index], True
        return self.insert(index, None), False

    def destroy(self) -> None:
        """Run the destroy hook on every element and empty the array."""
        if self.destroy_func is not None:
            for item in self._items:
                self.destroy_func(item)
        self._items = []

    def extract(self) -> list[Any]:
        """Hand over the elements as a list and leave the array empty."""
        items, self._items = self._items, []
        return items