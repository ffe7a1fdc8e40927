"""An ordered collection of items with list-like helpers."""

from __future__ import annotations

import random
from functools import cmp_to_key
from typing import Any, Callable, Iterator


class Collection:
    """An ordered sequence of items compared by equality.

    Items passed to the constructor are kept as given; ``add`` skips items
    already present.
    """

    def __init__(self, *args: Any) -> None:
        self._items: list[Any] = list(args)

    def __contains__(self, item: Any) -> bool:
        return any(item == existing for existing in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Collection({', '.join(map(repr, self._items))})"

    def add(self, item: Any) -> None:
        """Append ``item`` unless an equal item is already present."""
        if item not in self:
            self._items.append(item)

    def remove(self, item: Any) -> Any:
        """Drop every item equal to ``item`` and return ``item``."""
        self._items = [existing for existing in self._items if not item == existing]
        return item

    def move_to(self, item: Any, collection: Collection) -> None:
        """Add ``item`` to ``collection`` and remove it from this one."""
        collection.add(item)
        self.remove(item)

    def map(self, mapper: Callable[[Any], Any]) -> Collection:
        return Collection(*(mapper(item) for item in self._items))

    def filter(self, predicate: Callable[[Any], bool]) -> Collection:
        return Collection(*(item for item in self._items if predicate(item)))

    def reduce(self, reducer: Callable[[Any, Any], Any]) -> Any:
        """Fold with ``reducer(item, accumulator)``, starting from the first item."""
        if not self._items:
            raise ValueError("reduce of an empty collection")
        accumulator = self._items[0]
        for item in self._items[1:]:
            accumulator = reducer(item, accumulator)
        return accumulator

    def is_empty(self) -> bool:
        return not self._items

    def first(self) -> Any:
        return self._items[0] if self._items else None

    def last(self) -> Any:
        return self._items[-1] if self._items else None

    def get(self, index: int) -> Any:
        """Return the item at ``index``, or None when out of range."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def index_of(self, item: Any) -> int:
        return next(
            (position for position, existing in enumerate(self._items) if item == existing),
            -1,
        )

    def find(self, predicate: Callable[[Any], bool]) -> Any:
        return next((item for item in self._items if predicate(item)), None)

    def find_index(self, predicate: Callable[[Any], bool]) -> int:
        return next(
            (position for position, item in enumerate(self._items) if predicate(item)),
            -1,
        )

    def sort_with(self, comparator: Callable[[Any, Any], bool]) -> Collection:
        """Return a de-duplicated copy ordered by the ``comparator(a, b)`` "less than" test."""

        def compare(a: Any, b: Any) -> int:
            if comparator(a, b):
                return -1
            if comparator(b, a):
                return 1
            return 0

        result = Collection()
        for item in self._items:
            result.add(item)
        result._items.sort(key=cmp_to_key(compare))
        return result

    def items(self) -> list[Any]:
        """Return the items as a new list."""
        return list(self._items)

    def shuffle(self) -> None:
        """Shuffle the items in place."""
        random.shuffle(self._items)