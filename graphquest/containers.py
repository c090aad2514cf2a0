"""Key/value containers matched by equality or by ordering predicates."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

Predicate = Callable[[Any, Any], bool]


@dataclass
class MapPair:
    """A key with its associated value."""

    key: Any
    value: Any


def sorted_insert(items: list[Any], value: Any, lower_than: Predicate) -> None:
    """Insert value before the first element it is lower than.

    Elements that compare equal to value stay ahead of it.
    """
    position = next(
        (index for index, existing in enumerate(items) if lower_than(value, existing)),
        len(items),
    )
    items.insert(position, value)


class KeyedMap:
    """A map kept as a sequence of pairs.

    Keys match through ``is_equal``, or, for a sorted map, when neither key is
    lower than the other under ``lower_than``.  A sorted map keeps its pairs in
    key order.  With neither predicate given, keys match with ``==``.
    """

    def __init__(
        self,
        is_equal: Predicate | None = None,
        lower_than: Predicate | None = None,
    ) -> None:
        if is_equal is None and lower_than is None:
            is_equal = operator.eq
        self.is_equal = is_equal
        self.lower_than = lower_than
        self._pairs: list[MapPair] = []

    def _matches(self, pair: MapPair, key: Any) -> bool:
        if self.is_equal is not None and self.is_equal(pair.key, key):
            return True
        lower = self.lower_than
        return lower is not None and not lower(pair.key, key) and not lower(key, pair.key)

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair unless the key is already present."""
        if self.search(key) is None:
            self.insert_multi(key, value)

    def insert_multi(self, key: Any, value: Any) -> None:
        """Add a pair even when the key is already present."""
        pair = MapPair(key, value)
        lower = self.lower_than
        if lower is not None:
            sorted_insert(self._pairs, pair, lambda a, b: lower(a.key, b.key))
        else:
            self._pairs.append(pair)

    def search(self, key: Any) -> MapPair | None:
        """Return the first pair whose key matches, or None."""
        return next((pair for pair in self._pairs if self._matches(pair, key)), None)

    def remove(self, key: Any) -> MapPair | None:
        """Remove and return the first pair whose key matches, or None."""
        pair = self.search(key)
        if pair is not None:
            self._pairs.remove(pair)
        return pair

    def clear(self) -> None:
        """Remove every pair."""
        self._pairs.clear()

    def __iter__(self) -> Iterator[MapPair]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)