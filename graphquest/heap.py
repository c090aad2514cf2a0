"""A max-priority heap keyed by integer priorities."""

from __future__ import annotations

from typing import Any


class MaxHeap:
    """Binary heap returning the item with the highest priority first."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def top(self) -> Any:
        """Return the item with the highest priority, or None when empty."""
        return self._entries[0][1] if self._entries else None

    def push(self, data: Any, priority: int) -> None:
        """Add an item with the given priority."""
        entries = self._entries
        entries.append((priority, data))
        now = len(entries) - 1
        while now > 0 and entries[(now - 1) // 2][0] < priority:
            entries[now] = entries[(now - 1) // 2]
            now = (now - 1) // 2
        entries[now] = (priority, data)

    def pop(self) -> Any:
        """Remove and return the item with the highest priority."""
        entries = self._entries
        if not entries:
            raise IndexError("pop from an empty heap")
        removed = entries[0][1]
        last = entries.pop()
        if not entries:
            return removed
        entries[0] = last
        priority = last[0]
        size = len(entries)
        now = 1
        while (now < size and entries[now][0] > priority) or (
            now + 1 < size and entries[now + 1][0] > priority
        ):
            if now + 1 < size and entries[now][0] < entries[now + 1][0]:
                now += 1
            parent = (now - 1) // 2
            entries[parent], entries[now] = entries[now], entries[parent]
            now = now * 2 + 1
        return removed