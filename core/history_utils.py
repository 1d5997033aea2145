# core/history_utils.py
from __future__ import annotations
from typing import Iterator, List, Tuple


class PasswordHistory:
    """
    Recently generated passwords, most recent first.
    - add(): duplicates are ignored (no reordering); oldest entries fall off past capacity.
    - remove_at(): out-of-range indexes are ignored.
    Lives only in memory for one browser session.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self.capacity = capacity
        self._items: List[str] = []

    def add(self, password: str) -> bool:
        if password in self._items:
            return False
        self._items.insert(0, password)
        del self._items[self.capacity:]
        return True

    def remove_at(self, index: int) -> None:
        if 0 <= index < len(self._items):
            del self._items[index]

    def clear(self) -> None:
        self._items.clear()

    def items(self) -> Tuple[str, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def __contains__(self, password: object) -> bool:
        return password in self._items
