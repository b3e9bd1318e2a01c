from __future__ import annotations

from typing import List, Optional

from domain.models import Graph


class HighlightHistory:
    def __init__(self) -> None:
        self.entries: List[Graph] = []
        self.current_index: Optional[int] = None

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, highlight_set: Graph) -> None:
        self.entries.append(highlight_set)

    def record(self, highlight_set: Graph) -> int:
        self.append(highlight_set)
        self.current_index = len(self.entries) - 1
        return self.current_index

    def current(self) -> Graph | None:
        if self.current_index is None:
            return None
        return self.entries[self.current_index]

    def step(self, offset: int) -> Graph | None:
        if self.current_index is None:
            target = 0 if offset > 0 else len(self.entries) - 1
        else:
            target = self.current_index + offset
        if not 0 <= target < len(self.entries):
            return None
        self.current_index = target
        return self.entries[target]

    def unset_cursor(self) -> None:
        self.current_index = None

    def clear(self) -> None:
        self.entries.clear()
        self.current_index = None
