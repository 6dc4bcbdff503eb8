"""Optional index into a list of items."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SelectionState:
    """The selected position in a list, or None when nothing is selected."""

    index: int | None = None

    def clear(self) -> None:
        self.index = None

    def next(self, max_count: int) -> None:
        """Move down one item, stopping at the last of max_count items."""
        if max_count == 0:
            return
        self.index = 0 if self.index is None else min(self.index + 1, max_count - 1)

    def prev(self) -> None:
        self.index = 0 if self.index is None else max(self.index - 1, 0)

    def auto_select_first_if_empty(self, has_items: bool) -> None:
        if self.index is None and has_items:
            self.index = 0