"""An ordered list of card ids with a selection that follows the cards."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import ClassVar

from kanbantui.selection import SelectionState


@dataclass(frozen=True)
class TaskListId:
    """Identifies a task list: the whole board, or one column."""

    column_id: uuid.UUID | None = None

    ALL: ClassVar[TaskListId]

    @classmethod
    def column(cls, column_id: uuid.UUID) -> TaskListId:
        return cls(column_id)

    @property
    def is_all(self) -> bool:
        return self.column_id is None


TaskListId.ALL = TaskListId()


@dataclass
class TaskList:
    """Card ids shown in one list and which of them is selected."""

    id: TaskListId
    cards: list[uuid.UUID] = field(default_factory=list)
    selection: SelectionState = field(default_factory=SelectionState)

    @classmethod
    def with_cards(cls, list_id: TaskListId, cards: list[uuid.UUID]) -> TaskList:
        task_list = cls(list_id)
        task_list.update_cards(cards)
        return task_list

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def selected_index(self) -> int | None:
        return self.selection.index

    def update_cards(self, cards: list[uuid.UUID]) -> None:
        """Replace the cards, keeping the selected card selected where it remains."""
        current = self.selected_card_id()
        self.cards = list(cards)
        if current is not None:
            if not self.select_card(current):
                self.selection.index = 0 if self.cards else None
        elif self.cards and self.selection.index is not None:
            self.selection.index = min(self.selection.index, len(self.cards) - 1)

    def selected_card_id(self) -> uuid.UUID | None:
        idx = self.selection.index
        if idx is None or not 0 <= idx < len(self.cards):
            return None
        return self.cards[idx]

    def select_card(self, card_id: uuid.UUID) -> bool:
        """Select the card if present; report whether it was found."""
        try:
            self.selection.index = self.cards.index(card_id)
        except ValueError:
            return False
        return True

    def navigate_up(self) -> bool:
        """Move up; True when already at the top of a non-empty list."""
        was_at_top = self.selection.index in (0, None)
        self.selection.prev()
        return was_at_top and bool(self.cards)

    def navigate_down(self) -> bool:
        """Move down; True when already at the bottom of the list."""
        if not self.cards:
            return False
        was_at_bottom = self.selection.index == len(self.cards) - 1
        self.selection.next(len(self.cards))
        return was_at_bottom

    def clear(self) -> None:
        self.selection.clear()

    def is_empty(self) -> bool:
        return not self.cards

    def set_selected_index(self, index: int | None) -> None:
        """Select the index if it is in range; otherwise clear the selection."""
        if index is not None and 0 <= index < len(self.cards):
            self.selection.index = index
        else:
            self.selection.clear()