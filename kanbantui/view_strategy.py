"""Ways of arranging a board's cards into task lists: one flat list or one list per column."""

from __future__ import annotations

import abc
import uuid
from collections.abc import Sequence

from kanbantui.filter import BoardFilter
from kanbantui.models import Board, Card, Column
from kanbantui.selection import SelectionState
from kanbantui.sort import OrderedSorter, get_sorter_for_field
from kanbantui.task_list import TaskList, TaskListId


def _visible_cards(
    board: Board,
    all_cards: Sequence[Card],
    all_columns: Sequence[Column],
    active_sprint_filter: uuid.UUID | None,
    hide_assigned_cards: bool,
) -> list[Card]:
    """Cards of the board that pass the sprint filter and the assigned-card filter."""
    board_filter = BoardFilter(board.id, all_columns)
    return [
        card
        for card in all_cards
        if board_filter.matches(card)
        and (active_sprint_filter is None or card.sprint_id == active_sprint_filter)
        and not (hide_assigned_cards and card.sprint_id is not None)
    ]


def _board_sorter(board: Board) -> OrderedSorter:
    return OrderedSorter(get_sorter_for_field(board.task_sort_field), board.task_sort_order)


class ViewStrategy(abc.ABC):
    """Arranges the cards of a board into one or more task lists."""

    @abc.abstractmethod
    def active_task_list(self) -> TaskList | None:
        """The task list that navigation and selection act on."""

    @abc.abstractmethod
    def task_lists(self) -> list[TaskList]:
        """Every task list, in display order."""

    @abc.abstractmethod
    def navigate_left(self, select_last: bool = False) -> bool:
        """Move to the list on the left; report whether the active list changed."""

    @abc.abstractmethod
    def navigate_right(self, select_last: bool = False) -> bool:
        """Move to the list on the right; report whether the active list changed."""

    @abc.abstractmethod
    def refresh_task_lists(
        self,
        board: Board,
        all_cards: Sequence[Card],
        all_columns: Sequence[Column],
        active_sprint_filter: uuid.UUID | None = None,
        hide_assigned_cards: bool = False,
    ) -> None:
        """Rebuild the task lists from the current cards, keeping selections where possible."""


class FlatViewStrategy(ViewStrategy):
    """All of a board's cards in a single list."""

    def __init__(self) -> None:
        self._task_list = TaskList(TaskListId.ALL)

    def active_task_list(self) -> TaskList | None:
        return self._task_list

    def task_lists(self) -> list[TaskList]:
        return [self._task_list]

    def navigate_left(self, select_last: bool = False) -> bool:
        return False

    def navigate_right(self, select_last: bool = False) -> bool:
        return False

    def refresh_task_lists(
        self,
        board: Board,
        all_cards: Sequence[Card],
        all_columns: Sequence[Column],
        active_sprint_filter: uuid.UUID | None = None,
        hide_assigned_cards: bool = False,
    ) -> None:
        cards = _visible_cards(
            board, all_cards, all_columns, active_sprint_filter, hide_assigned_cards
        )
        ordered = _board_sorter(board).sort(cards)
        self._task_list.update_cards([card.id for card in ordered])


class _PerColumnViewStrategy(ViewStrategy):
    """One task list per column of the board, ordered by column position."""

    def __init__(self) -> None:
        self._column_lists: list[TaskList] = []
        self._active_column_index = 0

    @property
    def active_column_index(self) -> int:
        return self._active_column_index

    def _set_active_column_index(self, index: int) -> None:
        if 0 <= index < len(self._column_lists):
            self._active_column_index = index

    def active_task_list(self) -> TaskList | None:
        if 0 <= self._active_column_index < len(self._column_lists):
            return self._column_lists[self._active_column_index]
        return None

    def task_lists(self) -> list[TaskList]:
        return list(self._column_lists)

    def _enter_active_column(self, select_last: bool) -> None:
        task_list = self.active_task_list()
        if task_list is None:
            return
        if task_list.is_empty():
            task_list.clear()
        elif select_last:
            task_list.set_selected_index(len(task_list) - 1)
        elif task_list.selected_index is None:
            task_list.set_selected_index(0)

    def navigate_left(self, select_last: bool = False) -> bool:
        if self._active_column_index <= 0:
            return False
        self._active_column_index -= 1
        self._enter_active_column(select_last)
        return True

    def navigate_right(self, select_last: bool = False) -> bool:
        if self._active_column_index >= max(len(self._column_lists) - 1, 0):
            return False
        self._active_column_index += 1
        self._enter_active_column(select_last)
        return True

    def refresh_task_lists(
        self,
        board: Board,
        all_cards: Sequence[Card],
        all_columns: Sequence[Column],
        active_sprint_filter: uuid.UUID | None = None,
        hide_assigned_cards: bool = False,
    ) -> None:
        board_columns = sorted(
            (col for col in all_columns if col.board_id == board.id),
            key=lambda col: col.position,
        )
        visible = _visible_cards(
            board, all_cards, all_columns, active_sprint_filter, hide_assigned_cards
        )
        sorter = _board_sorter(board)
        previous = {task_list.id: task_list for task_list in self._column_lists}

        new_lists = []
        for column in board_columns:
            list_id = TaskListId.column(column.id)
            column_cards = sorter.sort(card for card in visible if card.column_id == column.id)
            task_list = TaskList(list_id)
            existing = previous.get(list_id)
            if existing is not None:
                task_list.selection = SelectionState(existing.selection.index)
            task_list.update_cards([card.id for card in column_cards])
            new_lists.append(task_list)

        self._column_lists = new_lists
        if self._active_column_index >= len(new_lists):
            self._active_column_index = max(len(new_lists) - 1, 0)


class GroupedViewStrategy(_PerColumnViewStrategy):
    """Cards grouped under column headings in a single panel."""

    def set_active_column_index(self, index: int) -> None:
        """Make the given column active; an index out of range is ignored."""
        self._set_active_column_index(index)


class KanbanViewStrategy(_PerColumnViewStrategy):
    """Cards laid out side by side, one panel per column."""

    def set_active_column_index(self, index: int) -> None:
        """Make the given column active; an index out of range is ignored."""
        self._set_active_column_index(index)