"""What the interface shows: the mode, the focus and the data being browsed."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field

from kanbantui.input import InputState
from kanbantui.models import Board, Card, Column, SortField, SortOrder, Sprint, TaskListView
from kanbantui.selection import SelectionState
from kanbantui.view_strategy import FlatViewStrategy, ViewStrategy

DEFAULT_SPRINT_PREFIX = "sprint"


class AppMode(enum.Enum):
    NORMAL = enum.auto()
    CREATE_BOARD = enum.auto()
    CREATE_CARD = enum.auto()
    CREATE_SPRINT = enum.auto()
    RENAME_BOARD = enum.auto()
    EXPORT_BOARD = enum.auto()
    EXPORT_ALL = enum.auto()
    IMPORT_BOARD = enum.auto()
    CARD_DETAIL = enum.auto()
    SET_CARD_POINTS = enum.auto()
    SET_CARD_PRIORITY = enum.auto()
    BOARD_DETAIL = enum.auto()
    SET_BRANCH_PREFIX = enum.auto()
    ORDER_CARDS = enum.auto()
    SPRINT_DETAIL = enum.auto()
    ASSIGN_CARD_TO_SPRINT = enum.auto()
    ASSIGN_MULTIPLE_CARDS_TO_SPRINT = enum.auto()
    CREATE_COLUMN = enum.auto()
    RENAME_COLUMN = enum.auto()
    DELETE_COLUMN_CONFIRM = enum.auto()
    SELECT_TASK_LIST_VIEW = enum.auto()


class Focus(enum.Enum):
    BOARDS = enum.auto()
    CARDS = enum.auto()


class CardFocus(enum.Enum):
    TITLE = enum.auto()
    METADATA = enum.auto()
    DESCRIPTION = enum.auto()


class BoardFocus(enum.Enum):
    NAME = enum.auto()
    DESCRIPTION = enum.auto()
    SETTINGS = enum.auto()
    SPRINTS = enum.auto()
    COLUMNS = enum.auto()


@dataclass
class AppState:
    """Everything the screen is drawn from."""

    mode: AppMode = AppMode.NORMAL
    focus: Focus = Focus.BOARDS
    card_focus: CardFocus = CardFocus.TITLE
    board_focus: BoardFocus = BoardFocus.NAME
    boards: list[Board] = field(default_factory=list)
    columns: list[Column] = field(default_factory=list)
    cards: list[Card] = field(default_factory=list)
    sprints: list[Sprint] = field(default_factory=list)
    active_board_index: int | None = None
    active_card_index: int | None = None
    active_sprint_index: int | None = None
    active_sprint_filter: uuid.UUID | None = None
    selected_cards: set[uuid.UUID] = field(default_factory=set)
    view_strategy: ViewStrategy = field(default_factory=FlatViewStrategy)
    input: InputState = field(default_factory=InputState)
    import_files: list[str] = field(default_factory=list)
    default_branch_prefix: str = "feature"
    current_sort_field: SortField | None = None
    current_sort_order: SortOrder | None = None
    board_selection: SelectionState = field(default_factory=SelectionState)
    import_selection: SelectionState = field(default_factory=SelectionState)
    priority_selection: SelectionState = field(default_factory=SelectionState)
    sort_field_selection: SelectionState = field(default_factory=SelectionState)
    sprint_selection: SelectionState = field(default_factory=SelectionState)
    column_selection: SelectionState = field(default_factory=SelectionState)
    sprint_assign_selection: SelectionState = field(default_factory=SelectionState)
    task_list_view_selection: SelectionState = field(default_factory=SelectionState)

    def current_board_index(self) -> int | None:
        """The open board, or else the one highlighted in the project list."""
        if self.active_board_index is not None:
            return self.active_board_index
        return self.board_selection.index

    def current_board(self) -> Board | None:
        idx = self.current_board_index()
        if idx is None or not 0 <= idx < len(self.boards):
            return None
        return self.boards[idx]

    def is_kanban_view(self) -> bool:
        """Whether the current board is laid out as side-by-side columns."""
        board = self.current_board()
        return board is not None and board.task_list_view is TaskListView.COLUMN_VIEW

    def sprint_filter_title(self) -> str | None:
        """The formatted name of the sprint the cards are filtered by, if any."""
        if self.active_sprint_filter is None:
            return None
        sprint = next((s for s in self.sprints if s.id == self.active_sprint_filter), None)
        board = self.current_board()
        if sprint is None or board is None:
            return None
        return sprint.formatted_name(board, board.sprint_prefix or DEFAULT_SPRINT_PREFIX)