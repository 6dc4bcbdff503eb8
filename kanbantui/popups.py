"""Popups drawn over the screen for input, choices and confirmations."""

from __future__ import annotations

from kanbantui.models import CardPriority, SortField, SortOrder, TaskListView
from kanbantui.state import DEFAULT_SPRINT_PREFIX, AppMode, AppState
from kanbantui.theme import (
    SELECTED_BG,
    Color,
    Modifier,
    Style,
    active_item,
    bold_highlight,
    highlight_text,
    label_text,
    normal_text,
)
from kanbantui.widgets import Line, Popup

_PRIORITIES = [CardPriority.LOW, CardPriority.MEDIUM, CardPriority.HIGH, CardPriority.CRITICAL]

_SORT_FIELDS = [
    (SortField.POINTS, "Points"),
    (SortField.PRIORITY, "Priority"),
    (SortField.CREATED_AT, "Date Created"),
    (SortField.UPDATED_AT, "Date Updated"),
    (SortField.STATUS, "Status"),
    (SortField.DEFAULT, "Task Number"),
]

_ORDER_INDICATORS = {SortOrder.ASCENDING: " (↑)", SortOrder.DESCENDING: " (↓)"}

_VIEWS = [
    (TaskListView.FLAT, "Flat"),
    (TaskListView.GROUPED_BY_COLUMN, "Grouped by Column"),
    (TaskListView.COLUMN_VIEW, "Column View (kanban board)"),
]

_INPUT_POPUPS = {
    AppMode.CREATE_BOARD: ("Create New Project", "Project Name:"),
    AppMode.CREATE_CARD: ("Create New Task", "Task Title:"),
    AppMode.CREATE_SPRINT: ("Create New Sprint", "Sprint Name (optional):"),
    AppMode.RENAME_BOARD: ("Rename Project", "New Project Name:"),
    AppMode.EXPORT_BOARD: ("Export Project", "Filename:"),
    AppMode.EXPORT_ALL: ("Export All Projects", "Filename:"),
    AppMode.SET_CARD_POINTS: ("Set Points", "Points (1-5 or empty):"),
    AppMode.SET_BRANCH_PREFIX: ("Set Branch Prefix", "Branch Prefix:"),
    AppMode.CREATE_COLUMN: ("Create New Column", "Column Name:"),
    AppMode.RENAME_COLUMN: ("Rename Column", "New Column Name:"),
}

_SPRINT_LABEL = Line.plain("Select sprint:", Style().fg(Color.YELLOW))
_ASSIGN_SELECTED = Style().fg(Color.WHITE).bg(Color.BLUE)
_ASSIGN_CURRENT = Style().fg(Color.GREEN).add_modifier(Modifier.BOLD)
_ASSIGN_NORMAL = Style().fg(Color.WHITE)


def _choice_style(selected: bool) -> Style:
    return bold_highlight() if selected else normal_text()


def render_input_popup(state: AppState, title: str, label: str) -> Popup:
    """A text field popup showing what has been typed so far."""
    return Popup(
        title,
        [Line.plain(state.input.buffer, normal_text())],
        width_percent=60,
        height_percent=20,
        label=Line.plain(label, highlight_text()),
    )


def render_priority_popup(state: AppState) -> Popup:
    selected = state.priority_selection.index
    lines = [
        Line.plain(priority.value, _choice_style(idx == selected))
        for idx, priority in enumerate(_PRIORITIES)
    ]
    return Popup("Set Priority", lines, width_percent=30, height_percent=40)


def render_order_cards_popup(state: AppState) -> Popup:
    """The sort fields, with the direction shown beside the one in use."""
    selected = state.sort_field_selection.index
    lines = []
    for idx, (sort_field, name) in enumerate(_SORT_FIELDS):
        is_selected = idx == selected
        is_active = sort_field == state.current_sort_field
        text = name
        if is_active and state.current_sort_order is not None:
            text += _ORDER_INDICATORS[state.current_sort_order]
        if is_selected:
            style = bold_highlight()
        elif is_active:
            style = active_item()
        else:
            style = normal_text()
        lines.append(Line.plain(("> " if is_selected else "  ") + text, style))
    return Popup(
        "Order Tasks By",
        lines,
        width_percent=60,
        height_percent=50,
        label=Line.plain("Select sort field:", highlight_text()),
    )


def render_import_popup(state: AppState) -> Popup:
    """The JSON files that can be imported."""
    if not state.import_files:
        lines = [Line.plain("No JSON files found in current directory", label_text())]
    else:
        lines = []
        for idx, filename in enumerate(state.import_files):
            selected = state.import_selection.index == idx
            style = normal_text().bg(SELECTED_BG) if selected else normal_text()
            lines.append(Line.plain(("> " if selected else "  ") + filename, style))
    return Popup(
        "Import Projects",
        lines,
        width_percent=60,
        height_percent=50,
        label=Line.plain("Select a JSON file to import:", highlight_text()),
    )


def _sprint_options(state: AppState):
    """The board's sprints preceded by None for 'no sprint', with the board."""
    idx = state.active_board_index
    if idx is None or not 0 <= idx < len(state.boards):
        return None, []
    board = state.boards[idx]
    return board, [None, *(s for s in state.sprints if s.board_id == board.id)]


def _sprint_option_name(board, sprint) -> str:
    if sprint is None:
        return "(None)"
    return sprint.formatted_name(board, board.sprint_prefix or DEFAULT_SPRINT_PREFIX)


def render_assign_sprint_popup(state: AppState) -> Popup:
    """Sprints the open card can be assigned to, marking its current one."""
    board, options = _sprint_options(state)
    card_idx = state.active_card_index
    current_id = None
    if card_idx is not None and 0 <= card_idx < len(state.cards):
        current_id = state.cards[card_idx].sprint_id

    lines = []
    for idx, sprint in enumerate(options):
        is_selected = state.sprint_assign_selection.index == idx
        is_current = (sprint.id if sprint is not None else None) == current_id
        if is_selected:
            style = _ASSIGN_SELECTED
        elif is_current:
            style = _ASSIGN_CURRENT
        else:
            style = _ASSIGN_NORMAL
        text = ("> " if is_selected else "  ") + _sprint_option_name(board, sprint)
        if is_current:
            text += " (current)"
        lines.append(Line.plain(text, style))
    return Popup("Assign to Sprint", lines, label=_SPRINT_LABEL)


def render_assign_multiple_cards_popup(state: AppState) -> Popup:
    """Sprints the selected cards can be assigned to."""
    board, options = _sprint_options(state)
    lines = []
    for idx, sprint in enumerate(options):
        is_selected = state.sprint_assign_selection.index == idx
        style = _ASSIGN_SELECTED if is_selected else _ASSIGN_NORMAL
        text = ("> " if is_selected else "  ") + _sprint_option_name(board, sprint)
        lines.append(Line.plain(text, style))
    title = f"Assign {len(state.selected_cards)} Cards to Sprint"
    return Popup(title, lines, label=_SPRINT_LABEL)


def render_delete_column_confirm_popup(state: AppState) -> Popup:
    warning = Style().fg(Color.YELLOW)
    lines = [
        Line.plain("Are you sure you want to delete this column?", warning),
        Line.plain("All cards will be moved to the first column.", warning),
        Line.plain("Press ENTER/y to delete, n/ESC to cancel", label_text()),
    ]
    return Popup("Delete Column", lines, width_percent=60, height_percent=30)


def render_select_task_list_view_popup(state: AppState) -> Popup:
    """The three layouts, marking the open board's current one."""
    selected = state.task_list_view_selection.index
    idx = state.active_board_index
    current = (
        state.boards[idx].task_list_view
        if idx is not None and 0 <= idx < len(state.boards)
        else None
    )
    lines = []
    for position, (view, name) in enumerate(_VIEWS):
        text = f"{name} (current)" if view is current else name
        lines.append(Line.plain(text, _choice_style(position == selected)))
    return Popup("Select Task List View", lines, width_percent=50, height_percent=40)


_CHOICE_POPUPS = {
    AppMode.IMPORT_BOARD: render_import_popup,
    AppMode.SET_CARD_PRIORITY: render_priority_popup,
    AppMode.ORDER_CARDS: render_order_cards_popup,
    AppMode.ASSIGN_CARD_TO_SPRINT: render_assign_sprint_popup,
    AppMode.ASSIGN_MULTIPLE_CARDS_TO_SPRINT: render_assign_multiple_cards_popup,
    AppMode.DELETE_COLUMN_CONFIRM: render_delete_column_confirm_popup,
    AppMode.SELECT_TASK_LIST_VIEW: render_select_task_list_view_popup,
}


def render_popup(state: AppState) -> Popup | None:
    """The popup the current mode shows, or None when it shows none."""
    if state.mode in _INPUT_POPUPS:
        title, label = _INPUT_POPUPS[state.mode]
        return render_input_popup(state, title, label)
    renderer = _CHOICE_POPUPS.get(state.mode)
    return renderer(state) if renderer is not None else None