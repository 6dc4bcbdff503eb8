"""The main screen's panels: the project list and the board's tasks in one of three layouts."""

from __future__ import annotations

from kanbantui.models import Board, Card, CardStatus, TaskListView
from kanbantui.state import AppState, Focus
from kanbantui.task_list import TaskList
from kanbantui.theme import (
    SELECTED_BG,
    Color,
    Modifier,
    Style,
    active_item,
    done_text,
    label_text,
    normal_text,
    points_style,
)
from kanbantui.widgets import Line, Panel, Span

NO_PROJECTS = "No projects yet. Press 'n' to create one!"
SELECT_PROJECT = "  Select a project to preview tasks"
NO_TASKS_ACTIVE = "  No tasks yet. Press 'n' to create one!"
NO_TASKS_PREVIEW = "  (Enter/Space) to add tasks"
NO_COLUMNS = "  No columns yet. Add columns in board settings."
EMPTY_COLUMN = "  (no tasks)"

_COLUMN_HEADER_STYLE = Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)


def _highlight(style: Style, on: bool) -> Style:
    return style.bg(SELECTED_BG) if on else style


def card_line(
    state: AppState, card: Card, board: Board, is_selected: bool, is_focused: bool
) -> Line:
    """One card as a list row: marker, number, title, points and sprint."""
    highlighted = is_selected and is_focused
    spans = [Span("> " if is_selected else "  ", _highlight(normal_text(), highlighted))]
    if card.id in state.selected_cards:
        spans.append(Span("[*] ", _highlight(active_item(), highlighted)))
    spans.append(Span(f"#{card.card_number} ", _highlight(label_text(), highlighted)))
    title_style = done_text() if card.status is CardStatus.DONE else normal_text()
    spans.append(Span(card.title, _highlight(title_style, highlighted)))
    if card.points is not None:
        spans.append(Span(f" [{card.points}]", _highlight(points_style(card.points), highlighted)))
    if state.active_sprint_filter is None and card.sprint_id is not None:
        sprint = next((s for s in state.sprints if s.id == card.sprint_id), None)
        if sprint is not None:
            name = sprint.formatted_name(board, board.sprint_prefix or "sprint")
            spans.append(Span(f" ({name})", _highlight(label_text(), highlighted)))
    return Line.of(spans)


def _find_card(state: AppState, card_id) -> Card | None:
    return next((c for c in state.cards if c.id == card_id), None)


def _list_lines(
    state: AppState, task_list: TaskList, board: Board, is_active: bool
) -> list[Line]:
    lines = []
    cards = ((idx, _find_card(state, cid)) for idx, cid in enumerate(task_list.cards))
    for idx, card in cards:
        if card is None:
            continue
        is_selected = is_active and task_list.selected_index == idx
        lines.append(
            card_line(state, card, board, is_selected, state.focus is Focus.CARDS and is_active)
        )
    return lines


def _no_tasks_message(state: AppState) -> Line:
    message = NO_TASKS_ACTIVE if state.active_board_index is not None else NO_TASKS_PREVIEW
    return Line.plain(message, label_text())


def _tasks_title(state: AppState) -> str:
    title = "Tasks [2]" if state.focus is Focus.CARDS else "Tasks"
    sprint_name = state.sprint_filter_title()
    if sprint_name is not None:
        title += f" - {sprint_name}"
    return title


def _tasks_panel(state: AppState, lines: list[Line]) -> Panel:
    title = _tasks_title(state)
    return Panel(title, lines, focused=state.focus is Focus.CARDS, focus_title=title)


def _board_columns(state: AppState, board: Board):
    return sorted(
        (col for col in state.columns if col.board_id == board.id), key=lambda col: col.position
    )


def render_projects_panel(state: AppState) -> Panel:
    """The list of projects, marking the highlighted and the open one."""
    focused = state.focus is Focus.BOARDS
    if not state.boards:
        lines = [Line.plain(NO_PROJECTS, label_text())]
    else:
        lines = []
        for idx, board in enumerate(state.boards):
            selected = state.board_selection.index == idx
            active = state.active_board_index == idx
            style = active_item() if active else normal_text()
            style = _highlight(style, selected and focused)
            lines.append(Line.plain(("> " if selected else "  ") + board.name, style))
    return Panel("Projects", lines, focused=focused, focus_title="Projects [1]")


def render_tasks_flat(state: AppState) -> Panel:
    """The active task list as a single panel."""
    lines: list[Line] = []
    if state.current_board_index() is None:
        lines.append(Line.plain(SELECT_PROJECT, label_text()))
    else:
        board = state.current_board()
        task_list = state.view_strategy.active_task_list()
        if board is not None and task_list is not None:
            if task_list.is_empty():
                lines.append(_no_tasks_message(state))
            else:
                lines.extend(_list_lines(state, task_list, board, True))
    return _tasks_panel(state, lines)


def render_tasks_grouped_by_column(state: AppState) -> Panel:
    """All task lists in one panel, each under a heading with its column's name."""
    lines: list[Line] = []
    if state.current_board_index() is None:
        lines.append(Line.plain(SELECT_PROJECT, label_text()))
    else:
        board = state.current_board()
        if board is not None:
            columns = _board_columns(state, board)
            task_lists = state.view_strategy.task_lists()
            active = state.view_strategy.active_task_list()
            if not columns:
                lines.append(Line.plain(NO_COLUMNS, label_text()))
            elif not task_lists:
                lines.append(_no_tasks_message(state))
            else:
                for column, task_list in zip(columns, task_lists):
                    is_active = task_list is active
                    lines.append(
                        Line.plain(
                            f"── {column.name} ({len(task_list)}) ──", _COLUMN_HEADER_STYLE
                        )
                    )
                    if task_list.is_empty():
                        lines.append(Line.plain(EMPTY_COLUMN, label_text()))
                    else:
                        lines.extend(_list_lines(state, task_list, board, is_active))
                    lines.append(Line())
    return _tasks_panel(state, lines)


def _column_name(state: AppState, task_list: TaskList) -> str:
    if task_list.id.is_all:
        return "All"
    column = next((c for c in state.columns if c.id == task_list.id.column_id), None)
    return column.name if column is not None else "Unknown"


def render_tasks_kanban_view(state: AppState) -> list[Panel]:
    """One panel per column, side by side."""
    cards_focused = state.focus is Focus.CARDS
    if state.current_board_index() is None:
        lines = [Line.plain(SELECT_PROJECT, label_text())]
        return [Panel("Tasks", lines, focused=cards_focused, focus_title="Tasks [2]")]
    board = state.current_board()
    if board is None:
        return []
    task_lists = state.view_strategy.task_lists()
    if not task_lists:
        lines = [Line.plain(NO_COLUMNS, label_text())]
        return [Panel("Tasks", lines, focused=cards_focused, focus_title="Tasks [2]")]

    active = state.view_strategy.active_task_list()
    panels = []
    for col_idx, task_list in enumerate(task_lists):
        is_active = task_list is active
        if task_list.is_empty():
            lines = [Line.plain(EMPTY_COLUMN, label_text())]
        else:
            lines = _list_lines(state, task_list, board, is_active)
        title = f"{_column_name(state, task_list)} ({len(task_list)})"
        if col_idx < 9:
            title += f" [{col_idx + 1}]"
        panels.append(
            Panel(title, lines, focused=cards_focused and is_active, focus_title=title)
        )
    return panels


def render_tasks_panel(state: AppState) -> list[Panel]:
    """The task panels in the layout the board asks for; previews pick their own."""
    board = state.current_board()
    if board is None:
        return [render_tasks_flat(state)]
    if state.active_board_index is None:
        column_count = sum(1 for col in state.columns if col.board_id == board.id)
        if column_count > 1:
            return [render_tasks_grouped_by_column(state)]
        return [render_tasks_flat(state)]
    if board.task_list_view is TaskListView.GROUPED_BY_COLUMN:
        return [render_tasks_grouped_by_column(state)]
    if board.task_list_view is TaskListView.COLUMN_VIEW:
        return render_tasks_kanban_view(state)
    return [render_tasks_flat(state)]


def render_main(state: AppState) -> list[Panel]:
    """The main area: projects beside tasks, or only the columns of an open kanban board."""
    idx = state.active_board_index
    open_kanban = (
        idx is not None
        and 0 <= idx < len(state.boards)
        and state.boards[idx].task_list_view is TaskListView.COLUMN_VIEW
    )
    if open_kanban:
        return render_tasks_panel(state)
    return [render_projects_panel(state), *render_tasks_panel(state)]