"""Full-screen detail views of a card, a board and a sprint."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import TypeVar

from kanbantui.models import Board, Card, SprintStatus
from kanbantui.state import DEFAULT_SPRINT_PREFIX, AppState, BoardFocus, CardFocus
from kanbantui.theme import (
    SELECTED_BG,
    Color,
    Modifier,
    Style,
    active_item,
    bold_highlight,
    label_text,
    normal_text,
    sprint_status_style,
)
from kanbantui.widgets import Line, Panel, Span

T = TypeVar("T")

NO_DESCRIPTION = "No description"
NOT_SET = "(not set)"

_STATUS_SYMBOLS = {
    SprintStatus.PLANNING: "○",
    SprintStatus.ACTIVE: "●",
    SprintStatus.COMPLETED: "✓",
    SprintStatus.CANCELLED: "✗",
}

_RED = Style().fg(Color.RED)
_CYAN_BOLD = Style().fg(Color.CYAN).add_modifier(Modifier.BOLD)


def _get(items: Sequence[T], index: int | None) -> T | None:
    if index is None or not 0 <= index < len(items):
        return None
    return items[index]


def _metadata_line(label: str, value: str, style: Style | None = None) -> Line:
    return Line.of(
        [
            Span(f"{label}: ", label_text()),
            Span(value, style if style is not None else normal_text()),
        ]
    )


def _metadata_line_multi(fields: Sequence[tuple[str, str, Style]]) -> Line:
    spans: list[Span] = []
    for position, (label, value, style) in enumerate(fields):
        if position:
            spans.append(Span(" | ", label_text()))
        spans.append(Span(f"{label}: ", label_text()))
        spans.append(Span(value, style))
    return Line.of(spans)


def _format_utc(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M UTC")


def _text_lines(text: str, style: Style) -> list[Line]:
    return [Line.plain(row, style) for row in text.split("\n")]


def _section(title: str, indicator: str, focused: bool, lines: list[Line]) -> Panel:
    return Panel(title, lines, focused=focused, focus_title=indicator)


def _branch_name(state: AppState, card: Card, board: Board) -> str:
    prefix = board.branch_prefix or state.default_branch_prefix
    return f"{prefix}-{card.card_number}"


def render_card_detail_view(state: AppState) -> list[Panel]:
    """Title, metadata and description panels of the open card."""
    card = _get(state.cards, state.active_card_index)
    board = _get(state.boards, state.active_board_index)
    if card is None or board is None:
        return []

    title = _section(
        "Task Title",
        "Task Title [1]",
        state.card_focus is CardFocus.TITLE,
        _text_lines(card.title, bold_highlight()),
    )

    points = str(card.points) if card.points is not None else "-"
    if card.due_date is not None:
        due = _metadata_line("Due", card.due_date.strftime("%Y-%m-%d %H:%M"), _RED)
    else:
        due = Line.plain("No due date", label_text())
    meta_lines = [
        _metadata_line_multi(
            [
                ("Priority", card.priority.value, normal_text()),
                ("Status", card.status.value, normal_text()),
                ("Points", points, normal_text()),
            ]
        ),
        due,
        _metadata_line("Branch", _branch_name(state, card, board), active_item()),
    ]
    meta = _section(
        "Metadata", "Metadata [2]", state.card_focus is CardFocus.METADATA, meta_lines
    )

    description = _section(
        "Description",
        "Description [3]",
        state.card_focus is CardFocus.DESCRIPTION,
        _text_lines(card.description or NO_DESCRIPTION, normal_text()),
    )
    return [title, meta, description]


def _settings_lines(state: AppState, board: Board) -> list[Line]:
    if board.branch_prefix:
        prefix_line = _metadata_line("Branch Prefix", board.branch_prefix, active_item())
    else:
        prefix_line = Line.of(
            [
                Span("Branch Prefix: ", label_text()),
                Span(state.default_branch_prefix, normal_text()),
                Span(" (default)", label_text()),
            ]
        )
    duration = (
        f"{board.sprint_duration_days} days"
        if board.sprint_duration_days is not None
        else NOT_SET
    )
    lines = [
        prefix_line,
        Line(),
        _metadata_line("Sprint Duration", duration),
        _metadata_line("Sprint Prefix", board.sprint_prefix or NOT_SET),
    ]
    available = board.sprint_names[board.sprint_name_used_count :]
    if available:
        lines.append(_metadata_line("Sprint Names", ", ".join(available)))
    return lines


def _sprint_lines(state: AppState, board: Board) -> list[Line]:
    board_sprints = [s for s in state.sprints if s.board_id == board.id]
    if not board_sprints:
        return [Line.plain("  No sprints yet. Press 'n' to create one!", label_text())]

    focused = state.board_focus is BoardFocus.SPRINTS
    prefix = board.sprint_prefix or DEFAULT_SPRINT_PREFIX
    lines = []
    for idx, sprint in enumerate(board_sprints):
        highlighted = focused and state.sprint_selection.index == idx

        def mark(style: Style) -> Style:
            return style.bg(SELECTED_BG) if highlighted else style

        card_count = sum(1 for c in state.cards if c.sprint_id == sprint.id)
        spans = [
            Span(f"{_STATUS_SYMBOLS[sprint.status]} ", sprint_status_style(sprint.status)),
            Span(sprint.formatted_name(board, prefix), mark(normal_text())),
            Span(f" ({card_count})", label_text()),
        ]
        if board.active_sprint_id == sprint.id:
            spans.append(Span(" Active", mark(active_item())))
        if sprint.is_ended():
            spans.append(Span(" Ended", mark(_RED.add_modifier(Modifier.BOLD))))
        lines.append(Line.of(spans))
    return lines


def _column_lines(state: AppState, board: Board) -> list[Line]:
    columns = sorted(
        (col for col in state.columns if col.board_id == board.id),
        key=lambda col: col.position,
    )
    if not columns:
        return [Line.plain("  No columns yet. Press 'n' to create one!", label_text())]

    focused = state.board_focus is BoardFocus.COLUMNS
    lines = []
    for idx, column in enumerate(columns):
        highlighted = focused and state.column_selection.index == idx
        name_style = normal_text().bg(SELECTED_BG) if highlighted else normal_text()
        card_count = sum(1 for c in state.cards if c.column_id == column.id)
        lines.append(
            Line.of(
                [
                    Span(f"{column.position + 1}. ", label_text()),
                    Span(column.name, name_style),
                    Span(f" ({card_count})", label_text()),
                ]
            )
        )
    return lines


def render_board_detail_view(state: AppState) -> list[Panel]:
    """Name, description, settings, sprints and columns of the highlighted board."""
    board = _get(state.boards, state.board_selection.index)
    if board is None:
        return []
    focus = state.board_focus
    return [
        _section(
            "Project Name",
            "Project Name [1]",
            focus is BoardFocus.NAME,
            _text_lines(board.name, bold_highlight()),
        ),
        _section(
            "Description",
            "Description [2]",
            focus is BoardFocus.DESCRIPTION,
            _text_lines(board.description or NO_DESCRIPTION, normal_text()),
        ),
        _section(
            "Settings",
            "Settings [3]",
            focus is BoardFocus.SETTINGS,
            _settings_lines(state, board),
        ),
        _section(
            "Sprints", "Sprints [4]", focus is BoardFocus.SPRINTS, _sprint_lines(state, board)
        ),
        _section(
            "Columns", "Columns [5]", focus is BoardFocus.COLUMNS, _column_lines(state, board)
        ),
    ]


def render_sprint_detail_view(state: AppState) -> list[Panel]:
    """The open sprint's status, dates and assigned card count."""
    sprint = _get(state.sprints, state.active_sprint_index)
    board = _get(state.boards, state.active_board_index)
    if sprint is None or board is None:
        return []

    prefix = board.sprint_prefix or DEFAULT_SPRINT_PREFIX
    lines = [
        _metadata_line("Sprint", sprint.formatted_name(board, prefix), bold_highlight()),
        Line(),
        _metadata_line("Status", sprint.status.value, sprint_status_style(sprint.status)),
        _metadata_line("Sprint Number", str(sprint.sprint_number)),
    ]
    name = sprint.get_name(board)
    if name is not None:
        lines.append(_metadata_line("Name", name))
    if sprint.start_date is not None:
        lines.append(_metadata_line("Start Date", _format_utc(sprint.start_date)))
    if sprint.end_date is not None:
        end_style = _RED if sprint.is_ended() else normal_text()
        lines.append(_metadata_line("End Date", _format_utc(sprint.end_date), end_style))

    lines.append(Line())
    card_count = sum(1 for c in state.cards if c.sprint_id == sprint.id)
    lines.append(_metadata_line("Cards Assigned", str(card_count), _CYAN_BOLD))
    if board.active_sprint_id == sprint.id:
        lines.append(_metadata_line("Active Sprint", "Yes (used for filtering)", active_item()))

    lines.append(Line())
    lines.append(_metadata_line("Created", _format_utc(sprint.created_at), label_text()))
    lines.append(_metadata_line("Updated", _format_utc(sprint.updated_at), label_text()))
    return [Panel("Sprint Details", lines, focused=True)]