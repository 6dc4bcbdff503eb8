import pytest

from kanbantui.models import Board, Card, Column, SortField, SortOrder, Sprint, TaskListView
from kanbantui.popups import (
    render_assign_multiple_cards_popup,
    render_assign_sprint_popup,
    render_delete_column_confirm_popup,
    render_import_popup,
    render_input_popup,
    render_order_cards_popup,
    render_popup,
    render_priority_popup,
    render_select_task_list_view_popup,
)
from kanbantui.state import AppMode, AppState
from kanbantui.theme import bold_highlight, normal_text


@pytest.fixture
def state():
    board = Board("Test Board")
    column = Column(board.id, "Todo", 0)
    card = Card.create(board, column.id, "Test Task", 0)
    sprint = Sprint(board.id, 1)
    return AppState(
        boards=[board],
        columns=[column],
        cards=[card],
        sprints=[sprint],
        active_board_index=0,
        active_card_index=0,
    )


def test_input_popup_shows_buffer_and_label(state):
    state.input.set("abc")
    popup = render_input_popup(state, "Create New Task", "Task Title:")
    assert popup.title == "Create New Task"
    assert popup.label.text() == "Task Title:"
    assert popup.lines[0].text() == "abc"


@pytest.mark.parametrize(
    "mode, title",
    [
        (AppMode.CREATE_BOARD, "Create New Project"),
        (AppMode.CREATE_CARD, "Create New Task"),
        (AppMode.EXPORT_ALL, "Export All Projects"),
        (AppMode.RENAME_COLUMN, "Rename Column"),
        (AppMode.DELETE_COLUMN_CONFIRM, "Delete Column"),
        (AppMode.SET_CARD_PRIORITY, "Set Priority"),
    ],
)
def test_render_popup_by_mode(state, mode, title):
    state.mode = mode
    assert render_popup(state).title == title


@pytest.mark.parametrize("mode", [AppMode.NORMAL, AppMode.BOARD_DETAIL, AppMode.CARD_DETAIL])
def test_render_popup_none_for_plain_modes(state, mode):
    state.mode = mode
    assert render_popup(state) is None


def test_priority_popup(state):
    state.priority_selection.index = 2
    popup = render_priority_popup(state)
    assert [line.text() for line in popup.lines] == ["Low", "Medium", "High", "Critical"]
    assert popup.lines[2].spans[0].style == bold_highlight()
    assert popup.lines[0].spans[0].style == normal_text()


def test_order_cards_popup_marks_active_field(state):
    state.current_sort_field = SortField.POINTS
    state.current_sort_order = SortOrder.ASCENDING
    popup = render_order_cards_popup(state)
    assert len(popup.lines) == 6
    assert "(↑)" in popup.lines[0].text()
    assert not any("(↑)" in line.text() for line in popup.lines[1:])
    assert popup.label.text() == "Select sort field:"


def test_import_popup_empty(state):
    popup = render_import_popup(state)
    assert popup.lines[0].text() == "No JSON files found in current directory"


def test_import_popup_selection(state):
    state.import_files = ["a.json", "b.json"]
    state.import_selection.index = 1
    popup = render_import_popup(state)
    assert len(popup.lines) == 2
    assert popup.lines[1].text().startswith("> ")
    assert "b.json" in popup.lines[1].text()


def test_assign_sprint_popup_marks_current(state):
    popup = render_assign_sprint_popup(state)
    assert len(popup.lines) == 2
    assert "(None)" in popup.lines[0].text()
    assert "(current)" in popup.lines[0].text()
    board = state.boards[0]
    assert state.sprints[0].formatted_name(board, "sprint") in popup.lines[1].text()

    state.cards[0].sprint_id = state.sprints[0].id
    popup = render_assign_sprint_popup(state)
    assert "(current)" in popup.lines[1].text()
    assert "(current)" not in popup.lines[0].text()


def test_assign_multiple_popup_title_counts_cards(state):
    state.selected_cards = {state.cards[0].id}
    popup = render_assign_multiple_cards_popup(state)
    assert str(len(state.selected_cards)) in popup.title
    assert len(popup.lines) == 2


def test_delete_column_confirm_text(state):
    text = render_delete_column_confirm_popup(state).text()
    assert "Press ENTER/y to delete, n/ESC to cancel" in text


def test_select_task_list_view_marks_current(state):
    state.boards[0].task_list_view = TaskListView.GROUPED_BY_COLUMN
    popup = render_select_task_list_view_popup(state)
    texts = [line.text() for line in popup.lines]
    assert texts[0] == "Flat"
    assert texts[1] == "Grouped by Column (current)"
    assert texts[2] == "Column View (kanban board)"