from kanbantui.models import (
    Board,
    Card,
    CardPriority,
    CardStatus,
    Column,
    SortField,
    SortOrder,
    Sprint,
    TaskListView,
)
from kanbantui.panels import (
    card_line,
    render_main,
    render_projects_panel,
    render_tasks_flat,
    render_tasks_grouped_by_column,
    render_tasks_kanban_view,
    render_tasks_panel,
)
from kanbantui.state import AppState, Focus
from kanbantui.theme import SELECTED_BG, Modifier
from kanbantui.view_strategy import (
    FlatViewStrategy,
    GroupedViewStrategy,
    KanbanViewStrategy,
)


def make_state(view=TaskListView.FLAT, column_names=("Todo", "Done"), titles=("A",)):
    board = Board("Proj", task_list_view=view)
    columns = [Column(board.id, name, pos) for pos, name in enumerate(column_names)]
    cards = [Card.create(board, columns[0].id, t, i) for i, t in enumerate(titles)]
    strategy = {
        TaskListView.FLAT: FlatViewStrategy,
        TaskListView.GROUPED_BY_COLUMN: GroupedViewStrategy,
        TaskListView.COLUMN_VIEW: KanbanViewStrategy,
    }[view]()
    strategy.refresh_task_lists(board, cards, columns)
    state = AppState(
        boards=[board], columns=columns, cards=cards, view_strategy=strategy,
        active_board_index=0,
    )
    return state, board, columns, cards


def test_projects_panel_empty():
    panel = render_projects_panel(AppState())
    assert [line.text() for line in panel.lines] == ["No projects yet. Press 'n' to create one!"]
    assert panel.display_title == "Projects [1]"


def test_projects_panel_lists_boards_in_order():
    state = AppState(boards=[Board("One"), Board("Two")], focus=Focus.CARDS)
    panel = render_projects_panel(state)
    texts = [line.text() for line in panel.lines]
    assert texts[0].endswith("One") and texts[1].endswith("Two")
    assert panel.display_title == "Projects"


def test_flat_without_board():
    panel = render_tasks_flat(AppState())
    assert panel.lines[0].text() == "  Select a project to preview tasks"
    assert panel.title == "Tasks"


def test_flat_empty_messages():
    state, *_ = make_state(titles=())
    assert render_tasks_flat(state).lines[0].text() == "  No tasks yet. Press 'n' to create one!"
    state.active_board_index = None
    state.board_selection.index = 0
    assert render_tasks_flat(state).lines[0].text() == "  (Enter/Space) to add tasks"


def test_flat_orders_and_highlights_selection():
    board = Board("Proj", task_sort_field=SortField.PRIORITY,
                  task_sort_order=SortOrder.DESCENDING)
    column = Column(board.id, "Todo", 0)
    low = Card.create(board, column.id, "Low", 0)
    low.update_priority(CardPriority.LOW)
    high = Card.create(board, column.id, "High", 1)
    high.update_priority(CardPriority.HIGH)
    strategy = FlatViewStrategy()
    strategy.refresh_task_lists(board, [low, high], [column])
    strategy.active_task_list().set_selected_index(0)
    state = AppState(boards=[board], columns=[column], cards=[low, high],
                     view_strategy=strategy, active_board_index=0, focus=Focus.CARDS)
    panel = render_tasks_flat(state)
    assert "High" in panel.lines[0].text()
    assert "Low" in panel.lines[1].text()
    assert any(s.style.background is SELECTED_BG for s in panel.lines[0].spans)
    assert all(s.style.background is None for s in panel.lines[1].spans)
    assert panel.display_title == "Tasks [2]"


def test_flat_title_with_sprint_filter():
    state, board, _, cards = make_state()
    sprint = Sprint(board.id, 1)
    cards[0].sprint_id = sprint.id
    state.sprints.append(sprint)
    state.active_sprint_filter = sprint.id
    panel = render_tasks_flat(state)
    assert panel.title == "Tasks - " + sprint.formatted_name(board, "sprint")


def test_grouped_headers_and_empty_column():
    state, *_ = make_state(view=TaskListView.GROUPED_BY_COLUMN)
    texts = [line.text() for line in render_tasks_grouped_by_column(state).lines]
    assert texts[0] == "── Todo (1) ──"
    assert "A" in texts[1]
    assert texts[2] == ""
    assert texts[3] == "── Done (0) ──"
    assert texts[4] == "  (no tasks)"


def test_grouped_without_columns():
    state, *_ = make_state(view=TaskListView.GROUPED_BY_COLUMN, column_names=("X",), titles=())
    state.columns = []
    lines = render_tasks_grouped_by_column(state).lines
    assert lines[0].text() == "  No columns yet. Add columns in board settings."


def test_kanban_panel_titles():
    state, *_ = make_state(view=TaskListView.COLUMN_VIEW)
    panels = render_tasks_kanban_view(state)
    assert [p.title for p in panels] == ["Todo (1) [1]", "Done (0) [2]"]
    assert panels[1].lines[0].text() == "  (no tasks)"


def test_kanban_tenth_column_has_no_shortcut():
    names = tuple(f"C{i}" for i in range(10))
    state, *_ = make_state(view=TaskListView.COLUMN_VIEW, column_names=names, titles=())
    panels = render_tasks_kanban_view(state)
    assert len(panels) == 10
    assert panels[8].title == "C8 (0) [9]"
    assert panels[9].title == "C9 (0)"


def test_kanban_without_board():
    panels = render_tasks_kanban_view(AppState())
    assert len(panels) == 1
    assert panels[0].lines[0].text() == "  Select a project to preview tasks"


def test_main_open_kanban_board_shows_only_columns():
    state, *_ = make_state(view=TaskListView.COLUMN_VIEW)
    titles = [p.title for p in render_main(state)]
    assert "Projects" not in titles
    assert len(titles) == 2


def test_main_flat_board_shows_projects_first():
    state, *_ = make_state()
    panels = render_main(state)
    assert panels[0].title == "Projects"
    assert panels[1].title == "Tasks"


def test_preview_with_several_columns_is_grouped():
    state, *_ = make_state(view=TaskListView.GROUPED_BY_COLUMN)
    state.active_board_index = None
    state.board_selection.index = 0
    panels = render_tasks_panel(state)
    assert len(panels) == 1
    assert panels[0].lines[0].text() == "── Todo (1) ──"


def test_card_line_shows_points_sprint_and_done_style():
    state, board, _, cards = make_state()
    card = cards[0]
    card.points = 3
    card.status = CardStatus.DONE
    sprint = Sprint(board.id, 2)
    card.sprint_id = sprint.id
    state.sprints.append(sprint)
    line = card_line(state, card, board, False, False)
    text = line.text()
    assert card.title in text
    assert sprint.formatted_name(board, "sprint") in text
    title_span = next(s for s in line.spans if s.content == card.title)
    assert Modifier.CROSSED_OUT in title_span.style.modifiers
    state.active_sprint_filter = sprint.id
    assert sprint.formatted_name(board, "sprint") not in card_line(
        state, card, board, False, False
    ).text()